"""
Barbell Plate Calculator API - Main Application

Resolves target bar weights into plates, converts between kg and lbs,
and builds percentage-of-1RM loading tables.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from barbell.core.config import settings
from barbell.core.logger import setup_logger
from barbell.api import plates, conversions, percentages

setup_logger(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="""
    ## Barbell Plate Calculator API

    Work out which plates to load for any target weight.

    ### Features
    - Greedy plate loading for the standard Olympic set (45 lb bar)
    - Exact/approximate match reporting with signed difference
    - kg/lbs conversion
    - Conversion table of achievable weights (search, sort, paging)
    - 1RM estimation and percentage tables with plates

    ### Core Endpoints
    - `/plates/calculate` - Plates for a target weight
    - `/conversions/table` - Achievable weights table
    - `/percentages/table` - Percentage-of-1RM table
    """,
    version="1.0.0",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(plates.router)
app.include_router(conversions.router)
app.include_router(percentages.router)


@app.get("/")
def root():
    """Root endpoint with API information."""
    return {
        "name": settings.APP_NAME,
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "plates": "/plates",
            "conversions": "/conversions",
            "percentages": "/percentages",
        }
    }


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
