from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Barbell Plate Calculator API"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None

    # Standard Olympic setup, all weights in pounds
    BAR_WEIGHT_LBS: float = 45
    AVAILABLE_PLATES_LBS: list[float] = [45, 35, 25, 15, 10, 5, 2.5]
    KG_TO_LBS_FACTOR: float = 2.20462

    # Conversion table range (per side)
    TABLE_MAX_PER_SIDE: float = 145
    TABLE_STEP: float = 5

    # Achieved vs. requested total tolerance for an exact match
    VALID_TOLERANCE: float = 0.1

    class Config:
        env_file = ".env"


settings = Settings()
