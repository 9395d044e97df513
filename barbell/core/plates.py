"""
Core plate math for a symmetrically loaded barbell.

Total weight = bar weight + 2 × (plates on one side)

Plates are chosen greedily, heaviest first. Greedy gives the fewest plates
only for "canonical" plate sets such as the standard Olympic set; use
is_canonical() to check a custom set and calculate_min_plates() when it
is not.
"""

from dataclasses import dataclass
from decimal import Decimal, getcontext, localcontext
from functools import lru_cache
from typing import Optional, Sequence

from loguru import logger

from barbell.core.config import settings
from barbell.core.units import WeightUnit, convert_to_lbs, round_to


@dataclass(frozen=True)
class PlateConfiguration:
    """Count of one plate denomination loaded on ONE side of the bar."""
    plate_weight: float
    quantity: int


@dataclass(frozen=True)
class WeightConversion:
    """One achievable loaded-bar state for the conversion table."""
    weight_per_side: float
    total_weight_lbs: float
    total_weight_kg: float
    plates: tuple[PlateConfiguration, ...] = ()


@dataclass(frozen=True)
class PlateCalculation:
    """Result of resolving an arbitrary target weight."""
    is_valid: bool
    total_weight: float
    plates: tuple[PlateConfiguration, ...] = ()
    difference: float = 0


@dataclass(frozen=True)
class PlateSet:
    """A bar plus the plate denominations available for it, heaviest first."""
    bar_weight: float
    denominations: tuple[float, ...]

    def __post_init__(self):
        denominations = tuple(float(d) for d in self.denominations)
        if not denominations:
            raise ValueError("At least one plate denomination is required")
        if any(d <= 0 for d in denominations):
            raise ValueError("Plate denominations must be positive")
        if any(a <= b for a, b in zip(denominations, denominations[1:])):
            raise ValueError("Plate denominations must be strictly descending")
        if self.bar_weight < 0:
            raise ValueError("Bar weight cannot be negative")
        object.__setattr__(self, "denominations", denominations)

    @property
    def smallest_plate(self) -> float:
        return self.denominations[-1]


OLYMPIC_BAR_WEIGHT = settings.BAR_WEIGHT_LBS
AVAILABLE_PLATES = tuple(settings.AVAILABLE_PLATES_LBS)
OLYMPIC_PLATE_SET = PlateSet(bar_weight=OLYMPIC_BAR_WEIGHT, denominations=AVAILABLE_PLATES)


def _to_decimal(value: float) -> Decimal:
    # str() gives the shortest repr, so 2.5 -> Decimal("2.5") and not its binary expansion
    return Decimal(str(value))


def sum_plates(plates: Sequence[PlateConfiguration]) -> float:
    """Weight of the plates on one side."""
    total = sum((_to_decimal(p.plate_weight) * p.quantity for p in plates), Decimal(0))
    return float(total)


def _exact_precision(*values: Decimal) -> int:
    """Digits needed so floor division and subtraction on these values stay exact."""
    top = max(v.adjusted() for v in values)
    bottom = min(v.as_tuple().exponent for v in values)
    return max(getcontext().prec, top - bottom + 2)


def calculate_plates_needed(
    weight_per_side: float,
    plate_set: PlateSet = OLYMPIC_PLATE_SET
) -> tuple[PlateConfiguration, ...]:
    """
    Greedy plate combination for one side of the bar.

    Uses the heaviest plate as many times as it fits, then moves on to the
    next one. The arithmetic is exact decimal, so the loaded weight never
    exceeds weight_per_side and the leftover is always smaller than the
    lightest plate. Leftover weight is dropped. Infinite or NaN weights
    load no plates.

    Args:
        weight_per_side: Weight to load on one side
        plate_set: Bar and plates to use (default: Olympic set)

    Returns:
        Plate configurations, heaviest denomination first
    """
    _check_plate_set(plate_set)

    remaining = _to_decimal(weight_per_side)
    if not remaining.is_finite():
        return ()

    plates = []
    denominations = [_to_decimal(d) for d in plate_set.denominations]
    with localcontext() as ctx:
        ctx.prec = _exact_precision(remaining, *denominations)
        for plate_weight, denomination in zip(plate_set.denominations, denominations):
            quantity = int(remaining // denomination)
            if quantity > 0:
                plates.append(PlateConfiguration(plate_weight=plate_weight, quantity=quantity))
                remaining -= denomination * quantity

    return tuple(plates)


def calculate_target_weight(
    target_weight: float,
    unit: WeightUnit | str = WeightUnit.LBS,
    plate_set: PlateSet = OLYMPIC_PLATE_SET
) -> PlateCalculation:
    """
    Work out the plates for a requested total weight.

    Never raises for numeric input. A target below the bar comes back
    invalid with no plates and a negative difference; a target that needs
    less than the lightest plate comes back invalid with the closest
    lighter load and the leftover as difference.

    Args:
        target_weight: Requested total, bar included
        unit: Unit of target_weight ("lbs" or "kg")
        plate_set: Bar and plates to use (default: Olympic set)

    Returns:
        PlateCalculation in pounds
    """
    target_lbs = convert_to_lbs(target_weight, unit)
    bar_weight = plate_set.bar_weight
    weight_per_side = (target_lbs - bar_weight) / 2

    if weight_per_side < 0:
        logger.debug(f"Target {target_lbs:.2f} lbs is below the {bar_weight} lbs bar")
        return PlateCalculation(
            is_valid=False,
            total_weight=bar_weight,
            plates=(),
            difference=target_lbs - bar_weight,
        )

    plates = calculate_plates_needed(weight_per_side, plate_set)
    actual_total = bar_weight + sum_plates(plates) * 2

    result = PlateCalculation(
        is_valid=abs(actual_total - target_lbs) < settings.VALID_TOLERANCE,
        total_weight=actual_total,
        plates=plates,
        difference=round_to(target_lbs - actual_total, 1),
    )
    logger.debug(
        f"Resolved {target_weight} {WeightUnit(unit).value} -> {actual_total} lbs "
        f"(valid={result.is_valid}, difference={result.difference})"
    )
    return result


# =============================================================================
# Non-greedy decomposition
# =============================================================================

def _grain(plate_set: PlateSet) -> int:
    """Scale factor that turns every denomination into an integer."""
    places = max(-_to_decimal(d).as_tuple().exponent for d in plate_set.denominations)
    return 10 ** max(places, 0)


def _to_grains(value: float, grain: int) -> int:
    return int(_to_decimal(value) * grain)


def _min_plate_table(coins: Sequence[int], limit: int) -> tuple[list[Optional[int]], list[Optional[int]]]:
    """Fewest plates for every amount 0..limit, plus the last plate used."""
    counts: list[Optional[int]] = [0] + [None] * limit
    last: list[Optional[int]] = [None] * (limit + 1)
    for amount in range(1, limit + 1):
        for coin in coins:
            if coin <= amount and counts[amount - coin] is not None:
                candidate = counts[amount - coin] + 1
                if counts[amount] is None or candidate < counts[amount]:
                    counts[amount] = candidate
                    last[amount] = coin
    return counts, last


def _greedy_count(coins: Sequence[int], amount: int) -> Optional[int]:
    count = 0
    for coin in coins:
        count += amount // coin
        amount %= coin
    return count if amount == 0 else None


def calculate_min_plates(
    weight_per_side: float,
    plate_set: PlateSet = OLYMPIC_PLATE_SET
) -> tuple[PlateConfiguration, ...]:
    """
    Fewest-plates combination by dynamic programming.

    Loads the heaviest achievable weight not above weight_per_side, using
    as few plates as possible. For canonical plate sets the plate count
    equals that of calculate_plates_needed(), though ties may be broken
    with a different mix of plates.
    """
    grain = _grain(plate_set)
    coins = [_to_grains(d, grain) for d in plate_set.denominations]
    target = _to_grains(weight_per_side, grain)
    if target <= 0:
        return ()

    counts, last = _min_plate_table(coins, target)
    amount = next(a for a in range(target, -1, -1) if counts[a] is not None)

    used: dict[int, int] = {}
    while amount > 0:
        coin = last[amount]
        used[coin] = used.get(coin, 0) + 1
        amount -= coin

    return tuple(
        PlateConfiguration(plate_weight=plate_weight, quantity=used[coin])
        for plate_weight, coin in zip(plate_set.denominations, coins)
        if coin in used
    )


# Largest DP table the automatic canonical check builds before giving up
MAX_CANONICAL_CHECK_SIZE = 100_000


def _canonical_check_coins(plate_set: PlateSet) -> tuple[list[int], int]:
    """Denominations in grains and the highest amount the canonical check covers."""
    grain = _grain(plate_set)
    coins = [_to_grains(d, grain) for d in plate_set.denominations]
    return coins, coins[0] + (coins[1] if len(coins) > 1 else 0)


@lru_cache(maxsize=None)
def is_canonical(plate_set: PlateSet) -> bool:
    """
    Whether greedy always finds the fewest plates for this plate set.

    Compares greedy against the dynamic-programming minimum for every
    amount up to the sum of the two heaviest plates, the range where the
    smallest counterexample of a non-canonical set lies. The cost grows
    tenfold with every decimal place in the finest denomination.
    """
    coins, limit = _canonical_check_coins(plate_set)

    counts, _ = _min_plate_table(coins, limit)
    for amount in range(1, limit + 1):
        if counts[amount] is not None and _greedy_count(coins, amount) != counts[amount]:
            return False
    return True


@lru_cache(maxsize=None)
def _check_plate_set(plate_set: PlateSet) -> None:
    _, limit = _canonical_check_coins(plate_set)
    if limit > MAX_CANONICAL_CHECK_SIZE:
        logger.info(
            f"Plate set {plate_set.denominations} is too fine-grained to check "
            f"({limit} amounts); skipping the canonical check"
        )
        return

    if not is_canonical(plate_set):
        logger.warning(
            f"Plate set {plate_set.denominations} is not canonical; "
            "greedy loading may use more plates than necessary"
        )
