"""Tests for plate display and validation helpers."""

from barbell.core.formatting import (
    BAR_ONLY,
    format_number,
    format_plate_configuration,
    calculate_total_weight_from_plates,
    validate_plate_configuration,
)
from barbell.core.plates import PlateConfiguration, PlateSet, calculate_plates_needed


class TestFormatPlateConfiguration:
    """Tests for plate configuration strings."""

    def test_empty_is_bar_only(self):
        assert format_plate_configuration([]) == BAR_ONLY
        assert format_plate_configuration(()) == "No plates (bar only)"

    def test_single_plate_type(self):
        assert format_plate_configuration([PlateConfiguration(45, 2)]) == "2×45 lbs"

    def test_multiple_plate_types(self):
        plates = [PlateConfiguration(45, 2), PlateConfiguration(25, 1)]
        assert format_plate_configuration(plates) == "2×45 lbs + 1×25 lbs"

    def test_fractional_plate(self):
        plates = calculate_plates_needed(67.5)
        assert format_plate_configuration(plates) == "1×45 lbs + 1×15 lbs + 1×5 lbs + 1×2.5 lbs"

    def test_order_preserved(self):
        plates = [PlateConfiguration(5, 1), PlateConfiguration(45, 1)]
        assert format_plate_configuration(plates) == "1×5 lbs + 1×45 lbs"

    def test_format_number(self):
        assert format_number(45.0) == "45"
        assert format_number(2.5) == "2.5"
        assert format_number(20.4) == "20.4"


class TestTotalWeightFromPlates:
    """Tests for total weight from a plate configuration."""

    def test_bar_only(self):
        assert calculate_total_weight_from_plates([]) == 45

    def test_with_plates(self):
        # 45 + 2 * (90 + 25)
        plates = [PlateConfiguration(45, 2), PlateConfiguration(25, 1)]
        assert calculate_total_weight_from_plates(plates) == 275

    def test_fractional_plates(self):
        plates = [PlateConfiguration(2.5, 3)]
        assert calculate_total_weight_from_plates(plates) == 60

    def test_custom_bar(self):
        plate_set = PlateSet(bar_weight=35, denominations=(45, 25, 10))
        assert calculate_total_weight_from_plates([PlateConfiguration(10, 1)], plate_set) == 55


class TestValidatePlateConfiguration:
    """Tests for plate configuration validation."""

    def test_empty_is_valid(self):
        assert validate_plate_configuration([]) is True

    def test_known_plates(self):
        plates = [PlateConfiguration(45, 1), PlateConfiguration(2.5, 2)]
        assert validate_plate_configuration(plates) is True

    def test_calculated_plates_are_valid(self):
        for weight in range(0, 150, 5):
            assert validate_plate_configuration(calculate_plates_needed(weight)) is True

    def test_unknown_plate(self):
        assert validate_plate_configuration([PlateConfiguration(50, 1)]) is False
        assert validate_plate_configuration([PlateConfiguration(45, 1), PlateConfiguration(1.25, 1)]) is False

    def test_zero_quantity(self):
        assert validate_plate_configuration([PlateConfiguration(45, 0)]) is False

    def test_negative_quantity(self):
        assert validate_plate_configuration([PlateConfiguration(45, -1)]) is False

    def test_fractional_quantity(self):
        assert validate_plate_configuration([PlateConfiguration(45, 1.5)]) is False

    def test_whole_float_quantity(self):
        assert validate_plate_configuration([PlateConfiguration(45, 2.0)]) is True

    def test_boolean_quantity(self):
        assert validate_plate_configuration([PlateConfiguration(45, True)]) is False

    def test_custom_plate_set(self):
        plate_set = PlateSet(bar_weight=20, denominations=(25, 20, 1.25))
        assert validate_plate_configuration([PlateConfiguration(1.25, 2)], plate_set) is True
        assert validate_plate_configuration([PlateConfiguration(45, 1)], plate_set) is False
