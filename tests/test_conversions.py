"""Tests for the conversion table and its search/sort/paging."""

import pytest
from barbell.core.conversions import (
    generate_weight_conversions,
    search_conversions,
    sort_conversions,
    paginate,
)
from barbell.core.plates import PlateSet, WeightConversion, sum_plates


class TestGenerateWeightConversions:
    """Tests for conversion table generation."""

    def test_row_count(self):
        assert len(generate_weight_conversions()) == 30

    def test_first_row_is_bar_only(self):
        first = generate_weight_conversions()[0]
        assert first == WeightConversion(
            weight_per_side=0,
            total_weight_lbs=45,
            total_weight_kg=20.4,
            plates=(),
        )

    def test_last_row(self):
        last = generate_weight_conversions()[-1]
        assert last.weight_per_side == 145
        assert last.total_weight_lbs == 335  # 45 + (145 * 2)
        assert last.total_weight_kg == 152.0

    def test_increments_of_five(self):
        conversions = generate_weight_conversions()
        assert [c.weight_per_side for c in conversions] == [i * 5 for i in range(30)]

    def test_totals(self):
        for c in generate_weight_conversions():
            assert c.total_weight_lbs == 45 + 2 * c.weight_per_side

    def test_kg_values(self):
        conversions = generate_weight_conversions()
        row = next(c for c in conversions if c.weight_per_side == 45)
        assert row.total_weight_kg == 61.2  # 135 lbs

    def test_plates_sum_to_weight_per_side(self):
        for c in generate_weight_conversions():
            assert sum_plates(c.plates) == c.weight_per_side

    def test_repeatable(self):
        assert generate_weight_conversions() == generate_weight_conversions()

    def test_custom_range(self):
        conversions = generate_weight_conversions(max_per_side=10, step=2.5)
        assert [c.weight_per_side for c in conversions] == [0, 2.5, 5, 7.5, 10]

    def test_fine_step_does_not_drift(self):
        conversions = generate_weight_conversions(max_per_side=1, step=0.1)
        assert len(conversions) == 11
        assert conversions[-1].weight_per_side == 1

    def test_custom_plate_set(self):
        plate_set = PlateSet(bar_weight=35, denominations=(45, 25, 10, 5))
        conversions = generate_weight_conversions(plate_set, max_per_side=20)
        assert [c.total_weight_lbs for c in conversions] == [35, 45, 55, 65, 75]

    def test_invalid_step(self):
        with pytest.raises(ValueError):
            generate_weight_conversions(step=0)


class TestSearchConversions:
    """Tests for searching the conversion table."""

    def test_empty_term_returns_all(self):
        conversions = generate_weight_conversions()
        assert search_conversions(conversions, "") == conversions
        assert search_conversions(conversions, None) == conversions

    def test_search_by_plate(self):
        # Rows that load a 35: per side 35, 40, 80, 85, 125, 130
        results = search_conversions(generate_weight_conversions(), "×35")
        assert [c.weight_per_side for c in results] == [35, 40, 80, 85, 125, 130]

    def test_search_case_insensitive(self):
        results = search_conversions(generate_weight_conversions(), "BAR ONLY")
        assert len(results) == 1
        assert results[0].weight_per_side == 0

    def test_search_by_total(self):
        results = search_conversions(generate_weight_conversions(), "335")
        assert any(c.total_weight_lbs == 335 for c in results)

    def test_search_by_kg(self):
        results = search_conversions(generate_weight_conversions(), "20.4")
        assert results[0].weight_per_side == 0

    def test_no_matches(self):
        assert search_conversions(generate_weight_conversions(), "xyz") == []


class TestSortConversions:
    """Tests for sorting the conversion table."""

    def test_default_ascending_lbs(self):
        conversions = generate_weight_conversions()
        assert sort_conversions(list(reversed(conversions))) == conversions

    def test_descending_kg(self):
        results = sort_conversions(generate_weight_conversions(), "kg", "desc")
        assert results[0].total_weight_lbs == 335
        assert results[-1].total_weight_lbs == 45

    def test_input_not_mutated(self):
        conversions = generate_weight_conversions()
        sort_conversions(conversions, "lbs", "desc")
        assert conversions[0].weight_per_side == 0

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            sort_conversions([], "stone")
        with pytest.raises(ValueError):
            sort_conversions([], "lbs", "sideways")


class TestPaginate:
    """Tests for paging through the conversion table."""

    def test_page(self):
        page = paginate(generate_weight_conversions(), skip=10, limit=5)
        assert [c.weight_per_side for c in page] == [50, 55, 60, 65, 70]

    def test_no_limit(self):
        assert len(paginate(generate_weight_conversions(), skip=25)) == 5

    def test_past_the_end(self):
        assert paginate(generate_weight_conversions(), skip=100, limit=10) == []
