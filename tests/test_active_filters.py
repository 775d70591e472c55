"""Tests for active filter badges and their removal."""

import pytest

from conftest import ids
from models.filters import ActiveFilter, FilterCriteria, SortKey
from services.active_filters import (
    clear_all_filters,
    has_active_filters,
    remove_filter,
    summarize_filters,
)
from services.property_filters import apply_filters


@pytest.fixture
def busy_criteria() -> FilterCriteria:
    return FilterCriteria(
        location_query=" Dar ",
        price_range="0-500000",
        price_min="300000",
        utilities=["electricity", "water"],
        nearby_services=["market"],
        sort_key=SortKey.price_low,
    )


class TestSummarizeFilters:
    def test_default_criteria_has_no_badges(self) -> None:
        assert summarize_filters(FilterCriteria()) == []
        assert not has_active_filters(FilterCriteria())

    def test_sort_alone_is_not_a_filter(self) -> None:
        assert not has_active_filters(FilterCriteria(sort_key=SortKey.price_high))

    def test_order_and_identity(self, busy_criteria: FilterCriteria) -> None:
        badges = summarize_filters(busy_criteria)
        assert [(b.field, b.value) for b in badges] == [
            ("location_query", "Dar"),
            ("price_range", "0-500000"),
            ("price_bounds", "300000-"),
            ("utilities", "electricity"),
            ("utilities", "water"),
            ("nearby_services", "market"),
        ]

    def test_labels(self, busy_criteria: FilterCriteria) -> None:
        labels = [b.label for b in summarize_filters(busy_criteria)]
        assert labels == [
            "Location: Dar",
            "Price: Under TZS 500,000",
            "Price: from TZS 300,000",
            "Electricity",
            "Water",
            "Market",
        ]

    def test_bucket_and_bounds_are_two_badges(self) -> None:
        criteria = FilterCriteria(price_range="5000000+", price_min=100, price_max=200)
        badges = summarize_filters(criteria)
        assert [b.field for b in badges] == ["price_range", "price_bounds"]
        assert badges[1].label == "Price: TZS 100 - TZS 200"

    def test_upper_bound_only(self) -> None:
        badge, = summarize_filters(FilterCriteria(price_max="1,000,000"))
        assert badge.label == "Price: up to TZS 1,000,000"
        assert badge.value == "-1000000"

    def test_custom_bucket_label(self) -> None:
        badge, = summarize_filters(FilterCriteria(price_range="100000-250000"))
        assert badge.label == "Price: TZS 100,000 - TZS 250,000"

    def test_ignored_inputs_have_no_badge(self) -> None:
        criteria = FilterCriteria(location_query="  ", price_range="cheap", price_min="abc")
        assert summarize_filters(criteria) == []


class TestRemoveFilter:
    def test_remove_each_badge_clears_only_that_field(self, busy_criteria: FilterCriteria) -> None:
        for badge in summarize_filters(busy_criteria):
            remaining = summarize_filters(remove_filter(busy_criteria, badge))
            assert badge not in remaining
            assert len(remaining) == len(summarize_filters(busy_criteria)) - 1

    def test_remove_utility_keeps_others(self, busy_criteria: FilterCriteria) -> None:
        updated = remove_filter(busy_criteria, ActiveFilter(field="utilities", value="water", label="Water"))
        assert updated.utilities == ["electricity"]
        assert updated.location_query == busy_criteria.location_query
        assert updated.sort_key == SortKey.price_low

    def test_remove_price_bounds_clears_min_and_max(self) -> None:
        criteria = FilterCriteria(price_min=1, price_max=2, price_range="0-500000")
        badge = summarize_filters(criteria)[1]
        updated = remove_filter(criteria, badge)
        assert updated.price_min is None and updated.price_max is None
        assert updated.price_range == "0-500000"

    def test_original_is_untouched(self, busy_criteria: FilterCriteria) -> None:
        badge = summarize_filters(busy_criteria)[0]
        remove_filter(busy_criteria, badge)
        assert busy_criteria.location_query == " Dar "

    def test_unknown_field(self) -> None:
        with pytest.raises(ValueError):
            remove_filter(FilterCriteria(), ActiveFilter(field="colour", label="Blue"))

    def test_removal_reruns_predicate(self, listings) -> None:
        criteria = FilterCriteria(location_query="arusha", nearby_services=["market"])
        assert apply_filters(listings, criteria) == []
        service_badge = summarize_filters(criteria)[1]
        assert ids(apply_filters(listings, remove_filter(criteria, service_badge))) == ["3"]


class TestClearAllFilters:
    def test_resets_everything(self, busy_criteria: FilterCriteria, listings) -> None:
        cleared = clear_all_filters()
        assert cleared == FilterCriteria()
        assert cleared.sort_key == SortKey.newest
        assert len(apply_filters(listings, cleared)) == len(listings)

    def test_leaves_current_criteria_untouched(self, busy_criteria: FilterCriteria) -> None:
        before = busy_criteria.model_copy(deep=True)
        cleared = clear_all_filters(busy_criteria)
        assert cleared == FilterCriteria()
        assert not has_active_filters(cleared)
        assert busy_criteria == before
