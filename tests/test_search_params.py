"""Tests for URL query parameter parsing."""

from models.filters import FilterCriteria, SortKey
from services.search_params import criteria_from_query_params, criteria_to_query_params


class TestCriteriaFromQueryParams:
    def test_empty_params_give_defaults(self) -> None:
        assert criteria_from_query_params({}) == FilterCriteria()

    def test_hero_search_params(self) -> None:
        criteria = criteria_from_query_params({"location": " Sinza ", "minPrice": "300000", "maxPrice": "700000"})
        assert criteria.location_query == "Sinza"
        assert criteria.price_min == "300000"
        assert criteria.price_max == "700000"

    def test_bucket_param(self) -> None:
        assert criteria_from_query_params({"price": "5000000+"}).price_range == "5000000+"

    def test_repeated_and_comma_separated_lists(self) -> None:
        criteria = criteria_from_query_params({
            "utilities": ["Water", "electricity"],
            "services": "school,market,school",
        })
        assert criteria.utilities == ["water", "electricity"]
        assert criteria.nearby_services == ["school", "market"]

    def test_sort_param(self) -> None:
        assert criteria_from_query_params({"sort": "price-high"}).sort_key == SortKey.price_high
        assert criteria_from_query_params({"sort": "bogus"}).sort_key == SortKey.newest

    def test_empty_strings_are_unset(self) -> None:
        criteria = criteria_from_query_params({"minPrice": "", "maxPrice": None, "price": ""})
        assert criteria.price_min is None
        assert criteria.price_max is None
        assert criteria.price_range == ""


class TestCriteriaToQueryParams:
    def test_defaults_render_nothing(self) -> None:
        assert criteria_to_query_params(FilterCriteria()) == {}

    def test_renders_every_field(self) -> None:
        criteria = FilterCriteria(
            location_query="Arusha",
            price_range="0-500000",
            price_min=100000.0,
            price_max="abc",
            utilities=["water"],
            nearby_services=["school"],
            sort_key=SortKey.price_low,
        )
        assert criteria_to_query_params(criteria) == {
            "location": "Arusha",
            "price": "0-500000",
            "minPrice": "100000",
            "utilities": ["water"],
            "services": ["school"],
            "sort": "price-low",
        }

    def test_parse_render_parse_is_stable(self) -> None:
        params = {"location": "Dar", "minPrice": "250000", "services": ["market"], "sort": "price-high"}
        criteria = criteria_from_query_params(params)
        assert criteria_from_query_params(criteria_to_query_params(criteria)) == criteria
