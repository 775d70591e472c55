"""
URL query parameters <-> FilterCriteria

The browse page is entered with ``location``, ``price``, ``minPrice`` and
``maxPrice`` (from the hero search or a shared link). ``utilities``,
``services`` and ``sort`` are also accepted so a filtered view can be
linked to.
"""
from typing import Dict, List, Mapping, Optional, Union

from models.filters import FilterCriteria, SortKey
from services.property_filters import parse_amount

QueryValue = Union[str, List[str], None]


def _first(value: QueryValue) -> Optional[str]:
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _many(value: QueryValue) -> List[str]:
    """Repeated params or a comma separated single value, deduplicated."""
    if value is None:
        return []
    raw = value if isinstance(value, (list, tuple)) else [value]
    items = []
    for chunk in raw:
        for item in str(chunk).split(","):
            item = item.strip().lower()
            if item and item not in items:
                items.append(item)
    return items


def _sort_key(value: Optional[str]) -> SortKey:
    try:
        return SortKey(value)
    except ValueError:
        return SortKey.newest


def _amount_param(amount: float) -> str:
    return str(int(amount)) if amount.is_integer() else str(amount)


def criteria_from_query_params(params: Mapping[str, QueryValue]) -> FilterCriteria:
    """Seed criteria from query parameters. Missing params keep their defaults."""
    return FilterCriteria(
        location_query=(_first(params.get("location")) or "").strip(),
        price_range=(_first(params.get("price")) or "").strip(),
        price_min=_first(params.get("minPrice")) or None,
        price_max=_first(params.get("maxPrice")) or None,
        utilities=_many(params.get("utilities")),
        nearby_services=_many(params.get("services")),
        sort_key=_sort_key(_first(params.get("sort"))),
    )


def criteria_to_query_params(criteria: FilterCriteria) -> Dict[str, Union[str, List[str]]]:
    """Query parameters that reproduce ``criteria``; defaults and unparseable bounds are left out."""
    params: Dict[str, Union[str, List[str]]] = {}

    location = (criteria.location_query or "").strip()
    if location:
        params["location"] = location
    if criteria.price_range and criteria.price_range.strip().lower() != "all":
        params["price"] = criteria.price_range.strip()

    price_min = parse_amount(criteria.price_min)
    if price_min is not None:
        params["minPrice"] = _amount_param(price_min)
    price_max = parse_amount(criteria.price_max)
    if price_max is not None:
        params["maxPrice"] = _amount_param(price_max)

    if criteria.utilities:
        params["utilities"] = list(criteria.utilities)
    if criteria.nearby_services:
        params["services"] = list(criteria.nearby_services)
    if criteria.sort_key != SortKey.newest:
        params["sort"] = criteria.sort_key.value
    return params
