"""
Active filter badges: derive them from the criteria, remove one, clear all
"""
from typing import List, Optional

from models.filters import ActiveFilter, FilterCriteria, PRICE_BUCKETS
from services.property_filters import format_price, parse_amount, parse_price_range

UTILITY_LABELS = {
    "electricity": "Electricity",
    "water": "Water",
}

SERVICE_LABELS = {
    "school": "School",
    "hospital": "Hospital",
    "market": "Market",
}


def _bucket_label(price_range: str) -> str:
    if price_range in PRICE_BUCKETS:
        return f"Price: {PRICE_BUCKETS[price_range]}"
    low, high = parse_price_range(price_range)
    if high == float("inf"):
        return f"Price: over {format_price(low)}"
    return f"Price: {format_price(low)} - {format_price(high)}"


def _amount_text(amount) -> str:
    if amount is None:
        return ""
    return str(int(amount)) if amount.is_integer() else str(amount)


def _bounds_label(low, high) -> str:
    if low is not None and high is not None:
        return f"Price: {format_price(low)} - {format_price(high)}"
    if low is not None:
        return f"Price: from {format_price(low)}"
    return f"Price: up to {format_price(high)}"


def summarize_filters(criteria: FilterCriteria) -> List[ActiveFilter]:
    """Badges for every non default field, in display order.

    The bucket and the custom bounds get separate badges so each can be
    removed on its own. Values that would be ignored by the evaluator do
    not produce a badge.
    """
    badges = []

    query = (criteria.location_query or "").strip()
    if query:
        badges.append(ActiveFilter(field="location_query", value=query, label=f"Location: {query}"))

    if parse_price_range(criteria.price_range) is not None:
        price_range = criteria.price_range.strip()
        badges.append(ActiveFilter(field="price_range", value=price_range, label=_bucket_label(price_range)))

    low = parse_amount(criteria.price_min)
    high = parse_amount(criteria.price_max)
    if low is not None or high is not None:
        value = f"{_amount_text(low)}-{_amount_text(high)}"
        badges.append(ActiveFilter(field="price_bounds", value=value, label=_bounds_label(low, high)))

    for utility in criteria.utilities:
        badges.append(ActiveFilter(field="utilities", value=utility,
                                   label=UTILITY_LABELS.get(utility, utility.title())))

    for service in criteria.nearby_services:
        badges.append(ActiveFilter(field="nearby_services", value=service,
                                   label=SERVICE_LABELS.get(service, service.title())))

    return badges


def has_active_filters(criteria: FilterCriteria) -> bool:
    return bool(summarize_filters(criteria))


def remove_filter(criteria: FilterCriteria, active_filter: ActiveFilter) -> FilterCriteria:
    """Copy of ``criteria`` with exactly the field behind ``active_filter`` cleared."""
    field = active_filter.field

    if field == "location_query":
        return criteria.model_copy(update={"location_query": ""})
    if field == "price_range":
        return criteria.model_copy(update={"price_range": ""})
    if field == "price_bounds":
        return criteria.model_copy(update={"price_min": None, "price_max": None})
    if field == "utilities":
        remaining = [u for u in criteria.utilities if u != active_filter.value]
        return criteria.model_copy(update={"utilities": remaining})
    if field == "nearby_services":
        remaining = [s for s in criteria.nearby_services if s != active_filter.value]
        return criteria.model_copy(update={"nearby_services": remaining})

    raise ValueError(f"Unknown filter field: {field}")


def clear_all_filters(criteria: Optional[FilterCriteria] = None) -> FilterCriteria:
    """Reset every filter and the sort order. ``criteria`` is left untouched."""
    return FilterCriteria()
