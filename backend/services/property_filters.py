"""
Reusable property filter and sort service.

Every view (browse, landlord dashboard, hero search) evaluates listings
through this module, so the predicate is defined in one place.

Status is not checked here: ``list_active_properties`` in the store only
returns active listings, and the dashboard deliberately searches over all of
a landlord's listings.
"""
import logging
import math
from datetime import date, datetime, timezone
from typing import Iterable, List, Optional, Tuple, Union

from models.filters import FilterCriteria, SortKey
from services.errors import FilterValidationError

logger = logging.getLogger(__name__)

NO_BUCKET_VALUES = ("", "all")


def parse_amount(value, strict: bool = False, field: str = "price") -> Optional[float]:
    """Parse a user supplied amount such as ``500000`` or ``"1,200,000"``.

    Returns None when the value is unset or does not parse. In strict mode a
    value that is present but not numeric raises FilterValidationError.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        amount = float(value)
    else:
        text = str(value).strip().replace(",", "").replace("_", "").replace(" ", "")
        if not text:
            return None
        try:
            amount = float(text)
        except ValueError:
            amount = None

    if amount is None or not math.isfinite(amount):
        if strict:
            raise FilterValidationError(f"{field} must be a number, got {value!r}")
        logger.debug(f"Ignoring non numeric {field}: {value!r}")
        return None
    return amount


def parse_price_range(value, strict: bool = False) -> Optional[Tuple[float, float]]:
    """Parse a bucket like ``"500000-1000000"`` or ``"5000000+"`` into inclusive bounds.

    The ``+`` form has an infinite upper bound. Empty and ``"all"`` mean no
    bucket. Malformed buckets are ignored unless ``strict`` is set.
    """
    if value is None:
        return None
    text = str(value).strip()
    if text.lower() in NO_BUCKET_VALUES:
        return None

    bounds = None
    if text.endswith("+"):
        low = parse_amount(text[:-1], field="price range")
        if low is not None:
            bounds = (low, math.inf)
    else:
        parts = text.split("-")
        if len(parts) == 2:
            low = parse_amount(parts[0], field="price range")
            high = parse_amount(parts[1], field="price range")
            if low is not None and high is not None and low <= high:
                bounds = (low, high)

    if bounds is None:
        if strict:
            raise FilterValidationError(f"Invalid price range {value!r}, expected '<min>-<max>' or '<min>+'")
        logger.debug(f"Ignoring malformed price range: {value!r}")
    return bounds


def coerce_price(value) -> float:
    """Listing price as a number; missing, NaN and non numeric prices count as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    return amount if math.isfinite(amount) else 0.0


def parse_timestamp(value) -> Optional[float]:
    """Seconds since the epoch for ``created_at``, or None if absent or unparseable.

    Naive datetimes are read as UTC.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc).timestamp()
    if isinstance(value, (int, float)) and math.isfinite(value):
        return float(value)
    return None


def _location_matches(prop, query: str) -> bool:
    query = (query or "").strip().lower()
    if not query:
        return True
    return query in (getattr(prop, "location", None) or "").lower()


def _price_within(price: float, low: Optional[float], high: Optional[float]) -> bool:
    if low is not None and price < low:
        return False
    if high is not None and price > high:
        return False
    return True


def _has_utilities(prop, required: Iterable[str]) -> bool:
    flags = getattr(prop, "utilities", None) or {}
    return all(flags.get(key) is True for key in required)


def _has_services(prop, required: Iterable[str]) -> bool:
    available = set(getattr(prop, "nearby_services", None) or [])
    return set(required).issubset(available)


def matches(prop, criteria: FilterCriteria, strict: bool = False) -> bool:
    """Whether a property passes every active filter in ``criteria``."""
    if not _location_matches(prop, criteria.location_query):
        return False

    price = coerce_price(getattr(prop, "price", None))

    price_min = parse_amount(criteria.price_min, strict, "price_min")
    price_max = parse_amount(criteria.price_max, strict, "price_max")
    if not _price_within(price, price_min, price_max):
        return False

    bucket = parse_price_range(criteria.price_range, strict)
    if bucket is not None and not _price_within(price, *bucket):
        return False

    if not _has_utilities(prop, criteria.utilities):
        return False

    if not _has_services(prop, criteria.nearby_services):
        return False

    return True


def validate_criteria(criteria: FilterCriteria) -> None:
    """Raise FilterValidationError if any price input in ``criteria`` is malformed."""
    parse_amount(criteria.price_min, True, "price_min")
    parse_amount(criteria.price_max, True, "price_max")
    parse_price_range(criteria.price_range, True)


def filter_properties(properties: Iterable, criteria: FilterCriteria, strict: bool = False) -> list:
    """Subset of ``properties`` matching ``criteria``, original order kept."""
    return [prop for prop in properties if matches(prop, criteria, strict)]


def _normalize_sort_key(sort_key: Union[SortKey, str, None]) -> SortKey:
    if isinstance(sort_key, SortKey):
        return sort_key
    try:
        return SortKey(sort_key)
    except ValueError:
        logger.debug(f"Unknown sort key {sort_key!r}, falling back to newest")
        return SortKey.newest


def _newest_key(prop) -> float:
    timestamp = parse_timestamp(getattr(prop, "created_at", None))
    # Undated listings go after dated ones and keep their relative order
    return timestamp if timestamp is not None else -math.inf


def sort_properties(properties: Iterable, sort_key: Union[SortKey, str, None] = SortKey.newest) -> list:
    """Stable sort of ``properties`` for the given sort key.

    Unknown keys sort by newest. Never raises on bad prices or dates.
    """
    key = _normalize_sort_key(sort_key)
    items = list(properties)

    if key == SortKey.price_low:
        return sorted(items, key=lambda p: coerce_price(getattr(p, "price", None)))
    if key == SortKey.price_high:
        return sorted(items, key=lambda p: coerce_price(getattr(p, "price", None)), reverse=True)
    return sorted(items, key=_newest_key, reverse=True)


def compare_properties(a, b, sort_key: Union[SortKey, str, None] = SortKey.newest) -> int:
    """Pairwise comparator consistent with sort_properties: negative if ``a`` goes first."""
    key = _normalize_sort_key(sort_key)

    if key in (SortKey.price_low, SortKey.price_high):
        left = coerce_price(getattr(a, "price", None))
        right = coerce_price(getattr(b, "price", None))
        if key == SortKey.price_high:
            left, right = right, left
    else:
        left = _newest_key(b)
        right = _newest_key(a)

    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def apply_filters(properties: Iterable, criteria: FilterCriteria, strict: bool = False) -> list:
    """Filter then sort, the full browse pipeline."""
    return sort_properties(filter_properties(properties, criteria, strict), criteria.sort_key)


def format_price(amount) -> str:
    """Render an amount the way listing cards show it, e.g. ``TZS 1,200,000``."""
    value = coerce_price(amount)
    if value.is_integer():
        return f"TZS {int(value):,}"
    return f"TZS {value:,.2f}"
