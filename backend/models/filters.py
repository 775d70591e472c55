"""
Filter models - Browse criteria and the badges derived from them
"""
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field


class SortKey(str, Enum):
    """Orderings offered on the browse page"""
    newest = "newest"
    price_low = "price-low"
    price_high = "price-high"


# Buckets offered by the price dropdown, value -> label
PRICE_BUCKETS = {
    "0-500000": "Under TZS 500,000",
    "500000-1000000": "TZS 500,000 - 1,000,000",
    "1000000-2000000": "TZS 1,000,000 - 2,000,000",
    "2000000-5000000": "TZS 2,000,000 - 5,000,000",
    "5000000+": "Over TZS 5,000,000",
}


class FilterCriteria(BaseModel):
    """Transient search state of a browse or dashboard view.

    Price bounds are kept as received (number or raw text) so that the
    evaluator can decide how to treat input that does not parse.
    """

    location_query: str = ""
    price_min: Optional[Union[float, str]] = None
    price_max: Optional[Union[float, str]] = None
    price_range: str = ""
    utilities: List[str] = Field(default_factory=list)
    nearby_services: List[str] = Field(default_factory=list)
    sort_key: SortKey = SortKey.newest


class ActiveFilter(BaseModel):
    """One removable badge in the active filter bar"""

    field: str
    value: Optional[str] = None
    label: str
