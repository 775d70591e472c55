"""
Database and domain models for the rental listings backend
"""

from .property import Property, PropertyStatus, PropertyCreate, PropertyUpdate, LandlordContact
from .filters import FilterCriteria, ActiveFilter, SortKey

__all__ = [
    "Property", "PropertyStatus", "PropertyCreate", "PropertyUpdate", "LandlordContact",
    "FilterCriteria", "ActiveFilter", "SortKey",
]
