"""
Domain exceptions for the listings backend
"""


class ListingsError(Exception):
    """Base exception for the listings backend."""


class FilterValidationError(ListingsError, ValueError):
    """Raised in strict mode when a filter value cannot be parsed."""


class PropertyStoreError(ListingsError):
    """Base exception for Property Store failures."""


class PropertyNotFoundError(PropertyStoreError):
    """Raised when a property id does not exist in the store."""

    def __init__(self, property_id: str):
        super().__init__(f"Property {property_id} not found")
        self.property_id = property_id


class StoreUnavailableError(PropertyStoreError):
    """Raised on transient store failures; the caller may retry."""

    retryable = True
