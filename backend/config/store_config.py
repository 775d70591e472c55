"""
Property Store selection and request-level settings
"""
import logging
import os

from services.property_store import InMemoryPropertyStore, PropertyStore, SQLPropertyStore
from services.rest_store import RestPropertyStore
from services.sample_data import sample_properties

logger = logging.getLogger(__name__)

# memory | sql | rest
PROPERTY_STORE = os.getenv("PROPERTY_STORE", "memory").lower()

SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_KEY = os.getenv("SUPABASE_KEY", "")
STORE_TIMEOUT = float(os.getenv("STORE_TIMEOUT", "10"))

# Reject malformed price filters with 400 instead of ignoring them
STRICT_FILTERS = os.getenv("STRICT_FILTERS", "false").lower() == "true"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

_store = None


def create_property_store(kind: str = None) -> PropertyStore:
    """Build the adapter named by ``kind`` (defaults to PROPERTY_STORE)"""
    kind = (kind or PROPERTY_STORE).lower()

    if kind == "sql":
        from config.db_connection import get_engine
        return SQLPropertyStore(get_engine())
    if kind == "rest":
        if not SUPABASE_URL or not SUPABASE_KEY:
            raise RuntimeError("PROPERTY_STORE=rest needs SUPABASE_URL and SUPABASE_KEY")
        return RestPropertyStore(SUPABASE_URL, SUPABASE_KEY, timeout=STORE_TIMEOUT)
    if kind == "memory":
        return InMemoryPropertyStore(sample_properties())

    raise RuntimeError(f"Unknown PROPERTY_STORE '{kind}', expected memory, sql or rest")


def get_property_store() -> PropertyStore:
    """FastAPI dependency returning the process wide store"""
    global _store
    if _store is None:
        _store = create_property_store()
        logger.info(f"Using {type(_store).__name__}")
    return _store


def get_strict_filters() -> bool:
    return STRICT_FILTERS
