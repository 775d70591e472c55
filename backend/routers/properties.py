"""
Properties router - Browse, search and listing detail endpoints
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Query

from config.store_config import get_property_store, get_strict_filters
from models.filters import PRICE_BUCKETS, SortKey
from models.property import SERVICE_TAGS, UTILITY_KEYS, Property
from services.active_filters import SERVICE_LABELS, UTILITY_LABELS, summarize_filters
from services.errors import FilterValidationError, PropertyNotFoundError, StoreUnavailableError
from services.favorites import FavoritesRegistry, get_favorites_registry
from services.property_filters import apply_filters, format_price, validate_criteria
from services.property_store import PropertyStore
from services.search_params import criteria_from_query_params, criteria_to_query_params

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["properties"])

SORT_LABELS = {
    SortKey.newest: "Newest first",
    SortKey.price_low: "Lowest price first",
    SortKey.price_high: "Highest price first",
}


def store_unavailable(error: StoreUnavailableError) -> HTTPException:
    """503 the client can offer a retry for"""
    logger.warning(f"Property store unavailable: {error}")
    return HTTPException(
        status_code=503,
        detail={"message": "Listings are temporarily unavailable, please try again", "retryable": True},
    )


def format_property_data(prop: Property, favorites=None) -> dict:
    """Format a property for API responses"""
    contact = prop.landlord_contact
    return {
        "id": prop.id,
        "title": prop.title,
        "description": prop.description,
        "price": prop.price,
        "price_display": f"{format_price(prop.price)}/month",
        "location": prop.location,
        "full_address": prop.full_address,
        "images": list(prop.images or []),
        "utilities": dict(prop.utilities or {}),
        "nearby_services": list(prop.nearby_services or []),
        "status": prop.status.value if hasattr(prop.status, "value") else prop.status,
        "created_at": prop.created_at.isoformat() if prop.created_at else None,
        "landlord_contact": contact.model_dump() if contact else None,
        "is_favorited": favorites.is_favorited(prop.id) if favorites is not None else False,
    }


@router.get("/properties")
async def browse_properties(
    location: Optional[str] = None,
    price: Optional[str] = None,
    min_price: Optional[str] = Query(None, alias="minPrice"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
    utilities: Optional[List[str]] = Query(None),
    services: Optional[List[str]] = Query(None),
    sort: Optional[str] = None,
    x_session_id: Optional[str] = Header(None),
    store: PropertyStore = Depends(get_property_store),
    registry: FavoritesRegistry = Depends(get_favorites_registry),
    strict: bool = Depends(get_strict_filters),
):
    """Active listings filtered and sorted from the query parameters"""
    criteria = criteria_from_query_params({
        "location": location,
        "price": price,
        "minPrice": min_price,
        "maxPrice": max_price,
        "utilities": utilities,
        "services": services,
        "sort": sort,
    })

    if strict:
        try:
            validate_criteria(criteria)
        except FilterValidationError as e:
            raise HTTPException(status_code=400, detail=str(e))

    try:
        properties = store.list_active_properties()
    except StoreUnavailableError as e:
        raise store_unavailable(e)

    results = apply_filters(properties, criteria)
    favorites = registry.get(x_session_id) if x_session_id else None
    logger.info(f"Browse: {len(results)} of {len(properties)} listings match")

    return {
        "status": "success",
        "data": {
            "properties": [format_property_data(prop, favorites) for prop in results],
            "total_count": len(results),
            "active_filters": [badge.model_dump() for badge in summarize_filters(criteria)],
            "criteria": criteria.model_dump(mode="json"),
            "query_params": criteria_to_query_params(criteria),
        },
    }


@router.get("/properties/{property_id}")
async def get_property(
    property_id: str,
    x_session_id: Optional[str] = Header(None),
    store: PropertyStore = Depends(get_property_store),
    registry: FavoritesRegistry = Depends(get_favorites_registry),
):
    """Listing detail"""
    try:
        prop = store.get_property_by_id(property_id)
    except PropertyNotFoundError:
        raise HTTPException(status_code=404, detail=f"Property {property_id} not found")
    except StoreUnavailableError as e:
        raise store_unavailable(e)

    favorites = registry.get(x_session_id) if x_session_id else None
    return {"status": "success", "data": format_property_data(prop, favorites)}


@router.get("/filters/options")
async def get_filter_options():
    """Choices for the browse page dropdowns and checkboxes"""
    return {
        "status": "success",
        "data": {
            "price_buckets": [{"value": value, "label": label} for value, label in PRICE_BUCKETS.items()],
            "sort_options": [{"value": key.value, "label": SORT_LABELS[key]} for key in SortKey],
            "utilities": [{"value": key, "label": UTILITY_LABELS[key]} for key in UTILITY_KEYS],
            "nearby_services": [{"value": tag, "label": SERVICE_LABELS[tag]} for tag in SERVICE_TAGS],
        },
    }
