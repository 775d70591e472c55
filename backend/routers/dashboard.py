"""
Dashboard router - Landlord listing management
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from config.store_config import get_property_store, get_strict_filters
from models.property import PropertyCreate, PropertyStatus, PropertyUpdate
from routers.properties import format_property_data, store_unavailable
from services.errors import FilterValidationError, PropertyNotFoundError, PropertyStoreError, StoreUnavailableError
from services.property_filters import apply_filters, validate_criteria
from services.property_store import PropertyStore
from services.search_params import criteria_from_query_params
from services.stats_service import get_listing_stats, get_local_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


def store_rejected(error: PropertyStoreError) -> HTTPException:
    """The store refused the write, retrying the same payload will not help"""
    logger.warning(f"Listing write rejected: {error}")
    return HTTPException(status_code=400, detail=str(error))


def _landlord_listings(store: PropertyStore, landlord_id: str):
    try:
        return store.list_landlord_properties(landlord_id)
    except StoreUnavailableError as e:
        raise store_unavailable(e)


@router.get("/{landlord_id}/listings")
async def get_landlord_listings(
    landlord_id: str,
    location: Optional[str] = None,
    price: Optional[str] = None,
    min_price: Optional[str] = Query(None, alias="minPrice"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
    utilities: Optional[List[str]] = Query(None),
    services: Optional[List[str]] = Query(None),
    sort: Optional[str] = None,
    store: PropertyStore = Depends(get_property_store),
    strict: bool = Depends(get_strict_filters),
):
    """Landlord listings of every status, searchable like the browse page"""
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

    listings = apply_filters(_landlord_listings(store, landlord_id), criteria)

    return {
        "status": "success",
        "data": {
            "listings": [
                {**format_property_data(prop), "views": prop.views, "inquiries": prop.inquiries}
                for prop in listings
            ],
            "total_count": len(listings),
        },
    }


@router.get("/{landlord_id}/summary")
async def get_landlord_summary(landlord_id: str, store: PropertyStore = Depends(get_property_store)):
    """Stat cards: listings, views, inquiries, average rent"""
    stats = get_listing_stats(_landlord_listings(store, landlord_id))
    return {"status": "success", "timestamp": get_local_now().isoformat(), "data": stats}


@router.post("/{landlord_id}/listings", status_code=201)
async def create_listing(
    landlord_id: str,
    payload: PropertyCreate,
    store: PropertyStore = Depends(get_property_store),
):
    """Publish a new listing"""
    try:
        prop = store.create_property(payload, landlord_id=landlord_id)
    except StoreUnavailableError as e:
        raise store_unavailable(e)
    except PropertyStoreError as e:
        raise store_rejected(e)
    return {"status": "success", "data": format_property_data(prop)}


@router.put("/listings/{property_id}")
async def update_listing(
    property_id: str,
    changes: PropertyUpdate,
    store: PropertyStore = Depends(get_property_store),
):
    """Edit a listing, only the sent fields change"""
    try:
        prop = store.update_property(property_id, changes)
    except PropertyNotFoundError:
        raise HTTPException(status_code=404, detail=f"Property {property_id} not found")
    except StoreUnavailableError as e:
        raise store_unavailable(e)
    except PropertyStoreError as e:
        raise store_rejected(e)
    return {"status": "success", "data": format_property_data(prop)}


@router.patch("/listings/{property_id}/status")
async def set_listing_status(
    property_id: str,
    status: PropertyStatus = Body(..., embed=True),
    store: PropertyStore = Depends(get_property_store),
):
    """Show or hide a listing on the browse page"""
    try:
        prop = store.set_status(property_id, status)
    except PropertyNotFoundError:
        raise HTTPException(status_code=404, detail=f"Property {property_id} not found")
    except StoreUnavailableError as e:
        raise store_unavailable(e)
    except PropertyStoreError as e:
        raise store_rejected(e)
    logger.info(f"Listing {property_id} is now {status.value}")
    return {"status": "success", "data": format_property_data(prop)}


@router.delete("/listings/{property_id}")
async def delete_listing(property_id: str, store: PropertyStore = Depends(get_property_store)):
    """Remove a listing"""
    try:
        store.delete_property(property_id)
    except PropertyNotFoundError:
        raise HTTPException(status_code=404, detail=f"Property {property_id} not found")
    except StoreUnavailableError as e:
        raise store_unavailable(e)
    except PropertyStoreError as e:
        raise store_rejected(e)
    return {"status": "success", "data": {"id": property_id}}
