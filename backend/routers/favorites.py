"""
Favorites router - Per session favorite toggling
"""
from fastapi import APIRouter, Depends, Header

from services.favorites import FavoritesRegistry, get_favorites_registry

router = APIRouter(prefix="/api/favorites", tags=["favorites"])


@router.get("")
async def list_favorites(
    x_session_id: str = Header(...),
    registry: FavoritesRegistry = Depends(get_favorites_registry),
):
    """Favorited ids in the order they were added"""
    favorites = registry.get(x_session_id)
    return {"status": "success", "data": favorites.ids() if favorites else []}


@router.post("/{property_id}/toggle")
async def toggle_favorite(
    property_id: str,
    x_session_id: str = Header(...),
    registry: FavoritesRegistry = Depends(get_favorites_registry),
):
    """Add the listing to favorites, or remove it if it was already there"""
    favorites = registry.for_session(x_session_id)
    favorited = favorites.toggle(property_id)
    if not favorites:
        registry.end_session(x_session_id)
    return {"status": "success", "data": {"property_id": property_id, "is_favorited": favorited}}
