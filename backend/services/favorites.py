"""
Favorites tracker, held in memory for one browsing session
"""
import logging
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


class FavoritesTracker:
    """Ordered set of favorited property ids."""

    def __init__(self, ids=None):
        # dict keeps insertion order, values unused
        self._ids: Dict[str, None] = dict.fromkeys(ids or [])

    def toggle(self, property_id: str) -> bool:
        """Add the id if absent, remove it if present. Returns the new membership."""
        if property_id in self._ids:
            del self._ids[property_id]
            return False
        self._ids[property_id] = None
        return True

    def is_favorited(self, property_id: str) -> bool:
        return property_id in self._ids

    def ids(self) -> List[str]:
        return list(self._ids)

    def clear(self) -> None:
        self._ids.clear()

    def __contains__(self, property_id) -> bool:
        return property_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)


class FavoritesRegistry:
    """One tracker per session id. Nothing survives a restart."""

    def __init__(self):
        self._sessions: Dict[str, FavoritesTracker] = {}

    def get(self, session_id: str) -> Optional[FavoritesTracker]:
        """Tracker of a session that has favorited something, without registering it"""
        return self._sessions.get(session_id)

    def for_session(self, session_id: str) -> FavoritesTracker:
        tracker = self._sessions.get(session_id)
        if tracker is None:
            logger.debug(f"Starting favorites for session {session_id}")
            tracker = self._sessions[session_id] = FavoritesTracker()
        return tracker

    def __len__(self) -> int:
        return len(self._sessions)

    def end_session(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)


favorites_registry = FavoritesRegistry()


def get_favorites_registry() -> FavoritesRegistry:
    return favorites_registry
