"""
Property Store over the managed backend's REST API (PostgREST dialect)
"""
import logging
from datetime import datetime
from typing import List, Optional

import httpx

from models.property import Property, PropertyCreate, PropertyStatus, PropertyUpdate, default_utilities
from services.errors import PropertyNotFoundError, PropertyStoreError, StoreUnavailableError
from services.property_store import PropertyStore, build_property

logger = logging.getLogger(__name__)

TABLE = "properties"

COLUMNS = [
    "id", "title", "description", "price", "location", "full_address", "images",
    "utilities", "nearby_services", "status", "created_at", "landlord_id",
    "landlord_name", "landlord_phone", "landlord_email", "views", "inquiries",
]


def _parse_created_at(value) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unparseable created_at from store: {value!r}")
        return None


def _parse_status(value) -> PropertyStatus:
    try:
        return PropertyStatus(value or PropertyStatus.active.value)
    except ValueError:
        return PropertyStatus.inactive


def property_from_row(row: dict) -> Property:
    """Build a Property from a row of the ``properties`` table.

    A joined ``profiles`` record (object or single element list) fills in the
    landlord contact when the row has none.
    """
    profile = row.get("profiles")
    if isinstance(profile, list):
        profile = profile[0] if profile else None
    profile = profile or {}

    utilities = default_utilities()
    utilities.update({k: bool(v) for k, v in (row.get("utilities") or {}).items()})

    services = []
    for tag in row.get("nearby_services") or []:
        if tag not in services:
            services.append(tag)

    return Property(
        id=str(row["id"]),
        title=row.get("title") or "",
        description=row.get("description") or "",
        price=row.get("price") or 0,
        location=row.get("location") or "",
        full_address=row.get("full_address"),
        images=list(row.get("images") or []),
        utilities=utilities,
        nearby_services=services,
        status=_parse_status(row.get("status")),
        created_at=_parse_created_at(row.get("created_at")),
        landlord_id=row.get("landlord_id"),
        landlord_name=row.get("landlord_name") or profile.get("full_name"),
        landlord_phone=row.get("landlord_phone") or profile.get("phone"),
        landlord_email=row.get("landlord_email") or profile.get("email"),
        views=row.get("views") or 0,
        inquiries=row.get("inquiries") or 0,
    )


def property_to_row(prop: Property) -> dict:
    row = {column: getattr(prop, column) for column in COLUMNS}
    row["status"] = prop.status.value if isinstance(prop.status, PropertyStatus) else prop.status
    row["created_at"] = prop.created_at.isoformat() if prop.created_at else None
    return row


class RestPropertyStore(PropertyStore):
    """Talks to ``{base_url}/rest/v1/properties`` with the project's API key"""

    def __init__(self, base_url: str, api_key: str, timeout: float = 10.0, transport=None):
        self.client = httpx.Client(
            base_url=f"{base_url.rstrip('/')}/rest/v1",
            headers={"apikey": api_key, "Authorization": f"Bearer {api_key}"},
            timeout=timeout,
            transport=transport,
        )

    def close(self):
        self.client.close()

    def _request(self, method: str, params: dict, json=None, representation: bool = False) -> list:
        headers = {"Prefer": "return=representation"} if representation else None
        try:
            response = self.client.request(method, f"/{TABLE}", params=params, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Property store request failed: {e}")
            raise StoreUnavailableError(f"Property store unavailable: {e}") from e

        if response.status_code >= 500:
            logger.error(f"Property store answered {response.status_code}: {response.text[:200]}")
            raise StoreUnavailableError(f"Property store answered {response.status_code}")
        if response.status_code >= 400:
            raise PropertyStoreError(f"Property store rejected {method} ({response.status_code}): {response.text[:200]}")

        if not response.content:
            return []
        return response.json()

    def _single(self, rows: list, property_id: str) -> Property:
        if not rows:
            raise PropertyNotFoundError(property_id)
        return property_from_row(rows[0])

    def list_active_properties(self) -> List[Property]:
        rows = self._request("GET", {"select": "*", "status": "eq.active", "order": "created_at.desc.nullslast"})
        return [property_from_row(row) for row in rows]

    def get_property_by_id(self, property_id: str) -> Property:
        rows = self._request("GET", {"select": "*", "id": f"eq.{property_id}"})
        return self._single(rows, property_id)

    def list_landlord_properties(self, landlord_id: str) -> List[Property]:
        rows = self._request("GET", {
            "select": "*",
            "landlord_id": f"eq.{landlord_id}",
            "order": "created_at.desc.nullslast",
        })
        return [property_from_row(row) for row in rows]

    def create_property(self, data: PropertyCreate, landlord_id: Optional[str] = None) -> Property:
        prop = build_property(data, landlord_id)
        rows = self._request("POST", {}, json=property_to_row(prop), representation=True)
        logger.info(f"Created listing {prop.id} for landlord {landlord_id}")
        return property_from_row(rows[0]) if rows else prop

    def update_property(self, property_id: str, changes: PropertyUpdate) -> Property:
        payload = changes.model_dump(mode="json", exclude_unset=True)
        rows = self._request("PATCH", {"id": f"eq.{property_id}"}, json=payload, representation=True)
        return self._single(rows, property_id)

    def delete_property(self, property_id: str) -> None:
        rows = self._request("DELETE", {"id": f"eq.{property_id}"}, representation=True)
        if not rows:
            raise PropertyNotFoundError(property_id)
        logger.info(f"Deleted listing {property_id}")
