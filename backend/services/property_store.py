"""
Property Store adapters.

The store owns persistence and the status gate: ``list_active_properties``
never returns inactive listings. Filtering and sorting for display happen in
``services.property_filters``.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from models.property import Property, PropertyCreate, PropertyStatus, PropertyUpdate
from services.errors import PropertyNotFoundError, PropertyStoreError, StoreUnavailableError
from services.property_filters import sort_properties
from services.stats_service import get_local_now

logger = logging.getLogger(__name__)


def build_property(data: PropertyCreate, landlord_id: Optional[str] = None) -> Property:
    """New listing from a validated dashboard payload"""
    return Property(
        **data.model_dump(),
        landlord_id=landlord_id,
        created_at=get_local_now(),
    )


def apply_changes(prop: Property, changes: PropertyUpdate) -> Property:
    """Copy the fields that were actually sent onto ``prop``"""
    for field, value in changes.model_dump(exclude_unset=True).items():
        setattr(prop, field, value)
    return prop


class PropertyStore(ABC):
    """Read/write API the views depend on"""

    @abstractmethod
    def list_active_properties(self) -> List[Property]:
        """Active listings, newest first"""

    @abstractmethod
    def get_property_by_id(self, property_id: str) -> Property:
        """Raises PropertyNotFoundError when the id is unknown"""

    @abstractmethod
    def list_landlord_properties(self, landlord_id: str) -> List[Property]:
        """Every listing of a landlord, whatever its status"""

    @abstractmethod
    def create_property(self, data: PropertyCreate, landlord_id: Optional[str] = None) -> Property:
        ...

    @abstractmethod
    def update_property(self, property_id: str, changes: PropertyUpdate) -> Property:
        ...

    @abstractmethod
    def delete_property(self, property_id: str) -> None:
        ...

    def set_status(self, property_id: str, status: PropertyStatus) -> Property:
        return self.update_property(property_id, PropertyUpdate(status=status))


class InMemoryPropertyStore(PropertyStore):
    """Dictionary backed store for local development and tests"""

    def __init__(self, properties: Optional[Iterable[Property]] = None):
        self._properties: Dict[str, Property] = {}
        for prop in properties or []:
            self._properties[prop.id] = prop

    def list_active_properties(self) -> List[Property]:
        active = [p for p in self._properties.values() if p.status == PropertyStatus.active]
        return sort_properties(active)

    def get_property_by_id(self, property_id: str) -> Property:
        try:
            return self._properties[property_id]
        except KeyError:
            raise PropertyNotFoundError(property_id) from None

    def list_landlord_properties(self, landlord_id: str) -> List[Property]:
        owned = [p for p in self._properties.values() if p.landlord_id == landlord_id]
        return sort_properties(owned)

    def create_property(self, data: PropertyCreate, landlord_id: Optional[str] = None) -> Property:
        prop = build_property(data, landlord_id)
        self._properties[prop.id] = prop
        logger.info(f"Created listing {prop.id} for landlord {landlord_id}")
        return prop

    def update_property(self, property_id: str, changes: PropertyUpdate) -> Property:
        return apply_changes(self.get_property_by_id(property_id), changes)

    def delete_property(self, property_id: str) -> None:
        if self._properties.pop(property_id, None) is None:
            raise PropertyNotFoundError(property_id)
        logger.info(f"Deleted listing {property_id}")


class SQLPropertyStore(PropertyStore):
    """Store over the ``properties`` table through SQLModel"""

    def __init__(self, engine):
        self.engine = engine

    def _run(self, operation, *args):
        try:
            with Session(self.engine) as session:
                return operation(session, *args)
        except IntegrityError as e:
            logger.warning(f"Property store rejected a write: {e.orig}")
            raise PropertyStoreError(f"Listing rejected by the store: {e.orig}") from e
        except SQLAlchemyError as e:
            logger.error(f"Property store query failed: {e}")
            raise StoreUnavailableError(f"Property store unavailable: {e}") from e

    @staticmethod
    def _get(session: Session, property_id: str) -> Property:
        prop = session.get(Property, property_id)
        if prop is None:
            raise PropertyNotFoundError(property_id)
        return prop

    def list_active_properties(self) -> List[Property]:
        def query(session):
            statement = (
                select(Property)
                .where(Property.status == PropertyStatus.active)
                .order_by(Property.created_at.desc().nulls_last())
            )
            return list(session.exec(statement).all())
        return self._run(query)

    def get_property_by_id(self, property_id: str) -> Property:
        return self._run(self._get, property_id)

    def list_landlord_properties(self, landlord_id: str) -> List[Property]:
        def query(session):
            statement = (
                select(Property)
                .where(Property.landlord_id == landlord_id)
                .order_by(Property.created_at.desc().nulls_last())
            )
            return list(session.exec(statement).all())
        return self._run(query)

    def create_property(self, data: PropertyCreate, landlord_id: Optional[str] = None) -> Property:
        def insert(session):
            prop = build_property(data, landlord_id)
            session.add(prop)
            session.commit()
            session.refresh(prop)
            return prop
        prop = self._run(insert)
        logger.info(f"Created listing {prop.id} for landlord {landlord_id}")
        return prop

    def update_property(self, property_id: str, changes: PropertyUpdate) -> Property:
        def update(session):
            prop = apply_changes(self._get(session, property_id), changes)
            session.add(prop)
            session.commit()
            session.refresh(prop)
            return prop
        return self._run(update)

    def delete_property(self, property_id: str) -> None:
        def delete(session):
            session.delete(self._get(session, property_id))
            session.commit()
        self._run(delete)
        logger.info(f"Deleted listing {property_id}")
