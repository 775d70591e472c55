"""Shared fixtures for the listings backend tests."""

from datetime import datetime, timezone

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from models.property import Property, PropertyStatus
from services.favorites import FavoritesRegistry
from services.property_store import InMemoryPropertyStore
from services.sample_data import sample_properties


def sqlite_engine(create_tables: bool = True):
    """Private in-memory SQLite database shared by every connection."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    if create_tables:
        SQLModel.metadata.create_all(engine)
    return engine


def make_property(**overrides) -> Property:
    """Active listing with sensible defaults, overridable per test."""
    values = {
        "id": "p-1",
        "title": "Test listing",
        "description": "",
        "price": 500000,
        "location": "Sinza, Dar es Salaam",
        "utilities": {"electricity": True, "water": True},
        "nearby_services": [],
        "status": PropertyStatus.active,
        "created_at": datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
    }
    values.update(overrides)
    return Property(**values)


@pytest.fixture
def listings() -> list[Property]:
    """The six sample listings, "1" newest and "6" oldest."""
    return sample_properties()


@pytest.fixture
def store(listings: list[Property]) -> InMemoryPropertyStore:
    return InMemoryPropertyStore(listings)


@pytest.fixture
def registry() -> FavoritesRegistry:
    return FavoritesRegistry()


@pytest.fixture
def scenario() -> list[Property]:
    """Two listings from the browse page example."""
    return [
        make_property(id="1", price=400000, location="Mikocheni, Dar es Salaam",
                      nearby_services=["school"], created_at=datetime(2024, 5, 1, tzinfo=timezone.utc)),
        make_property(id="2", price=900000, location="Arusha",
                      nearby_services=["school", "market"], created_at=datetime(2024, 5, 2, tzinfo=timezone.utc)),
    ]


def ids(properties) -> list[str]:
    return [prop.id for prop in properties]
