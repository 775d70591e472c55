"""
Property model - Represents rental listings published by landlords
"""
import uuid
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import field_validator
from sqlalchemy import JSON, DateTime
from sqlmodel import SQLModel, Field, Column


class PropertyStatus(str, Enum):
    """Listing visibility"""
    active = "active"
    inactive = "inactive"


class UtilityKey(str, Enum):
    """Utility flags a listing can advertise"""
    electricity = "electricity"
    water = "water"


class ServiceTag(str, Enum):
    """Nearby service categories"""
    school = "school"
    hospital = "hospital"
    market = "market"


UTILITY_KEYS = [u.value for u in UtilityKey]
SERVICE_TAGS = [s.value for s in ServiceTag]


def default_utilities() -> Dict[str, bool]:
    return {key: False for key in UTILITY_KEYS}


def new_property_id() -> str:
    return uuid.uuid4().hex


class LandlordContact(SQLModel):
    """Contact details shown on the listing detail page"""

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


class Property(SQLModel, table=True):
    """Property table for storing rental listings"""

    __tablename__ = "properties"

    id: str = Field(default_factory=new_property_id, primary_key=True, description="Listing identifier")

    # Listing details
    title: str = Field(default="", max_length=255, description="Listing title")
    description: str = Field(default="", description="Free text description")
    price: float = Field(default=0, description="Monthly rent in TZS")
    location: str = Field(default="", max_length=255, description="Place name used for search, e.g. 'Sinza, Dar es Salaam'")
    full_address: Optional[str] = Field(default=None, description="Street level address")

    images: List[str] = Field(default_factory=list, sa_column=Column(JSON), description="Ordered image URLs")
    utilities: Dict[str, bool] = Field(default_factory=default_utilities, sa_column=Column(JSON),
                                       description="Flags like {'electricity': true, 'water': false}")
    nearby_services: List[str] = Field(default_factory=list, sa_column=Column(JSON),
                                       description="Service tags such as 'school' or 'market'")

    status: PropertyStatus = Field(default=PropertyStatus.active, description="Only active listings are browsable")
    created_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime(timezone=True)),
                                           description="When the listing was published")

    # Landlord
    landlord_id: Optional[str] = Field(default=None, index=True, description="Owner account id")
    landlord_name: Optional[str] = Field(default=None, max_length=255)
    landlord_phone: Optional[str] = Field(default=None, max_length=50)
    landlord_email: Optional[str] = Field(default=None, max_length=255)

    # Dashboard counters
    views: int = Field(default=0, description="Number of detail page views")
    inquiries: int = Field(default=0, description="Number of tenant inquiries")

    @property
    def landlord_contact(self) -> Optional[LandlordContact]:
        if not (self.landlord_name or self.landlord_phone or self.landlord_email):
            return None
        return LandlordContact(name=self.landlord_name, phone=self.landlord_phone, email=self.landlord_email)


def _check_services(value: Optional[List[str]]) -> Optional[List[str]]:
    if value is None:
        return value
    cleaned = []
    for tag in value:
        tag = str(tag).strip().lower()
        if tag not in SERVICE_TAGS:
            raise ValueError(f"Unknown nearby service '{tag}', expected one of {SERVICE_TAGS}")
        if tag not in cleaned:
            cleaned.append(tag)
    return cleaned


def _check_utilities(value: Optional[Dict[str, bool]]) -> Optional[Dict[str, bool]]:
    if value is None:
        return value
    unknown = [key for key in value if key not in UTILITY_KEYS]
    if unknown:
        raise ValueError(f"Unknown utilities {unknown}, expected keys from {UTILITY_KEYS}")
    merged = default_utilities()
    merged.update({key: bool(flag) for key, flag in value.items()})
    return merged


class PropertyCreate(SQLModel):
    """Payload used by the landlord dashboard to publish a listing"""

    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    price: float = Field(ge=0)
    location: str = Field(min_length=1, max_length=255)
    full_address: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    utilities: Dict[str, bool] = Field(default_factory=default_utilities)
    nearby_services: List[str] = Field(default_factory=list)
    status: PropertyStatus = PropertyStatus.active

    landlord_name: Optional[str] = None
    landlord_phone: Optional[str] = None
    landlord_email: Optional[str] = None

    @field_validator("nearby_services")
    @classmethod
    def validate_services(cls, value):
        return _check_services(value)

    @field_validator("utilities")
    @classmethod
    def validate_utilities(cls, value):
        return _check_utilities(value)


class PropertyUpdate(SQLModel):
    """Partial update, only the fields that were sent are applied"""

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    location: Optional[str] = Field(default=None, min_length=1, max_length=255)
    full_address: Optional[str] = None
    images: Optional[List[str]] = None
    utilities: Optional[Dict[str, bool]] = None
    nearby_services: Optional[List[str]] = None
    status: Optional[PropertyStatus] = None

    @field_validator("title", "description", "price", "location", "images", "utilities",
                     "nearby_services", "status", mode="before")
    @classmethod
    def reject_null(cls, value, info):
        # Omit a field to leave it unchanged; only full_address can be cleared
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value

    @field_validator("nearby_services")
    @classmethod
    def validate_services(cls, value):
        return _check_services(value)

    @field_validator("utilities")
    @classmethod
    def validate_utilities(cls, value):
        return _check_utilities(value)
