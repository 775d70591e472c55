"""
Sample listings used to seed a fresh database and the in-memory store
"""
import copy
from datetime import datetime, timedelta, timezone

from models.property import Property, PropertyStatus

SAMPLE_LANDLORD_ID = "landlord-demo"

_SAMPLES = [
    {
        "id": "1",
        "title": "Modern house in Mikocheni",
        "description": "Three bedrooms, modern kitchen and a fenced compound.",
        "price": 800000,
        "location": "Mikocheni, Dar es Salaam",
        "images": ["https://images.unsplash.com/photo-1721322800607-8c38375eef04?w=400&h=300&fit=crop"],
        "utilities": {"electricity": True, "water": True},
        "nearby_services": ["school", "hospital", "market"],
        "views": 156,
        "inquiries": 8,
    },
    {
        "id": "2",
        "title": "Apartment near the main road",
        "description": "One bedroom with kitchen, close to public transport.",
        "price": 400000,
        "location": "Mwananyamala, Dar es Salaam",
        "images": ["https://images.unsplash.com/photo-1649972904349-6e44c42644a7?w=400&h=300&fit=crop"],
        "utilities": {"electricity": True, "water": False},
        "nearby_services": ["school", "market"],
        "views": 89,
        "inquiries": 12,
    },
    {
        "id": "3",
        "title": "Family house in Njiro",
        "description": "Four bedrooms with a garden and parking.",
        "price": 1200000,
        "location": "Njiro, Arusha",
        "utilities": {"electricity": True, "water": True},
        "nearby_services": ["school", "hospital"],
    },
    {
        "id": "4",
        "title": "Studio in Kijitonyama",
        "description": "Self contained room, ideal for students.",
        "price": 350000,
        "location": "Kijitonyama, Dar es Salaam",
        "utilities": {"electricity": True, "water": True},
        "nearby_services": ["market"],
    },
    {
        "id": "5",
        "title": "Two bedroom flat in Sinza",
        "description": "Second floor flat with balcony.",
        "price": 600000,
        "location": "Sinza, Dar es Salaam",
        "utilities": {"electricity": True, "water": True},
        "nearby_services": ["school", "hospital", "market"],
    },
    {
        "id": "6",
        "title": "Lake view house in Ilemela",
        "description": "Quiet neighbourhood close to the lake shore.",
        "price": 450000,
        "location": "Ilemela, Mwanza",
        "utilities": {"electricity": False, "water": True},
        "nearby_services": ["market", "hospital"],
    },
]


def sample_properties(now: datetime = None) -> list:
    """Fresh Property objects, listing "1" being the newest"""
    now = now or datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
    properties = []
    for position, sample in enumerate(_SAMPLES):
        properties.append(Property(
            **copy.deepcopy(sample),
            status=PropertyStatus.active,
            created_at=now - timedelta(days=position),
            landlord_id=SAMPLE_LANDLORD_ID,
            landlord_name="Demo Landlord",
            landlord_phone="+255 700 000 000",
        ))
    return properties
