"""
Landlord dashboard statistics
"""
import os
from datetime import datetime
from typing import Iterable

import pytz

from models.property import PropertyStatus

TANZANIA_TZ = pytz.timezone(os.getenv("APP_TIMEZONE", "Africa/Dar_es_Salaam"))


def get_local_now():
    """Current time in the marketplace timezone"""
    return datetime.now(TANZANIA_TZ)


def get_listing_stats(listings: Iterable) -> dict:
    """Totals shown in the dashboard stat cards"""
    listings = list(listings)

    total_views = sum(listing.views or 0 for listing in listings)
    total_inquiries = sum(listing.inquiries or 0 for listing in listings)
    active = [listing for listing in listings if listing.status == PropertyStatus.active]

    average_price = 0
    if listings:
        average_price = round(sum(listing.price or 0 for listing in listings) / len(listings))

    return {
        "total_listings": len(listings),
        "active_listings": len(active),
        "inactive_listings": len(listings) - len(active),
        "total_views": total_views,
        "total_inquiries": total_inquiries,
        "average_price": average_price,
    }
