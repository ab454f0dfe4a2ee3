"""SQLAlchemy ORM models."""

from parksys.models.activity import Activity
from parksys.models.advertisement import Advertisement
from parksys.models.asset import Asset, AssetCategory
from parksys.models.base import Base
from parksys.models.park import Amenity, Park, ParkAmenity
from parksys.models.user import User
from parksys.models.volunteer import Volunteer

__all__ = [
    "Activity",
    "Advertisement",
    "Amenity",
    "Asset",
    "AssetCategory",
    "Base",
    "Park",
    "ParkAmenity",
    "User",
    "Volunteer",
]
