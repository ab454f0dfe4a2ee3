"""Repositories: one data-access class per entity, each bound to a caller-owned session."""

from parksys.repositories.activities import ActivityRepository
from parksys.repositories.advertisements import AdvertisementRepository
from parksys.repositories.assets import AssetCategoryRepository, AssetRepository
from parksys.repositories.base import BaseRepository
from parksys.repositories.parks import AmenityRepository, ParkRepository
from parksys.repositories.users import UserRepository
from parksys.repositories.volunteers import VolunteerRepository

__all__ = [
    "ActivityRepository",
    "AdvertisementRepository",
    "AmenityRepository",
    "AssetCategoryRepository",
    "AssetRepository",
    "BaseRepository",
    "ParkRepository",
    "UserRepository",
    "VolunteerRepository",
]
