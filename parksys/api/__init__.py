"""API routes."""

from fastapi import APIRouter

from parksys.api import activities, advertisements, amenities, assets, auth, health, parks, volunteers

router = APIRouter()
router.include_router(auth.router, tags=["auth"])
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(volunteers.router, prefix="/volunteers", tags=["volunteers"])
router.include_router(parks.router, prefix="/parks", tags=["parks"])
router.include_router(amenities.router, prefix="/amenities", tags=["amenities"])
router.include_router(activities.router, prefix="/activities", tags=["activities"])
router.include_router(assets.categories_router, prefix="/asset-categories", tags=["assets"])
router.include_router(assets.router, prefix="/assets", tags=["assets"])
router.include_router(advertisements.router, prefix="/advertisements", tags=["advertising"])
router.include_router(advertisements.public_router, prefix="/public", tags=["advertising"])

# Mounted at the application root, outside the API prefix.
legacy_router = APIRouter()
legacy_router.include_router(volunteers.legacy_router, tags=["volunteers"])
legacy_router.include_router(amenities.legacy_router, tags=["amenities"])
