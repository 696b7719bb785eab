"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from rent_inspector.presentation.api.v1.endpoints.health import router as health_router
from rent_inspector.presentation.api.v1.endpoints.properties import router as properties_router
from rent_inspector.presentation.api.v1.endpoints.records import router as records_router
from rent_inspector.presentation.api.v1.endpoints.rooms import router as rooms_router
from rent_inspector.presentation.api.v1.endpoints.photos import router as photos_router
from rent_inspector.presentation.api.v1.endpoints.data import router as data_router
from rent_inspector.presentation.api.v1.endpoints.profile import router as profile_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(properties_router)
router.include_router(records_router)
router.include_router(rooms_router)
router.include_router(photos_router)
router.include_router(data_router)
router.include_router(profile_router)
