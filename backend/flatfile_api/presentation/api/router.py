"""Top-level API router — includes versioned sub-routers and the image controller."""

from fastapi import APIRouter

from flatfile_api.presentation.api.dummy_image_controller import router as dummy_image_router
from flatfile_api.presentation.api.v1.router import router as v1_router

router = APIRouter(prefix="/api")
router.include_router(v1_router)
router.include_router(dummy_image_router)
