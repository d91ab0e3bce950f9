"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from flatfile_api.application.schemas import MessageEnvelope
from flatfile_api.presentation.api.v1.endpoints.health import router as health_router
from flatfile_api.presentation.api.v1.endpoints.users import router as users_router
from flatfile_api.presentation.api.v1.endpoints.products import router as products_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(users_router)
router.include_router(products_router)


@router.get("", response_model=MessageEnvelope, response_model_exclude_none=True, tags=["Health"])
async def api_index() -> MessageEnvelope:
    """Describe the v1 API and its collections."""
    return MessageEnvelope(
        message="API v1",
        endpoints={
            "users": "/api/v1/users",
            "products": "/api/v1/products",
        },
    )
