"""Placeholder image API controller — gray PNGs with a text label."""

import asyncio

from fastapi import APIRouter, Response

from flatfile_api.config import get_settings
from flatfile_api.infrastructure.imaging.placeholder_image import (
    parse_dimensions,
    render_placeholder,
)

router = APIRouter(prefix="/dummyImage", tags=["Placeholder images"])


@router.get(
    "/{label}/{width}/{height}",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}},
)
async def generate_dummy_image(label: str, width: str, height: str) -> Response:
    """Render ``label`` on a ``width`` x ``height`` gradient."""
    image_width, image_height = parse_dimensions(
        width, height, max_dimension=get_settings().max_image_dimension
    )
    png = await asyncio.to_thread(render_placeholder, label, image_width, image_height)
    return Response(content=png, media_type="image/png")
