"""Placeholder PNG renderer — a gray gradient with a centered text label."""

import io
import logging

from PIL import Image, ImageDraw, ImageFont

from flatfile_api.domain.exceptions import InvalidImageDimensionsError

logger = logging.getLogger(__name__)

_TOP_COLOR = (0xE0, 0xE0, 0xE0)
_BOTTOM_COLOR = (0xAB, 0xAB, 0xAB)
_TEXT_COLOR = (0x66, 0x66, 0x66)


def parse_dimensions(width: str, height: str, max_dimension: int) -> tuple[int, int]:
    """Parse width/height path segments into positive, bounded integers."""
    try:
        parsed_width = int(width)
        parsed_height = int(height)
    except ValueError:
        raise InvalidImageDimensionsError(width, height) from None
    if not (0 < parsed_width <= max_dimension and 0 < parsed_height <= max_dimension):
        raise InvalidImageDimensionsError(width, height)
    return parsed_width, parsed_height


def _gradient_color(row: int, height: int) -> tuple[int, int, int]:
    ratio = row / (height - 1) if height > 1 else 0.0
    return tuple(
        round(top + (bottom - top) * ratio)
        for top, bottom in zip(_TOP_COLOR, _BOTTOM_COLOR)
    )


def render_placeholder(label: str, width: int, height: int) -> bytes:
    """Render ``label`` centered on a vertical gradient and return PNG bytes.

    The font size is an eighth of the shorter side.
    """
    image = Image.new("RGB", (width, height), _TOP_COLOR)
    draw = ImageDraw.Draw(image)

    for row in range(height):
        draw.line([(0, row), (width, row)], fill=_gradient_color(row, height))

    font_size = max(1, min(width, height) // 8)
    font = ImageFont.load_default(size=font_size)
    left, top, right, bottom = draw.textbbox((0, 0), label, font=font)
    origin = ((width - (right - left)) / 2 - left, (height - (bottom - top)) / 2 - top)
    draw.text(origin, label, fill=_TEXT_COLOR, font=font)

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    logger.debug("Rendered %dx%d placeholder for %r", width, height, label)
    return buffer.getvalue()
