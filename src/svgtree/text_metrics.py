"""Label extents for ``<text>`` elements, measured with Pillow fonts."""
from __future__ import annotations

import functools
import logging
from typing import Optional, Tuple, Union

from PIL import ImageFont

logger = logging.getLogger(__name__)

DEFAULT_FONT_SIZE = 16.0
DEFAULT_FONT_FAMILY = "sans-serif"
GENERIC_FONT_FILES = {
    "sans-serif": "DejaVuSans.ttf",
    "serif": "DejaVuSerif.ttf",
    "monospace": "DejaVuSansMono.ttf",
}

# Fraction of the measured width that lies left of x for each text-anchor.
ANCHOR_SHIFT = {"start": 0.0, "middle": 0.5, "end": 1.0}

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


def primary_family(font_family: Optional[str]) -> str:
    """Return the first family of a CSS font-family list, unquoted and lowercased."""
    if not font_family:
        return DEFAULT_FONT_FAMILY
    first = font_family.split(",", 1)[0].strip().strip("'\"").strip()
    return first.lower() or DEFAULT_FONT_FAMILY


@functools.lru_cache(maxsize=64)
def load_font(family: str, size: int) -> Font:
    """Load ``family`` at ``size`` pixels, falling back to Pillow's default face."""
    filename = GENERIC_FONT_FILES.get(family, family)
    try:
        return ImageFont.truetype(filename, size)
    except OSError:
        logger.debug("font %r not found, using Pillow default at %spx", filename, size)
        return ImageFont.load_default(size=size)


def text_extent(
    content: str,
    font_size: float = DEFAULT_FONT_SIZE,
    font_family: Optional[str] = None,
) -> Tuple[float, float]:
    """Return the advance width and line height of ``content``."""
    if not content:
        return 0.0, 0.0
    font = load_font(primary_family(font_family), max(1, int(round(font_size))))
    return float(font.getlength(content)), float(font_size)


def anchored_left(x: float, width: float, anchor: Optional[str]) -> float:
    return x - width * ANCHOR_SHIFT.get(anchor or "start", 0.0)


__all__ = [
    "ANCHOR_SHIFT",
    "DEFAULT_FONT_FAMILY",
    "DEFAULT_FONT_SIZE",
    "GENERIC_FONT_FILES",
    "anchored_left",
    "load_font",
    "primary_family",
    "text_extent",
]
