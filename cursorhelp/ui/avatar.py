"""Rendu des avatars circulaires avec Pillow."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont, UnidentifiedImageError

from cursorhelp.ui.theme import ACCENT_CONTAINER_COLOR, ON_ACCENT_CONTAINER_COLOR

AVATAR_SIZE = 56
_SUPERSAMPLING = 4

logger = logging.getLogger(__name__)


def _circle_mask(size: int) -> Image.Image:
    large = size * _SUPERSAMPLING
    mask = Image.new("L", (large, large), 0)
    drawer = ImageDraw.Draw(mask)
    drawer.ellipse((0, 0, large - 1, large - 1), fill=255)
    return mask.resize((size, size), Image.LANCZOS)


def _label_font(pixel_size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    for name in ("DejaVuSans-Bold.ttf", "Arial Bold.ttf", "arialbd.ttf"):
        try:
            return ImageFont.truetype(name, pixel_size)
        except OSError:
            continue
    return ImageFont.load_default()


def circular_avatar(image: Image.Image, size: int = AVATAR_SIZE) -> Image.Image:
    """Recadre l'image au centre puis la découpe en disque transparent."""
    image = image.convert("RGBA")
    width, height = image.size
    side = min(width, height)
    left = (width - side) // 2
    top = (height - side) // 2
    image = image.crop((left, top, left + side, top + side))
    image = image.resize((size, size), Image.LANCZOS)
    image.putalpha(_circle_mask(size))
    return image


def render_default_avatar(
    size: int = AVATAR_SIZE,
    label: str = "?",
    fill: str = ACCENT_CONTAINER_COLOR,
    text_fill: str = ON_ACCENT_CONTAINER_COLOR,
) -> Image.Image:
    """Dessine l'avatar par défaut : un disque coloré portant une lettre centrée."""
    image = Image.new("RGBA", (size, size), fill)
    drawer = ImageDraw.Draw(image)
    if label:
        font = _label_font(max(size // 2, 8))
        left, top, right, bottom = drawer.textbbox((0, 0), label, font=font)
        position = ((size - (right - left)) / 2 - left, (size - (bottom - top)) / 2 - top)
        drawer.text(position, label, font=font, fill=text_fill)
    image.putalpha(_circle_mask(size))
    return image


def load_avatar(path: str | Path, size: int = AVATAR_SIZE) -> Image.Image | None:
    """Charge une image locale en avatar circulaire ; None si elle est illisible."""
    try:
        with Image.open(path) as source:
            return circular_avatar(source, size)
    except (OSError, UnidentifiedImageError):
        logger.warning("Avatar illisible : %s", path)
        return None
