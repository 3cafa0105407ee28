from __future__ import annotations

import io
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from ..errors import InvalidFont, SizeMismatch
from ..models import parse_rgb


def load_font(font_bytes: bytes, size: int) -> ImageFont.FreeTypeFont:
    try:
        return ImageFont.truetype(io.BytesIO(font_bytes), size=size)
    except (OSError, ValueError) as e:
        raise InvalidFont() from e


def _check_fits(background_size: tuple[int, int], text_size: tuple[int, int]) -> None:
    bw, bh = background_size
    tw, th = text_size
    if bw <= tw or bh <= th:
        raise SizeMismatch()


def draw_text(
    label: str,
    font: ImageFont.FreeTypeFont,
    color: str | Sequence[int],
    fit_within: tuple[int, int] | None = None,
) -> Image.Image:
    """Render ``label`` as one line on a transparent RGBA image cropped to the ink box.

    With ``fit_within`` the ink box is measured first and ``SizeMismatch`` is
    raised before any pixels are allocated.
    """
    rgb = parse_rgb(color)
    left, top, right, bottom = font.getbbox(label)
    w = max(1, right - left)
    h = max(1, bottom - top)
    if fit_within is not None:
        _check_fits(fit_within, (w, h))

    img = Image.new("RGBA", (w, h), (*rgb, 0))
    draw = ImageDraw.Draw(img)
    draw.text((-left, -top), label, font=font, fill=(*rgb, 255))
    return img


def rasterize_text(
    label: str,
    font_bytes: bytes,
    size: int,
    color: str | Sequence[int],
    fit_within: tuple[int, int] | None = None,
) -> Image.Image:
    return draw_text(label, load_font(font_bytes, size), color, fit_within)


def text_origin(background_size: tuple[int, int], text_size: tuple[int, int]) -> tuple[int, int]:
    # Half the background minus half the text, both floored.
    bw, bh = background_size
    tw, th = text_size
    return bw // 2 - tw // 2, bh // 2 - th // 2


def compose(background: Image.Image, text: Image.Image) -> Image.Image:
    """Overlay ``text`` centered on a copy of ``background``; the input is left untouched."""
    _check_fits(background.size, text.size)

    x, y = text_origin(background.size, text.size)
    has_alpha = "A" in background.getbands() or "transparency" in background.info
    out = background.convert("RGBA")
    out.alpha_composite(text.convert("RGBA"), dest=(x, y))
    return out if has_alpha else out.convert("RGB")
