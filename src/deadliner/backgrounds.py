from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Callable

from PIL import Image, UnidentifiedImageError

from .download import download_image
from .errors import BackgroundDecodeError, BackgroundDownloadError, BackgroundNotFound
from .models import (
    Background,
    DiskBackground,
    ResolvedBackground,
    ScreenDimensions,
    SolidBackground,
    URLBackground,
)

log = logging.getLogger(__name__)

Downloader = Callable[[str], bytes]


def _decode(fp, source: str) -> Image.Image:
    try:
        img = Image.open(fp)
        img.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise BackgroundDecodeError(f"Couldn't read the background image from {source}!") from e
    return img


def _from_disk(location: Path) -> Image.Image:
    p = Path(location)
    if not p.is_file():
        raise BackgroundNotFound(f"Couldn't find the background image {str(p)!r}!")
    with p.open("rb") as fh:
        return _decode(fh, p.name)


def _from_url(url: str, downloader: Downloader) -> Image.Image:
    try:
        data = downloader(url)
    except Exception as e:
        log.warning("download of %s failed: %s", url, e)
        raise BackgroundDownloadError() from e
    return _decode(io.BytesIO(data), "the supplied URL")


def resolve(
    background: Background,
    screen: ScreenDimensions,
    downloader: Downloader = download_image,
) -> ResolvedBackground:
    """Produce the background pixels. Fit mode is passed through, never applied."""
    if isinstance(background, SolidBackground):
        img = Image.new("RGB", screen.size, background.color)
    elif isinstance(background, DiskBackground):
        img = _from_disk(background.location)
    elif isinstance(background, URLBackground):
        img = _from_url(background.url, downloader)
    else:
        raise TypeError(f"Unknown background source: {background!r}")

    log.debug("resolved %s background %dx%d", type(background).__name__, *img.size)
    return ResolvedBackground(image=img, mode=background.mode)
