from __future__ import annotations

import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path

from PIL import Image

from . import backgrounds, countdown, fonts
from .backgrounds import Downloader
from .download import download_image
from .errors import DeadlinerError, PersistError
from .models import RenderConfig, RenderResult
from .renderers import compose, draw_text, load_font

log = logging.getLogger(__name__)

RESULT_NAME = "result.png"


def result_path(cache_dir: Path) -> Path:
    return Path(cache_dir) / RESULT_NAME


def _save(img: Image.Image, out_path: Path) -> Path:
    # Write next to the target and swap it in, so a failed save never leaves a
    # truncated result.png behind.
    tmp_name = None
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=".result-", suffix=".png", dir=out_path.parent)
        with os.fdopen(fd, "wb") as fh:
            img.save(fh, format="PNG")
        os.replace(tmp_name, out_path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise PersistError() from e
    return out_path


def render(config: RenderConfig, now: datetime, cache_dir: Path, downloader: Downloader = download_image) -> tuple[Path, str]:
    """Render and persist the wallpaper, raising ``DeadlinerError`` on failure."""
    breakdown = countdown.compute(now, config.deadline, config.visibility)

    font_bytes = fonts.load_font_bytes(config.font, config.font_location)
    font = load_font(font_bytes, config.font_size)

    background = backgrounds.resolve(config.background, config.screen, downloader)
    # Measured against the background before the text canvas is allocated.
    text = draw_text(breakdown.label, font, config.font_color, fit_within=background.image.size)
    log.debug("text rendered at %dx%d", *text.size)

    result = compose(background.image, text)

    return _save(result, result_path(cache_dir)), breakdown.label


def run(
    config: RenderConfig,
    now: datetime | None = None,
    *,
    cache_dir: Path,
    downloader: Downloader = download_image,
) -> RenderResult:
    """Run one render and report the outcome as a ``RenderResult``.

    Blocks on network and disk. The cache file is shared by every run and the
    last writer wins, so callers must not start overlapping runs against the
    same ``cache_dir``. Setting the wallpaper is left to the caller.
    """
    now = now or datetime.now()
    try:
        path, label = render(config, now, cache_dir, downloader)
    except DeadlinerError as e:
        log.warning("render failed: %s", e.message)
        return RenderResult(ok=False, mode=config.background.mode, error=e.message)

    log.info("wallpaper rendered to %s (%s)", path, label)
    return RenderResult(ok=True, path=path, mode=config.background.mode, label=label)
