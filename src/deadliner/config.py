from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
import logging
import os
import yaml

from .countdown import deadline_from_parts, parse_deadline
from .download import DEFAULT_TIMEOUT
from .errors import ConfigError
from .fonts import SUPPORTED_FONT_EXTENSIONS, is_font_file
from .models import (
    Background,
    DiskBackground,
    Font,
    RenderConfig,
    ScreenDimensions,
    SolidBackground,
    URLBackground,
    UnitVisibility,
    WallpaperMode,
    parse_rgb,
)

SUPPORTED_RESOLUTIONS = {
    "1920x1080": (1920, 1080),
    "3840x2160": (3840, 2160),
    "2560x1600": (2560, 1600),
    "2560x1440": (2560, 1440),
    "1366x768": (1366, 768),
}

DEFAULT_CACHE_DIR = "~/.cache/deadliner"

MIN_FONT_SIZE = 5
MAX_FONT_SIZE = 255

def _expand(path: str) -> str:
    return os.path.expanduser(os.path.expandvars(path))

def _section(raw: dict, key: str) -> dict:
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key!r} must be a mapping")
    return value

def _int(value, key: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{key} must be a number, got {value!r}") from None

@dataclass(frozen=True)
class Config:
    raw: dict

    @property
    def screen(self) -> ScreenDimensions:
        screen = _section(self.raw, "screen")
        if screen:
            return ScreenDimensions(_int(screen.get("width"), "screen.width"), _int(screen.get("height"), "screen.height"))
        res = self.raw.get("resolution", "1920x1080")
        if res not in SUPPORTED_RESOLUTIONS:
            raise ConfigError(f"Unsupported resolution {res!r}. Supported: {list(SUPPORTED_RESOLUTIONS)}")
        return ScreenDimensions(*SUPPORTED_RESOLUTIONS[res])

    @property
    def deadline(self) -> datetime:
        dl = self.raw.get("deadline")
        if dl is None:
            raise ConfigError("deadline not set")
        if isinstance(dl, dict):
            return deadline_from_parts(
                dl.get("date", ""), dl.get("hours", ""), dl.get("minutes", ""), dl.get("period", "AM")
            )
        return parse_deadline(str(dl))

    @property
    def visibility(self) -> UnitVisibility:
        show = _section(self.raw, "show")
        default = UnitVisibility()
        return UnitVisibility(
            months=bool(show.get("months", default.months)),
            weeks=bool(show.get("weeks", default.weeks)),
            days=bool(show.get("days", default.days)),
            hours=bool(show.get("hours", default.hours)),
        )

    @property
    def background(self) -> Background:
        bg = _section(self.raw, "background")
        kind = str(bg.get("kind", "solid")).lower().strip()
        mode = WallpaperMode.parse(bg.get("mode", "center"))
        if kind == "solid":
            return SolidBackground(parse_rgb(bg.get("color", "#000000")))
        if kind == "disk":
            location = str(bg.get("location", "")).strip()
            if not location:
                raise ConfigError("background.location not set")
            return DiskBackground(Path(_expand(location)), mode)
        if kind == "url":
            url = str(bg.get("url", "")).strip()
            if not url:
                raise ConfigError("background.url not set")
            return URLBackground(url, mode)
        raise ConfigError(f"Unknown background.kind: {kind}")

    @property
    def font(self) -> Font:
        name = str(_section(self.raw, "font").get("name", Font.LATO_REGULAR.value))
        try:
            return Font(name)
        except ValueError:
            raise ConfigError(f"Unknown font {name!r}. Supported: {[f.value for f in Font]}") from None

    @property
    def font_location(self) -> Path | None:
        location = str(_section(self.raw, "font").get("location") or "").strip()
        if not location:
            return None
        if not is_font_file(location):
            raise ConfigError(f"Not a font: {location!r}. Supported: {list(SUPPORTED_FONT_EXTENSIONS)}")
        return Path(_expand(location))

    @property
    def font_size(self) -> int:
        size = _int(_section(self.raw, "font").get("size", 100), "font.size")
        if not MIN_FONT_SIZE <= size <= MAX_FONT_SIZE:
            raise ConfigError(f"font.size must be between {MIN_FONT_SIZE} and {MAX_FONT_SIZE}, got {size}")
        return size

    @property
    def font_color(self) -> tuple[int, int, int]:
        return parse_rgb(_section(self.raw, "font").get("color", "#ffffff"))

    @property
    def cache_dir(self) -> Path:
        out = _section(self.raw, "output").get("cache_dir", DEFAULT_CACHE_DIR)
        return Path(_expand(str(out)))

    @property
    def set_wallpaper(self) -> bool:
        return bool(_section(self.raw, "output").get("set_wallpaper", False))

    @property
    def download_timeout(self) -> float:
        return float(_section(self.raw, "download").get("timeout", DEFAULT_TIMEOUT))

    @property
    def log_level(self) -> int:
        name = str(_section(self.raw, "logging").get("level", "INFO")).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigError(f"Unknown logging.level: {name}")
        return level

    @property
    def log_file(self) -> Path | None:
        path = _section(self.raw, "logging").get("file")
        return Path(_expand(str(path))) if path else None

    def render_config(self) -> RenderConfig:
        return RenderConfig(
            deadline=self.deadline,
            screen=self.screen,
            background=self.background,
            visibility=self.visibility,
            font=self.font,
            font_location=self.font_location,
            font_size=self.font_size,
            font_color=self.font_color,
        )

def load_config(path: str | Path) -> Config:
    p = Path(_expand(str(path)))
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Couldn't read config {str(p)!r}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {str(p)!r}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError("config.yaml must contain a YAML mapping at top level.")
    return Config(raw=raw)
