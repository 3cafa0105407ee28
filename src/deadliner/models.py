from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Sequence, Union

from PIL import Image

from .errors import ConfigError

RGB = tuple[int, int, int]


def parse_rgb(color: str | Sequence[int]) -> RGB:
    """Accept ``"#rrggbb"``, ``"rrggbb"`` or an (r, g, b) triple."""
    if isinstance(color, str):
        c = color.strip().lstrip("#")
        if len(c) != 6:
            raise ConfigError(f"Invalid color {color!r}, expected #rrggbb")
        try:
            return tuple(int(c[i:i+2], 16) for i in (0, 2, 4))  # type: ignore[return-value]
        except ValueError:
            raise ConfigError(f"Invalid color {color!r}, expected #rrggbb") from None
    if not isinstance(color, (list, tuple)):
        raise ConfigError(f"Invalid color {color!r}, expected #rrggbb or [r, g, b]")
    values = tuple(color)
    if len(values) != 3 or not all(isinstance(v, int) and 0 <= v <= 255 for v in values):
        raise ConfigError(f"Invalid color {color!r}, expected three values in 0..255")
    return values  # type: ignore[return-value]


class WallpaperMode(Enum):
    CENTER = "center"
    CROP = "crop"
    FIT = "fit"
    SPAN = "span"

    @classmethod
    def parse(cls, value: str) -> "WallpaperMode":
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigError(f"Unknown wallpaper mode {value!r}. Supported: {[m.value for m in cls]}") from None


class Font(Enum):
    LATO_REGULAR = "LatoRegular"
    LATO_LIGHT = "LatoLight"
    SOURCE_CODE_PRO_REGULAR = "SourceCodeProRegular"
    SOURCE_CODE_PRO_BOLD = "SourceCodeProBold"
    CHOOSE_FROM_DISK = "ChooseFromDisk"


@dataclass(frozen=True)
class ScreenDimensions:
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Screen dimensions must be positive, got {self.width}x{self.height}")

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)


@dataclass(frozen=True)
class UnitVisibility:
    months: bool = False
    weeks: bool = False
    days: bool = True
    hours: bool = True


@dataclass(frozen=True)
class RemainingBreakdown:
    units: tuple[tuple[str, int], ...]
    minutes: int

    @property
    def label(self) -> str:
        return ", ".join(f"{count} {name}" for name, count in self.units) + " Left."


# Background sources form a closed set; backgrounds.resolve matches on all three.

@dataclass(frozen=True)
class SolidBackground:
    color: RGB = (0, 0, 0)

    @property
    def mode(self) -> WallpaperMode:
        return WallpaperMode.CENTER


@dataclass(frozen=True)
class DiskBackground:
    location: Path
    mode: WallpaperMode = WallpaperMode.CENTER


@dataclass(frozen=True)
class URLBackground:
    url: str
    mode: WallpaperMode = WallpaperMode.CENTER


Background = Union[SolidBackground, DiskBackground, URLBackground]


@dataclass(frozen=True)
class RenderConfig:
    deadline: datetime
    screen: ScreenDimensions
    background: Background = field(default_factory=SolidBackground)
    visibility: UnitVisibility = field(default_factory=UnitVisibility)
    font: Font = Font.LATO_REGULAR
    font_location: Path | None = None
    font_size: int = 100
    font_color: str | RGB = "#ffffff"


@dataclass
class ResolvedBackground:
    image: Image.Image
    mode: WallpaperMode


@dataclass(frozen=True)
class RenderResult:
    ok: bool
    path: Path | None = None
    mode: WallpaperMode = WallpaperMode.CENTER
    label: str | None = None
    error: str | None = None
