from __future__ import annotations

from importlib import resources
from pathlib import Path

from .errors import InvalidFont
from .models import Font

SUPPORTED_FONT_EXTENSIONS = (".ttf", ".otf")

PACKAGED_FONTS = {
    Font.LATO_REGULAR: "Lato-Regular.ttf",
    Font.LATO_LIGHT: "Lato-Light.ttf",
    Font.SOURCE_CODE_PRO_REGULAR: "SourceCodePro-Regular.ttf",
    Font.SOURCE_CODE_PRO_BOLD: "SourceCodePro-Bold.ttf",
}


def is_font_file(path: str | Path) -> bool:
    return Path(path).suffix.lower() in SUPPORTED_FONT_EXTENSIONS


def load_font_bytes(font: Font, location: str | Path | None = None) -> bytes:
    """Raw font data for a packaged variant, or the custom file at ``location``."""
    if font is Font.CHOOSE_FROM_DISK:
        if not location:
            raise InvalidFont("No font file was chosen!")
        p = Path(location)
        try:
            return p.read_bytes()
        except OSError as e:
            raise InvalidFont(f"Couldn't read the font file {p.name}!") from e

    asset = resources.files(__package__) / "assets" / "fonts" / PACKAGED_FONTS[font]
    try:
        return asset.read_bytes()
    except OSError as e:
        raise InvalidFont() from e
