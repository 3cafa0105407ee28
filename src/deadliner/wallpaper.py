from __future__ import annotations

from pathlib import Path
import subprocess

from .models import WallpaperMode

GNOME_PICTURE_OPTIONS = {
    WallpaperMode.CENTER: "centered",
    WallpaperMode.CROP: "zoom",
    WallpaperMode.FIT: "scaled",
    WallpaperMode.SPAN: "spanned",
}


def _gsettings(key: str, value: str, check: bool = True) -> None:
    subprocess.run(
        ["gsettings", "set", "org.gnome.desktop.background", key, value],
        check=check
    )


def set_gnome_wallpaper(image_path: Path, mode: WallpaperMode = WallpaperMode.CENTER) -> None:
    uri = image_path.resolve().as_uri()
    _gsettings("picture-options", GNOME_PICTURE_OPTIONS[mode])
    _gsettings("picture-uri", uri)
    # Many GNOME versions also use picture-uri-dark
    _gsettings("picture-uri-dark", uri, check=False)
