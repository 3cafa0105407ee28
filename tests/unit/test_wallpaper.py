import unittest
from pathlib import Path
from unittest import mock

from deadliner.models import WallpaperMode
from deadliner.wallpaper import set_gnome_wallpaper


class GnomeWallpaperTests(unittest.TestCase):
    def test_sets_mode_and_uris(self):
        path = Path("/tmp/deadliner/result.png")
        with mock.patch("deadliner.wallpaper.subprocess.run") as run:
            set_gnome_wallpaper(path, WallpaperMode.CROP)
        commands = [c.args[0] for c in run.call_args_list]
        self.assertIn(["gsettings", "set", "org.gnome.desktop.background", "picture-options", "zoom"], commands)
        uri = path.resolve().as_uri()
        self.assertIn(["gsettings", "set", "org.gnome.desktop.background", "picture-uri", uri], commands)
        self.assertIn(["gsettings", "set", "org.gnome.desktop.background", "picture-uri-dark", uri], commands)

    def test_every_mode_has_an_option(self):
        for mode in WallpaperMode:
            with self.subTest(mode=mode):
                with mock.patch("deadliner.wallpaper.subprocess.run") as run:
                    set_gnome_wallpaper(Path("/tmp/x.png"), mode)
                self.assertEqual(run.call_count, 3)


if __name__ == "__main__":
    unittest.main()
