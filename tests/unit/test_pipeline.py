import io
import tempfile
import unittest
from datetime import datetime, timedelta
from pathlib import Path

from PIL import Image

from deadliner.models import (
    DiskBackground,
    Font,
    RenderConfig,
    ScreenDimensions,
    SolidBackground,
    URLBackground,
    WallpaperMode,
)
from deadliner.pipeline import result_path, run

NOW = datetime(2022, 8, 1, 12, 0)


def _config(**overrides) -> RenderConfig:
    values = dict(
        deadline=NOW + timedelta(hours=50),
        screen=ScreenDimensions(800, 600),
        background=SolidBackground((0, 0, 0)),
        font=Font.LATO_REGULAR,
        font_size=40,
        font_color="#ffffff",
    )
    values.update(overrides)
    return RenderConfig(**values)


class PipelineTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.cache = Path(self._tmp.name) / "cache"

    def tearDown(self):
        self._tmp.cleanup()

    def test_render_round_trip(self):
        result = run(_config(), NOW, cache_dir=self.cache)
        self.assertTrue(result.ok, result.error)
        self.assertEqual(result.path, self.cache / "result.png")
        self.assertEqual(result.label, "2 Days, 2 Hours Left.")
        self.assertEqual(result.mode, WallpaperMode.CENTER)
        with Image.open(result.path) as img:
            self.assertEqual(img.size, (800, 600))
            self.assertEqual(img.getpixel((0, 0))[:3], (0, 0, 0))
            self.assertNotEqual(img.convert("L").getextrema(), (0, 0))

    def test_overwrites_previous_result(self):
        first = run(_config(background=SolidBackground((255, 0, 0))), NOW, cache_dir=self.cache)
        second = run(_config(background=SolidBackground((0, 255, 0))), NOW, cache_dir=self.cache)
        self.assertEqual(first.path, second.path)
        with Image.open(second.path) as img:
            self.assertEqual(img.getpixel((0, 0))[:3], (0, 255, 0))
        self.assertEqual(sorted(p.name for p in self.cache.iterdir()), ["result.png"])

    def test_disk_background_sets_size_and_mode(self):
        bg_path = Path(self._tmp.name) / "bg.png"
        Image.new("RGB", (640, 480), (20, 40, 60)).save(bg_path)
        result = run(_config(background=DiskBackground(bg_path, WallpaperMode.CROP)), NOW, cache_dir=self.cache)
        self.assertTrue(result.ok, result.error)
        self.assertEqual(result.mode, WallpaperMode.CROP)
        with Image.open(result.path) as img:
            self.assertEqual(img.size, (640, 480))

    def test_url_background_uses_downloader(self):
        buf = io.BytesIO()
        Image.new("RGB", (500, 300), (5, 5, 5)).save(buf, format="PNG")
        cfg = _config(background=URLBackground("https://example.com/bg.png", WallpaperMode.FIT))
        result = run(cfg, NOW, cache_dir=self.cache, downloader=lambda url: buf.getvalue())
        self.assertTrue(result.ok, result.error)
        with Image.open(result.path) as img:
            self.assertEqual(img.size, (500, 300))

    def _assert_failed(self, result, message):
        self.assertFalse(result.ok)
        self.assertIsNone(result.path)
        self.assertEqual(result.error, message)
        self.assertFalse(result_path(self.cache).exists())

    def test_past_deadline(self):
        result = run(_config(deadline=NOW - timedelta(days=1)), NOW, cache_dir=self.cache)
        self._assert_failed(result, "Deadline must be a future date!")

    def test_text_too_big(self):
        result = run(_config(screen=ScreenDimensions(200, 100), font_size=300), NOW, cache_dir=self.cache)
        self._assert_failed(result, "Font size is bigger than wallpaper's dimensions!")

    def test_huge_font_fails_before_allocating_text(self):
        result = run(_config(screen=ScreenDimensions(1920, 1080), font_size=20000), NOW, cache_dir=self.cache)
        self._assert_failed(result, "Font size is bigger than wallpaper's dimensions!")

    def test_download_failure(self):
        def failing(url):
            raise OSError("offline")

        cfg = _config(background=URLBackground("https://example.com/bg.png"))
        result = run(cfg, NOW, cache_dir=self.cache, downloader=failing)
        self._assert_failed(result, "Couldn't download the Image from the supplied URL!")

    def test_invalid_custom_font(self):
        font_path = Path(self._tmp.name) / "broken.ttf"
        font_path.write_bytes(b"garbage")
        cfg = _config(font=Font.CHOOSE_FROM_DISK, font_location=font_path)
        result = run(cfg, NOW, cache_dir=self.cache)
        self._assert_failed(result, "Couldn't load the selected font!")

    def test_custom_font_from_disk(self):
        from deadliner.fonts import load_font_bytes

        font_path = Path(self._tmp.name) / "custom.ttf"
        font_path.write_bytes(load_font_bytes(Font.SOURCE_CODE_PRO_BOLD))
        cfg = _config(font=Font.CHOOSE_FROM_DISK, font_location=font_path)
        self.assertTrue(run(cfg, NOW, cache_dir=self.cache).ok)

    def test_unwritable_cache_dir(self):
        blocker = Path(self._tmp.name) / "blocker"
        blocker.write_text("not a directory")
        result = run(_config(), NOW, cache_dir=blocker)
        self.assertFalse(result.ok)
        self.assertEqual(result.error, "Couldn't save result.png")


if __name__ == "__main__":
    unittest.main()
