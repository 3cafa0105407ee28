from __future__ import annotations

import argparse
import functools
import subprocess
import sys
from datetime import datetime

from .config import load_config
from .errors import DeadlinerError
from .logging_setup import configure_logging, get_logger
from .download import download_image
from .pipeline import run
from .wallpaper import set_gnome_wallpaper

def _parse_now(value: str) -> datetime:
    try:
        now = datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO timestamp: {value!r}") from None
    # Deadlines are local wall-clock times.
    if now.tzinfo is not None:
        raise argparse.ArgumentTypeError(f"use local time without a UTC offset: {value!r}")
    return now

def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="deadliner")
    ap.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    ap.add_argument("--no-set", action="store_true", help="Do not set GNOME wallpaper")
    ap.add_argument("--now", type=_parse_now, help="Render as if it were this local time (ISO format)")
    args = ap.parse_args(argv)

    try:
        cfg = load_config(args.config)
        configure_logging(cfg.log_level, cfg.log_file)
        render_cfg = cfg.render_config()
    except DeadlinerError as e:
        print(e.message, file=sys.stderr)
        return 2

    downloader = functools.partial(download_image, timeout=cfg.download_timeout)
    result = run(render_cfg, args.now, cache_dir=cfg.cache_dir, downloader=downloader)
    if not result.ok:
        print(result.error, file=sys.stderr)
        return 1

    print(result.path)
    if cfg.set_wallpaper and not args.no_set:
        try:
            set_gnome_wallpaper(result.path, result.mode)
        except (OSError, subprocess.CalledProcessError) as e:
            get_logger().error("couldn't set the wallpaper: %s", e)
            return 3
    return 0

if __name__ == "__main__":
    sys.exit(main())
