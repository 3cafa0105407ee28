from __future__ import annotations

import logging

import requests

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
USER_AGENT = "deadliner (+wallpaper countdown)"


def download_image(url: str, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    log.debug("downloading background from %s", url)
    r = requests.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
    r.raise_for_status()
    if not r.content:
        raise requests.HTTPError(f"Empty response body from {url}", response=r)
    return r.content
