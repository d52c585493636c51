"""Plain HTTP GET for remote pages and images."""

from __future__ import annotations

import urllib.error
import urllib.request
from typing import Callable

USER_AGENT = "Mozilla/5.0 (compatible; IndiekitBot/1.0)"

FetchFunc = Callable[[str, float], bytes]


def fetch_bytes(url: str, timeout: float) -> bytes:
    """GET ``url`` as the bot user agent, following redirects.

    Raises RuntimeError on a non-success status or connection failure.
    """
    req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            if not 200 <= resp.status < 300:
                raise RuntimeError(f"Fetch of {url} returned {resp.status}")
            return resp.read()
    except urllib.error.HTTPError as exc:
        raise RuntimeError(f"Fetch of {url} returned {exc.code}") from exc
    except urllib.error.URLError as exc:
        raise RuntimeError(f"Fetch of {url} failed: {exc.reason}") from exc
