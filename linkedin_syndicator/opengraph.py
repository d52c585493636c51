"""Open Graph / Twitter card image discovery for article pages."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from linkedin_syndicator.fetch import FetchFunc, fetch_bytes

logger = logging.getLogger(__name__)

PAGE_TIMEOUT = 10.0


def find_meta_image(html: str) -> str | None:
    """Return the ``og:image`` URL, else the ``twitter:image`` URL, else None."""
    soup = BeautifulSoup(html, "html.parser")
    for attr, value in (("property", "og:image"), ("name", "twitter:image")):
        tag = soup.find("meta", attrs={attr: value})
        content = tag.get("content") if tag is not None else None
        if isinstance(content, str) and content.strip():
            return content.strip()
    return None


def fetch_open_graph_image(
    url: str,
    fetch_func: FetchFunc | None = None,
    timeout: float = PAGE_TIMEOUT,
) -> str | None:
    """Scrape ``url`` for a card image. Any failure yields None."""
    fetch = fetch_func or fetch_bytes
    try:
        page = fetch(url, timeout)
        image = find_meta_image(page.decode("utf-8", errors="replace"))
    except Exception as exc:
        logger.debug("Open Graph scrape of %s failed: %s", url, exc)
        return None
    if image is None:
        logger.debug("No Open Graph image on %s", url)
    return image
