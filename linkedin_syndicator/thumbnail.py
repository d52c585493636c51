"""Thumbnail selection for LinkedIn article cards.

The post's own photo wins. Failing that, the article page is scraped for an
Open Graph (or Twitter card) image. Either image is uploaded to LinkedIn and
the resulting image URN backs the card.
"""

from __future__ import annotations

import logging
from typing import Callable

from linkedin_syndicator.client import LinkedInClient
from linkedin_syndicator.fallback import first_present
from linkedin_syndicator.opengraph import fetch_open_graph_image
from linkedin_syndicator.properties import PostProperties

logger = logging.getLogger(__name__)

ScrapeFunc = Callable[[str], str | None]


class ThumbnailResolver:
    """Resolves an uploaded image URN for an article card, or None."""

    def __init__(self, client: LinkedInClient, scrape_func: ScrapeFunc | None = None) -> None:
        self._client = client
        if scrape_func is None and client.live:
            scrape_func = fetch_open_graph_image
        # Mock clients get no default scraper: nothing leaves the process.
        self._scrape = scrape_func

    def _from_photo(self, owner_urn: str, properties: PostProperties) -> str | None:
        if not properties.photos or not properties.photos[0].url:
            return None
        return self._client.upload_image(owner_urn, properties.photos[0].url)

    def _from_page(self, owner_urn: str, properties: PostProperties) -> str | None:
        if not properties.url or self._scrape is None:
            return None
        image_url = self._scrape(properties.url)
        if not image_url:
            return None
        return self._client.upload_image(owner_urn, image_url)

    def resolve(self, owner_urn: str, properties: PostProperties) -> str | None:
        try:
            handle = first_present([
                lambda: self._from_photo(owner_urn, properties),
                lambda: self._from_page(owner_urn, properties),
            ])
        except Exception as exc:
            logger.warning("Thumbnail resolution for %s failed: %s", properties.url, exc)
            return None
        if handle is None:
            logger.info("No thumbnail for %s", properties.url or "post")
        return handle
