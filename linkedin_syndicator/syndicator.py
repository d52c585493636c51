"""Syndication of JF2 posts to LinkedIn.

``LinkedInPoster`` turns one post into exactly one LinkedIn post: resolve the
author, build the note or article payload, create the post, return its
permalink. ``LinkedInSyndicator`` is the face shown to the publishing
framework: it carries the user-facing configuration and converts any failure
into a ``SyndicationError`` with an HTTP status.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from linkedin_syndicator.content import (
    DEFAULT_CHARACTER_LIMIT,
    build_article_content,
    build_commentary,
)
from linkedin_syndicator.properties import PostProperties
from linkedin_syndicator.thumbnail import ThumbnailResolver

if TYPE_CHECKING:
    from linkedin_syndicator.client import LinkedInClient
    from linkedin_syndicator.config import SyndicatorConfig

logger = logging.getLogger(__name__)

LINKEDIN_URL = "https://www.linkedin.com/"


class LinkedInPoster:
    """Posts a single JF2 post to LinkedIn."""

    def __init__(
        self,
        client: LinkedInClient,
        character_limit: int = DEFAULT_CHARACTER_LIMIT,
        resolver: ThumbnailResolver | None = None,
    ) -> None:
        self._client = client
        self.character_limit = character_limit
        self._resolver = resolver or ThumbnailResolver(client)

    def post(self, properties: PostProperties | Mapping[str, Any]) -> str:
        """Create the LinkedIn post and return its permalink.

        Identity and post creation failures propagate. Thumbnail failures
        only leave the article card without an image.
        """
        if not isinstance(properties, PostProperties):
            properties = PostProperties.from_jf2(properties)

        author = self._client.get_identity()

        if properties.is_article:
            article = build_article_content(properties)
            commentary = build_commentary(
                properties, limit=self.character_limit, is_article=True,
            )
            article.thumbnail = self._resolver.resolve(author.urn, properties)
            url = self._client.create_article_post(author.urn, commentary, article)
        else:
            commentary = build_commentary(properties, limit=self.character_limit)
            url = self._client.create_text_post(author.urn, commentary)

        logger.info("Syndicated %s %s to %s", properties.post_type, properties.url, url)
        return url


class SyndicationError(Exception):
    """Syndication failed; ``status`` is the HTTP status to report."""

    def __init__(self, message: str, status: int = 500, plugin: str = "") -> None:
        self.status = status
        self.plugin = plugin
        super().__init__(message)


class LinkedInSyndicator:
    """LinkedIn syndication target for an IndieWeb publishing pipeline."""

    name = "LinkedIn syndicator"

    def __init__(self, config: SyndicatorConfig, poster: LinkedInPoster) -> None:
        self.config = config
        self._poster = poster

    @property
    def environment(self) -> list[str]:
        return ["LINKEDIN_ACCESS_TOKEN"]

    @property
    def info(self) -> dict[str, Any]:
        name = self.config.author_name or "LinkedIn user"
        url = self.config.author_profile_url or LINKEDIN_URL
        info: dict[str, Any] = {
            "checked": self.config.checked,
            "name": name,
            "uid": url,
            "service": {"name": "LinkedIn", "url": LINKEDIN_URL},
            "user": {"name": name, "url": url},
        }
        if not self.config.author_name:
            info["error"] = "Author name not configured"
        return info

    def syndicate(
        self,
        properties: PostProperties | Mapping[str, Any],
        publication: Any = None,
    ) -> str:
        """Syndicate a post, returning the LinkedIn permalink.

        ``publication`` is accepted for the pipeline's calling convention
        and is not used.
        """
        try:
            return self._poster.post(properties)
        except Exception as exc:
            status = getattr(exc, "status", None) or 500
            reason = getattr(exc, "reason", "")
            message = f"Could not create LinkedIn post: {reason}" if reason else str(exc)
            logger.error("%s: %s", self.name, message)
            raise SyndicationError(message, status=status, plugin=self.name) from exc
