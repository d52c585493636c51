"""Builders for LinkedIn commentary text and article card metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from linkedin_syndicator.fallback import first_present
from linkedin_syndicator.properties import PostProperties
from linkedin_syndicator.text import html_to_plain_text, truncate, truncate_with_permalink

DEFAULT_CHARACTER_LIMIT = 3000
DESCRIPTION_LIMIT = 256
UNTITLED = "Untitled"


@dataclass
class ArticleContent:
    source: str
    title: str
    description: str
    thumbnail: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "source": self.source,
            "title": self.title,
            "description": self.description,
        }
        if self.thumbnail:
            payload["thumbnail"] = self.thumbnail
        return payload


def _html_text(properties: PostProperties) -> Callable[[], str]:
    def produce() -> str:
        if properties.content and properties.content.html:
            return html_to_plain_text(properties.content.html)
        return ""
    return produce


def _plain_text(properties: PostProperties) -> Callable[[], str]:
    return lambda: properties.content.text if properties.content else ""


def build_commentary(
    properties: PostProperties,
    limit: int = DEFAULT_CHARACTER_LIMIT,
    is_article: bool = False,
) -> str:
    """Build the post commentary, truncated to ``limit`` with the permalink.

    Article posts use the summary as a teaser since the card already shows
    title and description. Notes use the full content, then the title.
    """
    if is_article:
        producers = [
            lambda: properties.summary,
            _html_text(properties),
            _plain_text(properties),
        ]
    else:
        producers = [
            _html_text(properties),
            _plain_text(properties),
            lambda: properties.name,
        ]
    text = first_present(producers) or ""
    return truncate_with_permalink(text, properties.url or None, limit)


def build_article_content(properties: PostProperties) -> ArticleContent:
    description = first_present([
        lambda: properties.summary,
        _html_text(properties),
        _plain_text(properties),
    ]) or ""
    return ArticleContent(
        source=properties.url,
        title=properties.name or UNTITLED,
        description=truncate(description, DESCRIPTION_LIMIT),
    )
