"""JF2 post properties as consumed by the syndicator.

JF2 is loosely typed: ``content`` may be a string or an ``{html, text}``
mapping, and ``photo`` may be a bare URL, a ``{url, alt}`` mapping, or a list
of either. ``PostProperties.from_jf2`` normalizes all of these into one
shape so the builders never inspect raw JF2.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

ARTICLE = "article"
NOTE = "note"


@dataclass(frozen=True)
class PostContent:
    html: str = ""
    text: str = ""


@dataclass(frozen=True)
class Photo:
    url: str
    alt: str = ""


@dataclass(frozen=True)
class PostProperties:
    post_type: str = NOTE
    url: str = ""
    name: str = ""
    summary: str = ""
    content: PostContent | None = None
    photos: tuple[Photo, ...] = field(default_factory=tuple)

    @property
    def is_article(self) -> bool:
        return self.post_type == ARTICLE

    @classmethod
    def from_jf2(cls, properties: Mapping[str, Any]) -> PostProperties:
        post_type = ARTICLE if properties.get("post-type") == ARTICLE else NOTE
        return cls(
            post_type=post_type,
            url=_as_str(properties.get("url")),
            name=_as_str(properties.get("name")),
            summary=_as_str(properties.get("summary")),
            content=_parse_content(properties.get("content")),
            photos=_parse_photos(properties.get("photo")),
        )


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _parse_content(value: Any) -> PostContent | None:
    if isinstance(value, str):
        return PostContent(text=value) if value else None
    if isinstance(value, Mapping):
        content = PostContent(
            html=_as_str(value.get("html")),
            text=_as_str(value.get("text")),
        )
        return content if content.html or content.text else None
    return None


def _parse_photo(value: Any) -> Photo:
    if isinstance(value, Mapping):
        url = _as_str(value.get("url")) or _as_str(value.get("value"))
        return Photo(url=url, alt=_as_str(value.get("alt")))
    return Photo(url=_as_str(value))


def _parse_photos(value: Any) -> tuple[Photo, ...]:
    """Normalize ``photo`` to a tuple, keeping URL-less entries in place."""
    if value is None:
        return ()
    items = value if isinstance(value, (list, tuple)) else [value]
    return tuple(_parse_photo(item) for item in items)
