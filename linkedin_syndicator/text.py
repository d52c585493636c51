"""Plain-text rendering and character-budget truncation for LinkedIn posts."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, NavigableString

ELLIPSIS = "…"

_SKIPPED_TAGS = ["img", "script", "style", "noscript"]
_LINE_TAGS = ["br", "li", "tr"]
_BLOCK_TAGS = [
    "p", "div", "section", "article", "header", "footer", "aside",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "blockquote", "pre", "figure", "figcaption", "table", "hr",
]
_WHITESPACE = re.compile(r"\s+")
_BLANK_RUNS = re.compile(r"\n{3,}")


def html_to_plain_text(html: str) -> str:
    """Render HTML as plain text suitable for a LinkedIn commentary.

    Links keep their text and lose their href. Images are dropped. Block
    elements are separated by a blank line, list items and ``<br>`` by a
    single line break. Malformed markup is rendered on a best-effort basis.
    """
    soup = BeautifulSoup(html, "html.parser")

    for tag in soup.find_all(_SKIPPED_TAGS):
        tag.decompose()

    # Collapse source formatting whitespace; exact type check skips comments.
    for node in soup.find_all(string=True):
        if type(node) is NavigableString and node.find_parent("pre") is None:
            node.replace_with(_WHITESPACE.sub(" ", str(node)))

    for tag in soup.find_all(_LINE_TAGS):
        if tag.name == "br":
            tag.replace_with("\n")
        else:
            tag.insert_after("\n")
    for tag in soup.find_all(_BLOCK_TAGS):
        tag.insert_before("\n\n")
        tag.insert_after("\n\n")

    lines = (line.strip() for line in soup.get_text().splitlines())
    return _BLANK_RUNS.sub("\n\n", "\n".join(lines)).strip()


def truncate(text: str, limit: int) -> str:
    """Hard-truncate ``text`` to ``limit`` characters, ending with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit - 1].strip() + ELLIPSIS


def truncate_with_permalink(text: str, permalink: str | None, limit: int) -> str:
    """Fit ``text`` into ``limit`` characters, appending ``permalink``.

    The permalink goes after a blank line unless the text already contains
    it. When the text has to be cut, the cut point leaves room for the
    ellipsis and the permalink suffix.
    """
    if not text:
        return permalink or ""

    if permalink and permalink not in text:
        suffix = f"\n\n{permalink}"
        available = limit - len(suffix)
        if len(text) > available:
            return text[:available - 1].strip() + ELLIPSIS + suffix
        return text + suffix

    if len(text) > limit:
        return text[:limit - 1].strip() + ELLIPSIS

    return text
