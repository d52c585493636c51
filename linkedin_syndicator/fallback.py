"""Ordered fallback chains: try each producer in turn, keep the first hit."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def first_present(producers: Iterable[Callable[[], T | None]]) -> T | None:
    """Return the first non-empty result from ``producers``.

    Producers are zero-argument callables evaluated left to right. ``None``
    and empty values (``""``, ``[]``) count as absent. Evaluation stops at
    the first present value, so later producers are never called.
    """
    for produce in producers:
        value = produce()
        if value:
            return value
    return None
