"""Listing and searching the emoji known to the ``emoji`` package."""

from __future__ import annotations

import logging
from functools import lru_cache

import emoji as emoji_lib

from inputkit.emojis.character import Emoji

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _fully_qualified() -> tuple[Emoji, ...]:
    status = emoji_lib.STATUS["fully_qualified"]
    result = tuple(
        Emoji(char) for char, data in emoji_lib.EMOJI_DATA.items()
        if data.get("status") == status
    )
    logger.debug("Loaded %d fully-qualified emoji", len(result))
    return result


def all_emojis() -> list[Emoji]:
    """Return every fully-qualified emoji, in ``emoji`` package order."""
    return list(_fully_qualified())


def search(query: str, limit: int | None = None) -> list[Emoji]:
    """Return emoji whose Unicode name contains *query* (case-insensitive).

    An empty query matches nothing.
    """
    needle = query.strip().lower()
    if not needle:
        return []

    matches: list[Emoji] = []
    for item in _fully_qualified():
        if needle in item.unicode_name.lower():
            matches.append(item)
            if limit is not None and len(matches) >= limit:
                break
    return matches
