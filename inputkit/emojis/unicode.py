"""Unicode identifiers and display names for emoji.

The identifier is the emoji's scalars spelled out as ``\\N{NAME}``
escapes, exactly like a Python string literal would write them::

    >>> unicode_identifier("😀")
    '\\\\N{GRINNING FACE}'

The display name keeps only the first scalar's name and title-cases it,
which drops variation selectors, skin tone modifiers, joiners and the
second half of a flag. Flags then get a curated name from the override
table when one exists.
"""

from __future__ import annotations

import logging
import re
import unicodedata

import inputkit.log  # registers TRACE level and logger.trace()
from inputkit.emojis.flags import flag_name, region_code

logger = logging.getLogger(__name__)

_COMPONENT_RE = re.compile(r"\\N\{([^}]*)\}")
_CODEPOINT_RE = re.compile(r"U\+[0-9A-F]+")


def scalar_name(ch: str) -> str:
    """Canonical Unicode name of a single scalar, ``U+XXXX`` if it has none."""
    name = unicodedata.name(ch, None)
    if name is None:
        return f"U+{ord(ch):04X}"
    return name


def unicode_identifier(chars: str) -> str:
    return "".join("\\N{%s}" % scalar_name(ch) for ch in chars)


def _title_word(word: str) -> str:
    # "ZIPPER-MOUTH" -> "Zipper-Mouth"; "U+1FAEB" stays as it is
    if _CODEPOINT_RE.fullmatch(word):
        return word
    return "-".join(part.capitalize() for part in word.split("-"))


def clean_unicode_name(identifier: str) -> str:
    """Turn a raw identifier into a display name.

    ``\\N{GRINNING FACE}`` -> ``Grinning Face``. Only the first ``\\N{...}``
    component is used; an identifier without any markup is title-cased
    as it is.
    """
    components = _COMPONENT_RE.findall(identifier)
    raw = components[0] if components else identifier
    return " ".join(_title_word(word) for word in raw.split())


def unicode_name_override(chars: str) -> str | None:
    code = region_code(chars)
    if code is None:
        return None
    return flag_name(code)


def unicode_name(chars: str) -> str:
    override = unicode_name_override(chars)
    if override is not None:
        return override
    return clean_unicode_name(unicode_identifier(chars))


def resolve(chars: str) -> tuple[str, str]:
    """Return ``(identifier, name)`` for an emoji."""
    identifier = unicode_identifier(chars)
    name = unicode_name_override(chars)
    if name is None:
        name = clean_unicode_name(identifier)
    logger.trace("resolve: %r -> %s / %s", chars, identifier, name)  # type: ignore[attr-defined]
    return identifier, name
