"""Emoji values and their Unicode identifiers and display names."""

from inputkit.emojis.catalog import all_emojis, search
from inputkit.emojis.character import Emoji
from inputkit.emojis.flags import FLAG_NAMES, flag_for_region, flag_name, is_flag, region_code
from inputkit.emojis.unicode import (
    clean_unicode_name,
    resolve,
    unicode_identifier,
    unicode_name,
    unicode_name_override,
)

__all__ = [
    "Emoji",
    "FLAG_NAMES",
    "all_emojis",
    "clean_unicode_name",
    "flag_for_region",
    "flag_name",
    "is_flag",
    "region_code",
    "resolve",
    "search",
    "unicode_identifier",
    "unicode_name",
    "unicode_name_override",
]
