"""The ``Emoji`` value type."""

from __future__ import annotations

from dataclasses import dataclass

import emoji as emoji_lib

from inputkit.emojis import flags, unicode


@dataclass(frozen=True)
class Emoji:
    """A single emoji character (one grapheme cluster)."""

    char: str

    def __str__(self) -> str:
        return self.char

    @property
    def unicode_identifier(self) -> str:
        """Raw ``\\N{...}`` identifier, e.g. ``\\N{GRINNING FACE}``."""
        return unicode.unicode_identifier(self.char)

    @property
    def unicode_name(self) -> str:
        """Display name, e.g. ``Grinning Face`` or ``Flag - Kenya``."""
        return unicode.unicode_name(self.char)

    @property
    def unicode_name_override(self) -> str | None:
        """Curated display name; only defined for flags."""
        return unicode.unicode_name_override(self.char)

    @property
    def region_code(self) -> str | None:
        return flags.region_code(self.char)

    @property
    def is_flag(self) -> bool:
        return self.region_code is not None

    @property
    def is_valid(self) -> bool:
        return emoji_lib.is_emoji(self.char)
