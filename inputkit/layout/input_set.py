"""Input sets: the characters on a keyboard's letter, number and symbol rows.

An input set only describes which characters are available, row by row.
Key sizes, insets and the extra keys around the input rows belong to a
layout, which is built from an input set elsewhere.

Rows can differ between phones and pads. Both variants are stored and
``characters(device)`` picks one, so building an input set never needs
to know which device it will end up on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

import inputkit.log  # registers TRACE level and logger.trace()
from inputkit.layout.device import DeviceClass, KeyboardCase

logger = logging.getLogger(__name__)

DEFAULT_NUMERIC_CURRENCY = "$"
DEFAULT_SYMBOLIC_CURRENCY = "£"


# ------------------------------------------------------------------
# Items and rows
# ------------------------------------------------------------------

@dataclass(frozen=True)
class InputSetItem:
    """A single input key.

    ``uppercased`` and ``lowercased`` default to the upper and lower
    forms of ``neutral``. Set them explicitly for keys whose shifted
    character is not a plain case change.
    """

    neutral: str
    uppercased: str | None = None
    lowercased: str | None = None

    def character(self, case: KeyboardCase = KeyboardCase.LOWERCASED) -> str:
        if case.is_uppercased:
            return self.uppercased if self.uppercased is not None else self.neutral.upper()
        return self.lowercased if self.lowercased is not None else self.neutral.lower()


def _items(chars: Iterable[str]) -> tuple[InputSetItem, ...]:
    return tuple(InputSetItem(ch) for ch in chars)


@dataclass(frozen=True)
class InputSetRow:
    """One row of input keys, with a phone and a pad variant."""

    phone: tuple[InputSetItem, ...]
    pad: tuple[InputSetItem, ...]

    @classmethod
    def from_chars(cls, chars: str) -> InputSetRow:
        """Create a row with one key per character, same on every device."""
        items = _items(chars)
        return cls(phone=items, pad=items)

    @classmethod
    def from_variants(cls, phone: str, pad: str) -> InputSetRow:
        """Create a row with different characters on phones and pads."""
        return cls(phone=_items(phone), pad=_items(pad))

    def items(self, device: DeviceClass | str = DeviceClass.PHONE) -> tuple[InputSetItem, ...]:
        device = DeviceClass.parse(device)
        return self.pad if device is DeviceClass.PAD else self.phone

    def characters(
        self,
        device: DeviceClass | str = DeviceClass.PHONE,
        case: KeyboardCase = KeyboardCase.LOWERCASED,
    ) -> list[str]:
        return [item.character(case) for item in self.items(device)]


InputSetRows = Sequence[InputSetRow]


# ------------------------------------------------------------------
# Input sets
# ------------------------------------------------------------------

class InputSetKind(Enum):
    ALPHABETIC = "alphabetic"
    NUMERIC = "numeric"
    SYMBOLIC = "symbolic"


@dataclass(frozen=True)
class InputSet:
    """Rows of input keys for one kind of keyboard."""

    kind: InputSetKind
    rows: tuple[InputSetRow, ...]

    def __post_init__(self):
        # Accept any sequence of rows but always store a tuple.
        object.__setattr__(self, "rows", tuple(self.rows))

    def characters(
        self,
        device: DeviceClass | str = DeviceClass.PHONE,
        case: KeyboardCase = KeyboardCase.LOWERCASED,
    ) -> list[list[str]]:
        """Return the characters of every row for *device* and *case*."""
        device = DeviceClass.parse(device)
        return [row.characters(device, case) for row in self.rows]


# ------------------------------------------------------------------
# Alphabetic
# ------------------------------------------------------------------

def qwerty() -> InputSet:
    return InputSet(InputSetKind.ALPHABETIC, (
        InputSetRow.from_chars("qwertyuiop"),
        InputSetRow.from_chars("asdfghjkl"),
        InputSetRow.from_variants(phone="zxcvbnm", pad="zxcvbnm,."),
    ))


def qwertz() -> InputSet:
    return InputSet(InputSetKind.ALPHABETIC, (
        InputSetRow.from_chars("qwertzuiop"),
        InputSetRow.from_chars("asdfghjkl"),
        InputSetRow.from_variants(phone="yxcvbnm", pad="yxcvbnm,."),
    ))


def azerty() -> InputSet:
    return InputSet(InputSetKind.ALPHABETIC, (
        InputSetRow.from_chars("azertyuiop"),
        InputSetRow.from_chars("qsdfghjklm"),
        InputSetRow.from_variants(phone="wxcvbn’", pad="wxcvbn’,."),
    ))


# ------------------------------------------------------------------
# Numeric and symbolic
# ------------------------------------------------------------------

def standard_numeric(currency: str) -> InputSet:
    """Numeric input set with *currency* on the second row.

    *currency* is not validated. Each of its characters becomes a key.
    """
    return InputSet(InputSetKind.NUMERIC, (
        InputSetRow.from_chars("1234567890"),
        InputSetRow.from_variants(
            phone=f"-/:;(){currency}&@”",
            pad=f"@#{currency}&*()’”",
        ),
        InputSetRow.from_variants(phone=".,?!’", pad="%-+=/;:!?"),
    ))


def standard_symbolic(currencies: Sequence[str]) -> InputSet:
    """Symbolic input set with *currencies* on the second row."""
    joined = "".join(currencies)
    return InputSet(InputSetKind.SYMBOLIC, (
        InputSetRow.from_variants(phone="[]{}#%^*+=", pad="1234567890"),
        InputSetRow.from_variants(
            phone=f"_\\|~<>{joined}•",
            pad=f"{joined}_^[]{{}}",
        ),
        InputSetRow.from_variants(phone=".,?!’", pad="§|~…\\<>!?"),
    ))


# ------------------------------------------------------------------
# English defaults
# ------------------------------------------------------------------

def english() -> InputSet:
    return qwerty()


def english_numeric(currency: str = DEFAULT_NUMERIC_CURRENCY) -> InputSet:
    return standard_numeric(currency)


def english_symbolic(currency: str = DEFAULT_SYMBOLIC_CURRENCY) -> InputSet:
    return standard_symbolic(["€", currency, "¥"])


def input_set(kind: InputSetKind | str, currency: str | None = None) -> InputSet:
    """Return the English input set for *kind*.

    *currency* replaces the default currency of numeric and symbolic
    sets and is ignored for alphabetic ones.
    """
    if not isinstance(kind, InputSetKind):
        try:
            kind = InputSetKind(str(kind).strip().lower())
        except ValueError:
            raise ValueError(f"Invalid input set kind: {kind!r}")

    logger.trace("input_set: kind=%s currency=%r", kind.value, currency)  # type: ignore[attr-defined]

    if kind is InputSetKind.NUMERIC:
        return english_numeric(DEFAULT_NUMERIC_CURRENCY if currency is None else currency)
    if kind is InputSetKind.SYMBOLIC:
        return english_symbolic(DEFAULT_SYMBOLIC_CURRENCY if currency is None else currency)
    return english()
