"""Keyboard input sets (alphabetic, numeric and symbolic rows)."""

from inputkit.layout.device import DeviceClass, KeyboardCase
from inputkit.layout.input_set import (
    InputSet,
    InputSetItem,
    InputSetKind,
    InputSetRow,
    InputSetRows,
    azerty,
    english,
    english_numeric,
    english_symbolic,
    input_set,
    qwerty,
    qwertz,
    standard_numeric,
    standard_symbolic,
)

__all__ = [
    "DeviceClass",
    "KeyboardCase",
    "InputSet",
    "InputSetItem",
    "InputSetKind",
    "InputSetRow",
    "InputSetRows",
    "azerty",
    "english",
    "english_numeric",
    "english_symbolic",
    "input_set",
    "qwerty",
    "qwertz",
    "standard_numeric",
    "standard_symbolic",
]
