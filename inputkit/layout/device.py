"""Device classes and keyboard cases used to select input set characters."""

from __future__ import annotations

from enum import Enum


class DeviceClass(Enum):
    """Target device class.

    Row content differs between phones and larger (pad) devices. The
    device class is always passed in explicitly; nothing here looks at
    the runtime environment.
    """

    PHONE = "phone"
    PAD = "pad"

    @classmethod
    def parse(cls, value: DeviceClass | str) -> DeviceClass:
        """Return the device class for *value*.

        Accepts a ``DeviceClass`` or its name (``"phone"``, ``"pad"``,
        case-insensitive). ``"tablet"`` is an alias of ``"pad"``.
        Raises ``ValueError`` for anything else.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid device class: {value!r}")
        key = value.strip().lower()
        if key == "tablet":
            key = "pad"
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Invalid device class: {value!r} (expected 'phone' or 'pad')")


class KeyboardCase(Enum):
    LOWERCASED = "lowercased"
    UPPERCASED = "uppercased"
    CAPS_LOCKED = "caps_locked"

    @property
    def is_uppercased(self) -> bool:
        return self in (KeyboardCase.UPPERCASED, KeyboardCase.CAPS_LOCKED)
