"""Descriptions of device controls and their types.

A control's state is represented by plain Python values: ``None`` for
stateless controls, ``str``, ``bool`` or ``float``. Menu items are either
``str`` or ``float``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Flags(enum.Flag):
    """Control state flags."""

    NONE = 0x000
    READ = 0x001
    WRITE = 0x002


@dataclass(frozen=True)
class Stateless:
    """A control without state, such as a button."""


@dataclass(frozen=True)
class Boolean:
    """An on/off switch."""


@dataclass(frozen=True)
class Number:
    """A numerical control with an inclusive value range and a step size."""

    range: tuple[float, float]
    step: float

    def __post_init__(self) -> None:
        low, high = self.range
        object.__setattr__(self, "range", (float(low), float(high)))
        object.__setattr__(self, "step", float(self.step))


@dataclass(frozen=True)
class String:
    """A string-valued control."""


@dataclass(frozen=True)
class Bitmask:
    """A bit field control."""


@dataclass(frozen=True)
class Menu:
    """A menu holding string or numerical items."""

    items: tuple[str | float, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class Descriptor:
    """A device control."""

    id: int
    name: str
    typ: Stateless | Boolean | Number | String | Bitmask | Menu
    flags: Flags

    def readable(self) -> bool:
        """Return True if the control value can be read."""
        return Flags.READ in self.flags

    def writable(self) -> bool:
        """Return True if the control value can be written."""
        return Flags.WRITE in self.flags