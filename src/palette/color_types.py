from __future__ import annotations

"""Core Base24 slot types used by the palette library.

This module defines the eight accent roles (:class:`AccentSlot`), the fixed
Base24 key tables and the human-readable metadata attached to each key.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Tuple

from util.color import is_hex_color


HexColor = str


class AccentSlot(Enum):
    """Logical accent roles in Base24 order, valued by their persisted name."""

    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"

    @property
    def index(self) -> int:
        return _SLOT_ORDER.index(self)

    @property
    def accent_key(self) -> str:
        """Base24 key of the accent color (``base08``..``base0F``)."""
        return ACCENT_KEYS[self.index]

    @property
    def muted_key(self) -> str:
        """Base24 key of the muted variant (``base10``..``base17``)."""
        return MUTED_KEYS[self.index]

    @classmethod
    def from_name(cls, name: str) -> "AccentSlot":
        """Look up a slot by name (``"red"``) or accent key (``"base08"``)."""
        key = str(name).strip()
        for slot in cls:
            if slot.value == key.lower() or slot.accent_key == key:
                return slot
        raise KeyError(f"unknown accent slot: {name!r}")


_SLOT_ORDER: Tuple[AccentSlot, ...] = tuple(AccentSlot)

BASE_KEYS: Tuple[str, ...] = tuple(f"base0{i:X}" for i in range(8))
ACCENT_KEYS: Tuple[str, ...] = tuple(f"base0{i:X}" for i in range(8, 16))
MUTED_KEYS: Tuple[str, ...] = tuple(f"base1{i:X}" for i in range(8))
ALL_KEYS: Tuple[str, ...] = BASE_KEYS + ACCENT_KEYS + MUTED_KEYS


@dataclass(frozen=True)
class ColorInfo:
    """Display metadata for one Base24 key."""

    key: str
    name: str
    description: str


@dataclass(frozen=True)
class ColorSection:
    """A group of keys shown together, e.g. in a palette editor."""

    title: str
    colors: Tuple[ColorInfo, ...]
    editable: bool


BASE_COLORS: Tuple[ColorInfo, ...] = (
    ColorInfo("base00", "Background", "Primary background color"),
    ColorInfo("base01", "Alt Background", "Secondary background for panels"),
    ColorInfo("base02", "Selection", "Selection background"),
    ColorInfo("base03", "Comments", "Comments and subtle text"),
    ColorInfo("base04", "Secondary Text", "Secondary foreground (low contrast)"),
    ColorInfo("base05", "Main Text", "Primary foreground (main text)"),
    ColorInfo("base06", "Light Surface", "Emphasized foreground"),
    ColorInfo("base07", "Light Accent", "Strong emphasis (high contrast)"),
)

ACCENT_COLORS: Tuple[ColorInfo, ...] = (
    ColorInfo("base08", "Red", "Variables, errors, deletion"),
    ColorInfo("base09", "Orange", "Numbers, constants"),
    ColorInfo("base0A", "Yellow", "Classes, warnings"),
    ColorInfo("base0B", "Green", "Strings, additions"),
    ColorInfo("base0C", "Cyan", "Support, regex"),
    ColorInfo("base0D", "Blue", "Functions, methods"),
    ColorInfo("base0E", "Purple", "Keywords, storage"),
    ColorInfo("base0F", "Pink", "Tags, deprecated"),
)

MUTED_COLORS: Tuple[ColorInfo, ...] = tuple(
    ColorInfo(key, f"Muted {info.name}", f"Subtle {info.name.lower()} variant")
    for key, info in zip(MUTED_KEYS, ACCENT_COLORS)
)

COLOR_SECTIONS: Tuple[ColorSection, ...] = (
    ColorSection("Base Colors", BASE_COLORS, editable=False),
    ColorSection("Accent Colors (Editable)", ACCENT_COLORS, editable=True),
    ColorSection("Muted Accent Colors", MUTED_COLORS, editable=False),
)

_INFO_BY_KEY: dict[str, ColorInfo] = {
    info.key: info for info in BASE_COLORS + ACCENT_COLORS + MUTED_COLORS
}


def accent_keys() -> list[str]:
    return list(ACCENT_KEYS)


def color_name(key: str) -> str:
    """Display name for a key; unknown keys are returned unchanged."""
    info = _INFO_BY_KEY.get(key)
    return info.name if info is not None else key


def color_description(key: str) -> str:
    info = _INFO_BY_KEY.get(key)
    return info.description if info is not None else ""


def is_accent_key(key: str) -> bool:
    return key in ACCENT_KEYS


def validate_base24_colors(colors: Mapping[str, object]) -> bool:
    """True when every Base24 key maps to a ``#RRGGBB`` string."""
    try:
        return all(is_hex_color(colors[key]) for key in ALL_KEYS)
    except (KeyError, TypeError):
        return False


__all__ = [
    "HexColor",
    "AccentSlot",
    "BASE_KEYS",
    "ACCENT_KEYS",
    "MUTED_KEYS",
    "ALL_KEYS",
    "ColorInfo",
    "ColorSection",
    "BASE_COLORS",
    "ACCENT_COLORS",
    "MUTED_COLORS",
    "COLOR_SECTIONS",
    "accent_keys",
    "color_name",
    "color_description",
    "is_accent_key",
    "validate_base24_colors",
]
