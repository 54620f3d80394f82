from __future__ import annotations

"""Container types for palette inputs and outputs.

This module defines :class:`ThemeParams`, the fully resolved parameter vector
a palette is built from, and :class:`Base24Palette`, the immutable 24-color
result.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, Iterator, Mapping

from .color_types import ALL_KEYS, AccentSlot, HexColor


@dataclass(frozen=True)
class ThemeParams:
    """Tunable parameter vector.

    Attributes
    ----------
    bg_hue, bg_sat, bg_light:
        Background HSL; hue in [0, 360), the others in [0, 100].
    accent_hue:
        Anchor adjustment added to every slot's standard position, in (-180, 180].
    accent_sat, accent_light:
        Accent saturation/lightness in [0, 100].
    comment_light:
        Lightness of base03 in [0, 100].
    color_adjustments:
        Sparse per-slot user hue offsets in [-180, 180].
    """

    bg_hue: float
    bg_sat: float
    bg_light: float
    accent_hue: float
    accent_sat: float
    accent_light: float
    comment_light: float
    color_adjustments: Mapping[AccentSlot, float] = field(default_factory=dict)

    def adjustment(self, slot: AccentSlot) -> float:
        """User offset for a slot (0 when unset)."""
        return float(self.color_adjustments.get(slot, 0.0))

    def with_values(self, **changes: object) -> "ThemeParams":
        return replace(self, **changes)  # type: ignore[arg-type]

    def to_dict(self) -> Dict[str, object]:
        """JSON-ready form using the persisted camelCase field names."""
        return {
            "bgHue": self.bg_hue,
            "bgSat": self.bg_sat,
            "bgLight": self.bg_light,
            "accentHue": self.accent_hue,
            "accentSat": self.accent_sat,
            "accentLight": self.accent_light,
            "commentLight": self.comment_light,
            "colorAdjustments": {
                slot.value: {"hueOffset": offset}
                for slot, offset in self.color_adjustments.items()
            },
        }


@dataclass(frozen=True)
class Base24Palette:
    """Generated Base24 palette.

    Behaves as a read-only mapping from ``base00``..``base17`` to lowercase
    ``#rrggbb`` strings. Instances are only ever created whole.
    """

    colors: Mapping[str, HexColor]

    def __post_init__(self) -> None:
        missing = [k for k in ALL_KEYS if k not in self.colors]
        if missing:
            raise ValueError(f"palette is missing keys: {missing}")
        # read-only private copy in Base24 key order
        frozen = MappingProxyType({k: self.colors[k] for k in ALL_KEYS})
        object.__setattr__(self, "colors", frozen)

    def __getitem__(self, key: str) -> HexColor:
        return self.colors[key]

    def __iter__(self) -> Iterator[str]:
        return iter(ALL_KEYS)

    def __len__(self) -> int:
        return len(ALL_KEYS)

    def keys(self) -> list[str]:
        return list(ALL_KEYS)

    def as_dict(self) -> Dict[str, HexColor]:
        return dict(self.colors)

    def accent(self, slot: AccentSlot) -> HexColor:
        return self.colors[slot.accent_key]

    def muted_variant(self, slot: AccentSlot) -> HexColor:
        return self.colors[slot.muted_key]


__all__ = ["ThemeParams", "Base24Palette"]
