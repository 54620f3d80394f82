from __future__ import annotations

"""Hue offset composition for the eight accent slots.

Every accent hue is the sum of four layers:

    anchor (flavor accent hue) + standard slot offset + theme offset + user offset

:meth:`HueCompositor.resolve_hue` is the single place where that sum is
formed, so previews, palette generation and exports cannot drift apart.
"""

from typing import Dict, Mapping, Optional

from .catalog import ThemeCatalog
from .color_types import AccentSlot
from .engine import normalize_hue

#: Canonical angular position of each slot relative to a hue-0 anchor.
STANDARD_OFFSETS: Dict[AccentSlot, float] = {
    AccentSlot.RED: 0.0,
    AccentSlot.ORANGE: 30.0,
    AccentSlot.YELLOW: 60.0,
    AccentSlot.GREEN: 150.0,
    AccentSlot.CYAN: 180.0,
    AccentSlot.BLUE: 210.0,
    AccentSlot.PURPLE: 270.0,
    AccentSlot.PINK: 330.0,
}

OFFSET_MIN = -180.0
OFFSET_MAX = 180.0


def normalize_signed(angle: float) -> float:
    """Map an angle onto the shortest signed path in (-180, 180]."""
    r = normalize_hue(angle)
    if r > 180.0:
        r -= 360.0
    return r


def clamp_offset(offset: float) -> float:
    """Clamp a user hue offset into [-180, 180]."""
    return max(OFFSET_MIN, min(OFFSET_MAX, float(offset)))


def standard_offset(slot: AccentSlot) -> float:
    return STANDARD_OFFSETS[slot]


def compose_hue(
    anchor_hue: float, slot: AccentSlot, theme_offset: float = 0.0, user_offset: float = 0.0
) -> float:
    """Sum the four offset layers for one slot and normalize into [0, 360)."""
    return normalize_hue(anchor_hue + STANDARD_OFFSETS[slot] + theme_offset + user_offset)


def rotate_adjustments_with_anchor(
    old_anchor: float,
    new_anchor: float,
    adjustments: Mapping[AccentSlot, float],
) -> Dict[AccentSlot, float]:
    """Re-express per-slot offsets after the anchor hue moves.

    Each adjusted slot keeps its absolute hue rotated by the same delta as the
    anchor, so the palette turns as a rigid whole.
    """
    delta = new_anchor - old_anchor
    rotated: Dict[AccentSlot, float] = {}
    for slot, offset in adjustments.items():
        old_absolute = old_anchor + offset
        new_absolute = normalize_hue(old_absolute + delta)
        rotated[slot] = normalize_signed(new_absolute - new_anchor)
    return rotated


class HueCompositor:
    """Resolves accent hues against a theme catalog."""

    def __init__(self, catalog: ThemeCatalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> ThemeCatalog:
        return self._catalog

    def theme_offset(self, theme_id: str, slot: AccentSlot) -> float:
        """Theme offset for the slot (0 when undefined).

        Raises :class:`palette.catalog.ThemeNotFoundError` for unknown themes.
        """
        return self._catalog.get_theme(theme_id).offset_for(slot)

    def combined_offset(self, theme_id: str, slot: AccentSlot, user_offset: float = 0.0) -> float:
        """Theme offset plus user adjustment, as shown next to the standard position."""
        return self.theme_offset(theme_id, slot) + user_offset

    def resolve_hue(
        self, anchor_hue: float, slot: AccentSlot, theme_id: str, user_offset: float = 0.0
    ) -> float:
        return compose_hue(anchor_hue, slot, self.theme_offset(theme_id, slot), user_offset)

    def slot_hues(
        self,
        anchor_hue: float,
        theme_id: str,
        adjustments: Optional[Mapping[AccentSlot, float]] = None,
    ) -> Dict[AccentSlot, float]:
        """Resolved hue for every slot in Base24 order."""
        adjustments = adjustments or {}
        return {
            slot: self.resolve_hue(anchor_hue, slot, theme_id, adjustments.get(slot, 0.0))
            for slot in AccentSlot
        }


__all__ = [
    "STANDARD_OFFSETS",
    "OFFSET_MIN",
    "OFFSET_MAX",
    "normalize_hue",
    "normalize_signed",
    "clamp_offset",
    "standard_offset",
    "compose_hue",
    "rotate_adjustments_with_anchor",
    "HueCompositor",
]
