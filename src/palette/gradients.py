from __future__ import annotations

"""Evenly spaced color ramps for slider tracks and previews.

Every helper samples one parameter with ``numpy.linspace`` while holding the
others fixed and returns a list of lowercase hex strings.
"""

from typing import List, Optional

import numpy as np

from .catalog import ThemeCatalog
from .color_types import AccentSlot
from .convert import to_rgb_hex
from .harmony import HueCompositor, OFFSET_MAX, OFFSET_MIN


def _samples(start: float, stop: float, steps: int) -> np.ndarray:
    if steps < 2:
        raise ValueError(f"steps must be >= 2, got {steps}")
    return np.linspace(float(start), float(stop), int(steps))


def hue_gradient(saturation: float, lightness: float, steps: int = 13) -> List[str]:
    """Full hue circle from 0 to 360 at fixed saturation/lightness."""
    return [to_rgb_hex(float(h), saturation, lightness) for h in _samples(0.0, 360.0, steps)]


def saturation_gradient(hue: float, lightness: float, steps: int = 11) -> List[str]:
    return [to_rgb_hex(hue, float(s), lightness) for s in _samples(0.0, 100.0, steps)]


def lightness_gradient(hue: float, saturation: float, steps: int = 11) -> List[str]:
    return [to_rgb_hex(hue, saturation, float(v)) for v in _samples(0.0, 100.0, steps)]


def accent_hue_gradient(
    catalog: ThemeCatalog,
    theme_id: str,
    saturation: float,
    lightness: float,
    steps: int = 13,
) -> List[str]:
    """Red-slot color as the anchor adjustment sweeps [-180, 180].

    Shows how the whole accent wheel turns when the anchor slider moves.
    """
    compositor = HueCompositor(catalog)
    return [
        to_rgb_hex(compositor.resolve_hue(float(a), AccentSlot.RED, theme_id), saturation, lightness)
        for a in _samples(OFFSET_MIN, OFFSET_MAX, steps)
    ]


def offset_gradient(
    catalog: ThemeCatalog,
    theme_id: str,
    slot: AccentSlot,
    anchor_hue: float,
    saturation: float,
    lightness: float,
    steps: int = 13,
    span: Optional[float] = None,
) -> List[str]:
    """One slot's color as its user offset sweeps ``[-span, span]`` (default 180)."""
    half = OFFSET_MAX if span is None else min(OFFSET_MAX, abs(float(span)))
    compositor = HueCompositor(catalog)
    return [
        to_rgb_hex(compositor.resolve_hue(anchor_hue, slot, theme_id, float(o)), saturation, lightness)
        for o in _samples(-half, half, steps)
    ]


__all__ = [
    "hue_gradient",
    "saturation_gradient",
    "lightness_gradient",
    "accent_hue_gradient",
    "offset_gradient",
]
