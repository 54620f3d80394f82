from __future__ import annotations

"""sRGB gamut handling utilities for CIE LCh colors.

This module provides a small helper to convert LCh colors into the sRGB
gamut by shrinking chroma until the color falls inside [0, 1]^3.
"""

from typing import Tuple

from .engine import ColorEngine, lch_to_lab


LCH = Tuple[float, float, float]


def to_srgb_gamut_safe(
    engine: ColorEngine,
    L: float,
    C: float,
    h: float,
    max_iter: int = 24,
    reduction_factor: float = 0.9,
) -> Tuple[float, float, float, LCH]:
    """Convert LCh to in-gamut sRGB, reducing C until within gamut.

    Lightness and hue are preserved; only chroma is given up.
    Returns (r, g, b, (L_adj, C_adj, h_adj)).
    """
    L = max(0.0, min(100.0, L))
    C_curr = max(0.0, C)
    h_norm = engine.normalize_hue(h)

    r = g = b = 0.0
    for _ in range(max_iter):
        r, g, b = engine.lab_to_srgb(*lch_to_lab(L, C_curr, h_norm))
        if _in_gamut(r, g, b):
            return r, g, b, (L, C_curr, h_norm)
        C_curr *= reduction_factor

    # Fallback: clip to [0, 1]
    r = _clip01(r)
    g = _clip01(g)
    b = _clip01(b)
    return r, g, b, (L, C_curr, h_norm)


def _in_gamut(r: float, g: float, b: float, tol: float = 1e-9) -> bool:
    lo = -tol
    hi = 1.0 + tol
    return lo <= r <= hi and lo <= g <= hi and lo <= b <= hi


def _clip01(x: float) -> float:
    return max(0.0, min(1.0, x))
