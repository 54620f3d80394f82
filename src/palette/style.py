from __future__ import annotations

"""Lightness/saturation rules deriving every Base24 slot from ThemeParams.

This module holds the fixed numeric recipe: background family steps,
foreground lightness, comment hue and the muted-variant easing. The
functions return plain ``(hue, saturation, lightness)`` triples; conversion
to hex happens in :mod:`palette.api`.
"""

from typing import Tuple

from .engine import clamp_percent


HSL = Tuple[float, float, float]

LIGHT_THEME_THRESHOLD = 50.0

FOREGROUND_SAT = 15.0
COMMENT_SAT = 15.0
SURFACE_SAT = 20.0

MUTED_SAT_FLOOR = 25.0
MUTED_SAT_FACTOR = 0.7
MUTED_LIGHT_CEILING = 85.0
MUTED_BOOST_MAX = 18.0
MUTED_BOOST_MIN = 8.0


def is_light(bg_light: float) -> bool:
    """A theme is light when its background lightness exceeds 50."""
    return bg_light > LIGHT_THEME_THRESHOLD


def background_family(bg_hue: float, bg_sat: float, bg_light: float) -> Tuple[HSL, HSL, HSL]:
    """base00..base02: the background and two progressively raised surfaces."""
    sign = -1.0 if is_light(bg_light) else 1.0
    base00 = (bg_hue, bg_sat, bg_light)
    base01 = (bg_hue, min(100.0, bg_sat * 1.2), clamp_percent(bg_light + sign * 4.0))
    base02 = (bg_hue, min(100.0, bg_sat * 1.5), clamp_percent(bg_light + sign * 8.0))
    return base00, base01, base02


def comment_color(bg_hue: float, bg_light: float, comment_light: float) -> HSL:
    """base03: complementary hue on light themes, background hue on dark ones."""
    hue = bg_hue + 180.0 if is_light(bg_light) else bg_hue
    return (hue, COMMENT_SAT, comment_light)


def foreground_family(bg_hue: float, bg_light: float) -> Tuple[HSL, HSL, HSL, HSL]:
    """base04..base07, fixed lightness so contrast never depends on accents."""
    light = is_light(bg_light)
    main_l = 5.0 if light else 95.0
    # secondary text sits 15 points closer to the background
    secondary_l = main_l + 15.0 if light else main_l - 15.0
    base04 = (bg_hue, FOREGROUND_SAT, secondary_l)
    base05 = (bg_hue, FOREGROUND_SAT, main_l)
    base06 = (bg_hue + 60.0, SURFACE_SAT, 20.0 if light else 80.0)
    base07 = (bg_hue - 60.0, SURFACE_SAT, 18.0 if light else 82.0)
    return base04, base05, base06, base07


def muted_saturation(accent_sat: float) -> float:
    return max(MUTED_SAT_FLOOR, accent_sat * MUTED_SAT_FACTOR)


def muted_lightness(accent_light: float) -> float:
    """Lift accent lightness toward 85 with a quadratic ease.

    Dark accents gain up to 18 points, already-light ones as little as 8;
    accents at or above the ceiling are left unchanged.
    """
    a = clamp_percent(accent_light)
    if a >= MUTED_LIGHT_CEILING:
        return a
    t = (a / 100.0) ** 2
    boost = MUTED_BOOST_MAX - (MUTED_BOOST_MAX - MUTED_BOOST_MIN) * t
    return min(MUTED_LIGHT_CEILING, a + boost)


__all__ = [
    "LIGHT_THEME_THRESHOLD",
    "is_light",
    "background_family",
    "comment_color",
    "foreground_family",
    "muted_saturation",
    "muted_lightness",
]
