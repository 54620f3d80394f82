from __future__ import annotations

"""Color conversion engine for HSL, sRGB and CIELAB.

This module defines the :class:`ColorEngine` protocol and a default
implementation. HSL is the user-facing cylindrical model every palette
slot is specified in; CIELAB/LCh (D65) is the perceptually uniform space
used to measure and correct how bright a converted color actually looks.
"""

import math
from typing import Protocol, Tuple


SRGB = Tuple[float, float, float]
LAB = Tuple[float, float, float]
LCH = Tuple[float, float, float]

# D65 reference white
_XN = 0.95047
_YN = 1.0
_ZN = 1.08883

_EPS = (6.0 / 29.0) ** 3
_KAPPA = 3.0 * (6.0 / 29.0) ** 2


def normalize_hue(h: float) -> float:
    """Normalize hue angle into [0, 360)."""
    r = float(h) % 360.0
    # float modulo of a tiny negative value rounds up to exactly 360.0
    if r >= 360.0:
        return 0.0
    return r + 0.0


def clamp_percent(x: float) -> float:
    """Clamp a saturation/lightness value into [0, 100]."""
    return max(0.0, min(100.0, float(x)))


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def normalize_hue(self, h: float) -> float: ...

    def hsl_to_srgb(self, h: float, s: float, l: float) -> SRGB: ...

    def srgb_to_lab(self, r: float, g: float, b: float) -> LAB: ...

    def lab_to_srgb(self, L: float, a: float, b: float) -> SRGB: ...


class DefaultColorEngine:
    """Default implementation based on standard HSL and CIELAB (sRGB, D65)."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360)."""
        return normalize_hue(h)

    def hsl_to_srgb(self, h: float, s: float, l: float) -> SRGB:
        """Convert HSL (h in degrees, s/l in [0, 100]) to sRGB in [0, 1].

        Hue is wrapped, saturation and lightness are clamped, so the
        conversion is total.
        """
        h_norm = self.normalize_hue(h)
        s01 = clamp_percent(s) / 100.0
        l01 = clamp_percent(l) / 100.0

        c = (1.0 - abs(2.0 * l01 - 1.0)) * s01
        hp = h_norm / 60.0
        x = c * (1.0 - abs(hp % 2.0 - 1.0))
        m = l01 - c / 2.0

        if hp < 1.0:
            r, g, b = c, x, 0.0
        elif hp < 2.0:
            r, g, b = x, c, 0.0
        elif hp < 3.0:
            r, g, b = 0.0, c, x
        elif hp < 4.0:
            r, g, b = 0.0, x, c
        elif hp < 5.0:
            r, g, b = x, 0.0, c
        else:
            r, g, b = c, 0.0, x
        return (r + m, g + m, b + m)

    def srgb_to_lab(self, r: float, g: float, b: float) -> LAB:
        """Convert sRGB in [0, 1] to CIELAB (L in [0, 100])."""
        rl, gl, bl = _srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b)

        x = 0.4124564 * rl + 0.3575761 * gl + 0.1804375 * bl
        y = 0.2126729 * rl + 0.7151522 * gl + 0.0721750 * bl
        z = 0.0193339 * rl + 0.1191920 * gl + 0.9503041 * bl

        fx = _lab_f(x / _XN)
        fy = _lab_f(y / _YN)
        fz = _lab_f(z / _ZN)

        L = 116.0 * fy - 16.0
        a = 500.0 * (fx - fy)
        b_ = 200.0 * (fy - fz)
        return (max(0.0, min(100.0, L)), a, b_)

    def lab_to_srgb(self, L: float, a: float, b: float) -> SRGB:
        """Convert CIELAB to sRGB.

        Components are NOT clamped: values outside [0, 1] signal an
        out-of-gamut color and are handled by :mod:`palette.gamut`.
        """
        fy = (max(0.0, min(100.0, L)) + 16.0) / 116.0
        fx = fy + a / 500.0
        fz = fy - b / 200.0

        x = _XN * _lab_f_inv(fx)
        y = _YN * _lab_f_inv(fy)
        z = _ZN * _lab_f_inv(fz)

        rl = 3.2404542 * x - 1.5371385 * y - 0.4985314 * z
        gl = -0.9692660 * x + 1.8760108 * y + 0.0415560 * z
        bl = 0.0556434 * x - 0.2040259 * y + 1.0572252 * z
        return (_linear_to_srgb(rl), _linear_to_srgb(gl), _linear_to_srgb(bl))


def lab_to_lch(L: float, a: float, b: float) -> LCH:
    """Convert CIELAB to its cylindrical form (L, C, h)."""
    C = math.sqrt(a * a + b * b)
    if C < 1e-12:
        return (L, 0.0, 0.0)
    return (L, C, normalize_hue(math.degrees(math.atan2(b, a))))


def lch_to_lab(L: float, C: float, h: float) -> LAB:
    """Convert (L, C, h) back to CIELAB."""
    h_rad = math.radians(normalize_hue(h))
    C = max(0.0, C)
    return (L, C * math.cos(h_rad), C * math.sin(h_rad))


def _lab_f(t: float) -> float:
    if t > _EPS:
        return t ** (1.0 / 3.0)
    return t / _KAPPA + 4.0 / 29.0


def _lab_f_inv(t: float) -> float:
    if t > 6.0 / 29.0:
        return t**3
    return _KAPPA * (t - 4.0 / 29.0)


def _srgb_to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(c: float) -> float:
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055
