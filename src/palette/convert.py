from __future__ import annotations

"""HSL to hex conversion with best-effort perceptual correction.

:func:`to_rgb_hex` is the plain, total HSL conversion. :func:`perceptually_correct`
measures the naive result in CIE LCh and darkens hues that read much brighter
than their HSL lightness suggests (yellow-green, green and cyan at high
chroma). Correction never raises: any failure or degenerate result falls back
to the naive conversion.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from common.settings import get as _get_settings
from util.color import rgb01_to_hex

from .engine import ColorEngine, DefaultColorEngine, lab_to_lch
from .gamut import to_srgb_gamut_safe

logger = logging.getLogger(__name__)

#: Minimum measured LCh chroma before any correction applies.
CHROMA_THRESHOLD = 35.0

_BLACK = "#000000"
_WHITE = "#ffffff"

_DEFAULT_ENGINE = DefaultColorEngine()


@dataclass(frozen=True)
class CorrectionBand:
    """A measured-hue interval [start, end) and its lightness factor."""

    name: str
    start: float
    end: float
    factor: float

    def contains(self, hue: float) -> bool:
        return self.start <= hue < self.end


CORRECTION_BANDS: Tuple[CorrectionBand, ...] = (
    CorrectionBand("yellow-green", 70.0, 130.0, 0.88),
    CorrectionBand("green", 130.0, 180.0, 0.92),
    CorrectionBand("cyan", 180.0, 220.0, 0.96),
)


def to_rgb_hex(
    hue: float,
    saturation: float,
    lightness: float,
    engine: Optional[ColorEngine] = None,
) -> str:
    """Convert HSL to a lowercase ``#rrggbb`` string.

    Hue is taken mod 360; saturation and lightness are clamped to [0, 100].
    """
    if engine is None:
        engine = _DEFAULT_ENGINE
    r, g, b = engine.hsl_to_srgb(hue, saturation, lightness)
    return rgb01_to_hex(r, g, b)


def correction_band(hue: float) -> Optional[CorrectionBand]:
    """Return the band containing the measured hue, if any."""
    for band in CORRECTION_BANDS:
        if band.contains(hue):
            return band
    return None


def perceptually_correct(
    hue: float,
    saturation: float,
    lightness: float,
    engine: Optional[ColorEngine] = None,
) -> str:
    """Convert HSL to hex, reducing lightness for apparently too-bright hues.

    The naive conversion is measured in CIE LCh. When its chroma exceeds
    :data:`CHROMA_THRESHOLD` and its hue angle lies in one of
    :data:`CORRECTION_BANDS`, L* is scaled by the band factor and the color is
    converted back with gamut-safe chroma reduction.
    """
    if engine is None:
        engine = _DEFAULT_ENGINE
    naive = to_rgb_hex(hue, saturation, lightness, engine)
    if not _get_settings().PERCEPTUAL_CORRECTION:
        return naive

    try:
        r, g, b = engine.hsl_to_srgb(hue, saturation, lightness)
        L, C, h = lab_to_lch(*engine.srgb_to_lab(r, g, b))
        if C <= CHROMA_THRESHOLD:
            return naive
        band = correction_band(h)
        if band is None:
            return naive
        r2, g2, b2, _ = to_srgb_gamut_safe(engine, L * band.factor, C, h)
        corrected = rgb01_to_hex(r2, g2, b2)
    except Exception:
        logger.debug("perceptual correction failed; using naive conversion", exc_info=True)
        return naive

    if corrected in (_BLACK, _WHITE) and corrected != naive:
        logger.debug("degenerate correction for hsl(%s, %s, %s)", hue, saturation, lightness)
        return naive
    return corrected


__all__ = [
    "CHROMA_THRESHOLD",
    "CORRECTION_BANDS",
    "CorrectionBand",
    "correction_band",
    "perceptually_correct",
    "to_rgb_hex",
]
