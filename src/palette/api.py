from __future__ import annotations

"""High-level public API for generating Base24 palettes.

This module provides :class:`PaletteBuilder` and the convenience function
:func:`generate_palette`, which coordinate hue composition, the slot
lightness/saturation recipe and HSL conversion to produce a
:class:`palette.palette.Base24Palette`.
"""

import logging
from typing import Dict, Optional

from .catalog import ThemeCatalog, builtin_catalog
from .color_types import AccentSlot, HexColor
from .convert import perceptually_correct, to_rgb_hex
from .engine import ColorEngine, DefaultColorEngine, clamp_percent, normalize_hue
from .harmony import HueCompositor
from .palette import Base24Palette, ThemeParams
from .style import (
    background_family,
    comment_color,
    foreground_family,
    muted_lightness,
    muted_saturation,
)

logger = logging.getLogger(__name__)


class PaletteBuilder:
    """Builds complete palettes for themes of one catalog."""

    def __init__(
        self,
        catalog: ThemeCatalog,
        engine: Optional[ColorEngine] = None,
    ) -> None:
        self._compositor = HueCompositor(catalog)
        self._engine = engine if engine is not None else DefaultColorEngine()

    @property
    def compositor(self) -> HueCompositor:
        return self._compositor

    def build(self, params: ThemeParams, theme_id: str) -> Base24Palette:
        """Generate all 24 colors for ``params`` rendered in theme ``theme_id``.

        Parameters
        ----------
        params:
            Fully resolved parameters. Out-of-range saturation/lightness are
            clamped and hues wrapped, so in-range input never raises.
        theme_id:
            Theme whose per-slot offsets apply. Unknown ids raise
            :class:`palette.catalog.ThemeNotFoundError`.

        Returns
        -------
        Base24Palette
            A new palette; nothing is shared with earlier builds.
        """
        bg_hue = normalize_hue(params.bg_hue)
        bg_sat = clamp_percent(params.bg_sat)
        bg_light = clamp_percent(params.bg_light)
        accent_sat = clamp_percent(params.accent_sat)
        accent_light = clamp_percent(params.accent_light)

        hues = self._compositor.slot_hues(params.accent_hue, theme_id, params.color_adjustments)

        colors: Dict[str, HexColor] = {}
        base00, base01, base02 = background_family(bg_hue, bg_sat, bg_light)
        base03 = comment_color(bg_hue, bg_light, clamp_percent(params.comment_light))
        base04, base05, base06, base07 = foreground_family(bg_hue, bg_light)
        for key, hsl in (
            ("base00", base00),
            ("base01", base01),
            ("base02", base02),
            ("base03", base03),
            ("base04", base04),
            ("base05", base05),
            ("base06", base06),
            ("base07", base07),
        ):
            colors[key] = to_rgb_hex(*hsl, engine=self._engine)

        m_sat = muted_saturation(accent_sat)
        m_light = muted_lightness(accent_light)
        for slot in AccentSlot:
            hue = hues[slot]
            colors[slot.accent_key] = perceptually_correct(
                hue, accent_sat, accent_light, engine=self._engine
            )
            colors[slot.muted_key] = to_rgb_hex(hue, m_sat, m_light, engine=self._engine)

        logger.debug("built palette theme=%s accent_hue=%s", theme_id, params.accent_hue)
        return Base24Palette(colors)


def generate_palette(
    params: ThemeParams,
    theme_id: str,
    catalog: Optional[ThemeCatalog] = None,
    engine: Optional[ColorEngine] = None,
) -> Base24Palette:
    """Generate a Base24 palette.

    Parameters
    ----------
    params:
        Resolved :class:`ThemeParams`.
    theme_id:
        Theme identifier in ``catalog``.
    catalog:
        Catalog providing theme offsets. If None, the built-in catalog is used.
    engine:
        Optional ColorEngine. If None, DefaultColorEngine is used.
    """
    if catalog is None:
        catalog = builtin_catalog()
    return PaletteBuilder(catalog, engine).build(params, theme_id)


__all__ = ["PaletteBuilder", "generate_palette"]
