"""Public entrypoint for the Lumina palette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``palette`` instead of individual
submodules.
"""

from .color_types import AccentSlot, HexColor
from .catalog import (
    CatalogLookupError,
    FlavorDefinition,
    FlavorNotFoundError,
    StaticThemeCatalog,
    ThemeCatalog,
    ThemeDefinition,
    ThemeNotFoundError,
    builtin_catalog,
)
from .palette import Base24Palette, ThemeParams
from .harmony import HueCompositor
from .convert import perceptually_correct, to_rgb_hex
from .api import PaletteBuilder, generate_palette
from .ui_helpers import (
    EXPORT_FORMAT_OPTIONS,
    PARAM_RANGES,
    ExportFormat,
    export_palette,
    export_params,
)

__all__ = [
    "AccentSlot",
    "HexColor",
    "CatalogLookupError",
    "ThemeNotFoundError",
    "FlavorNotFoundError",
    "FlavorDefinition",
    "ThemeDefinition",
    "ThemeCatalog",
    "StaticThemeCatalog",
    "builtin_catalog",
    "ThemeParams",
    "Base24Palette",
    "HueCompositor",
    "to_rgb_hex",
    "perceptually_correct",
    "PaletteBuilder",
    "generate_palette",
    "ExportFormat",
    "export_palette",
    "export_params",
    "PARAM_RANGES",
    "EXPORT_FORMAT_OPTIONS",
]
