from __future__ import annotations

"""Helper utilities for integrating Lumina palettes into external UIs.

This module exposes label/enum pairs for export formats, the slider range
table for every tunable parameter, and public ``export_palette`` /
``export_params`` helpers that turn palettes and parameters into plain,
JSON-ready structures.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from util.color import parse_hex_color_str

from .palette import Base24Palette, ThemeParams


class ExportFormat(Enum):
    """Supported output formats for exported palettes."""

    HEX = "hex"
    RGB_255 = "rgb_255"
    SCHEME = "scheme"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("HEX", ExportFormat.HEX),
    ("RGB (0-255)", ExportFormat.RGB_255),
    ("Base24 scheme", ExportFormat.SCHEME),
]


@dataclass(frozen=True)
class ParamRange:
    """Slider bounds for one parameter."""

    label: str
    min: float
    max: float
    step: float = 1.0


# keyed by the persisted parameter name
PARAM_RANGES: Dict[str, ParamRange] = {
    "bgHue": ParamRange("Background Hue", 0.0, 359.0),
    "bgSat": ParamRange("Background Saturation", 0.0, 100.0),
    "bgLight": ParamRange("Background Lightness", 0.0, 100.0),
    "accentHue": ParamRange("Accent Hue Shift", -180.0, 180.0),
    "accentSat": ParamRange("Accent Saturation", 0.0, 100.0),
    "accentLight": ParamRange("Accent Lightness", 0.0, 100.0),
    "commentLight": ParamRange("Comment Lightness", 0.0, 100.0),
}

DEFAULT_AUTHOR = "Lumina"


def scheme_document(
    palette: Base24Palette,
    name: str,
    author: Optional[str] = None,
) -> Dict[str, object]:
    """Base24 scheme document: ``{name, scheme, author, colors}``."""
    return {
        "name": name,
        "scheme": "base24",
        "author": author or DEFAULT_AUTHOR,
        "colors": palette.as_dict(),
    }


def export_palette(
    palette: Base24Palette,
    fmt: ExportFormat | str,
    *,
    name: str = "Lumina",
    author: Optional[str] = None,
) -> object:
    """Convert a palette to the requested format.

    ``hex`` and ``rgb_255`` return a dict keyed ``base00``..``base17``;
    ``scheme`` returns a full scheme document.
    """
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.HEX:
        return palette.as_dict()
    if export_fmt == ExportFormat.RGB_255:
        return {key: parse_hex_color_str(value) for key, value in palette.as_dict().items()}
    if export_fmt == ExportFormat.SCHEME:
        return scheme_document(palette, name, author)
    raise ValueError(f"Unsupported export format: {fmt}")


def export_params(params: ThemeParams, theme_id: str, flavor_id: str) -> Dict[str, object]:
    """Raw parameter export for re-import or sharing."""
    out: Dict[str, object] = {"theme": theme_id, "flavor": flavor_id}
    out.update(params.to_dict())
    return out


__all__ = [
    "ExportFormat",
    "EXPORT_FORMAT_OPTIONS",
    "ParamRange",
    "PARAM_RANGES",
    "scheme_document",
    "export_palette",
    "export_params",
]
