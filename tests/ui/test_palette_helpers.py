from __future__ import annotations

"""palette.ui_helpers / palette.gradients / color_types メタ情報のテスト。"""

import pytest

from palette import generate_palette
from palette.catalog import builtin_catalog
from palette.color_types import (
    ACCENT_KEYS,
    COLOR_SECTIONS,
    AccentSlot,
    accent_keys,
    color_description,
    color_name,
    is_accent_key,
)
from palette.gradients import (
    accent_hue_gradient,
    hue_gradient,
    lightness_gradient,
    offset_gradient,
    saturation_gradient,
)
from palette.palette import ThemeParams
from palette.ui_helpers import PARAM_RANGES, ExportFormat, export_palette, export_params


def _params() -> ThemeParams:
    return ThemeParams(
        bg_hue=242, bg_sat=40, bg_light=12,
        accent_hue=0, accent_sat=95, accent_light=60, comment_light=55,
        color_adjustments={AccentSlot.CYAN: 12.0},
    )


def _palette():
    return generate_palette(_params(), "twilight", builtin_catalog())


def test_export_hex_matches_palette() -> None:
    pal = _palette()
    assert export_palette(pal, "hex") == pal.as_dict()


def test_export_rgb_255() -> None:
    pal = _palette()
    out = export_palette(pal, ExportFormat.RGB_255)
    assert set(out) == set(pal.keys())
    assert all(len(v) == 3 and all(0 <= c <= 255 for c in v) for v in out.values())
    r, g, b = out["base00"]
    assert f"#{r:02x}{g:02x}{b:02x}" == pal["base00"]


def test_export_scheme_document() -> None:
    doc = export_palette(_palette(), "scheme", name="Lumina Twilight", author="me")
    assert doc["scheme"] == "base24"
    assert doc["name"] == "Lumina Twilight"
    assert doc["author"] == "me"
    assert len(doc["colors"]) == 24


def test_export_unknown_format() -> None:
    with pytest.raises(ValueError):
        export_palette(_palette(), "oklch")


def test_export_params() -> None:
    out = export_params(_params(), "twilight", "balanced")
    assert out["theme"] == "twilight"
    assert out["flavor"] == "balanced"
    assert out["accentSat"] == 95
    assert out["colorAdjustments"] == {"cyan": {"hueOffset": 12.0}}


def test_param_ranges_cover_every_field() -> None:
    assert set(PARAM_RANGES) == {
        "bgHue", "bgSat", "bgLight", "accentHue", "accentSat", "accentLight", "commentLight"
    }
    assert PARAM_RANGES["accentHue"].min == -180.0


def test_gradients_lengths_and_endpoints() -> None:
    hues = hue_gradient(100, 50, steps=13)
    assert len(hues) == 13
    assert hues[0] == hues[-1] == "#ff0000"
    sats = saturation_gradient(0, 50, steps=5)
    assert sats[0] == "#808080" and sats[-1] == "#ff0000"
    lights = lightness_gradient(0, 100, steps=3)
    assert lights == ["#000000", "#ff0000", "#ffffff"]
    with pytest.raises(ValueError):
        hue_gradient(100, 50, steps=1)


def test_accent_and_offset_gradients() -> None:
    cat = builtin_catalog()
    anchors = accent_hue_gradient(cat, "midnight", 100, 50, steps=3)
    # red slot at anchor -180, 0, 180
    assert anchors == ["#00ffff", "#ff0000", "#00ffff"]
    offsets = offset_gradient(cat, "midnight", AccentSlot.RED, 0, 100, 50, steps=3, span=120)
    assert offsets == ["#0000ff", "#ff0000", "#00ff00"]


def test_color_metadata() -> None:
    assert accent_keys() == list(ACCENT_KEYS)
    assert color_name("base0D") == "Blue"
    assert color_name("unknown") == "unknown"
    assert color_description("base05").startswith("Primary foreground")
    assert is_accent_key("base0A") and not is_accent_key("base10")
    assert [s.editable for s in COLOR_SECTIONS] == [False, True, False]
    assert AccentSlot.from_name("base0F") is AccentSlot.PINK
    assert AccentSlot.YELLOW.muted_key == "base12"
