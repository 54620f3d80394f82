import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, settings, strategies as st  # type: ignore

from engine.params.state import (
    ParameterState,
    ParamField,
    ResetFlavor,
    ResetTheme,
    UpdateColorAdjustment,
    UpdateParam,
    apply_action,
)
from palette import generate_palette
from palette.catalog import builtin_catalog
from palette.color_types import ALL_KEYS, AccentSlot, validate_base24_colors
from palette.engine import normalize_hue
from palette.harmony import normalize_signed, rotate_adjustments_with_anchor
from palette.palette import ThemeParams

CATALOG = builtin_catalog()

angles = st.floats(-1e6, 1e6, allow_nan=False, allow_infinity=False)
percents = st.floats(0, 100, allow_nan=False)
offsets = st.floats(-180, 180, allow_nan=False)
slots = st.sampled_from(list(AccentSlot))


def _circular_diff(a: float, b: float) -> float:
    d = abs(a - b) % 360.0
    return min(d, 360.0 - d)


@given(h=angles)
def test_normalize_hue_range_and_congruence(h):
    n = normalize_hue(h)
    assert 0.0 <= n < 360.0
    assert _circular_diff(n, h) < 1e-6


@given(h=angles)
def test_normalize_signed_range(h):
    n = normalize_signed(h)
    assert -180.0 < n <= 180.0
    assert _circular_diff(n, h) < 1e-6


@given(
    old=offsets,
    new=offsets,
    adj=st.dictionaries(slots, offsets, max_size=8),
)
def test_rotation_preserves_absolute_hue_up_to_delta(old, new, adj):
    rotated = rotate_adjustments_with_anchor(old, new, adj)
    assert set(rotated) == set(adj)
    for slot, off in adj.items():
        before = normalize_hue(old + off)
        after = normalize_hue(new + rotated[slot])
        assert _circular_diff(after, normalize_hue(before + (new - old))) < 1e-6


@settings(max_examples=50, deadline=None)
@given(
    theme=st.sampled_from(CATALOG.theme_ids()),
    bg_hue=st.floats(0, 359.99, allow_nan=False),
    bg_sat=percents,
    bg_light=percents,
    accent_hue=offsets,
    accent_sat=percents,
    accent_light=percents,
    comment_light=percents,
    adj=st.dictionaries(slots, offsets, max_size=8),
)
def test_palette_totality_and_determinism(
    theme, bg_hue, bg_sat, bg_light, accent_hue, accent_sat, accent_light, comment_light, adj
):
    params = ThemeParams(
        bg_hue, bg_sat, bg_light, accent_hue, accent_sat, accent_light, comment_light, adj
    )
    pal = generate_palette(params, theme, CATALOG)
    assert list(pal) == list(ALL_KEYS)
    assert validate_base24_colors(pal.as_dict())
    assert generate_palette(params, theme, CATALOG) == pal


@settings(max_examples=50, deadline=None)
@given(
    bg=percents,
    accent=percents,
    slot=slots,
    off=offsets,
)
def test_resets_are_idempotent(bg, accent, slot, off):
    s = ParameterState.initial(CATALOG)
    s = apply_action(s, UpdateParam(ParamField.BG_LIGHT, bg), CATALOG)
    s = apply_action(s, UpdateParam(ParamField.ACCENT_LIGHT, accent), CATALOG)
    s = apply_action(s, UpdateColorAdjustment(slot, off), CATALOG)
    for action in (ResetFlavor(), ResetTheme()):
        once = apply_action(s, action, CATALOG)
        assert apply_action(once, action, CATALOG) == once
