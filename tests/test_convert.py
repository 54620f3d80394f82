from __future__ import annotations

import pytest

from common import settings
from palette.convert import CORRECTION_BANDS, correction_band, perceptually_correct, to_rgb_hex
from palette.engine import DefaultColorEngine, lab_to_lch
from util.color import hex_to_rgb01


def _lab_l(hex_: str) -> float:
    return DefaultColorEngine().srgb_to_lab(*hex_to_rgb01(hex_))[0]


def test_to_rgb_hex_is_lowercase_and_total() -> None:
    assert to_rgb_hex(0, 100, 50) == "#ff0000"
    assert to_rgb_hex(-360, 100, 50) == "#ff0000"
    got = to_rgb_hex(200, 250, -3)
    assert got == "#000000"
    assert to_rgb_hex(210, 50, 60) == to_rgb_hex(210, 50, 60).lower()


@pytest.mark.parametrize(
    "hue,name",
    [(69.9, None), (70.0, "yellow-green"), (129.9, "yellow-green"), (130.0, "green"), (180.0, "cyan"), (220.0, None)],
)
def test_correction_band_edges(hue: float, name: str | None) -> None:
    band = correction_band(hue)
    assert (band.name if band else None) == name


def test_band_factors() -> None:
    assert [b.factor for b in CORRECTION_BANDS] == [0.88, 0.92, 0.96]


@pytest.mark.parametrize("hue", [60, 120, 180])
def test_bright_hues_are_darkened(hue: float) -> None:
    naive = to_rgb_hex(hue, 100, 50)
    corrected = perceptually_correct(hue, 100, 50)
    assert corrected != naive
    assert _lab_l(corrected) < _lab_l(naive)


@pytest.mark.parametrize("hue", [0, 240, 300])
def test_hues_outside_bands_are_unchanged(hue: float) -> None:
    assert perceptually_correct(hue, 100, 50) == to_rgb_hex(hue, 100, 50)


def test_low_chroma_is_unchanged() -> None:
    eng = DefaultColorEngine()
    _, C, _ = lab_to_lch(*eng.srgb_to_lab(*eng.hsl_to_srgb(120, 10, 50)))
    assert C <= 35
    assert perceptually_correct(120, 10, 50) == to_rgb_hex(120, 10, 50)


def test_correction_can_be_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LUMINA_PERCEPTUAL_CORRECTION", "0")
    settings.reload_from_env()
    assert perceptually_correct(120, 100, 50) == "#00ff00"


class _FailingEngine(DefaultColorEngine):
    def srgb_to_lab(self, r: float, g: float, b: float):  # type: ignore[override]
        raise RuntimeError("boom")


class _BlackEngine(DefaultColorEngine):
    def lab_to_srgb(self, L: float, a: float, b: float):  # type: ignore[override]
        return (0.0, 0.0, 0.0)


def test_exception_falls_back_to_naive() -> None:
    assert perceptually_correct(120, 100, 50, engine=_FailingEngine()) == "#00ff00"


def test_degenerate_black_falls_back_to_naive() -> None:
    assert perceptually_correct(120, 100, 50, engine=_BlackEngine()) == "#00ff00"


def test_pure_black_input_is_kept() -> None:
    assert perceptually_correct(120, 100, 0) == "#000000"
