from __future__ import annotations

"""api.cli のエンドツーエンドテスト（tmp_path 上のセッションファイルを使用）。"""

import json
from pathlib import Path

import pytest

from api.cli import EXIT_ERROR, main


def _run(capsys: pytest.CaptureFixture[str], state: Path, *args: str) -> tuple[int, str, str]:
    code = main(["--state-file", str(state), *args])
    out, err = capsys.readouterr()
    return code, out, err


def test_show_json_defaults(capsys, tmp_path: Path) -> None:
    code, out, _ = _run(capsys, tmp_path / "s.json", "show", "--json")
    assert code == 0
    data = json.loads(out)
    assert data["theme"] == "midnight"
    assert data["flavor"] == "balanced"
    assert data["customized"] is False
    assert data["colors"]["base00"] == "#0f0b13"
    assert len(data["colors"]) == 24


def test_changes_are_persisted_between_runs(capsys, tmp_path: Path) -> None:
    state = tmp_path / "s.json"
    assert _run(capsys, state, "theme", "dawn")[0] == 0
    assert _run(capsys, state, "set", "accentHue", "90")[0] == 0
    assert _run(capsys, state, "adjust", "yellow", "40")[0] == 0
    _, out, _ = _run(capsys, state, "export", "params")
    params = json.loads(out)
    assert params["theme"] == "dawn"
    assert params["accentHue"] == 90
    assert params["colorAdjustments"] == {"yellow": {"hueOffset": 40.0}}

    assert _run(capsys, state, "clear-adjust", "yellow")[0] == 0
    assert _run(capsys, state, "reset-theme")[0] == 0
    _, out, _ = _run(capsys, state, "show", "--json")
    assert json.loads(out)["customized"] is False


def test_no_persist_leaves_file_untouched(capsys, tmp_path: Path) -> None:
    state = tmp_path / "s.json"
    assert _run(capsys, state, "--no-persist", "theme", "noon")[0] == 0
    assert not state.exists()


def test_export_scheme(capsys, tmp_path: Path) -> None:
    code, out, _ = _run(capsys, tmp_path / "s.json", "export", "scheme", "--author", "tester")
    assert code == 0
    doc = json.loads(out)
    assert doc["scheme"] == "base24"
    assert doc["name"] == "Lumina Midnight Balanced"
    assert doc["author"] == "tester"


def test_themes_lists_catalog(capsys, tmp_path: Path) -> None:
    code, out, _ = _run(capsys, tmp_path / "s.json", "themes")
    assert code == 0
    assert "* midnight" in out
    assert "noon" in out


def test_human_show(capsys, tmp_path: Path) -> None:
    code, out, _ = _run(capsys, tmp_path / "s.json", "show")
    assert code == 0
    assert "Lumina Midnight (midnight/balanced, default)" in out
    assert "base0F" in out


@pytest.mark.parametrize(
    "args,needle",
    [
        (("theme", "nope"), "theme not found"),
        (("flavor", "spicy"), "flavor not found"),
        (("adjust", "magenta", "10"), "unknown accent slot"),
        (("set", "hue", "10"), "unknown parameter"),
        (("set", "bgSat", "nan"), "must be finite"),
    ],
)
def test_errors_exit_with_code_2(capsys, tmp_path: Path, args, needle) -> None:
    code, _, err = _run(capsys, tmp_path / "s.json", *args)
    assert code == EXIT_ERROR
    assert needle in err
