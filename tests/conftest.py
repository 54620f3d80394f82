"""共通フィクスチャ。

- 環境変数/セッション保存先をテストごとに隔離
- 組み込みカタログと永続化なしの ParameterStore
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from common import settings
from engine.params.store import ParameterStore
from palette.catalog import StaticThemeCatalog, builtin_catalog


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    """保存先を tmp_path に向け、補正などの設定を既定に戻す。"""
    state_dir = tmp_path / "session"
    for name in ("LUMINA_PERCEPTUAL_CORRECTION", "LUMINA_PERSIST", "LUMINA_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LUMINA_STATE_DIR", str(state_dir))
    settings.reload_from_env()
    yield state_dir
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture()
def catalog() -> StaticThemeCatalog:
    return builtin_catalog()


@pytest.fixture()
def store(catalog: StaticThemeCatalog) -> ParameterStore:
    return ParameterStore(catalog)
