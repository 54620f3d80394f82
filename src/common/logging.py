"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する。
- CLI などの入口からは `setup_default_logging()` を 1 度だけ呼ぶ。
- レベルの優先順: 引数 > `LUMINA_LOG_LEVEL` > config の `logging.level` > INFO。
"""

from __future__ import annotations

import logging

from .settings import get as _get_settings

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str | None = None, *, config_level: str | None = None) -> int:
    """指定値/環境変数/設定ファイルからログレベルを決める。"""
    if isinstance(level, int):
        return level
    candidates = (level, _get_settings().LOG_LEVEL, config_level)
    for cand in candidates:
        if isinstance(cand, str) and cand.strip():
            lvl = getattr(logging, cand.strip().upper(), None)
            if isinstance(lvl, int):
                return lvl
    return logging.INFO


def setup_default_logging(
    level: int | str | None = None, *, config_level: str | None = None
) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば、レベルだけ合わせて終了する。
    """
    lvl = resolve_level(level, config_level=config_level)
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(lvl)
        return
    logging.basicConfig(level=lvl, format=_FORMAT)


__all__ = ["resolve_level", "setup_default_logging"]
