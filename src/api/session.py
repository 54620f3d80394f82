"""
どこで: `api.session`（高レベル入口）。
何を: カタログ・保存済みセッション・永続化フックを組み合わせて ParameterStore を生成する。
なぜ: 利用者（CLI/GUI）が起動時の復元と変更時の保存を意識せずに済むようにするため。
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path

from common.settings import get as _get_settings
from engine.params.persistence import load_session, save_session
from engine.params.state import ParameterState
from engine.params.store import ParameterStore
from palette.catalog import ThemeCatalog, builtin_catalog
from util.paths import resolve_session_file
from util.utils import config_section

logger = logging.getLogger(__name__)


def default_catalog() -> ThemeCatalog:
    """組み込みカタログ（既定 theme/flavor は設定 `palette_session` で上書き可）。"""
    cfg = config_section("palette_session")
    kwargs: dict[str, str] = {}
    for key in ("default_theme", "default_flavor"):
        value = cfg.get(key)
        if isinstance(value, str) and value.strip():
            kwargs[key] = value.strip()
    try:
        return builtin_catalog(**kwargs)
    except KeyError as e:
        logger.warning("invalid palette_session defaults (%s); using built-in defaults", e)
        return builtin_catalog()


def open_session(
    catalog: ThemeCatalog | None = None,
    *,
    path: Path | str | None = None,
    persist: bool | None = None,
) -> ParameterStore:
    """保存済みセッションを復元した ParameterStore を返す。

    引数:
        catalog: テーマカタログ。None なら `default_catalog()`。
        path: セッション JSON。None なら設定/環境変数から解決。
        persist: 変更ごとに保存するか。None なら `LUMINA_PERSIST`（既定 True）。
    """
    if catalog is None:
        catalog = default_catalog()
    target = Path(path) if path is not None else resolve_session_file()
    if persist is None:
        persist = _get_settings().PERSIST

    state = load_session(catalog, target)
    if state is None:
        state = ParameterState.initial(catalog)
    else:
        logger.debug("restored session from %s", target)

    hook = functools.partial(save_session, path=target) if persist else None
    return ParameterStore(catalog, state, persist=hook)


__all__ = ["default_catalog", "open_session"]
