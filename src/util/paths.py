"""
どこで: `util.paths`。
何を: セッション保存先ディレクトリの解決と生成ユーティリティを提供する。
なぜ: 永続化層が保存先の優先順位（環境変数 > 設定 > 既定）を意識せずに済むようにするため。
"""

from __future__ import annotations

from pathlib import Path

from common.settings import get as _get_settings

from .utils import _find_project_root, config_section

DEFAULT_SESSION_FILE = "lumina.json"


def resolve_session_dir() -> Path:
    """セッション保存ディレクトリを返す（作成はしない）。

    優先順:
    1) 環境変数 `LUMINA_STATE_DIR`
    2) 設定 `palette_session.state_dir`
    3) プロジェクトルート直下の `data/session/`
    """
    env_dir = _get_settings().STATE_DIR
    if env_dir:
        return Path(env_dir)
    state_dir = config_section("palette_session").get("state_dir")
    if isinstance(state_dir, str) and state_dir.strip():
        return Path(state_dir)
    return _find_project_root(Path(__file__).parent) / "data" / "session"


def resolve_session_file() -> Path:
    """セッション JSON のパスを返す（ファイル名は `palette_session.file_name` で上書き可）。"""
    name = config_section("palette_session").get("file_name")
    if not isinstance(name, str) or not name.strip():
        name = DEFAULT_SESSION_FILE
    return resolve_session_dir() / name


def ensure_parent_dir(path: Path) -> Path:
    """`path` の親ディレクトリを作成して `path` を返す。

    - 既存の場合もそのまま返す（`exist_ok=True`）。
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


__all__ = [
    "DEFAULT_SESSION_FILE",
    "resolve_session_dir",
    "resolve_session_file",
    "ensure_parent_dir",
]
