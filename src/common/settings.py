"""
どこで: `common.settings`
何を: `LUMINA_*` 環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_str


@dataclass
class _Settings:
    # セッション保存先（未指定なら config / 既定パスに委ねる）
    STATE_DIR: str | None = None
    # 保存を行うか（CLI の --no-persist と同等）
    PERSIST: bool = True

    # 色変換
    PERCEPTUAL_CORRECTION: bool = True

    # Logging
    LOG_LEVEL: str | None = None


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。"""
    _settings.STATE_DIR = env_str("LUMINA_STATE_DIR")
    _settings.PERSIST = env_bool("LUMINA_PERSIST", True)
    _settings.PERCEPTUAL_CORRECTION = env_bool("LUMINA_PERCEPTUAL_CORRECTION", True)
    level = env_str("LUMINA_LOG_LEVEL")
    _settings.LOG_LEVEL = level.upper() if level else None


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
