"""
どこで: `api` 入口（高レベル公開 API）。
何を: セッションを開いて ParameterStore を得る `open_session` と、パレット生成の主要型を再輸出。
なぜ: 利用者が単一名前空間からテーマ選択→調整→エクスポートまで完結できるようにするため。

Usage:
    from api import open_session

    store = open_session()
    store.switch_theme("dawn")
    store.update_param("accentHue", 90)
    colors = store.current_colors()
"""

from engine.params import ParameterStore, ParamField
from palette import AccentSlot, Base24Palette, ThemeParams, builtin_catalog

from .session import default_catalog, open_session

__all__ = [
    "open_session",
    "default_catalog",
    "builtin_catalog",
    "ParameterStore",
    "ParamField",
    "AccentSlot",
    "ThemeParams",
    "Base24Palette",
]
