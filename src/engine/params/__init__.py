"""
どこで: `engine.params` パッケージの公開入口。
何を: ParameterState/ParameterStore/ParamField と永続化関数を再輸出。
なぜ: 外部から薄いファサードを提供し、内部実装の入れ替えと依存分離を容易にするため。
"""

from .persistence import (
    SNAPSHOT_VERSION,
    load_session,
    restore_state,
    save_session,
    serialize_state,
)
from .state import (
    FlavorOverrides,
    ParameterState,
    ParamField,
    ThemeOverrides,
    apply_action,
    resolve_params,
)
from .store import ParameterStore

__all__ = [
    "ParamField",
    "FlavorOverrides",
    "ThemeOverrides",
    "ParameterState",
    "ParameterStore",
    "apply_action",
    "resolve_params",
    "SNAPSHOT_VERSION",
    "serialize_state",
    "restore_state",
    "save_session",
    "load_session",
]
