"""
どこで: `common` パッケージ。
何を: 環境変数設定とロギング初期化の軽量ユーティリティ。
なぜ: palette/engine/api のどの層からも使える共通基盤を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging
from .settings import get as get_settings

__all__ = [
    "get_settings",
    "setup_default_logging",
]
