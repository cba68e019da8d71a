"""
どこで: `common` パッケージ。
何を: objects/evaluators/skills で使う軽量ユーティリティ（設定・ロギング・BaseRegistry）。
なぜ: 計算本体から実行環境寄りの関心事を分離し、依存の向きを単純化するため。
"""

from .base_registry import BaseRegistry
from .logging import setup_default_logging

__all__ = [
    "BaseRegistry",
    "setup_default_logging",
]
