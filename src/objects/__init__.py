"""
どこで: `objects` パッケージ。
何を: 難易度オブジェクトのデータモデルと modifier フラグ。
なぜ: 前処理側が生成し評価側が読むだけの型を、計算ロジックから切り離して置くため。
"""

from .difficulty_object import OsuDifficultyObject, previous
from .mods import Mods, has_hidden

__all__ = [
    "OsuDifficultyObject",
    "previous",
    "Mods",
    "has_hidden",
]
