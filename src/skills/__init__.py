"""
どこで: `skills` パッケージ。
何を: スキル（難易度列の集計器）と、その集約方式・バッチ評価。
なぜ: ホストの評価パイプラインが `process` → `difficulty_value` の共通手順で各スキルを駆動できるようにするため。
"""

from .aggregation import aggregation, get_aggregation, list_aggregations
from .base import Skill
from .batch import BatchEvaluationError, evaluate_all
from .reading import SKILL_MULTIPLIER, DifficultyView, Reading

__all__ = [
    "Skill",
    "Reading",
    "DifficultyView",
    "SKILL_MULTIPLIER",
    "aggregation",
    "get_aggregation",
    "list_aggregations",
    "evaluate_all",
    "BatchEvaluationError",
]
