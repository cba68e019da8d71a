"""
どこで: `skills.aggregation`
何を: オブジェクトごとの難易度列を 1 つのスカラーへ畳み込む集約方式のレジストリ。
なぜ: 最終集約のアルゴリズムは兄弟スキルの慣例に合わせて差し替えられる必要があるため、
      `Reading` から切り離して名前で選べるようにする。

登録済み:
- `weighted_sum`: 降順ソートし、順位 i に `decay ** i` を掛けて合計する（既定）。
  `decay` は `RDG_DECAY_WEIGHT`（既定 0.9 は兄弟スキルの慣例に合わせた仮定値）。

使い方:
    @aggregation("peak")
    def peak(values):
        return max(values, default=0.0)
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

import numpy as np

from common import settings
from common.base_registry import BaseRegistry

AggregationFn = Callable[[Sequence[float]], float]


class AggregationRegistry(BaseRegistry):
    """集約関数用レジストリ（`BaseRegistry` の名前正規化をそのまま使う）。"""


_REGISTRY = AggregationRegistry()


def aggregation(arg: Any | None = None, /, name: str | None = None):
    """集約関数を登録するデコレータ。

    - `@aggregation`           -> obj.__name__ で登録
    - `@aggregation()`         -> obj.__name__ で登録
    - `@aggregation("custom")` -> "custom" 名で登録
    """
    # 直付け (@aggregation) の場合
    if callable(arg) and name is None:
        return _REGISTRY.register(None)(arg)

    # 引数付き (@aggregation() / @aggregation("name")) の場合
    return _REGISTRY.register(name if name is not None else arg)


def get_aggregation(name: str) -> AggregationFn:
    return _REGISTRY.get(name)


def list_aggregations() -> list[str]:
    return sorted(_REGISTRY.list_all())


def resolve_aggregation(strategy: str | AggregationFn | None) -> AggregationFn:
    """名前/関数/None から集約関数を得る。None は設定 `RDG_AGGREGATION` に従う。"""
    if strategy is None:
        return get_aggregation(settings.get().AGGREGATION)
    if isinstance(strategy, str):
        return get_aggregation(strategy)
    if callable(strategy):
        return strategy
    raise TypeError(f"aggregation must be a name or a callable, got {type(strategy).__name__}")


def weighted_sum_with_decay(values: Sequence[float], decay_weight: float) -> float:
    """降順に並べ、順位ごとに `decay_weight` 倍ずつ減衰させた重み付き和。"""
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        return 0.0
    ordered = np.sort(arr)[::-1]
    weights = np.power(decay_weight, np.arange(ordered.size, dtype=np.float64))
    return float(np.dot(ordered, weights))


@aggregation("weighted_sum")
def weighted_sum(values: Sequence[float]) -> float:
    return weighted_sum_with_decay(values, settings.get().DECAY_WEIGHT)


__all__ = [
    "AggregationFn",
    "AggregationRegistry",
    "aggregation",
    "get_aggregation",
    "list_aggregations",
    "resolve_aggregation",
    "weighted_sum",
    "weighted_sum_with_decay",
]
