"""
どこで: `evaluators.kernels`
何を: 読譜難易度で使うスカラーカーネル（ロジスティック関数・時間減衰・角度ナーフの最終段）。
なぜ: 各オブジェクトの後方走査で繰り返し呼ばれるため、Numba で JIT 化して Python 側のオーバーヘッドを抑える。

実装メモ:
- `fastmath` は使わない。`2 / 0 = inf` を含む IEEE 754 の意味論をそのまま保つ必要がある。
- `error_model="numpy"` により、ゼロ除算は例外ではなく inf を返す。
- いずれも Python から直接呼び出し可能（テストはそのまま呼ぶ）。
"""

from __future__ import annotations

import math

from numba import njit  # type: ignore[attr-defined]

READING_WINDOW_SIZE: float = 3000.0


@njit(cache=True)
def logistic(x: float) -> float:
    """標準シグモイド `1 / (1 + e^-x)`。値域 (0, 1)、`logistic(0) == 0.5`。"""
    return 1.0 / (1.0 + math.exp(-x))


@njit(cache=True)
def time_nerf_factor(delta_time: float) -> float:
    """経過時間に対する重み。

    窓幅の半分（1500）までは 1、そこから窓幅（3000）で 0 まで線形に減衰し、以降は 0。
    """
    x = 2.0 - delta_time / (READING_WINDOW_SIZE / 2.0)
    if x < 0.0:
        return 0.0
    if x > 1.0:
        return 1.0
    return x


@njit(cache=True, error_model="numpy")
def angle_nerf_from_count(constant_angle_count: float) -> float:
    """等角度カウントからナーフ係数 `min(2 / count, 1) ** 2` を求める。

    count == 0 は 2 / 0 = inf → min(inf, 1) = 1 となり、ナーフ無し（1.0）になる。
    """
    ratio = 2.0 / constant_angle_count
    return min(ratio, 1.0) ** 2


@njit(cache=True, error_model="numpy")
def ieee_div(a: float, b: float) -> float:
    """IEEE 754 の除算。`x / 0` は例外にせず ±inf（`0 / 0` は nan）を返す。"""
    return a / b


__all__ = ["READING_WINDOW_SIZE", "logistic", "time_nerf_factor", "angle_nerf_from_count", "ieee_div"]
