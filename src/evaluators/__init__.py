"""
どこで: `evaluators` パッケージ。
何を: スキルから呼ばれる純関数の評価器（現状は読譜のみ）。
なぜ: 状態を持つ集計（skills）と、入力だけで決まる計算（evaluators）の責務を分けるため。
"""

from .reading import (
    constant_angle_nerf_factor,
    duration_spent_invisible,
    evaluate_diff_of,
    logistic,
    time_nerf_factor,
)

__all__ = [
    "evaluate_diff_of",
    "constant_angle_nerf_factor",
    "duration_spent_invisible",
    "logistic",
    "time_nerf_factor",
]
