"""
どこで: `evaluators.reading`（ReadingEvaluator）
何を: 1 オブジェクトの「読み」難易度を、入力だけから決まる純関数として計算する。
なぜ: 状態を持つ集計器（`skills.reading.Reading`）から計算を切り離し、単体テストと並列評価を可能にするため。

評価の構成:
- 密度: 現在のオブジェクトが出現してから判定されるまでに画面上に見えている直前オブジェクトの数（重み付き）。
- Hidden: フェードアウトにより見えない時間の長さ。
- 等角度ナーフ: 直近の移動方向が一定（予測しやすい）なら難易度を下げる。

前提:
- `sequence[0..current.index)` の各オブジェクトは前処理済み（評価はシーケンスを書き換えない）。
- `current.index >= 1` のとき `strain_time > 0`。
- `start_time` は 0 以下でもよい。clock 推定値での除算は IEEE 754 に従う（0 除算は inf）。
"""

from __future__ import annotations

import math
from typing import Sequence

from common.param_utils import clamp
from objects.difficulty_object import OsuDifficultyObject, previous

from .kernels import (
    READING_WINDOW_SIZE,
    angle_nerf_from_count,
    ieee_div,
    logistic,
    time_nerf_factor,
)

FADE_OUT_DURATION_MULTIPLIER: float = 0.3

# 等角度ナーフの走査範囲 [ms]
ANGLE_TIME_LIMIT: float = 2000.0
ANGLE_TIME_LIMIT_LOW: float = 200.0


def evaluate_diff_of(
    current: OsuDifficultyObject,
    sequence: Sequence[OsuDifficultyObject],
    hidden: bool,
    time_preempt: float,
    time_fade_in: float,
    *,
    clock_rate: float | None = None,
) -> float:
    """`current` の読譜難易度（倍率適用前）を返す。

    引数:
        current: 評価対象。
        sequence: 全オブジェクト列（後方参照用、読み取りのみ）。
        hidden: Hidden modifier が有効か。
        time_preempt: 不透明度カーブに使う preempt。
        time_fade_in: 不透明度カーブに使う fade-in。
        clock_rate: 再生速度倍率。None のときは `start_time / strain_time` による推定値を使う。

    返り値:
        難易度（スピナーと先頭オブジェクトは常に 0）。
    """
    if current.is_spinner or current.index == 0:
        return 0.0

    velocity = current.lazy_jump_dist / current.strain_time

    if clock_rate is None:
        # 実際の再生速度が分かるまでの近似（式をそのまま保つ）
        clock_rate = current.start_time / current.strain_time

    past_object_difficulty_influence = 1.0

    for i in range(current.index - 1, -1, -1):
        past = sequence[i]

        if (
            current.start_time - past.start_time > READING_WINDOW_SIZE
            or past.start_time < current.start_time - current.preempt
        ):
            break

        loop_difficulty = current.opacity_at(past.start_time, False, time_preempt, time_fade_in)

        # 短い距離は流し取りできるので、配置の紛らわしさは効かない
        loop_difficulty *= logistic((past.min_jump_dist - 80.0) / 15.0)

        # start_time == 0 なら clock 推定は 0、経過時間は inf になり減衰係数は 0
        time_between = ieee_div(current.start_time - past.start_time, clock_rate)
        loop_difficulty *= time_nerf_factor(time_between)

        past_object_difficulty_influence += loop_difficulty

    note_density_difficulty = (
        3.0 * math.log(max(past_object_difficulty_influence - 1.0, 1.0))
    ) ** 2.3

    hidden_difficulty = 0.0
    if hidden:
        time_spent_invisible = ieee_div(duration_spent_invisible(current), clock_rate)
        time_difficulty_factor = 800.0 / past_object_difficulty_influence

        hidden_difficulty += (7.0 * time_spent_invisible / time_difficulty_factor) ** 1 + 2.0 * velocity

    difficulty = hidden_difficulty + note_density_difficulty
    difficulty *= constant_angle_nerf_factor(current, sequence)

    return difficulty


def constant_angle_nerf_factor(
    current: OsuDifficultyObject, sequence: Sequence[OsuDifficultyObject]
) -> float:
    """直近 2 秒の移動角が現在の角度に揃っているほど小さくなる係数（0, 1]。

    角度情報が 1 件も無ければカウントは 0 のままで、結果は 1.0（ナーフ無し）。
    """
    constant_angle_count = 0.0
    backwards = 0
    current_time_gap = 0.0

    while current_time_gap < ANGLE_TIME_LIMIT:
        past = previous(sequence, current.index, backwards)
        if past is None:
            break

        long_interval_factor = clamp(
            1.0
            - (past.strain_time - ANGLE_TIME_LIMIT_LOW) / (ANGLE_TIME_LIMIT - ANGLE_TIME_LIMIT_LOW),
            0.0,
            1.1,
        )

        if past.angle is not None and current.angle is not None:
            angle_difference = abs(past.angle - current.angle)
            constant_angle_count += (
                math.cos(4.0 * min(math.pi / 8.0, angle_difference)) * long_interval_factor
            )

        current_time_gap = current.start_time - past.start_time
        backwards += 1

    return angle_nerf_from_count(constant_angle_count)


def duration_spent_invisible(current: OsuDifficultyObject) -> float:
    """出現開始からフェードアウト完了までの、完全には見えていない時間 [ms]。

    オブジェクト自身の `preempt`/`fade_in` を使う。
    例: preempt=600, fade_in=400, start_time=1000 → (800 + 180) - 400 = 580。
    """
    fade_out_start_time = current.start_time - current.preempt + current.fade_in
    fade_out_duration = current.preempt * FADE_OUT_DURATION_MULTIPLIER

    return (fade_out_start_time + fade_out_duration) - (current.start_time - current.preempt)


__all__ = [
    "READING_WINDOW_SIZE",
    "FADE_OUT_DURATION_MULTIPLIER",
    "ANGLE_TIME_LIMIT",
    "ANGLE_TIME_LIMIT_LOW",
    "evaluate_diff_of",
    "constant_angle_nerf_factor",
    "duration_spent_invisible",
    "logistic",
    "time_nerf_factor",
]
