"""
どこで: `objects.difficulty_object`
何を: 難易度評価の入力となる 1 ヒットオブジェクト分の読み取り専用レコードと、
      シーケンスを後方へ辿る境界安全なアクセサ `previous()`。
なぜ: 前処理（位置/タイミング計算）と評価ロジックの境界を型で固定し、
      評価側が「過去オブジェクトのフィールドは確定済み」と仮定できるようにするため。

注意:
- `angle` は前方に 2 個以上のオブジェクトがある場合のみ値を持つ。無い場合は 0 ではなく `None`。
  利用側は必ず存在確認してから使うこと。
- 単位は時間が ms、距離が osu! ピクセル（正規化半径基準）。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from common.param_utils import clamp01

# Hidden 時のフェードアウト長（preempt に対する比率）
HIDDEN_FADE_OUT_DURATION_MULTIPLIER: float = 0.3


@dataclass(slots=True, frozen=True)
class OsuDifficultyObject:
    """前処理済みの難易度オブジェクト（評価中は不変）。"""

    index: int
    start_time: float
    preempt: float
    fade_in: float
    strain_time: float
    lazy_jump_dist: float = 0.0
    min_jump_dist: float = 0.0
    angle: float | None = None
    is_spinner: bool = False

    def opacity_at(
        self, time: float, hidden: bool, time_preempt: float, time_fade_in: float
    ) -> float:
        """時刻 `time` における本オブジェクトの不透明度 [0, 1] を返す。

        - `time` が開始時刻を過ぎていれば 0（判定済みのオブジェクトは見えないとみなす）。
        - フェードイン: `start_time - time_preempt` から `time_fade_in` かけて 0→1。
        - `hidden=True` のときはフェードイン完了直後から `time_preempt * 0.3` かけて 1→0。

        引数の `time_preempt`/`time_fade_in` はスキル側の設定値で、オブジェクト自身の
        `preempt`/`fade_in` とは独立に与える。
        """
        if time > self.start_time:
            return 0.0

        fade_in_start_time = self.start_time - time_preempt
        fade_in = clamp01((time - fade_in_start_time) / time_fade_in)

        if hidden:
            fade_out_start_time = self.start_time - time_preempt + time_fade_in
            fade_out_duration = time_preempt * HIDDEN_FADE_OUT_DURATION_MULTIPLIER
            return min(fade_in, 1.0 - clamp01((time - fade_out_start_time) / fade_out_duration))

        return fade_in


def previous(
    sequence: Sequence[OsuDifficultyObject], index: int, backwards: int
) -> OsuDifficultyObject | None:
    """`index` から数えて `backwards + 1` 個前のオブジェクトを返す。

    `backwards=0` が直前のオブジェクト。シーケンス先頭より前（または末尾より後）を
    指す場合は例外にせず `None` を返すため、後方走査の自然な終端として扱える。
    """
    pos = index - (backwards + 1)
    if pos < 0 or pos >= len(sequence):
        return None
    return sequence[pos]


__all__ = ["OsuDifficultyObject", "previous", "HIDDEN_FADE_OUT_DURATION_MULTIPLIER"]
