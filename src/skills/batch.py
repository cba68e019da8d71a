"""
どこで: `skills.batch` のバッチ評価層。
何を: オブジェクト列全体に `evaluate_diff_of` を適用し、結果を `index` 位置へ書き込んだ配列を返す。
      ワーカ数が 2 以上ならスレッドプールで並列評価し、例外は `BatchEvaluationError` で文脈付きに伝搬。
なぜ: 評価は入力のみで決まる純関数なので、完了順に依存しない形で書き戻せば並列化しても
      逐次処理と同じ並び（index 順）の難易度列が得られるため。

注意:
- 戻り値の i 番目は `sequence[i]`（`index == i`）の評価値。倍率（SKILL_MULTIPLIER）は掛けない。
- `sequence` は評価中に変更しないこと（読み取りのみで共有する）。
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

import numpy as np

from common import settings
from evaluators.reading import evaluate_diff_of
from objects.difficulty_object import OsuDifficultyObject

logger = logging.getLogger(__name__)


class BatchEvaluationError(Exception):
    """評価中の例外をラップして対象オブジェクトの index を付与。"""

    def __init__(self, index: int, original: BaseException) -> None:
        super().__init__(f"BatchEvaluationError(index={index}): {original!r}")
        self.index = index
        self.original = original


def evaluate_all(
    sequence: Sequence[OsuDifficultyObject],
    *,
    hidden: bool,
    preempt: float,
    fade_in: float,
    clock_rate: float | None = None,
    max_workers: int | None = None,
    start: int = 0,
) -> np.ndarray:
    """`sequence[start:]` の各オブジェクトを評価し、float64 配列で返す。

    引数:
        sequence: 全オブジェクト列（`sequence[i].index == i` を前提）。
        hidden, preempt, fade_in, clock_rate: `evaluate_diff_of` へそのまま渡す。
        max_workers: None なら設定 `RDG_MAX_WORKERS`。0/1 はインライン実行。
        start: 評価を始める位置（それより前は既に処理済みとみなす）。

    返り値:
        長さ `len(sequence) - start` の配列。要素 k は `sequence[start + k]` の評価値。
    """
    targets = sequence[start:]
    out = np.zeros(len(targets), dtype=np.float64)
    if len(targets) == 0:
        return out

    for k, obj in enumerate(targets):
        if obj.index != start + k:
            raise ValueError(
                f"sequence is not index-ordered: position {start + k} holds index {obj.index}"
            )

    workers = settings.get().MAX_WORKERS if max_workers is None else int(max_workers)

    def _evaluate(obj: OsuDifficultyObject) -> float:
        try:
            return evaluate_diff_of(
                obj, sequence, hidden, preempt, fade_in, clock_rate=clock_rate
            )
        except Exception as e:  # noqa: BLE001 - index 文脈付きで再送出
            raise BatchEvaluationError(obj.index, e) from e

    if workers <= 1:
        for obj in targets:
            out[obj.index - start] = _evaluate(obj)
        logger.debug("evaluate_all: %d objects evaluated inline", len(targets))
        return out

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {pool.submit(_evaluate, obj): obj.index for obj in targets}
        for fut, idx in futures.items():
            # 完了順ではなく index 位置へ書き戻す
            out[idx - start] = fut.result()

    logger.debug("evaluate_all: %d objects evaluated on %d workers", len(targets), workers)
    return out


__all__ = ["BatchEvaluationError", "evaluate_all"]
