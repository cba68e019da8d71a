"""
どこで: `skills.reading`
何を: 読譜（reading）スキルの集計器。設定（Hidden/preempt/fade-in）と難易度履歴を保持し、
      各オブジェクトの計算は `evaluators.reading.evaluate_diff_of` に委譲する。
なぜ: 状態（履歴）と計算（純関数）を分け、評価器を単体でテスト・並列実行できるようにするため。

ライフサイクル:
1. レーティング計算ごとに 1 度だけ生成（設定は固定）。
2. 全オブジェクトについて index 順に `process`（または `process_all` でまとめて）。
3. 最後に `difficulty_value()` を 1 度だけ呼び、集約値を得て破棄する。
"""

from __future__ import annotations

import logging
from typing import Sequence, overload

from evaluators.reading import evaluate_diff_of
from objects.difficulty_object import OsuDifficultyObject
from objects.mods import Mods, has_hidden

from .aggregation import AggregationFn, resolve_aggregation
from .batch import evaluate_all

logger = logging.getLogger(__name__)

SKILL_MULTIPLIER: float = 2.4


class DifficultyView(Sequence[float]):
    """難易度履歴の読み取り専用ビュー（コピーせず元のリストを参照する）。

    タプル等の他のシーケンスとは要素列で比較する。
    """

    __slots__ = ("_values",)

    def __init__(self, values: list[float]) -> None:
        self._values = values

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[float, ...]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._values[index])
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DifficultyView):
            return self._values == other._values
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return len(self._values) == len(other) and all(
                a == b for a, b in zip(self._values, other)
            )
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DifficultyView({self._values!r})"


class Reading:
    """オブジェクトごとの読譜難易度を追記していくスキル。

    `difficulties[i]` は i 番目に処理したオブジェクトの値（倍率適用済み）。追記のみで並べ替えない。
    """

    def __init__(
        self,
        mods: int | Mods,
        preempt: float,
        fade_in: float,
        *,
        clock_rate: float | None = None,
        aggregation: str | AggregationFn | None = None,
    ) -> None:
        self.hidden = has_hidden(mods)
        self.preempt = float(preempt)
        self.fade_in = float(fade_in)
        self.clock_rate = clock_rate
        self._aggregate = resolve_aggregation(aggregation)
        self._difficulties: list[float] = []
        self._finalized = False
        self._view = DifficultyView(self._difficulties)

    @property
    def difficulties(self) -> DifficultyView:
        return self._view

    def __len__(self) -> int:
        return len(self._difficulties)

    def _ensure_open(self) -> None:
        if self._finalized:
            raise RuntimeError("Reading has already been finalized")

    def process(
        self, current: OsuDifficultyObject, sequence: Sequence[OsuDifficultyObject]
    ) -> None:
        """`current` を評価し、倍率を掛けて履歴へ追記する。

        `current.index` は既処理数と一致している必要がある（後方走査が index 順を前提とするため）。
        """
        self._ensure_open()
        expected = len(self._difficulties)
        if current.index != expected:
            raise ValueError(
                f"objects must be processed in index order: expected {expected}, got {current.index}"
            )

        value = evaluate_diff_of(
            current,
            sequence,
            self.hidden,
            self.preempt,
            self.fade_in,
            clock_rate=self.clock_rate,
        )
        self._difficulties.append(value * SKILL_MULTIPLIER)

    def process_all(
        self, sequence: Sequence[OsuDifficultyObject], *, max_workers: int | None = None
    ) -> None:
        """未処理の残り `sequence[len(self):]` をまとめて処理する（結果は index 順に追記）。"""
        self._ensure_open()
        values = evaluate_all(
            sequence,
            hidden=self.hidden,
            preempt=self.preempt,
            fade_in=self.fade_in,
            clock_rate=self.clock_rate,
            max_workers=max_workers,
            start=len(self._difficulties),
        )
        self._difficulties.extend(float(v) * SKILL_MULTIPLIER for v in values)

    def difficulty_value(self) -> float:
        """履歴を集約して単一の難易度値を返す（1 度だけ呼ぶ）。"""
        self._ensure_open()
        self._finalized = True
        value = float(self._aggregate(self._difficulties))
        logger.debug(
            "reading: aggregated %d difficulties (hidden=%s) -> %.6f",
            len(self._difficulties),
            self.hidden,
            value,
        )
        return value


__all__ = ["Reading", "DifficultyView", "SKILL_MULTIPLIER"]
