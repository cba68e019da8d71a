"""
どこで: `skills.base`
何を: スキル（オブジェクト列 → 単一の難易度値）の構造的インタフェース。
なぜ: ホスト側の集計パイプラインが具体クラスに依存せず、各スキルを同じ手順で駆動できるようにするため。
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from objects.difficulty_object import OsuDifficultyObject


@runtime_checkable
class Skill(Protocol):
    """Structural typing: `process` を全オブジェクトに順に呼び、最後に 1 度だけ `difficulty_value`。"""

    def process(
        self, current: OsuDifficultyObject, sequence: Sequence[OsuDifficultyObject]
    ) -> None:
        ...

    def difficulty_value(self) -> float:
        ...


__all__ = ["Skill"]
