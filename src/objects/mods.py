"""
どこで: `objects.mods`
何を: osu! レガシー形式の modifier ビットフラグと、Hidden 判定の問い合わせ。
なぜ: 評価側は「Hidden が有効か」だけを知ればよく、ビット配置の知識をここに閉じ込めるため。

ビット配置はレガシー API（`mods` 整数）と同一。Hidden 以外は現状どの評価にも影響しない。
"""

from __future__ import annotations

from enum import IntFlag


class Mods(IntFlag):
    NONE = 0
    NO_FAIL = 1 << 0
    EASY = 1 << 1
    TOUCH_DEVICE = 1 << 2
    HIDDEN = 1 << 3
    HARD_ROCK = 1 << 4
    DOUBLE_TIME = 1 << 6
    HALF_TIME = 1 << 8
    NIGHTCORE = 1 << 9
    FLASHLIGHT = 1 << 10
    SPUN_OUT = 1 << 12

    @classmethod
    def from_value(cls, value: int | "Mods") -> "Mods":
        """整数/Mods から Mods を得る。未知のビットは保持したまま受け入れる。"""
        if isinstance(value, Mods):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"mods must be an int bitmask, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"mods bitmask must be non-negative, got {value}")
        return cls(value)


def has_hidden(mods: int | Mods) -> bool:
    """Hidden（可視時間を短縮する modifier）が有効か。"""
    return bool(Mods.from_value(mods) & Mods.HIDDEN)


__all__ = ["Mods", "has_hidden"]
