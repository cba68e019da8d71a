"""
どこで: `common` の数値ユーティリティ。
何を: 区間へのクランプ（一般形と 0–1 専用形）。
なぜ: 不透明度カーブや減衰係数など、上下限つきの係数計算を同一の書き方に揃えるため。
"""

from __future__ import annotations


def clamp(x: float, lo: float, hi: float) -> float:
    """`x` を `[lo, hi]` に収める（`lo <= hi` を前提）。"""
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x


def clamp01(x: float) -> float:
    return 0.0 if x <= 0.0 else 1.0 if x >= 1.0 else x


__all__ = ["clamp", "clamp01"]
