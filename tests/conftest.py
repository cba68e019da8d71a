"""共通フィクスチャ。

- 難易度オブジェクトの生成ヘルパ
- 手計算しやすい小さなオブジェクト列
- 設定（環境変数）の差し替えと復元
"""

from __future__ import annotations

from typing import Callable, Iterator

import pytest

from common import settings
from objects.difficulty_object import OsuDifficultyObject

ObjFactory = Callable[..., OsuDifficultyObject]


def make_obj(index: int, start_time: float, **kwargs) -> OsuDifficultyObject:
    """preempt=600, fade_in=400 を既定とするオブジェクト生成ヘルパ。"""
    fields = {
        "preempt": 600.0,
        "fade_in": 400.0,
        "strain_time": 200.0,
        "lazy_jump_dist": 100.0,
        "min_jump_dist": 80.0,
        "angle": None,
        "is_spinner": False,
    }
    fields.update(kwargs)
    return OsuDifficultyObject(index=index, start_time=start_time, **fields)


@pytest.fixture()
def obj_factory() -> ObjFactory:
    return make_obj


@pytest.fixture()
def three_objects() -> list[OsuDifficultyObject]:
    """手計算用の 3 オブジェクト列（角度情報なし）。

    - o0: t=1000
    - o1: t=1200, strain=200 → clock 推定 6
    - o2: t=1600, strain=400 → clock 推定 4, lazy=100 → velocity 0.25
    """
    return [
        make_obj(0, 1000.0, strain_time=1000.0, lazy_jump_dist=0.0),
        make_obj(1, 1200.0, strain_time=200.0),
        make_obj(2, 1600.0, strain_time=400.0),
    ]


@pytest.fixture()
def dense_stream() -> list[OsuDifficultyObject]:
    """50ms 間隔・大ジャンプの 6 オブジェクト列（すべて完全に見えている前提の密度用）。"""
    return [
        make_obj(i, 1000.0 + 50.0 * i, strain_time=50.0, min_jump_dist=10_000.0)
        for i in range(6)
    ]


@pytest.fixture()
def env_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """環境変数を差し替え、終了時に元へ戻して設定を再読込する。"""
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()
