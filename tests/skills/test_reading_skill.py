from __future__ import annotations

import pytest

from objects.mods import Mods
from skills import SKILL_MULTIPLIER, Reading, Skill


@pytest.mark.smoke
def test_reading_satisfies_skill_protocol() -> None:
    assert isinstance(Reading(0, 600.0, 400.0), Skill)


def test_configuration_from_mods() -> None:
    assert Reading(Mods.HIDDEN, 600.0, 400.0).hidden is True
    assert Reading(Mods.DOUBLE_TIME, 600.0, 400.0).hidden is False
    r = Reading(8 | 64, 450, 300)
    assert (r.hidden, r.preempt, r.fade_in) == (True, 450.0, 300.0)
    assert r.difficulties == ()


def test_process_appends_one_value_per_object(three_objects) -> None:
    r = Reading(0, 600.0, 400.0)
    for n, obj in enumerate(three_objects, start=1):
        r.process(obj, three_objects)
        assert len(r.difficulties) == n
    # 非 Hidden かつ先行 2 個以下では密度も 0
    assert r.difficulties == (0.0, 0.0, 0.0)


def test_end_to_end_hidden_values(three_objects) -> None:
    r = Reading(Mods.HIDDEN, 600.0, 400.0)
    for obj in three_objects:
        r.process(obj, three_objects)

    d = r.difficulties
    assert d[0] == 0.0
    assert d[1] == pytest.approx(2.26875 * SKILL_MULTIPLIER)  # 5.445
    assert d[2] == pytest.approx(2.0859375 * SKILL_MULTIPLIER)  # 5.00625


def test_process_rejects_out_of_order_objects(three_objects) -> None:
    r = Reading(0, 600.0, 400.0)
    with pytest.raises(ValueError):
        r.process(three_objects[1], three_objects)
    r.process(three_objects[0], three_objects)
    with pytest.raises(ValueError):
        r.process(three_objects[0], three_objects)
    assert len(r.difficulties) == 1


def test_difficulty_value_uses_weighted_sum(three_objects) -> None:
    r = Reading(Mods.HIDDEN, 600.0, 400.0)
    for obj in three_objects:
        r.process(obj, three_objects)
    # 降順 [5.445, 5.00625, 0] に 1, 0.9, 0.81
    assert r.difficulty_value() == pytest.approx(5.445 + 5.00625 * 0.9)


def test_difficulty_value_accepts_custom_strategy(three_objects) -> None:
    r = Reading(Mods.HIDDEN, 600.0, 400.0, aggregation=max)
    for obj in three_objects:
        r.process(obj, three_objects)
    assert r.difficulty_value() == pytest.approx(5.445)


def test_empty_reading_aggregates_to_zero() -> None:
    assert Reading(0, 600.0, 400.0).difficulty_value() == 0.0


def test_finalized_reading_rejects_further_use(three_objects) -> None:
    r = Reading(0, 600.0, 400.0)
    r.process(three_objects[0], three_objects)
    r.difficulty_value()
    with pytest.raises(RuntimeError):
        r.process(three_objects[1], three_objects)
    with pytest.raises(RuntimeError):
        r.difficulty_value()


def test_unknown_aggregation_name() -> None:
    with pytest.raises(KeyError):
        Reading(0, 600.0, 400.0, aggregation="no_such_strategy")


@pytest.mark.parametrize("workers", [0, 4])
def test_process_all_matches_sequential(dense_stream, workers: int) -> None:
    seq_reading = Reading(Mods.HIDDEN, 600.0, 100.0)
    for obj in dense_stream:
        seq_reading.process(obj, dense_stream)

    batch_reading = Reading(Mods.HIDDEN, 600.0, 100.0)
    batch_reading.process_all(dense_stream, max_workers=workers)

    assert batch_reading.difficulties == seq_reading.difficulties


def test_process_all_continues_after_partial_processing(three_objects) -> None:
    r = Reading(Mods.HIDDEN, 600.0, 400.0)
    r.process(three_objects[0], three_objects)
    r.process_all(three_objects)
    assert len(r.difficulties) == 3
    assert r.difficulties[2] == pytest.approx(5.00625)


def test_difficulties_is_a_live_read_only_view(three_objects) -> None:
    r = Reading(Mods.HIDDEN, 600.0, 400.0)
    view = r.difficulties
    assert r.difficulties is view  # アクセスごとにコピーしない
    for obj in three_objects:
        r.process(obj, three_objects)
    # 追記後も同じビューから最新の値が見える
    assert len(view) == 3
    assert view[1] == pytest.approx(5.445)
    assert view[1:] == pytest.approx((5.445, 5.00625))
    assert list(view) == list(r.difficulties)
    with pytest.raises(TypeError):
        view[0] = 1.0  # type: ignore[index]
    assert not hasattr(view, "append")
