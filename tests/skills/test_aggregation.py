from __future__ import annotations

import pytest

from common import settings
from skills.aggregation import (
    _REGISTRY,
    aggregation,
    get_aggregation,
    list_aggregations,
    resolve_aggregation,
    weighted_sum,
    weighted_sum_with_decay,
)


@pytest.mark.smoke
def test_weighted_sum_sorts_descending() -> None:
    assert weighted_sum([1.0, 3.0, 2.0]) == pytest.approx(3.0 + 2.0 * 0.9 + 1.0 * 0.81)
    assert weighted_sum([]) == 0.0


def test_weighted_sum_with_explicit_decay() -> None:
    assert weighted_sum_with_decay([1.0, 1.0, 1.0], 1.0) == pytest.approx(3.0)
    assert weighted_sum_with_decay((4.0, 2.0), 0.5) == pytest.approx(5.0)


def test_decay_weight_follows_env(env_settings) -> None:
    env_settings.setenv("RDG_DECAY_WEIGHT", "0.5")
    settings.reload_from_env()
    assert weighted_sum([1.0, 3.0, 2.0]) == pytest.approx(3.0 + 1.0 + 0.25)


def test_builtin_registered_and_resolved() -> None:
    assert "weighted_sum" in list_aggregations()
    assert get_aggregation("WeightedSum") is weighted_sum
    assert resolve_aggregation(None) is weighted_sum
    assert resolve_aggregation("weighted-sum") is weighted_sum
    with pytest.raises(TypeError):
        resolve_aggregation(1.5)  # type: ignore[arg-type]


def test_default_follows_env(env_settings) -> None:
    @aggregation("peak_for_test")
    def peak(values):  # noqa: ANN001 - テスト用
        return max(values, default=0.0)

    try:
        env_settings.setenv("RDG_AGGREGATION", "peak_for_test")
        settings.reload_from_env()
        assert resolve_aggregation(None) is peak
    finally:
        _REGISTRY.unregister("peak_for_test")


def test_decorator_forms_and_duplicates() -> None:
    @aggregation
    def bare_for_test(values):  # noqa: ANN001 - テスト用
        return 0.0

    @aggregation()
    def called_for_test(values):  # noqa: ANN001 - テスト用
        return 1.0

    try:
        assert get_aggregation("bare_for_test") is bare_for_test
        assert get_aggregation("called_for_test") is called_for_test
        with pytest.raises(ValueError):
            aggregation("bare_for_test")(lambda values: 2.0)
    finally:
        _REGISTRY.unregister("bare_for_test")
        _REGISTRY.unregister("called_for_test")
