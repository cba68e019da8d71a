"""
どこで: `common.settings`
何を: 難易度計算まわりの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

注意:
- 評価式の定数（窓幅や倍率など）はここに置かない。`evaluators` 側のモジュール定数で固定する。
- ここで扱うのは集約方式・並列度・ログレベルといった実行環境寄りの設定のみ。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, env_int, env_str

DEFAULT_AGGREGATION = "weighted_sum"
# 兄弟スキルの慣例（上位から 0.9 倍ずつ減衰）を仮定した値
DEFAULT_DECAY_WEIGHT = 0.9


@dataclass
class _Settings:
    # 集約
    AGGREGATION: str = DEFAULT_AGGREGATION
    DECAY_WEIGHT: float = DEFAULT_DECAY_WEIGHT

    # バッチ評価（0 = インライン実行）
    MAX_WORKERS: int = 0

    # Logging
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 減衰率は (0, 1] の範囲外なら既定値へフォールバック。
    - ワーカ数は下限 0 に丸める。
    """
    _settings.AGGREGATION = env_str("RDG_AGGREGATION", DEFAULT_AGGREGATION)
    _settings.DECAY_WEIGHT = env_float(
        "RDG_DECAY_WEIGHT", DEFAULT_DECAY_WEIGHT, min_value=0.0, max_value=1.0
    )
    _settings.MAX_WORKERS = env_int("RDG_MAX_WORKERS", 0, min_value=0) or 0
    _settings.LOG_LEVEL = env_str("RDG_LOG_LEVEL", "INFO").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings", "DEFAULT_AGGREGATION", "DEFAULT_DECAY_WEIGHT"]
