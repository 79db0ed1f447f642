"""数组队列的配置。

初始容量与增长因子对应原先的编译期常量，这里作为带默认值的运行期配置提供，
可以直接构造、从环境变量读取，或从 YAML 文件加载。
"""

from __future__ import annotations

import os
from dataclasses import dataclass

import yaml

DEFAULT_INITIAL_CAPACITY = 1024
DEFAULT_GROWTH_FACTOR = 2

INIT_CAP_ENV = "QUEUE_INIT_CAP"
GROW_FACTOR_ENV = "QUEUE_GROW_FACTOR"


@dataclass(frozen=True)
class QueueConfig:
    """Configuration for :class:`ArrayQueue` buffer sizing.

    Parameters
    ----------
    initial_capacity:
        Number of slots allocated when the queue is created. Must be at least 1.
    growth_factor:
        Factor by which the buffer grows when full and shrinks when sparse.
        Must be at least 2.
    """

    initial_capacity: int = DEFAULT_INITIAL_CAPACITY
    growth_factor: int = DEFAULT_GROWTH_FACTOR

    def __post_init__(self) -> None:
        for name in ("initial_capacity", "growth_factor"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} 必须是整数，得到: {value!r}")
        if self.initial_capacity < 1:
            raise ValueError(f"initial_capacity 必须 >= 1，得到: {self.initial_capacity}")
        if self.growth_factor < 2:
            raise ValueError(f"growth_factor 必须 >= 2，得到: {self.growth_factor}")

    @classmethod
    def from_env(cls) -> "QueueConfig":
        """从 QUEUE_INIT_CAP / QUEUE_GROW_FACTOR 环境变量构造配置，缺省时使用默认值。"""
        return cls(
            initial_capacity=_int_from_env(INIT_CAP_ENV, DEFAULT_INITIAL_CAPACITY),
            growth_factor=_int_from_env(GROW_FACTOR_ENV, DEFAULT_GROWTH_FACTOR),
        )


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as err:
        raise ValueError(f"环境变量 {name} 必须是整数，得到: {raw!r}") from err


def load_config(path: str) -> QueueConfig:
    """Load :class:`QueueConfig` from a YAML file."""
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    return QueueConfig(**data)
