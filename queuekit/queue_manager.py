"""
队列后端管理器

按名称注册和创建队列后端，并以返回 None 的方式报告创建时的内存不足。
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Type

from .base import Queue
from .config import QueueConfig
from .data_structures.basic.array_queue import ArrayQueue
from .data_structures.basic.linked_queue import LinkedQueue


class QueueBacking(Enum):
    """内置队列后端枚举"""
    ARRAY = "array"
    LINKED = "linked"


class QueueRegistry:
    """队列后端注册表"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._backings: Dict[str, Type[Queue]] = {}
        self._register_default_backings()

    def _register_default_backings(self) -> None:
        """注册默认后端"""
        self.register(QueueBacking.ARRAY.value, ArrayQueue)
        self.register(QueueBacking.LINKED.value, LinkedQueue)

    def register(self, name: str, queue_class: Type[Queue]) -> None:
        """
        注册队列后端

        Args:
            name: 后端名称
            queue_class: 队列类，必须继承自 Queue
        """
        if not isinstance(queue_class, type) or not issubclass(queue_class, Queue):
            raise ValueError(f"队列类 {queue_class} 必须继承自 Queue")
        self._backings[name] = queue_class

    def get_backing(self, name: str) -> Type[Queue]:
        """获取队列类"""
        if name not in self._backings:
            raise KeyError(f"未找到队列后端: {name}")
        return self._backings[name]

    def list_backings(self) -> List[str]:
        """列出已注册的后端"""
        return list(self._backings.keys())

    def create_queue(self, backing: str, elem_type: type,
                     config: Optional[QueueConfig] = None) -> Optional[Queue]:
        """
        创建指定后端的空队列

        Args:
            backing: 后端名称
            elem_type: 元素类型
            config: 数组后端的缓冲区配置，其他后端忽略

        Returns:
            新队列；内存不足时返回 None

        Raises:
            KeyError: 后端不存在
            TypeError: elem_type 不是类型
        """
        queue_class = self.get_backing(backing)
        try:
            if issubclass(queue_class, ArrayQueue):
                return queue_class(elem_type, config)
            return queue_class(elem_type)
        except MemoryError:
            self.logger.error(f"无法为 {backing} 队列分配内存")
            return None


# 全局队列后端注册表实例
_queue_registry = None


def get_queue_registry() -> QueueRegistry:
    """获取全局队列后端注册表实例"""
    global _queue_registry
    if _queue_registry is None:
        _queue_registry = QueueRegistry()
    return _queue_registry


def create_queue(backing, elem_type: type,
                 config: Optional[QueueConfig] = None) -> Optional[Queue]:
    """便捷函数：创建队列，backing 可以是名称或 QueueBacking"""
    if isinstance(backing, QueueBacking):
        backing = backing.value
    return get_queue_registry().create_queue(backing, elem_type, config)
