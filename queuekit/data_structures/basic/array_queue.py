from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Type

from queuekit.base import Queue, T
from queuekit.config import QueueConfig


logger = logging.getLogger(__name__)


class ArrayQueue(Queue[T]):
    """基于动态循环数组实现的先进先出（FIFO）队列。

    元素存放在容量为 c 的循环缓冲区中，队头位置为 s，元素数量为 n，
    逻辑序列为 buffer[(s + i) mod c]，i ∈ [0, n)。

    扩容与缩容:
        - 入队时如果 n == c，申请容量为 c * g 的新缓冲区，把逻辑序列从下标 0
          开始紧凑复制过去（不回绕时一次复制，回绕时先尾段后头段两次复制），
          然后 s 置 0。
        - 出队后如果队列非空、c // g >= 2 并且 4n < c，按同样方式缩容到 c // g。
          4n < c 的阈值保证缩容后紧接着的入队不会再次触发扩容。
        - 缩容是尽力而为的：新缓冲区申请失败时保留旧缓冲区，出队依然成功。

    时间复杂度:
        - enqueue: 均摊 O(1)
        - dequeue: 均摊 O(1)
        - peek_front: O(1)
    空间复杂度: O(c)，且 c 不超过 max(C₀, g * 4n)
    """

    def __init__(self, elem_type: Type[T], config: Optional[QueueConfig] = None) -> None:
        """初始化空队列。

        参数:
            elem_type: 元素类型
            config: 缓冲区配置，缺省时从环境变量读取（默认 1024 / 2）
        """
        super().__init__(elem_type)
        self.config = config or QueueConfig.from_env()
        self._buffer: List[Optional[T]] = self._allocate(self.config.initial_capacity)
        self._cap = self.config.initial_capacity
        self._start = 0
        self._count = 0

    def empty_like(self) -> "ArrayQueue[T]":
        self._ensure_alive()
        return type(self)(self.elem_type, self.config)

    # Storage hooks --------------------------------------------------------
    def _size(self) -> int:
        return self._count

    def _capacity(self) -> int:
        return self._cap

    def _front(self) -> T:
        return self._buffer[self._start]

    def _end(self) -> int:
        """队尾之后一个位置的下标。"""
        return (self._start + self._count) % self._cap

    def _push(self, value: T) -> bool:
        if self._count == self._cap:
            new_cap = self._cap * self.config.growth_factor
            try:
                self._resize(new_cap)
            except MemoryError:
                logger.error("Cannot grow queue buffer from %d to %d slots", self._cap, new_cap)
                return False
        self._buffer[self._end()] = value
        self._count += 1
        return True

    def _pop(self) -> None:
        self._buffer[self._start] = None  # 丢弃旧队头
        self._count -= 1
        self._start = (self._start + 1) % self._cap

        factor = self.config.growth_factor
        if self._count > 0 and self._cap // factor >= 2 and self._count * 4 < self._cap:
            new_cap = self._cap // factor
            try:
                self._resize(new_cap)
            except MemoryError:
                logger.warning(
                    "Cannot shrink queue buffer from %d to %d slots; keeping current buffer",
                    self._cap,
                    new_cap,
                )

    def _walk(self) -> Iterator[T]:
        for i in range(self._count):
            yield self._buffer[(self._start + i) % self._cap]

    def _release(self) -> None:
        self._buffer = []
        self._count = 0
        self._start = 0

    # Internal helpers -----------------------------------------------------
    @staticmethod
    def _allocate(capacity: int) -> List[Optional[T]]:
        return [None] * capacity

    def _resize(self, new_cap: int) -> None:
        """把逻辑序列紧凑复制到容量为 new_cap 的新缓冲区，并把 s 置 0。

        新缓冲区申请失败时抛出 MemoryError，队列状态保持不变。
        """
        arr = self._allocate(new_cap)
        start, count = self._start, self._count
        if start + count <= self._cap:
            arr[:count] = self._buffer[start:start + count]
        else:
            # 回绕：先复制尾段，再复制头段
            ntail = self._cap - start
            arr[:ntail] = self._buffer[start:]
            arr[ntail:count] = self._buffer[:count - ntail]
        logger.debug("Resized queue buffer from %d to %d slots", self._cap, new_cap)
        self._buffer = arr
        self._cap = new_cap
        self._start = 0
