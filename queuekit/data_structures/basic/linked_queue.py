from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from queuekit.base import Queue, T


logger = logging.getLogger(__name__)


@dataclass
class Node:
    """链式队列的节点。

    属性:
        value: 节点持有的元素
        next: 指向后继节点的引用，队尾节点为 None
    """
    value: Any
    next: Optional[Node] = None


class LinkedQueue(Queue[T]):
    """基于单向链表实现的先进先出（FIFO）队列。

    队列通过 front 持有整条链，back 只是指向最后一个节点的观察引用。

    不变式：
        - n == 0 时 front 与 back 都为 None
        - n == 1 时 front is back，且 front.next 为 None
        - n >= 2 时 front is not back，从 front 沿 next 走 n - 1 步到达 back，
          back.next 为 None

    时间复杂度:
        - enqueue: O(1)
        - dequeue: O(1)
        - destroy: O(n)
    空间复杂度: O(n)
    """

    def __init__(self, elem_type) -> None:
        """初始化空队列。"""
        super().__init__(elem_type)
        self.front: Optional[Node] = None
        self.back: Optional[Node] = None
        self._count = 0

    def _size(self) -> int:
        return self._count

    def _capacity(self) -> int:
        # 只受可用内存限制
        return sys.maxsize

    def _front(self) -> T:
        return self.front.value

    def _push(self, value: T) -> bool:
        try:
            node = self._new_node(value)
        except MemoryError:
            logger.error("Cannot allocate a node for enqueue")
            return False

        if self.back is None:  # 队列为空，新节点同时成为队头
            self.front = node
        else:
            self.back.next = node
        self.back = node
        self._count += 1
        return True

    def _pop(self) -> None:
        old_front = self.front
        self.front = old_front.next
        if self.front is None:  # 刚移除的是唯一的节点
            self.back = None
        old_front.next = None
        self._count -= 1

    def _walk(self) -> Iterator[T]:
        current = self.front
        while current:
            yield current.value
            current = current.next

    def _release(self) -> None:
        # 逐个断开节点，避免长链留下引用
        current = self.front
        while current:
            successor = current.next
            current.next = None
            current = successor
        self.front = None
        self.back = None
        self._count = 0

    @staticmethod
    def _new_node(value: T) -> Node:
        return Node(value)
