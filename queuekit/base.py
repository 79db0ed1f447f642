from __future__ import annotations

import copy
import sys
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterator, Optional, TextIO, Type, TypeVar

from queuekit.errors import ContractViolationError

T = TypeVar("T")


class Algorithm(ABC):
    """所有算法的基类。

    子类必须实现:
        execute: 执行算法并返回结果的抽象方法
    """

    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        """执行算法并返回结果。"""
        raise NotImplementedError


class Queue(ABC, Generic[T]):
    """先进先出（FIFO）队列的抽象约定。

    队列保存单一元素类型的有限有序序列，队头是最早入队且仍在队列中的元素，
    队尾是最近入队的元素。除了移除队头之外，元素之间的相对顺序不会改变。

    主要操作：
        - enqueue: 将元素的副本加入队尾，成功返回 True，内存不足返回 False
        - dequeue: 丢弃队头元素，队列为空返回 False
        - peek_front: 返回队头元素的副本，队列为空时返回调用方给定的默认值
        - size / empty / capacity: 查询元素数量、是否为空、物理容量
        - print: 按给定格式把队列输出到文本流
        - destroy: 释放全部元素与底层存储，只能调用一次

    时间复杂度:
        除 destroy 和 print 为 O(n) 外，其余操作均为均摊 O(1)。

    实现说明:
        子类只需要实现底层存储相关的钩子（_push、_pop、_front、_walk、_release），
        元素类型检查、按值复制以及销毁后的使用检查都在这里统一完成。
    """

    def __init__(self, elem_type: Type[T]) -> None:
        """创建指定元素类型的空队列。

        参数:
            elem_type: 元素类型，任意元素可使用 object

        异常:
            TypeError: elem_type 不是类型
        """
        if not isinstance(elem_type, type):
            raise TypeError(f"元素类型必须是 type，得到: {elem_type!r}")
        self.elem_type = elem_type
        self._destroyed = False

    # Public API -----------------------------------------------------------
    def size(self) -> int:
        """返回队列中元素的数量。"""
        self._ensure_alive()
        return self._size()

    def empty(self) -> bool:
        """检查队列是否为空。"""
        return self.size() == 0

    def capacity(self) -> int:
        """返回无需重新分配即可容纳的元素数量。"""
        self._ensure_alive()
        return self._capacity()

    def peek_front(self, default: Optional[T] = None) -> Optional[T]:
        """查看队头元素但不移除。

        参数:
            default: 队列为空时返回的值

        返回:
            队头元素的副本；队列为空时原样返回 default
        """
        self._ensure_alive()
        if self._size() == 0:
            return default
        return copy.copy(self._front())

    def enqueue(self, value: T) -> bool:
        """将 value 的副本加入队尾。

        返回:
            bool: 成功返回 True；无法分配内存时返回 False，队列保持不变

        类型检查使用 isinstance，因此元素类型的子类实例也会被接受，
        例如 bool 值可以加入元素类型为 int 的队列。

        异常:
            TypeError: value 不是队列的元素类型
        """
        self._ensure_alive()
        if not isinstance(value, self.elem_type):
            raise TypeError(
                f"队列元素类型为 {self.elem_type.__name__}，得到: {type(value).__name__}"
            )
        return self._push(copy.copy(value))

    def dequeue(self) -> bool:
        """丢弃队头元素。

        返回:
            bool: 成功返回 True；队列为空返回 False
        """
        self._ensure_alive()
        if self._size() == 0:
            return False
        self._pop()
        return True

    def destroy(self) -> None:
        """销毁队列，释放所有元素与底层存储。

        异常:
            ContractViolationError: 队列已经被销毁
        """
        self._ensure_alive()
        self._release()
        self._destroyed = True

    def empty_like(self) -> "Queue[T]":
        """创建一个同类型、同元素类型的空队列。"""
        self._ensure_alive()
        return type(self)(self.elem_type)

    def print(
        self,
        sink: Optional[TextIO] = None,
        sep: Optional[str] = ",",
        vertical: bool = False,
        print_element: Optional[Callable[[T], str]] = None,
    ) -> None:
        """把队列内容输出到文本流。

        参数:
            sink: 输出目标，默认为 sys.stdout
            sep: 水平布局时的分隔符，None 时使用 ","
            vertical: True 时每行输出一个元素并加上 "[i] " 前缀
            print_element: 把单个元素转换为文本的函数，默认为 str
        """
        self._ensure_alive()
        self._render(self._walk(), self._size(), sink, sep, vertical, print_element)

    def __len__(self) -> int:
        return self.size()

    # Storage hooks --------------------------------------------------------
    @abstractmethod
    def _size(self) -> int:
        ...

    @abstractmethod
    def _capacity(self) -> int:
        ...

    @abstractmethod
    def _front(self) -> T:
        """返回队头元素本身（调用方保证队列非空）。"""

    @abstractmethod
    def _push(self, value: T) -> bool:
        ...

    @abstractmethod
    def _pop(self) -> None:
        """移除队头元素（调用方保证队列非空）。"""

    @abstractmethod
    def _walk(self) -> Iterator[T]:
        """按从队头到队尾的顺序遍历底层存储，只供格式化输出使用。"""

    @abstractmethod
    def _release(self) -> None:
        ...

    # Internal helpers -----------------------------------------------------
    def _ensure_alive(self) -> None:
        if self._destroyed:
            raise ContractViolationError(f"{type(self).__name__} 已被销毁")

    @staticmethod
    def _render(
        values: Iterator[T],
        count: int,
        sink: Optional[TextIO],
        sep: Optional[str],
        vertical: bool,
        print_element: Optional[Callable[[T], str]],
    ) -> None:
        out = sink if sink is not None else sys.stdout
        if sep is None:
            sep = ","
        fmt = print_element or str
        for i, value in enumerate(values):
            if vertical:
                out.write(f"[{i}] {fmt(value)}\n")
            else:
                out.write(fmt(value))
                out.write("\n" if i == count - 1 else sep)
