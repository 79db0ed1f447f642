"""两个队列的稳定合并。"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from ..base import Algorithm, Queue, T
from ..errors import ContractViolationError, QueueAllocationError


logger = logging.getLogger(__name__)

Compare = Callable[[T, T], bool]


def merge_queues(
    q1: Optional[Queue[T]], q2: Optional[Queue[T]], compare: Compare
) -> Optional[Queue[T]]:
    """按 compare 给出的顺序稳定合并两个队列。

    compare(a, b) 为 True 表示 a 应排在 b 之前。每一步比较两个队头 a、b：
    只有 compare(a, b) 为 True 时才取 q1 的队头，否则取 q2 的队头，
    因此相等的元素 q2 优先。一个队列取空后，另一个队列剩余的元素按原顺序追加。

    特殊情况:
        - 两个都为 None，或两个都为空：返回 None
        - 一个为 None 或为空：原样返回另一个队列（调用方只需销毁这一个句柄）

    参数:
        q1: 第一个队列，可以为 None
        q2: 第二个队列，可以为 None
        compare: 严格序谓词

    返回:
        新建的合并队列（与 q1 同类型、同元素类型），或上述特殊情况下的输入队列。
        两个输入都非空时，合并结束后它们都被取空，但仍归原持有者销毁。

    异常:
        TypeError: compare 不可调用，或两个队列的元素类型不同
        ContractViolationError: q1 与 q2 是同一个队列
        QueueAllocationError: 合并结果无法继续增长；未移动的元素留在原队列中

    时间复杂度: O(n1 + n2)
    空间复杂度: O(n1 + n2)
    """
    if not callable(compare):
        raise TypeError(f"compare 必须是可调用的二元谓词，得到: {compare!r}")

    if q1 is None and q2 is None:
        return None
    if q1 is None:
        return q2
    if q2 is None:
        return q1
    if q1 is q2:
        raise ContractViolationError("不能把同一个队列同时作为两个输入合并")

    q1_is_empty = q1.empty()
    q2_is_empty = q2.empty()
    if q1_is_empty and q2_is_empty:
        return None
    if q1_is_empty:
        return q2
    if q2_is_empty:
        return q1

    if q1.elem_type is not q2.elem_type:
        raise TypeError(
            f"无法合并元素类型不同的队列: {q1.elem_type.__name__} 与 {q2.elem_type.__name__}"
        )

    logger.debug("Merging queues of sizes %d and %d", q1.size(), q2.size())
    merged = q1.empty_like()

    # 比较两个队头，每次移动一个元素
    while not q1.empty() and not q2.empty():
        a = q1.peek_front()
        b = q2.peek_front()
        if compare(a, b):
            _move_front(q1, a, merged)
        else:
            _move_front(q2, b, merged)

    rest = q1 if not q1.empty() else q2
    while not rest.empty():
        _move_front(rest, rest.peek_front(), merged)

    logger.debug("Merged queue has %d elements", merged.size())
    return merged


def _move_front(source: Queue[T], value: T, target: Queue[T]) -> None:
    """把 source 的队头 value 移到 target 队尾；只有入队成功后才出队。"""
    if not target.enqueue(value):
        raise QueueAllocationError("无法为合并结果分配内存", partial=target)
    source.dequeue()


class MergeQueues(Algorithm):
    """稳定合并两个队列，相等元素优先取第二个队列。"""

    def execute(
        self, q1: Optional[Queue[T]], q2: Optional[Queue[T]], compare: Compare
    ) -> Optional[Queue[T]]:
        """返回 merge_queues(q1, q2, compare) 的结果。"""
        return merge_queues(q1, q2, compare)
