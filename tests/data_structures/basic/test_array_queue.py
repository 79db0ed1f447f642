import logging

import pytest

from queuekit.config import QueueConfig
from queuekit.data_structures.basic.array_queue import ArrayQueue
from queuekit.errors import ContractViolationError


def _drain(queue):
    seen = []
    while not queue.empty():
        seen.append(queue.peek_front())
        assert queue.dequeue()
    return seen


def _fail_allocation(capacity):
    raise MemoryError


def test_default_configuration(monkeypatch):
    monkeypatch.delenv("QUEUE_INIT_CAP", raising=False)
    monkeypatch.delenv("QUEUE_GROW_FACTOR", raising=False)
    queue = ArrayQueue(int)
    assert queue.size() == 0
    assert queue.capacity() == 1024
    assert queue.config == QueueConfig(1024, 2)


def test_environment_overrides_default_configuration(monkeypatch):
    monkeypatch.setenv("QUEUE_INIT_CAP", "10")
    monkeypatch.setenv("QUEUE_GROW_FACTOR", "3")
    queue = ArrayQueue(int)
    assert queue.capacity() == 10
    assert queue.config.growth_factor == 3


def test_capacity_trace_through_growth_and_shrink():
    queue = ArrayQueue(int, QueueConfig(initial_capacity=2, growth_factor=2))
    digits = [3, 1, 4, 1, 5, 9, 2, 6]

    capacities, sizes = [], []
    for digit in digits:
        assert queue.enqueue(digit)
        capacities.append(queue.capacity())
        sizes.append(queue.size())
        assert queue.peek_front() == 3
    assert capacities == [2, 2, 4, 4, 8, 8, 8, 8]
    assert sizes == list(range(1, 9))

    before_dequeue, fronts = [], []
    while not queue.empty():
        before_dequeue.append(queue.capacity())
        fronts.append(queue.peek_front())
        assert queue.dequeue()
    assert before_dequeue == [8, 8, 8, 8, 8, 8, 8, 4]
    assert fronts == digits
    assert queue.size() == 0
    assert queue.capacity() == 4


def test_growth_preserves_order_when_sequence_wraps():
    queue = ArrayQueue(int, QueueConfig(initial_capacity=4, growth_factor=2))
    for value in range(4):
        queue.enqueue(value)
    queue.dequeue()
    queue.dequeue()
    queue.enqueue(4)
    queue.enqueue(5)
    # sequence 2,3,4,5 now straddles the end of the buffer
    assert queue._start == 2
    assert queue.capacity() == 4

    queue.enqueue(6)
    assert queue.capacity() == 8
    assert queue._start == 0
    assert _drain(queue) == [2, 3, 4, 5, 6]


def test_shrink_preserves_order_when_sequence_wraps():
    queue = ArrayQueue(int, QueueConfig(initial_capacity=16, growth_factor=2))
    for value in range(16):
        queue.enqueue(value)
    for _ in range(12):
        queue.dequeue()
    queue.enqueue(16)
    queue.enqueue(17)
    # 12..17 occupies slots 12..15 then 0..1
    for _ in range(3):
        queue.dequeue()
    assert queue.capacity() == 8
    assert queue._start == 0
    assert _drain(queue) == [15, 16, 17]


def test_shrink_hysteresis():
    queue = ArrayQueue(int, QueueConfig(initial_capacity=4, growth_factor=2))
    for value in range(5):
        queue.enqueue(value)
    assert queue.capacity() == 8
    for _ in range(4):
        queue.dequeue()
    assert queue.capacity() == 4
    assert queue.enqueue(5)
    assert queue.capacity() == 4
    assert _drain(queue) == [4, 5]


def test_no_shrink_below_two_slots():
    queue = ArrayQueue(int, QueueConfig(initial_capacity=3, growth_factor=3))
    queue.enqueue(1)
    queue.enqueue(2)
    queue.dequeue()
    assert queue.capacity() == 3


def test_growth_factor_three():
    queue = ArrayQueue(int, QueueConfig(initial_capacity=3, growth_factor=3))
    for value in range(4):
        queue.enqueue(value)
    assert queue.capacity() == 9
    for _ in range(3):
        queue.dequeue()
    assert queue.capacity() == 3
    assert queue.peek_front() == 3


def test_enqueue_after_drain_writes_at_current_front_index():
    queue = ArrayQueue(int, QueueConfig(initial_capacity=4, growth_factor=2))
    for value in (1, 2, 3):
        queue.enqueue(value)
    _drain(queue)
    assert queue._start == 3

    assert queue.enqueue(9)
    assert queue.peek_front() == 9
    assert queue._buffer[3] == 9


def test_failed_growth_leaves_queue_unchanged(monkeypatch, caplog):
    queue = ArrayQueue(int, QueueConfig(initial_capacity=2, growth_factor=2))
    queue.enqueue(7)
    queue.enqueue(8)
    monkeypatch.setattr(queue, "_allocate", _fail_allocation)

    with caplog.at_level(logging.ERROR):
        assert not queue.enqueue(9)

    assert "Cannot grow queue buffer" in caplog.text
    assert queue.size() == 2
    assert queue.capacity() == 2
    assert _drain(queue) == [7, 8]


def test_failed_shrink_is_best_effort(monkeypatch, caplog):
    queue = ArrayQueue(int, QueueConfig(initial_capacity=2, growth_factor=2))
    for value in range(8):
        queue.enqueue(value)
    monkeypatch.setattr(queue, "_allocate", _fail_allocation)

    with caplog.at_level(logging.WARNING):
        for _ in range(7):
            assert queue.dequeue()

    assert "Cannot shrink queue buffer" in caplog.text
    assert queue.capacity() == 8
    assert queue.size() == 1
    assert queue.peek_front() == 7


def test_dequeued_slot_is_released():
    queue = ArrayQueue(object, QueueConfig(initial_capacity=4, growth_factor=2))
    queue.enqueue("a")
    queue.enqueue("b")
    queue.dequeue()
    assert queue._buffer[0] is None


def test_empty_like_keeps_configuration():
    config = QueueConfig(initial_capacity=2, growth_factor=4)
    queue = ArrayQueue(str, config)
    other = queue.empty_like()
    assert isinstance(other, ArrayQueue)
    assert other.config is config
    assert other.elem_type is str
    assert other.empty()


def test_destroy_twice_is_a_contract_violation():
    queue = ArrayQueue(int, QueueConfig(initial_capacity=2, growth_factor=2))
    queue.enqueue(1)
    queue.destroy()
    with pytest.raises(ContractViolationError):
        queue.destroy()
    with pytest.raises(ContractViolationError):
        queue.size()
