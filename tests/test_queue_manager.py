import logging

import pytest

from queuekit.base import Queue
from queuekit.config import QueueConfig
from queuekit.data_structures.basic.array_queue import ArrayQueue
from queuekit.data_structures.basic.linked_queue import LinkedQueue
from queuekit.queue_manager import QueueBacking, QueueRegistry, create_queue, get_queue_registry


def test_default_backings():
    registry = QueueRegistry()
    assert registry.list_backings() == ["array", "linked"]
    assert registry.get_backing("array") is ArrayQueue
    assert registry.get_backing("linked") is LinkedQueue


def test_create_by_name_and_enum():
    queue = create_queue("linked", int)
    assert isinstance(queue, LinkedQueue)

    config = QueueConfig(initial_capacity=4, growth_factor=2)
    queue = create_queue(QueueBacking.ARRAY, str, config)
    assert isinstance(queue, ArrayQueue)
    assert queue.capacity() == 4
    assert queue.elem_type is str


def test_unknown_backing():
    with pytest.raises(KeyError):
        QueueRegistry().get_backing("heap")
    with pytest.raises(KeyError):
        create_queue("heap", int)


def test_register_rejects_non_queue_classes():
    registry = QueueRegistry()
    with pytest.raises(ValueError):
        registry.register("list", list)
    with pytest.raises(ValueError):
        registry.register("instance", LinkedQueue(int))


def test_register_custom_backing():
    class CountingQueue(LinkedQueue):
        pass

    registry = QueueRegistry()
    registry.register("counting", CountingQueue)
    assert isinstance(registry.create_queue("counting", int), CountingQueue)
    assert issubclass(registry.get_backing("counting"), Queue)


def test_create_reports_allocation_failure(monkeypatch, caplog):
    def fail(capacity):
        raise MemoryError

    monkeypatch.setattr(ArrayQueue, "_allocate", staticmethod(fail))
    with caplog.at_level(logging.ERROR):
        assert QueueRegistry().create_queue("array", int) is None
    assert "array" in caplog.text


def test_global_registry_is_shared():
    assert get_queue_registry() is get_queue_registry()
