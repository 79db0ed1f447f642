import logging

import pytest

from queuekit.config import QueueConfig
from queuekit.data_structures.basic.array_queue import ArrayQueue
from queuekit.data_structures.basic.linked_queue import LinkedQueue
from queuekit.logging_config import reset_logging


SMALL_CONFIG = QueueConfig(initial_capacity=2, growth_factor=2)


@pytest.fixture(params=["array", "linked"])
def make_queue(request):
    """Build empty queues of the parametrized backing; arrays start tiny to exercise resizing."""

    def factory(elem_type=int):
        if request.param == "array":
            return ArrayQueue(elem_type, SMALL_CONFIG)
        return LinkedQueue(elem_type)

    return factory


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    reset_logging()
    yield
    root.handlers = handlers
    root.setLevel(level)
    reset_logging()
