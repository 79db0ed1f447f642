"""FIFO queues with array and linked backings, plus a stable queue merge."""

from .base import Algorithm, Queue
from .config import QueueConfig, load_config
from .data_structures.basic.array_queue import ArrayQueue
from .data_structures.basic.linked_queue import LinkedQueue
from .errors import ContractViolationError, QueueAllocationError
from .merging.merge_queues import MergeQueues, merge_queues
from .queue_manager import QueueBacking, QueueRegistry, create_queue, get_queue_registry

__all__ = [
    "Algorithm",
    "ArrayQueue",
    "ContractViolationError",
    "LinkedQueue",
    "MergeQueues",
    "Queue",
    "QueueAllocationError",
    "QueueBacking",
    "QueueConfig",
    "QueueRegistry",
    "create_queue",
    "get_queue_registry",
    "load_config",
    "merge_queues",
]
