"""Queue backings."""

from .array_queue import ArrayQueue
from .linked_queue import LinkedQueue, Node

__all__ = ["ArrayQueue", "LinkedQueue", "Node"]
