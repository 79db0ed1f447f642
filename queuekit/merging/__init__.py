from .merge_queues import MergeQueues, merge_queues

__all__ = ["MergeQueues", "merge_queues"]
