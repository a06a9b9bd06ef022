from .Max_Heap import Entry, EmptyQueueError, MaxHeapPriorityQueue

__all__ = [
    "Entry",
    "EmptyQueueError",
    "MaxHeapPriorityQueue"
]
