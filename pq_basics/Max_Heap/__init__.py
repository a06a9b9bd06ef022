from .entry import Entry
from .errors import EmptyQueueError
from .max_heap_priority_queue import MaxHeapPriorityQueue
from .utils import (
    TeeStdout,
    tee_stdout,
    heap_property_violations,
    is_complete
)

__all__ = [
    "Entry",
    "EmptyQueueError",
    "MaxHeapPriorityQueue",
    "TeeStdout",
    "tee_stdout",
    "heap_property_violations",
    "is_complete"
]
