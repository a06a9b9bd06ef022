class EmptyQueueError(IndexError):
    """
    Raised when extracting from (or peeking at) a queue with no entries.

    Subclasses IndexError to match `heapq.heappop([])`.
    """
    pass
