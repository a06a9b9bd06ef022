import os
import sys
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, TextIO, Any

from .entry import Entry


class TeeStdout:
    """
    Writes everything to several text streams at once, e.g. the console and a log file.
    """
    def __init__(self, *streams: TextIO):
        self.streams = streams

    def write(self, data: str) -> int:
        for s in self.streams:
            s.write(data)
            s.flush()
        return len(data)

    def flush(self) -> None:
        for s in self.streams:
            s.flush()


@contextmanager
def tee_stdout(log_path: Optional[str]) -> Iterator[None]:
    """
    Duplicate sys.stdout into `log_path` for the duration of the block.
    A `log_path` of None leaves stdout untouched.
    """
    if log_path is None:
        yield
        return

    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    original_stdout = sys.stdout
    with open(log_path, "w", encoding="utf-8") as f:
        sys.stdout = TeeStdout(original_stdout, f)
        try:
            yield
        finally:
            sys.stdout = original_stdout


def heap_property_violations(
    heap: List[Optional[Entry]],
    higher_priority: Callable[[Any, Any], bool],
) -> List[int]:
    """
    Return the child slots whose priority outranks their parent's.

    `heap` is the 1-indexed slot list of a MaxHeapPriorityQueue (sentinel at 0).
    An empty result means the max-heap property holds.
    """
    return [
        i for i in range(2, len(heap))
        if higher_priority(heap[i].priority, heap[i // 2].priority)
    ]


def is_complete(heap: List[Optional[Entry]]) -> bool:
    """
    True if the sentinel slot is empty and slots 1..n are all occupied.
    """
    return heap[0] is None and all(isinstance(slot, Entry) for slot in heap[1:])
