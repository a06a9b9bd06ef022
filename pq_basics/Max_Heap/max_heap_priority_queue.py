"""
Priority queue backed by an array-based binary max-heap.

The implicit tree lives in a dense Python list that is 1-indexed:
slot 0 is a reserved sentinel (always None), the root sits at index 1,
the children of slot i are at 2i and 2i+1 and its parent is at i // 2.

Usage:

pq = MaxHeapPriorityQueue()       # creates an empty queue
pq.insert("eat", 10)              # pushes a value with its priority
entry = pq.peek_max()             # highest-priority entry without removing it
value, priority = pq.extract_max()  # pops the highest-priority entry
for entry in pq.drain(): ...      # pops entries until the queue is empty
"""

import operator
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple
)

from .entry import Entry, T, P
from .errors import EmptyQueueError


Comparator = Callable[[Any, Any], bool] # returns True if the first priority outranks the second

ROOT = 1


class MaxHeapPriorityQueue(Generic[T, P]):
    def __init__(
        self,
        higher_priority: Optional[Comparator] = None,
        verbose: bool = False,
    ):
        """
        Parameters:
            - higher_priority (Callable[[P, P], bool], optional):
                Strict comparator, `higher_priority(a, b)` is True when priority `a`
                must come out before priority `b`. Defaults to `operator.gt`,
                i.e. plain numeric / natural ordering.

            - verbose (bool):
                Print a trace line for every insert / extract and sift step.
        """
        if higher_priority is None:
            higher_priority = operator.gt
        elif not callable(higher_priority):
            raise TypeError(f"higher_priority must be callable, got {type(higher_priority)}")

        self._higher = higher_priority
        self.verbose = verbose
        self._heap: List[Optional[Entry[T, P]]] = [None] # slot 0 is the sentinel

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Tuple[T, P]],
        **kwargs: Any,
    ) -> "MaxHeapPriorityQueue[T, P]":
        """
        Build a queue by inserting every (value, priority) pair in order.
        Keyword arguments are forwarded to the constructor.
        """
        queue = cls(**kwargs)
        for i, pair in enumerate(pairs):
            try:
                value, priority = pair
            except (TypeError, ValueError):
                raise ValueError(f"Item {i} is not a (value, priority) pair: {pair!r}") from None
            queue.insert(value, priority)
        return queue

    # ------------------------------------------------------------
    # Size / inspection
    # ------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._heap) - 1

    def __bool__(self) -> bool:
        return len(self._heap) > 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self)})"

    def is_empty(self) -> bool:
        return not self

    @property
    def heap(self) -> List[Optional[Entry[T, P]]]:
        """Snapshot of the underlying slots, sentinel included."""
        return list(self._heap)

    def peek_max(self) -> Entry[T, P]:
        """Return the highest-priority entry without removing it."""
        if not self:
            raise EmptyQueueError("peek_max from an empty priority queue")
        return self._heap[ROOT]

    # ------------------------------------------------------------
    # Insert / extract
    # ------------------------------------------------------------
    def insert(self, value: T, priority: P) -> None:
        """
        Add `value` with `priority`.

        The new entry goes to the next free leaf (the end of the list, which
        keeps the tree complete) and is sifted up toward the root while it
        strictly outranks its parent. Equal priorities never swap.
        Runs in O(log n).

        If a priority comparison raises, the queue is left unchanged.
        """
        entry = Entry(value, priority)
        idx = len(self._heap)
        path = self._sift_up_path(entry, idx)

        self._heap.append(entry)
        if self.verbose:
            print(f"insert: {entry!r} at slot {idx}")
        self._apply_path(idx, path, "sift_up")

    def extract_max(self) -> Entry[T, P]:
        """
        Remove and return the highest-priority entry.

        The last leaf is moved to the root and sifted down; ties among equal
        maxima are broken arbitrarily. Runs in O(log n).

        If a priority comparison raises, the queue is left unchanged.

        Raises:
            - EmptyQueueError: the queue holds no entries.
        """
        heap = self._heap

        # 0 or 1 entry: moving the last leaf to the root would overwrite itself
        if len(heap) < 3:
            if len(heap) < 2:
                heap[0] = None
                raise EmptyQueueError("extract_max from an empty priority queue")
            entry = heap.pop()
            heap[0] = None
            if self.verbose:
                print(f"extract_max: {entry!r} (queue now empty)")
            return entry

        # the tail leaves its slot, so the heap shrinks by one before sifting
        path = self._sift_down_path(heap[-1], ROOT, len(heap) - 1)

        entry = heap[ROOT]
        heap[ROOT] = heap.pop()
        if self.verbose:
            print(f"extract_max: {entry!r}, moved {heap[ROOT]!r} to root")
        self._apply_path(ROOT, path, "sift_down")
        return entry

    def drain(self) -> Iterator[Entry[T, P]]:
        """Yield entries in non-increasing priority order, emptying the queue."""
        while self:
            yield self.extract_max()

    # ------------------------------------------------------------
    # Heap repair
    #
    # Each sift first walks the tree and returns the slots the moving entry
    # passes through; the heap is only mutated once every comparison has
    # succeeded.
    # ------------------------------------------------------------
    def _sift_up_path(self, entry: Entry[T, P], idx: int) -> List[int]:
        heap = self._heap
        higher = self._higher

        path = []
        parent = idx // 2
        while parent >= ROOT and higher(entry.priority, heap[parent].priority):
            path.append(parent)
            parent //= 2
        return path

    def _sift_down_path(self, entry: Entry[T, P], idx: int, size: int) -> List[int]:
        heap = self._heap
        higher = self._higher

        path = []
        while True:
            left = 2 * idx
            right = left + 1
            if left >= size:
                break

            # prefer the right child when it is >= the left one
            child = left
            if right < size and not higher(heap[left].priority, heap[right].priority):
                child = right

            # descend while the chosen child is >= the moving entry
            if higher(entry.priority, heap[child].priority):
                break

            path.append(child)
            idx = child
        return path

    def _apply_path(self, idx: int, path: List[int], label: str) -> None:
        heap = self._heap
        for target in path:
            heap[idx], heap[target] = heap[target], heap[idx]
            if self.verbose:
                print(f"\t{label}: slot {idx} <-> slot {target}")
            idx = target
