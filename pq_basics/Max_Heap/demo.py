"""
Demo driver for MaxHeapPriorityQueue.

Inserts a handful of labeled activities, then extracts until the queue is
empty and prints them in descending priority order.

    python -m pq_basics.Max_Heap.demo
    python -m pq_basics.Max_Heap.demo --pairs sleep=8 code=9 --verbose
"""

import math
import argparse
from typing import List, Optional, Sequence, Tuple

from .entry import Entry
from .max_heap_priority_queue import MaxHeapPriorityQueue
from .utils import tee_stdout

DEFAULT_ACTIVITIES: List[Tuple[str, int]] = [
    ("play", 1),
    ("eat", 10),
    ("pee", 3),
    ("poop", 7),
    ("be happy", 5),
]


def parse_pair(text: str) -> Tuple[str, float]:
    """
    Parse a NAME=PRIORITY argument. Integral priorities stay ints.
    """
    name, sep, priority_str = text.rpartition("=")
    if not sep or not name:
        raise ValueError(f"Invalid pair (expected NAME=PRIORITY): {text!r}")

    try:
        priority = int(priority_str)
    except ValueError:
        try:
            priority = float(priority_str)
        except ValueError:
            raise ValueError(f"Invalid priority in pair: {text!r}") from None
        if not math.isfinite(priority):
            raise ValueError(f"Priority must be finite: {text!r}")

    return name, priority


def main(argv: Optional[Sequence[str]] = None) -> List[Entry[str, float]]:
    parser = argparse.ArgumentParser(description="Max-heap priority queue demo")
    parser.add_argument(
        "--pairs",
        "-p",
        type=str,
        nargs="+",
        default=None,
        help="activities as NAME=PRIORITY (defaults to the built-in five)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="print sift traces")
    parser.add_argument("--log_path", type=str, default=None, help="also write output to this file")
    args = parser.parse_args(argv)

    if args.pairs is None:
        activities = list(DEFAULT_ACTIVITIES)
    else:
        activities = [parse_pair(p) for p in args.pairs]

    with tee_stdout(args.log_path):
        print("\n========== Demo Config ==========")
        for k, v in sorted(vars(args).items()):
            print(f"{k:15s}: {v}")
        print("=================================\n")

        pq = MaxHeapPriorityQueue.from_pairs(activities, verbose=args.verbose)
        print(f"built {pq!r}")

        drained = list(pq.drain())
        for entry in drained:
            print(entry)

    return drained


if __name__ == "__main__":
    main()
