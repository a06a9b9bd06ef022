"""
Profiling smoke tests for MaxHeapPriorityQueue.

Pushes a large stream of numpy-generated priorities through the queue under
cProfile to surface gross performance regressions (e.g. a sift loop that
degrades to linear time). Memory usage is reported via psutil.
"""

import os
import sys
import time
import cProfile
import pstats
import unittest
from io import StringIO

import numpy as np
import psutil

from pq_basics.Max_Heap import MaxHeapPriorityQueue
from pq_basics.Max_Heap.utils import TeeStdout


LOG_PATH = "pq_basics/Max_Heap/tests/test_02_profile_max_heap_priority_queue.txt"


class TestMaxHeapProfile(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.log_path = LOG_PATH
        os.makedirs(os.path.dirname(cls.log_path), exist_ok=True)
        cls._orig_stdout = sys.stdout
        cls._log_file = open(cls.log_path, "w", encoding="utf-8")
        sys.stdout = TeeStdout(sys.stdout, cls._log_file)


    @classmethod
    def tearDownClass(cls):
        sys.stdout = cls._orig_stdout
        cls._log_file.close()


    # cProfile helper function
    def _profile_insert_and_drain(
        self,
        num_entries: int,
        priority_range: int,
        seed: int = 51,
        max_time_in_sec: float = None,
    ):
        """
        Insert `num_entries` random priorities, drain the queue, and check
        the output order plus optional wall-clock limit.
        """
        rng = np.random.default_rng(seed)
        priorities = rng.integers(0, priority_range, size=num_entries).tolist()
        process = psutil.Process(os.getpid())

        profiler = cProfile.Profile()
        profiler.enable()
        start_time = time.perf_counter()

        pq = MaxHeapPriorityQueue()
        for i, priority in enumerate(priorities):
            pq.insert(i, priority)
        insert_time = time.perf_counter()

        drained = [entry.priority for entry in pq.drain()]

        end_time = time.perf_counter()
        profiler.disable()

        print(f"insert: {insert_time - start_time:.2f} sec for {num_entries} entries")
        print(f"drain:  {end_time - insert_time:.2f} sec for {num_entries} entries")

        # --- Memory usage ---
        mem_info = process.memory_info()
        rss_MB = mem_info.rss / 1024**2
        print(f"RSS memory (resident): {rss_MB:.1f} MB")

        # --- Correctness ---
        self.assertEqual(len(drained), num_entries)
        self.assertEqual(drained, sorted(priorities, reverse=True))
        self.assertEqual(len(pq), 0)

        if max_time_in_sec is not None:
            self.assertLessEqual(
                end_time - start_time, max_time_in_sec,
                f"insert + drain exceeded {max_time_in_sec} s, took {end_time - start_time:.2f} s"
            )

        # --- Print profiling summary ---
        s = StringIO()
        stats = pstats.Stats(profiler, stream=s)
        stats.strip_dirs().sort_stats("cumulative").print_stats(10)

        print(f"\n========== cProfile Results ({num_entries} entries) ==========")
        print(s.getvalue())


    def test_01_profile_many_distinct_priorities(self):
        print(f"\n[{self._testMethodName}]")
        self._profile_insert_and_drain(
            num_entries = 50_000,
            priority_range = 1_000_000,
            max_time_in_sec = 60
        )


    def test_02_profile_heavy_ties(self):
        print(f"\n[{self._testMethodName}]")
        self._profile_insert_and_drain(
            num_entries = 50_000,
            priority_range = 4,
            max_time_in_sec = 60
        )


if __name__ == "__main__":
    unittest.main()
