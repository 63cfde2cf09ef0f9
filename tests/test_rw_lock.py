"""
tests/test_rw_lock.py

Unit tests for university/sync/rw_lock.py.

Covers:
    L1 - two readers hold the lock at the same time
    L2 - a writer waits until readers release
    L3 - a waiting writer blocks new readers (writer preference)
    L4 - the owning writer may re-enter the write side and take the read side
    L5 - mismatched releases raise RuntimeError

Every thread join / wait uses a timeout so a regression fails instead of hanging.
"""

import sys
import threading
import time
import unittest
from pathlib import Path

# ---------------------------------------------------------------------------
# PYTHONPATH bootstrap: repo root must be importable from any test runner.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from university.sync.rw_lock import ReadWriteLock  # noqa: E402

TIMEOUT = 2.0
# Long enough for a thread that should be blocked to have run if it weren't.
SETTLE = 0.1


def _wait_until(predicate, timeout: float = TIMEOUT) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


class TestReadWriteLock(unittest.TestCase):

    def setUp(self):
        self.lock = ReadWriteLock()

    # ------------------------------------------------------------------
    # L1 - shared readers
    # ------------------------------------------------------------------
    def test_readers_hold_lock_concurrently(self):
        """Both readers must reach the barrier while holding the read side."""
        barrier = threading.Barrier(2, timeout=TIMEOUT)
        errors: list[BaseException] = []

        def reader():
            try:
                with self.lock.read_locked():
                    barrier.wait()
            except threading.BrokenBarrierError as exc:
                errors.append(exc)

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(TIMEOUT)

        self.assertEqual(errors, [], "readers must not block each other")

    # ------------------------------------------------------------------
    # L2 - writer excluded while a reader holds the lock
    # ------------------------------------------------------------------
    def test_writer_waits_for_reader(self):
        """acquire_write() must not return until the reader releases."""
        acquired = threading.Event()

        def writer():
            with self.lock.write_locked():
                acquired.set()

        self.lock.acquire_read()
        t = threading.Thread(target=writer)
        t.start()

        self.assertFalse(acquired.wait(SETTLE), "writer entered while a reader held the lock")

        self.lock.release_read()
        self.assertTrue(acquired.wait(TIMEOUT), "writer never acquired after reader released")
        t.join(TIMEOUT)

    # ------------------------------------------------------------------
    # L3 - writer preference
    # ------------------------------------------------------------------
    def test_waiting_writer_blocks_new_readers(self):
        """Once a writer is queued, a new reader must wait behind it."""
        order: list[str] = []
        writer_done = threading.Event()
        reader_done = threading.Event()

        def writer():
            with self.lock.write_locked():
                order.append("writer")
            writer_done.set()

        def late_reader():
            with self.lock.read_locked():
                order.append("reader")
            reader_done.set()

        self.lock.acquire_read()
        w = threading.Thread(target=writer)
        w.start()
        self.assertTrue(_wait_until(lambda: self.lock._writers_waiting == 1))

        r = threading.Thread(target=late_reader)
        r.start()
        self.assertFalse(reader_done.wait(SETTLE), "new reader overtook a waiting writer")

        self.lock.release_read()
        self.assertTrue(writer_done.wait(TIMEOUT))
        self.assertTrue(reader_done.wait(TIMEOUT))
        w.join(TIMEOUT)
        r.join(TIMEOUT)

        self.assertEqual(order, ["writer", "reader"])

    # ------------------------------------------------------------------
    # L4 - re-entrancy for the owning writer
    # ------------------------------------------------------------------
    def test_owning_writer_can_reenter_and_read(self):
        """Nested write and read acquisitions by the writer must not deadlock."""
        with self.lock.write_locked():
            with self.lock.write_locked():
                with self.lock.read_locked():
                    self.assertTrue(self.lock.write_held)
            self.assertTrue(self.lock.write_held, "inner release must not drop the outer hold")
        self.assertFalse(self.lock.write_held)

        # Fully released: another thread can now write.
        acquired = threading.Event()

        def writer():
            with self.lock.write_locked():
                acquired.set()

        t = threading.Thread(target=writer)
        t.start()
        self.assertTrue(acquired.wait(TIMEOUT))
        t.join(TIMEOUT)

    def test_write_held_is_false_for_other_threads(self):
        """write_held reports ownership for the calling thread only."""
        seen: list[bool] = []
        with self.lock.write_locked():
            t = threading.Thread(target=lambda: seen.append(self.lock.write_held))
            t.start()
            t.join(TIMEOUT)
        self.assertEqual(seen, [False])

    # ------------------------------------------------------------------
    # L5 - misuse
    # ------------------------------------------------------------------
    def test_release_read_without_acquire_raises(self):
        with self.assertRaises(RuntimeError):
            self.lock.release_read()

    def test_release_write_by_non_owner_raises(self):
        """A thread that does not own the write side cannot release it."""
        with self.assertRaises(RuntimeError):
            self.lock.release_write()

        errors: list[BaseException] = []

        def intruder():
            try:
                self.lock.release_write()
            except RuntimeError as exc:
                errors.append(exc)

        with self.lock.write_locked():
            t = threading.Thread(target=intruder)
            t.start()
            t.join(TIMEOUT)
        self.assertEqual(len(errors), 1)


if __name__ == "__main__":
    unittest.main()
