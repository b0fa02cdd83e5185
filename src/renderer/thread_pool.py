# renderer/thread_pool.py
import logging
import sys
import threading
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import Callable, List, Optional, TextIO

logger = logging.getLogger(__name__)


class ProgressReporter:
    """Writes a carriage-return percentage to a stream as tasks complete."""
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stderr
        self.last_percent = -1

    def __call__(self, completed: int, total: int):
        percent = (completed * 100) // total if total else 100
        if percent != self.last_percent:
            self.last_percent = percent
            self.stream.write(f"\r{percent}% ")
            self.stream.flush()

    def finish(self):
        self.stream.write("\r")
        self.stream.flush()


class RenderPool:
    """
    Fixed-size pool of worker threads draining independent tasks.

    One pool is created per render. It owns the completed-task counter, which
    is only touched under its lock, and reports progress through an optional
    callback ``progress(completed, total)``.
    """
    def __init__(self, thread_count: int, progress: Optional[Callable[[int, int], None]] = None,
                 total: Optional[int] = None):
        if thread_count < 1:
            raise ValueError(f"thread_count must be at least 1, got {thread_count}")
        self.thread_count = thread_count
        self.progress = progress
        self.total = total
        self._executor = ThreadPoolExecutor(max_workers=thread_count, thread_name_prefix="render")
        self._futures: List[Future] = []
        self._lock = threading.Lock()
        self._completed = 0

    @property
    def completed(self) -> int:
        with self._lock:
            return self._completed

    @property
    def enqueued(self) -> int:
        return len(self._futures)

    def enqueue(self, fn: Callable, *args) -> Future:
        future = self._executor.submit(self._run, fn, *args)
        self._futures.append(future)
        return future

    def _run(self, fn: Callable, *args):
        result = fn(*args)
        with self._lock:
            self._completed += 1
            if self.progress is not None:
                self.progress(self._completed, self.total or len(self._futures))
        return result

    def wait_until_nothing_in_flight(self):
        """
        Block until every enqueued task has finished.

        The first task failure cancels the tasks that have not started and is
        re-raised here; the render is abandoned as a whole.
        """
        done, not_done = wait(self._futures, return_when=FIRST_EXCEPTION)
        failed = next((f for f in done if f.exception() is not None), None)
        if failed is not None:
            for future in not_done:
                future.cancel()
            self.shutdown()
            logger.error("Render task failed; aborting render")
            raise failed.exception()

    def shutdown(self):
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "RenderPool":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()
        return False
