"""A fixed set of worker threads draining a shared task queue."""

from __future__ import annotations

import os
import threading
from collections import deque
from typing import Callable, Optional


class ThreadPool:
    """Runs submitted callables on ``num_threads`` workers.

    Shutting down lets the workers finish every queued task before they exit.
    Exceptions raised by tasks are collected in ``errors``.
    """

    def __init__(self, num_threads: Optional[int] = None) -> None:
        count = num_threads if num_threads is not None else (os.cpu_count() or 1)
        if count < 1:
            raise ValueError("a pool needs at least one thread")
        self._tasks: deque[Callable[[], object]] = deque()
        self._update = threading.Condition()
        self._stopping = False
        self.errors: list[Exception] = []
        self._threads = [
            threading.Thread(target=self._work, daemon=True) for _ in range(count)
        ]
        for thread in self._threads:
            thread.start()

    def _work(self) -> None:
        while True:
            with self._update:
                self._update.wait_for(lambda: len(self._tasks) > 0 or self._stopping)
                if not self._tasks:
                    return
                task = self._tasks.popleft()
            try:
                task()
            except Exception as exc:
                with self._update:
                    self.errors.append(exc)

    def submit(self, task: Callable[[], object]) -> None:
        """Queue ``task`` to run on the next free worker."""
        with self._update:
            if self._stopping:
                raise RuntimeError("cannot submit to a pool that is shutting down")
            self._tasks.append(task)
            self._update.notify()

    def shutdown(self) -> None:
        """Stop accepting tasks, run those still queued and join the workers."""
        with self._update:
            self._stopping = True
            self._update.notify_all()
        for thread in self._threads:
            thread.join()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, *args: object) -> None:
        self.shutdown()