import threading
import time

import pytest

from interviewkit.thread_pool import ThreadPool


def test_every_task_runs_before_the_context_exits():
    done = []
    lock = threading.Lock()

    def task(i):
        time.sleep(0.01)
        with lock:
            done.append(i)

    with ThreadPool(3) as pool:
        for i in range(10):
            pool.submit(lambda i=i: task(i))
    assert sorted(done) == list(range(10))
    assert list(pool.errors) == []


def test_workers_run_tasks_concurrently():
    barrier = threading.Barrier(3, timeout=5)
    passed = []
    lock = threading.Lock()

    def task():
        barrier.wait()
        with lock:
            passed.append(threading.get_ident())

    with ThreadPool(3) as pool:
        for _ in range(3):
            pool.submit(task)
    assert list(pool.errors) == []
    assert len(passed) == 3
    assert len(set(passed)) == 3


def test_submit_after_shutdown_is_rejected():
    pool = ThreadPool(2)
    pool.shutdown()
    with pytest.raises(RuntimeError):
        pool.submit(lambda: None)


def test_task_errors_are_collected_and_pool_keeps_working():
    results = []
    with ThreadPool(1) as pool:
        pool.submit(lambda: 1 / 0)
        pool.submit(lambda: results.append("after"))
    assert results == ["after"]
    assert len(pool.errors) == 1
    assert isinstance(pool.errors[0], ZeroDivisionError)


def test_thread_count_must_be_positive():
    with pytest.raises(ValueError):
        ThreadPool(0)