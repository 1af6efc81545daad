"""Worked answers for the thread exercises: joining, shared state and channels."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from queue import SimpleQueue


def _timed_sleep(index: int, delay: float) -> int:
    start = time.monotonic_ns()
    time.sleep(delay)
    print(f"thread {index} is complete")
    return (time.monotonic_ns() - start) // 1_000_000


def run_timed_workers(count: int = 10, delay: float = 0.25) -> list[int]:
    """Run ``count`` sleeping workers at once; return each one's time in milliseconds."""
    with ThreadPoolExecutor(max_workers=max(count, 1)) as pool:
        futures = [pool.submit(_timed_sleep, i, delay) for i in range(count)]
        results = [future.result() for future in futures]
    if len(results) != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    print()
    for i, result in enumerate(results):
        print(f"thread {i} took {result}ms")
    return results


@dataclass
class JobStatus:
    """A counter of finished jobs shared between threads; hold ``lock`` to update it."""

    jobs_completed: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)


def count_jobs(count: int = 10, delay: float = 0.25) -> JobStatus:
    """Have ``count`` threads each record one finished job; return the shared status."""
    status = JobStatus()

    def job() -> None:
        time.sleep(delay)
        with status.lock:
            status.jobs_completed += 1

    threads = [threading.Thread(target=job) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
        with status.lock:
            completed = status.jobs_completed
        print(f"jobs completed {completed}")
    return status


@dataclass(frozen=True)
class Queue:
    """Values to send, split into two halves for two sending threads."""

    length: int = 10
    first_half: tuple[int, ...] = (1, 2, 3, 4, 5)
    second_half: tuple[int, ...] = (6, 7, 8, 9, 10)


_DONE = object()


def send_queue(queue: Queue, delay: float = 1.0) -> Iterator[int]:
    """Send both halves from two threads and yield values as they arrive.

    The iteration ends once both senders have finished.
    """
    channel: SimpleQueue[object] = SimpleQueue()

    def sender(values: tuple[int, ...]) -> None:
        try:
            for value in values:
                print(f"sending {value}")
                channel.put(value)
                time.sleep(delay)
        finally:
            channel.put(_DONE)

    senders = [
        threading.Thread(target=sender, args=(half,), daemon=True)
        for half in (queue.first_half, queue.second_half)
    ]
    for thread in senders:
        thread.start()

    remaining = len(senders)
    while remaining:
        item = channel.get()
        if item is _DONE:
            remaining -= 1
            continue
        print(f"Got: {item}")
        yield item  # type: ignore[misc]
    for thread in senders:
        thread.join()