"""Thread lessons: joining workers, a shared counter and two producers."""

from __future__ import annotations

import queue as _queue
import threading
import time
from dataclasses import dataclass, field


def run_workers(count: int = 10, delay: float = 0.25) -> int:
    """Start workers that sleep then report, wait for all and return how many finished."""

    def work(index: int) -> None:
        time.sleep(delay)
        print(f"thread {index} is complete")

    handles = [threading.Thread(target=work, args=(i,)) for i in range(count)]
    for handle in handles:
        handle.start()
    completed = 0
    for handle in handles:
        handle.join()
        completed += 1
    if completed != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed


@dataclass
class _JobStatus:
    jobs_completed: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock)


def count_completed_jobs(count: int = 10, delay: float = 0.25) -> int:
    """Have workers bump a shared counter under a lock and return its final value."""
    status = _JobStatus()

    def work() -> None:
        time.sleep(delay)
        with status.lock:
            status.jobs_completed += 1

    handles = [threading.Thread(target=work) for _ in range(count)]
    for handle in handles:
        handle.start()
    for handle in handles:
        handle.join()
        with status.lock:
            print(f"jobs completed {status.jobs_completed}")
    with status.lock:
        return status.jobs_completed


@dataclass
class Queue:
    """Values to send, split in two halves, with the expected total count."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])
    interval: float = 1.0


def send_tx(queue: Queue, sink: _queue.Queue) -> list[threading.Thread]:
    """Send each half from its own thread into the sink; return the started threads."""

    def produce(values: list[int]) -> None:
        for value in values:
            print(f"sending {value!r}")
            sink.put(value)
            time.sleep(queue.interval)

    producers = [
        threading.Thread(target=produce, args=(list(queue.first_half),)),
        threading.Thread(target=produce, args=(list(queue.second_half),)),
    ]
    for producer in producers:
        producer.start()
    return producers


def receive_all(queue: Queue) -> list[int]:
    """Receive everything the producers send and check the expected count."""
    sink: _queue.Queue = _queue.Queue()
    producers = send_tx(queue, sink)
    received: list[int] = []
    while any(p.is_alive() for p in producers) or not sink.empty():
        try:
            value = sink.get(timeout=0.05)
        except _queue.Empty:
            continue
        print(f"Got: {value}")
        received.append(value)
    for producer in producers:
        producer.join()
    while not sink.empty():
        value = sink.get_nowait()
        print(f"Got: {value}")
        received.append(value)
    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(f"received {len(received)} values, expected {queue.length}")
    return received