"""
Fixed-size worker pool shipping composed events off the caller's thread.
"""
from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional

from hatari.constants import NUM_THREADS_FOR_HTTP_REQUESTS
from hatari.models import ClientIdentity

from .callbacks import UploadEventCallback, route
from .outcomes import SubmissionOutcome, TransportFailure, describe_exception

logger = logging.getLogger(__name__)

Submitter = Callable[["DispatchTask"], SubmissionOutcome]

_STOP = object()


@dataclass(frozen=True)
class DispatchTask:
    identity: ClientIdentity
    collection: str
    body: bytes
    callback: Optional[UploadEventCallback] = None


class DispatchPool:
    """
    N daemon worker threads draining a FIFO queue of :class:`DispatchTask`.

    ``submit`` only enqueues, so it never waits on the network. Workers are
    started on the first submission and live for the rest of the process.
    With more than one worker, tasks can complete in a different order than
    they were submitted.
    """

    def __init__(
        self,
        submitter: Submitter,
        workers: int = NUM_THREADS_FOR_HTTP_REQUESTS,
        task_queue: Optional[queue.Queue] = None,
    ):
        """
        Initialize the pool.

        Args:
            submitter: Performs one submission and returns its outcome.
            workers: Number of worker threads.
            task_queue: Queue to drain, unbounded FIFO by default.
        """
        if workers < 1:
            raise ValueError(f"A dispatch pool needs at least one worker, got {workers}")

        self._submitter = submitter
        self._workers = workers
        self._queue: queue.Queue = task_queue if task_queue is not None else queue.Queue()
        self._threads: List[threading.Thread] = []
        self._lock = threading.Lock()
        self._closed = False

    @property
    def workers(self) -> int:
        return self._workers

    @property
    def started(self) -> bool:
        return bool(self._threads)

    def start(self) -> None:
        with self._lock:
            self._start_workers()

    def _start_workers(self) -> None:
        # Caller holds self._lock
        if self._threads or self._closed:
            return

        for index in range(self._workers):
            thread = threading.Thread(
                target=self._worker,
                name=f"hatari-dispatch-{index}",
                daemon=True,
            )
            thread.start()
            self._threads.append(thread)

        logger.debug("Started %d dispatch workers", self._workers)

    def submit(self, task: DispatchTask) -> None:
        """
        Queue a task and return immediately.

        Raises:
            RuntimeError: If the pool was closed.
        """
        with self._lock:
            if self._closed:
                raise RuntimeError("Cannot submit to a closed dispatch pool")

            self._start_workers()
            self._queue.put(task)

        logger.debug("Queued event for collection %s", task.collection)

    def join(self) -> None:
        """
        Block until every task queued so far has been processed.
        """
        self._queue.join()

    def close(self, timeout: Optional[float] = None) -> None:
        """
        Stop the workers once the tasks already queued are done.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            threads = list(self._threads)

            # Sentinels go behind every task accepted before the close
            for _ in threads:
                self._queue.put(_STOP)

        for thread in threads:
            thread.join(timeout)

    def _worker(self) -> None:
        while True:
            task = self._queue.get()
            try:
                if task is _STOP:
                    return
                self._process(task)
            finally:
                self._queue.task_done()

    def _process(self, task: DispatchTask) -> None:
        try:
            outcome = self._submitter(task)
        except Exception as e:
            logger.exception("Unexpected error submitting event to %s", task.collection)
            outcome = TransportFailure(describe_exception(e))

        try:
            route(outcome, task.callback)
        except Exception:
            logger.exception("Upload callback for collection %s raised", task.collection)


_default_pool: Optional[DispatchPool] = None
_default_pool_lock = threading.Lock()


def get_default_pool() -> DispatchPool:
    """
    Return the process-wide pool, creating it from the resolved settings on
    first use.
    """
    global _default_pool

    with _default_pool_lock:
        if _default_pool is None:
            from hatari.config import get_settings
            from .http import EventSender

            settings = get_settings()
            sender = EventSender(
                base_url=settings.base_url,
                api_version=settings.api_version,
                timeout=settings.timeout,
            )
            _default_pool = DispatchPool(sender.submit_one, workers=settings.workers)

        return _default_pool
