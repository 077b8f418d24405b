"""Run task queues concurrently, with child groups that finish first."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, Callable, Iterable

from .errors import ParallelError
from .exception import ExceptionProxy, default_exception
from .executor import Executor
from .taskqueue import TaskQueue


def _run_concurrently(calls: Iterable[Callable[[], Any]]) -> None:
    """Run every call on its own thread and wait for all of them.

    The first error raised by any call is raised again once all are done.
    """
    calls = list(calls)
    if not calls:
        return
    with ThreadPoolExecutor(max_workers=len(calls)) as pool:
        futures = [pool.submit(call) for call in calls]
    for future in futures:
        future.result()


class Parallel:
    """A group of task queues that run side by side.

    Queues run concurrently with one another, while the executors inside a
    queue run in order.  Child groups made with :meth:`give_birth` are all
    waited for before this group's own queues start.
    """

    def __init__(self) -> None:
        self._queues: list[TaskQueue] = []
        self._children: list[Parallel] = []
        self._exception: ExceptionProxy = default_exception()

    def with_exception(self, exception: ExceptionProxy) -> Parallel:
        """Use ``exception`` to handle errors raised by tasks; returns self."""
        self._exception = exception
        return self

    def add(self, f: Callable[..., Any], *args: Any) -> Executor:
        """Add a call in a queue of its own and return its executor."""
        return self.queue().push(f, *args)

    def queue(self) -> TaskQueue:
        """Create a new queue that runs alongside the others."""
        task_queue = TaskQueue()
        self._queues.append(task_queue)
        return task_queue

    def give_birth(self) -> Parallel:
        """Create a child group that completes before this group's queues run."""
        child = Parallel()
        child._exception = self._exception
        self._children.append(child)
        return child

    def wait(self, *args: Any) -> None:
        """Run the children, then this group's queues, and block until all finish.

        ``args`` are handed to the exception handler when a task fails.
        Errors from wrongly wired tasks are raised here instead of handled.
        """
        _run_concurrently(partial(child.wait, *args) for child in self._children)
        print("child wait finished")
        if len(self._queues) == 1:
            self._safe_run(self._queues[0], args)
            return
        _run_concurrently(partial(self._safe_run, q, args) for q in self._queues)

    def _safe_run(self, task_queue: TaskQueue, args: tuple[Any, ...]) -> None:
        try:
            task_queue.purge()
        except ParallelError:
            raise
        except Exception as err:  # task failures go to the configured handler
            self._exception.deal(*args)(err)