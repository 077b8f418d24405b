"""A list of executors that run one after another."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from .executor import Executor


class TaskQueue:
    """Executors run in the order they were pushed."""

    def __init__(self) -> None:
        self._handlers: list[Executor] = []

    def push(self, f: Callable[..., Any], *args: Any) -> Executor:
        """Append a call to the queue and return its executor."""
        executor = Executor(f, *args)
        self._handlers.append(executor)
        return executor

    def purge(self) -> None:
        """Run every executor in order."""
        for executor in self._handlers:
            executor.do()

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[Executor]:
        return iter(self._handlers)