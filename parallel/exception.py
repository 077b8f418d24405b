"""Handlers for errors raised by tasks while they run."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

Dealer = Callable[[Any], None]


class ExceptionProxy(ABC):
    """Builds a dealer for an error, given the arguments passed to ``wait``."""

    @abstractmethod
    def deal(self, *args: Any) -> Dealer:
        """Return a callable that handles one error."""


class DefaultException(ExceptionProxy):
    """Prints the error and carries on."""

    def deal(self, *args: Any) -> Dealer:
        def _print(err: Any) -> None:
            print(err)

        return _print


def default_exception() -> ExceptionProxy:
    """Return the handler used when none is configured."""
    return DefaultException()