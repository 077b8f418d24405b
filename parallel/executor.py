"""A single call bound to its arguments and to the slots that take its results."""

from __future__ import annotations

import functools
import types
from dataclasses import dataclass
from typing import Any, Callable

from .errors import (
    ArgInputLengthNotMatchError,
    NotAFunctionError,
    ResNilError,
    ResOutOfRangeError,
    ResTypeNotASlotError,
)

_CO_VARARGS = 0x04


@dataclass
class Result:
    """A mutable slot that receives one returned value."""

    value: Any = None


class Executor:
    """Runs ``f(*args)`` and stores what it returns into result slots."""

    def __init__(self, f: Callable[..., Any], *args: Any) -> None:
        self.f = f
        self.args = args
        self.res: tuple[Any, ...] = ()

    def set_res(self, *args: Any) -> Executor:
        """Set the slots that receive the return values; returns self."""
        self.res = args
        return self

    def do(self) -> None:
        """Validate the call, run it and fill the result slots."""
        if not callable(self.f):
            raise NotAFunctionError()
        self._check_arguments()
        for slot in self.res:
            if slot is None:
                raise ResNilError()
            if not isinstance(slot, Result):
                raise ResTypeNotASlotError()

        returned = self.f(*self.args)

        for slot, value in zip(self.res, self._unpack(returned), strict=True):
            slot.value = value

    def _check_arguments(self) -> None:
        func: Any = self.f
        offset = 0
        if isinstance(func, types.MethodType):
            func = func.__func__
            offset = 1
        if isinstance(func, functools.partial):
            return
        code = getattr(func, "__code__", None)
        if code is None:
            return

        positional = code.co_argcount - offset
        defaults = len(getattr(func, "__defaults__", None) or ())
        required = max(positional - defaults, 0)
        kw_defaults = getattr(func, "__kwdefaults__", None) or {}
        required_kwonly = code.co_kwonlyargcount - len(kw_defaults)
        has_varargs = bool(code.co_flags & _CO_VARARGS)

        count = len(self.args)
        if required_kwonly > 0 or count < required:
            raise ArgInputLengthNotMatchError()
        if not has_varargs and count > positional:
            raise ArgInputLengthNotMatchError()

    def _unpack(self, returned: Any) -> tuple[Any, ...]:
        count = len(self.res)
        if count == 0:
            if returned is not None:
                raise ResOutOfRangeError()
            return ()
        if count == 1:
            return (returned,)
        if not isinstance(returned, tuple) or len(returned) != count:
            raise ResOutOfRangeError()
        return returned