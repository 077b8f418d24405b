"""Demonstrations of running tasks with :class:`Parallel`."""

from __future__ import annotations

import argparse
import threading
import time
from typing import Any, Callable, Sequence

from .examples import (
    A,
    B,
    BadCall,
    Obj,
    a_and_b,
    call_dts,
    call_other,
    call_string,
    get_info_a,
    get_info_b,
)
from .exception import Dealer, ExceptionProxy
from .executor import Result
from .parallel import Parallel


def _report_time(start: float) -> None:
    print(f"time cost: {int(time.monotonic() - start)} s")


def run_basic() -> dict[str, Any]:
    """Every call in its own queue; total time is the longest call."""
    cs, csd, dts, obj, obj2r = Result(), Result(), Result(), Result(), Result()
    obj2 = Obj(name="hello again")

    p = Parallel()
    start = time.monotonic()
    p.add(call_string, "Hello World").set_res(cs, csd)
    p.add(call_dts, 123).set_res(dts)
    p.add(call_other, 1, 2).set_res(obj)
    p.add(obj2.string).set_res(obj2r)
    p.wait()

    print(cs.value, csd.value)
    print(dts.value)
    print(obj.value.name)
    print(obj2r.value)
    _report_time(start)
    return {"cs": cs.value, "csd": csd.value, "dts": dts.value,
            "obj": obj.value, "obj2r": obj2r.value}


def run_child() -> dict[str, Any]:
    """Two child groups fetch A and B, then the parent combines them."""
    a: Result = Result()
    b: Result = Result()
    res: Result = Result()
    ctx = None

    p = Parallel()
    start = time.monotonic()
    p.give_birth().add(get_info_a, ctx, 1).set_res(a)
    p.give_birth().add(get_info_b, ctx, 2).set_res(b)
    p.add(lambda: a_and_b(a.value, b.value)).set_res(res)
    p.wait()

    print(a.value)
    print(b.value)
    print(res.value)
    _report_time(start)
    return {"a": a.value, "b": b.value, "res": res.value}


class _PrintingException(ExceptionProxy):
    """Prints each error with the wait arguments and keeps a record of it."""

    def __init__(self) -> None:
        self.handled: list[tuple[BaseException, tuple[Any, ...]]] = []
        self._lock = threading.Lock()

    def deal(self, *args: Any) -> Dealer:
        def _handle(err: Any) -> None:
            print(err, list(args))
            with self._lock:
                self.handled.append((err, args))

        return _handle


def run_exception() -> list[tuple[BaseException, tuple[Any, ...]]]:
    """Failing calls are passed to a custom handler; returns what it handled."""
    a = Result()
    bad = BadCall()
    handler = _PrintingException()

    p = Parallel().with_exception(handler)
    p.add(bad.assignment_to_nil_map)
    p.add(bad.slice_out_of_range).set_res(a)
    p.wait(1, 2, 3)
    return handler.handled


def run_multique() -> dict[str, Any]:
    """Several queues side by side; calls within a queue run in order."""
    cs, csd, dts, obj, obj2r = Result(), Result(), Result(), Result(), Result()
    obj2 = Obj(name="hello again")

    p = Parallel()
    start = time.monotonic()
    first = p.queue()
    first.push(call_string, "Hello World").set_res(cs, csd)
    first.push(call_other, 1, 2).set_res(obj)
    second = p.queue()
    second.push(call_dts, 123).set_res(dts)
    p.add(obj2.string).set_res(obj2r)
    p.wait()

    print(cs.value, csd.value)
    print(dts.value)
    print(obj.value.name)
    print(obj2r.value)
    _report_time(start)
    return {"cs": cs.value, "csd": csd.value, "dts": dts.value,
            "obj": obj.value, "obj2r": obj2r.value}


def run_que() -> dict[str, Any]:
    """All calls in one queue; total time is the sum of the calls."""
    cs, csd, dts, obj, obj2r = Result(), Result(), Result(), Result(), Result()
    obj2 = Obj(name="hello again")

    p = Parallel()
    start = time.monotonic()
    que = p.queue()
    que.push(call_string, "Hello World").set_res(cs, csd)
    que.push(call_dts, 123).set_res(dts)
    que.push(call_other, 1, 2).set_res(obj)
    que.push(obj2.string).set_res(obj2r)
    print(f"queue of {len(que)} calls")
    p.wait()

    print(cs.value, csd.value)
    print(dts.value)
    print(obj.value.name)
    print(obj2r.value)
    _report_time(start)
    return {"cs": cs.value, "csd": csd.value, "dts": dts.value,
            "obj": obj.value, "obj2r": obj2r.value}


_DEMOS: dict[str, Callable[[], Any]] = {
    "basic": run_basic,
    "child": run_child,
    "exception": run_exception,
    "multique": run_multique,
    "que": run_que,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one demonstration, or all of them."""
    parser = argparse.ArgumentParser(prog="parallel-demo", description=__doc__)
    parser.add_argument("demo", nargs="?", default="all",
                        choices=["all", *_DEMOS])
    options = parser.parse_args(argv)
    names = list(_DEMOS) if options.demo == "all" else [options.demo]
    for name in names:
        print(f"== {name} ==")
        _DEMOS[name]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())