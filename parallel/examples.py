"""Sample tasks of varying duration used by the demonstrations."""

from __future__ import annotations

import json
import re
import time
from dataclasses import dataclass, field
from typing import Any

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    """Parse a decimal integer; 0 when it is not one, clamped to 64 bits."""
    if not _INTEGER.fullmatch(text):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(text)))


def _int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


@dataclass
class Obj:
    """A named object."""

    name: str

    def string(self) -> str:
        """Return the name, slowly."""
        print("Running Obj.String")
        time.sleep(4)
        return self.name


def call_string(s: str) -> tuple[str, int]:
    """Return the string and its integer value (0 if it is not a number)."""
    print("Running CallString")
    time.sleep(1)
    return s, _atoi(s)


def call_dts(x: int) -> str:
    """Return ``x`` in decimal."""
    print("Running CallDts")
    time.sleep(2)
    return f"{x:d}"


def call_other(x: int, y: int) -> Obj:
    """Return an object naming both arguments."""
    print("Running CallOther")
    time.sleep(3)
    return Obj(name=f"called: {x}~{y}")


class BadCall:
    """Calls that always fail."""

    def slice_out_of_range(self) -> int:
        items = [1, 2, 3, 4, 5]
        return items[100]

    def assignment_to_nil_map(self) -> None:
        mapping: Any = None
        mapping[1] = Obj(name="1")


@dataclass
class A:
    id: int
    a1: list[str] | None = None
    a2: int = 0


@dataclass
class DataA:
    """A row of table ``a``; ``a1`` holds a JSON list of strings."""

    id: int
    a1: str = ""
    a2: int = 0

    def dto(self) -> A:
        try:
            parsed = json.loads(self.a1)
        except ValueError:
            parsed = None
        if not (isinstance(parsed, list) and all(isinstance(x, str) for x in parsed)):
            parsed = None
        return A(id=self.id, a1=parsed, a2=self.a2)


def get_info_a(ctx: Any, id: int) -> A:
    """Look up record A by id."""
    print("Running GetInfoA")
    time.sleep(1)
    row = DataA(id=id, a1='["i am a11", "i am a12"]', a2=_int32(id * 100))
    return row.dto()


@dataclass
class B:
    id: int
    b1: str = ""
    b2: int = 0


@dataclass
class DataB:
    """A row of table ``b``."""

    id: int
    b1: str = ""
    b2: int = 0

    def dto(self) -> B:
        return B(id=self.id, b1=self.b1, b2=self.b2)


def get_info_b(ctx: Any, id: int) -> B:
    """Look up record B by id."""
    print("Running GetInfoB")
    time.sleep(2)
    row = DataB(id=id, b1=f"B: {id}", b2=_int32(id * 100))
    return row.dto()


def a_and_b(a: A | None, b: B | None) -> dict[str, Any]:
    """Combine A and B into one JSON-shaped dictionary."""
    print("Running AAndB", a, b)
    time.sleep(1)
    combined = {
        "a": None if a is None else {"id": a.id, "a1": a.a1, "a2": a.a2},
        "b": None if b is None else {"Id": b.id, "B1": b.b1, "B2": b.b2},
    }
    encoded = json.dumps(combined, separators=(",", ":"), ensure_ascii=False)
    print(encoded)
    return json.loads(encoded)