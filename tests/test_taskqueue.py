from dataclasses import dataclass

import pytest

from parallel.errors import NotAFunctionError
from parallel.executor import Result
from parallel.taskqueue import TaskQueue


def _atoi(s):
    try:
        return int(s)
    except ValueError:
        return 0


def call_string(s):
    return s, _atoi(s)


def call_dts(x):
    return f"{x}"


@dataclass
class Obj:
    name: str

    def string(self):
        return self.name


def call_other(x, y):
    return Obj(name=f"called: {x}~{y}")


def test_queue_runs_all_tasks():
    cs, csd, dts, obj, obj2r = Result(), Result(), Result(), Result(), Result()
    obj2 = Obj(name="hello again")

    que = TaskQueue()
    que.push(call_string, "Hello World").set_res(cs, csd)
    que.push(call_dts, 123).set_res(dts)
    que.push(call_other, 1, 2).set_res(obj)
    que.push(obj2.string).set_res(obj2r)
    que.purge()

    assert (cs.value, csd.value) == ("Hello World", 0)
    assert dts.value == "123"
    assert obj.value.name == "called: 1~2"
    assert obj2r.value == "hello again"


def test_push_returns_executor_in_queue():
    que = TaskQueue()
    ex = que.push(call_dts, 1)
    assert list(que) == [ex]
    assert len(que) == 1


def test_purge_runs_in_push_order():
    order = []
    que = TaskQueue()
    for i in range(3):
        que.push(order.append, i)
    que.purge()
    assert order == [0, 1, 2]


def test_purge_stops_at_error():
    order = []
    que = TaskQueue()
    que.push(order.append, "first")
    que.push(5)
    que.push(order.append, "never")
    with pytest.raises(NotAFunctionError):
        que.purge()
    assert order == ["first"]