from unittest import mock

import pytest

from parallel.examples import (
    A,
    B,
    BadCall,
    DataA,
    DataB,
    Obj,
    a_and_b,
    call_dts,
    call_other,
    call_string,
    get_info_a,
    get_info_b,
)


@pytest.fixture(autouse=True)
def no_sleep():
    with mock.patch("time.sleep") as sleeper:
        yield sleeper


def test_call_string_non_number():
    assert call_string("Hello World") == ("Hello World", 0)


def test_call_string_number():
    assert call_string("42") == ("42", 42)
    assert call_string("-7") == ("-7", -7)


def test_call_string_clamps_huge_values():
    big = "9" * 30
    assert call_string(big)[1] == 2**63 - 1


def test_call_dts():
    assert call_dts(123) == "123"


def test_call_other():
    assert call_other(1, 2) == Obj(name="called: 1~2")


def test_obj_string_sleeps_and_returns_name(no_sleep):
    assert Obj(name="hello again").string() == "hello again"
    no_sleep.assert_called_once_with(4)


def test_bad_calls_raise():
    bad = BadCall()
    with pytest.raises(IndexError):
        bad.slice_out_of_range()
    with pytest.raises(TypeError):
        bad.assignment_to_nil_map()


def test_data_a_dto_parses_list():
    row = DataA(id=3, a1='["x", "y"]', a2=9)
    assert row.dto() == A(id=3, a1=["x", "y"], a2=9)


def test_data_a_dto_bad_json_gives_none():
    assert DataA(id=3, a1="not json", a2=1).dto().a1 is None


def test_data_b_dto_round_trip():
    row = DataB(id=4, b1="text", b2=8)
    result = row.dto()
    assert (result.id, result.b1, result.b2) == (row.id, row.b1, row.b2)


def test_get_info_a():
    a = get_info_a(None, 1)
    assert a.id == 1
    assert a.a1 == ["i am a11", "i am a12"]
    assert a.a2 == 100


def test_get_info_b():
    b = get_info_b(None, 2)
    assert b.id == 2
    assert b.b1 == "B: 2"


def test_a_and_b_round_trip():
    a = A(id=1, a1=["p", "q"], a2=5)
    b = B(id=2, b1="B: 2", b2=6)
    res = a_and_b(a, b)
    assert res["a"] == {"id": a.id, "a1": a.a1, "a2": a.a2}
    assert res["b"] == {"Id": b.id, "B1": b.b1, "B2": b.b2}


def test_a_and_b_with_missing_parts():
    assert a_and_b(None, None) == {"a": None, "b": None}