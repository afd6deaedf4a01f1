"""Tests for in-place operations: add/set/remove, populate-on-miss and extend."""

import pytest

from maputils import mutate, exceptions


def test_add_then_add_again_raises_and_keeps_first(abc):
    mutate.add(abc, "d", 4)
    assert abc["d"] == 4
    with pytest.raises(exceptions.DuplicateKeyError, match="'d'"):
        mutate.add(abc, "d", 5)
    assert abc["d"] == 4


def test_duplicate_key_error_is_a_key_error():
    with pytest.raises(KeyError):
        mutate.add({"a": None}, "a", 1)


def test_set_upserts(abc):
    mutate.set(abc, "a", 10)
    mutate.set(abc, "z", 26)
    assert abc == {"a": 10, "b": 2, "c": 3, "z": 26}


def test_remove_reports_outcome(abc):
    assert mutate.remove(abc, "b") is True
    assert "b" not in abc
    before = dict(abc)
    assert mutate.remove(abc, "b") is False
    assert abc == before


def test_clear_and_destroy_empty_in_place(abc):
    ref = abc
    mutate.clear(abc)
    assert ref == {}
    other = {"x": 1}
    mutate.destroy(other)
    assert other == {}


def test_set_if_undefined_keeps_first_value():
    m = {}
    assert mutate.set_if_undefined(m, "x", 5) == 5
    assert m == {"x": 5}
    assert mutate.set_if_undefined(m, "x", 7) == 5
    assert m == {"x": 5}


def test_set_if_undefined_respects_stored_none():
    m = {"x": None}
    assert mutate.set_if_undefined(m, "x", 1) is None


def test_set_if_absent_lazy_only_calls_supplier_on_miss():
    calls = []

    def supplier():
        calls.append(1)
        return "computed"

    cache = {}
    assert mutate.set_if_absent_lazy(cache, "k", supplier) == "computed"
    assert mutate.set_if_absent_lazy(cache, "k", supplier) == "computed"
    assert len(calls) == 1
    assert cache == {"k": "computed"}


def test_extend_merges_later_sources_win():
    o = {}
    out = mutate.extend(o, {"a": 0, "b": 1})
    assert out is o
    assert o == {"a": 0, "b": 1}
    mutate.extend(o, {"b": 2, "c": 3}, None, {"c": 4})
    assert o == {"a": 0, "b": 2, "c": 4}


def test_extend_is_shallow():
    inner = {"deep": 1}
    o = mutate.extend({}, {"k": inner})
    assert o["k"] is inner
