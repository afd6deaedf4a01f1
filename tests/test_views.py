"""Tests for read-only views: live reads, lenient vs strict writes."""

import logging
from types import MappingProxyType

import pytest

from maputils import config, exceptions, mutate, views


def test_view_reads_track_original(abc):
    view = views.create_immutable_view(abc)
    assert views.is_immutable_view(view)
    assert not views.is_immutable_view(abc)
    assert view["a"] == 1
    assert list(view) == ["a", "b", "c"]
    assert len(view) == 3
    assert view == abc
    abc["d"] = 4
    assert view["d"] == 4
    assert "d" in view


def test_lenient_view_drops_writes(abc, caplog):
    view = views.create_immutable_view(abc)
    with caplog.at_level(logging.DEBUG, logger="maputils.views"):
        view["a"] = 100
        del view["b"]
        view.update({"z": 0})
        view.clear()
        mutate.set(view, "q", 1)
        mutate.add(view, "r", 1)
    assert abc == {"a": 1, "b": 2, "c": 3}
    assert "Ignored write" in caplog.text


def test_lenient_view_pop_and_setdefault_do_not_mutate(abc):
    view = views.create_immutable_view(abc)
    assert view.pop("a") == 1
    assert view.pop("zz", "dflt") == "dflt"
    with pytest.raises(KeyError):
        view.pop("zz")
    assert view.popitem() == ("a", 1)
    assert view.setdefault("a", 5) == 1
    assert view.setdefault("n", 5) == 5
    assert abc == {"a": 1, "b": 2, "c": 3}


def test_strict_view_raises(abc):
    view = views.create_immutable_view(abc, strict=True)
    assert view.strict
    with pytest.raises(exceptions.ImmutableViewError):
        view["a"] = 100
    with pytest.raises(exceptions.ImmutableViewError):
        del view["a"]
    with pytest.raises(exceptions.ImmutableViewError):
        mutate.clear(view)
    with pytest.raises(TypeError):
        view.update(a=2)
    assert abc == {"a": 1, "b": 2, "c": 3}


def test_strictness_from_config(abc):
    cfg = config.MapUtilsConfig(strict_views=True)
    assert views.create_immutable_view(abc, config=cfg).strict
    assert not views.create_immutable_view(abc, strict=False, config=cfg).strict


def test_existing_view_is_returned_unchanged(abc):
    view = views.create_immutable_view(abc)
    assert views.create_immutable_view(view) is view
    proxy = MappingProxyType(abc)
    assert views.is_immutable_view(proxy)
    assert views.create_immutable_view(proxy) is proxy


def test_mutate_through_original_still_works(abc):
    view = views.create_immutable_view(abc, strict=True)
    mutate.set(abc, "a", 9)
    assert view["a"] == 9


def test_set_if_undefined_on_lenient_view_returns_value_without_storing(abc):
    view = views.create_immutable_view(abc)
    assert mutate.set_if_undefined(view, "a", 100) == 1
    assert mutate.set_if_undefined(view, "n", 5) == 5
    assert "n" not in abc
