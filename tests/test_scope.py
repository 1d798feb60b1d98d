import pytest

from fungus.scope import Defer, defer


def test_defer_actually_waits_until_end():
    state = {"value": 1}
    with defer(lambda: state.update(value=2)):
        assert state["value"] == 1
    assert state["value"] == 2


def test_defer_fires_even_with_exception():
    state = {"value": 1}
    with pytest.raises(RuntimeError):
        with defer(lambda: state.update(value=2)):
            raise RuntimeError("boom")
    assert state["value"] == 2


def test_defer_enter_returns_itself():
    calls = []
    guard = Defer(lambda: calls.append("done"))
    with guard as entered:
        assert entered is guard
        assert calls == []
    assert calls == ["done"]


def test_defer_runs_in_reverse_when_nested():
    calls = []
    with defer(lambda: calls.append("outer")):
        with defer(lambda: calls.append("inner")):
            pass
    assert calls == ["inner", "outer"]