"""
Tests for the internal Action record and callable validation.
"""

import math
from fractions import Fraction

import pytest
from unittest.mock import Mock

from reactive_events.core.events.action import (
    Action,
    is_valid_action_callable,
    is_valid_interval,
    same_callable,
)
from reactive_events.core.types import ActionCallable, InvalidArgument


def greet(name):
    return f"hello {name}"


class CallableThing:
    def __call__(self, *args, **kwargs):
        return None


class TestCallableValidation:
    """Test cases for is_valid_action_callable."""

    @pytest.mark.parametrize(
        "candidate",
        [greet, lambda: None, print, CallableThing(), CallableThing, Mock(), "x".upper],
    )
    def test_callables_accepted(self, candidate):
        assert is_valid_action_callable(candidate) is True
        assert isinstance(candidate, ActionCallable)

    @pytest.mark.parametrize("candidate", [42, 1.5, "greet", None, {}, [], object()])
    def test_non_callables_rejected(self, candidate):
        assert is_valid_action_callable(candidate) is False


class TestIntervalValidation:
    """Test cases for is_valid_interval."""

    @pytest.mark.parametrize("interval", [0, 0.0, 3, 2.5, Fraction(1, 3), math.inf])
    def test_valid(self, interval):
        assert is_valid_interval(interval) is True

    @pytest.mark.parametrize(
        "interval", [-1, -0.001, math.nan, True, False, "1", None, [1]]
    )
    def test_invalid(self, interval):
        assert is_valid_interval(interval) is False


class TestAction:
    """Test cases for Action."""

    def test_initialization(self):
        """Test an action records its callable, interval and creation time."""
        action = Action(greet, 5, created_at=100.0)

        assert action.callable is greet
        assert action.interval == 5
        assert action.last_invocation_time == 100.0

    def test_default_interval(self):
        """Test the interval defaults to zero."""
        action = Action(greet, created_at=100.0)

        assert action.interval == 0

    def test_creation_time_is_required(self):
        """Test an action cannot be built without a clock reading."""
        with pytest.raises(TypeError):
            Action(greet)

    def test_constructor_validates(self):
        """Test the constructor rejects bad callables and intervals."""
        with pytest.raises(InvalidArgument):
            Action(42, created_at=0.0)
        with pytest.raises(InvalidArgument):
            Action(greet, -1, created_at=0.0)

    def test_is_due(self):
        """Test the interval gate."""
        action = Action(greet, 5, created_at=100.0)

        assert action.is_due(104.9) is False
        assert action.is_due(105.0) is True

    def test_zero_interval_always_due(self):
        action = Action(greet, 0, created_at=100.0)

        assert action.is_due(0.0) is True
        assert action.is_due(100.0) is True

    def test_mark_invoked_never_goes_backwards(self):
        """Test the last invocation time is monotonically non-decreasing."""
        action = Action(greet, 5, created_at=100.0)

        action.mark_invoked(110.0)
        action.mark_invoked(90.0)

        assert action.last_invocation_time == 110.0

    def test_equality_ignores_interval_and_time(self):
        """Test actions wrapping the same callable are equal."""
        first = Action(greet, 0, created_at=1.0)
        second = Action(greet, 30, created_at=2.0)

        assert first == second
        assert second == first
        assert first != Action(CallableThing(), 0, created_at=1.0)

    def test_equality_with_other_types(self):
        assert Action(greet, created_at=0.0) != greet

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Action(greet, created_at=0.0))

    def test_repr(self):
        assert repr(Action(greet, 2, created_at=0.0)) == "Action(greet, interval=2)"


class TestSameCallable:
    """Test cases for callable identity."""

    def test_identity(self):
        thing = CallableThing()

        assert same_callable(thing, thing)
        assert not same_callable(thing, CallableThing())

    def test_bound_methods(self):
        """Test bound methods compare by instance and function."""

        class Widget:
            def redraw(self):
                pass

            def resize(self):
                pass

        widget = Widget()

        assert widget.redraw is not widget.redraw
        assert same_callable(widget.redraw, widget.redraw)
        assert not same_callable(widget.redraw, widget.resize)
        assert not same_callable(widget.redraw, Widget().redraw)

    def test_builtin_bound_methods(self):
        items = []

        assert same_callable(items.append, items.append)
        assert not same_callable(items.append, [].append)
        assert not same_callable(items.append, items.pop)
