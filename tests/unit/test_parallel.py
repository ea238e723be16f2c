"""Tests for running one operation across many handles concurrently."""

from __future__ import annotations

import concurrent.futures
import threading
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from capability_dispatch.capabilities.builtin import Drawable, Readable, Writable
from capability_dispatch.dispatch.dispatcher import CapabilityDispatcher
from capability_dispatch.dispatch.parallel import invoke_concurrently
from capability_dispatch.variants.devices import SequenceSource
from capability_dispatch.variants.shapes import Circle, Point, Square, Triangle

SETTINGS = SimpleNamespace(CAPABILITY_DISPATCH={"MAX_WORKERS": 3})


class SlowShape:
    def __init__(self, label: str, gate: threading.Barrier) -> None:
        self.label = label
        self.gate = gate

    def draw(self) -> str:
        self.gate.wait(timeout=5)
        return self.label


def test_results_follow_input_order():
    """Test that results keep the order of the handles."""
    dispatcher = CapabilityDispatcher(django_settings=SETTINGS)
    shapes = [Circle(1), Square(2), Triangle(Point(), Point(1, 0), Point(0, 1))]
    handles = [dispatcher.bind(shape, Drawable) for shape in shapes]

    results = invoke_concurrently(
        handles, "draw", dispatcher=dispatcher, django_settings=SETTINGS
    )

    assert results == [shape.draw() for shape in shapes]


def test_operations_actually_run_concurrently():
    """Test that operations overlap in time."""
    dispatcher = CapabilityDispatcher(django_settings=SETTINGS)
    gate = threading.Barrier(3)
    handles = [
        dispatcher.bind(SlowShape(label, gate), Drawable) for label in ("a", "b", "c")
    ]

    assert invoke_concurrently(handles, "draw", django_settings=SETTINGS) == [
        "a",
        "b",
        "c",
    ]


def test_empty_input_returns_empty_list():
    """Test running over no handles."""
    assert invoke_concurrently([], "draw", django_settings=SETTINGS) == []


def test_max_workers_defaults_to_configuration():
    """Test that the pool size comes from settings."""
    dispatcher = CapabilityDispatcher(django_settings=SETTINGS)
    handle = dispatcher.bind(Circle(1), Drawable)

    with patch.object(
        concurrent.futures,
        "ThreadPoolExecutor",
        wraps=concurrent.futures.ThreadPoolExecutor,
    ) as executor:
        invoke_concurrently([handle], "draw", django_settings=SETTINGS)

    executor.assert_called_once_with(max_workers=3)


def test_explicit_max_workers_wins():
    """Test that an explicit pool size wins over settings."""
    dispatcher = CapabilityDispatcher(django_settings=SETTINGS)
    handle = dispatcher.bind(Circle(1), Drawable)

    with patch.object(
        concurrent.futures,
        "ThreadPoolExecutor",
        wraps=concurrent.futures.ThreadPoolExecutor,
    ) as executor:
        invoke_concurrently([handle], "draw", max_workers=1, django_settings=SETTINGS)

    executor.assert_called_once_with(max_workers=1)


def test_errors_propagate():
    """Test that an operation error propagates."""
    dispatcher = CapabilityDispatcher(django_settings=SETTINGS)
    handles = [
        dispatcher.bind(SequenceSource([1]), Readable),
        dispatcher.bind(SequenceSource([]), Readable),
    ]

    with pytest.raises(EOFError):
        invoke_concurrently(handles, "read", django_settings=SETTINGS)


def test_extra_arguments_reach_every_operation():
    """Test that extra arguments are passed to every operation."""
    dispatcher = CapabilityDispatcher(django_settings=SETTINGS)
    sinks = [[], []]

    class ListSink:
        def __init__(self, target: list) -> None:
            self.target = target

        def write(self, value: object) -> None:
            self.target.append(value)

    handles = [dispatcher.bind(ListSink(target), Writable) for target in sinks]

    invoke_concurrently(handles, "write", "ping", django_settings=SETTINGS)

    assert sinks == [["ping"], ["ping"]]
