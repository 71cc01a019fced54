"""Shared fixtures for arrowline tests."""

import pytest

from arrowline import Box, ConnectorManager, Point


@pytest.fixture
def left_box():
    """Box whose center is (50, 50)."""
    return Box(x=0, y=0, width=100, height=100, label="left")


@pytest.fixture
def right_box():
    """Box whose center is (350, 250)."""
    return Box(x=300, y=200, width=100, height=100, label="right")


@pytest.fixture
def point_box():
    """Zero-size box; every anchor resolves to its origin."""
    def make(x, y):
        return Box(x=x, y=y, width=0, height=0)
    return make


@pytest.fixture
def recorder():
    """Listener recording (handle, rendered) notifications."""
    calls = []

    def listener(handle, rendered):
        calls.append((handle, rendered))

    listener.calls = calls
    return listener


@pytest.fixture
def manager(recorder):
    return ConnectorManager(listener=recorder)


def assert_orthogonal(route, tolerance=0.1):
    """Every segment moves along one axis (the other differs by < tolerance)."""
    for a, b in zip(route, route[1:]):
        assert min(abs(b.x - a.x), abs(b.y - a.y)) < tolerance, (a, b)


def assert_point(actual, expected, tol=1e-9):
    if not isinstance(expected, Point):
        expected = Point(*expected)
    assert actual.x == pytest.approx(expected.x, abs=tol)
    assert actual.y == pytest.approx(expected.y, abs=tol)
