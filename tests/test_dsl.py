"""Tests for the canvas DSL."""

import pytest

from arrowline import box, canvas, connect
from arrowline.models import RoutingKind


def test_canvas_collects_boxes_and_connectors():
    with canvas(400, 200) as c:
        a = box(20, 20, 80, 40, label="A")
        b = box(260, 120, 80, 40, label="B")
        handle = connect(a, b)

    assert c.boxes == [a, b]
    assert len(c.manager) == 1
    assert c.manager.get(handle).source is a


def test_canvas_defaults_and_overrides():
    with canvas(400, 200, kind="orthogonal", color="blue") as c:
        a = box(0, 0, 10, 10)
        b = box(100, 100, 10, 10)
        first = connect(a, b)
        second = connect(a, b, kind="direct")

    assert c.manager.get(first).config.kind is RoutingKind.ORTHOGONAL
    assert c.manager.get(first).config.color == "blue"
    assert c.manager.get(second).config.kind is RoutingKind.DIRECT


def test_canvas_writes_svg_on_exit(tmp_path):
    target = tmp_path / "flow"
    with canvas(200, 100, filename=str(target)):
        connect(box(0, 0, 20, 20), box(150, 60, 20, 20), label="next")

    assert ">next<" in (tmp_path / "flow.svg").read_text(encoding="utf-8")


def test_nested_canvases():
    with canvas(100, 100) as outer:
        with canvas(50, 50) as inner:
            box(0, 0, 1, 1)
        box(0, 0, 2, 2)

    assert len(inner.boxes) == 1
    assert len(outer.boxes) == 1


def test_outside_canvas():
    with pytest.raises(RuntimeError):
        box(0, 0, 1, 1)
