"""Tests for SVG output."""

import pytest

from arrowline import Box, ConnectorManager, ConnectorRenderer, Theme, render_to_svg


@pytest.fixture
def scene():
    a = Box(x=20, y=20, width=80, height=40, label="Source")
    b = Box(x=220, y=120, width=80, height=40, label="Target")
    manager = ConnectorManager()
    manager.register(a, b, kind="orthogonal", start_anchor=(1, 0.5), label="calls", color="#ff0000")
    manager.register(a, b, label="direct")
    return manager, [a, b]


def test_render_contains_paths_and_labels(scene):
    manager, boxes = scene
    svg = render_to_svg(manager, 400, 200, elements=boxes)

    assert svg.startswith("<?xml")
    assert svg.count("<path") == 2
    for connector in manager:
        assert connector.rendered.d in svg
    assert 'stroke="#ff0000"' in svg
    assert ">calls<" in svg
    assert ">direct<" in svg
    assert ">Source<" in svg


def test_direct_label_is_rotated(scene):
    manager, _ = scene
    svg = render_to_svg(manager, 400, 200)
    assert "rotate(" in svg
    assert "translate(0 -7)" in svg


def test_render_writes_file(scene, tmp_path):
    manager, boxes = scene
    target = tmp_path / "out"
    svg = render_to_svg(manager, 400, 200, filename=str(target), elements=boxes)

    written = (tmp_path / "out.svg").read_text(encoding="utf-8")
    assert written == svg


def test_theme_background(scene):
    manager, _ = scene
    drawing = ConnectorRenderer(Theme(background="#123456")).render(manager, 100, 100)
    assert 'fill="#123456"' in drawing.as_svg()
