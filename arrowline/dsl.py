"""Python DSL for drawing connectors between boxes."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .manager import ConnectorManager
from .models import Box
from .renderer import render_to_svg

if TYPE_CHECKING:
    from collections.abc import Generator

    from .models import HasBounds


@dataclass(eq=False)
class Canvas:
    """A drawing surface: boxes, connectors and shared connector defaults."""

    width: float
    height: float
    filename: str | None = None
    defaults: dict[str, Any] = field(default_factory=dict)
    manager: ConnectorManager = field(default_factory=ConnectorManager)
    boxes: list[Box] = field(default_factory=list)

    def to_svg(self) -> str:
        return render_to_svg(self.manager, self.width, self.height, self.filename, self.boxes)


# Context stack for nested canvases
_canvas_stack: list[Canvas] = []


def _current_canvas() -> Canvas:
    if not _canvas_stack:
        raise RuntimeError("box() and connect() must be used inside a canvas() block")
    return _canvas_stack[-1]


@contextmanager
def canvas(
        width: float,
        height: float,
        filename: str | None = None,
        **defaults: Any,
) -> Generator[Canvas]:
    """Create a canvas context.

    Usage:
        with canvas(400, 200, filename="flow", kind="orthogonal"):
            a = box(20, 20, 80, 40, label="A")
            b = box(260, 120, 80, 40, label="B")
            connect(a, b, start_anchor=(1, 0.5), label="next")

    Args:
        width: Canvas width
        height: Canvas height
        filename: Output filename (without extension); nothing is written if None
        **defaults: Connector options applied to every connect() call

    Yields:
        The Canvas object
    """
    c = Canvas(width=width, height=height, filename=filename, defaults=dict(defaults))
    _canvas_stack.append(c)

    try:
        yield c
    finally:
        _canvas_stack.pop()

    # Render on clean exit
    if filename:
        c.to_svg()


def box(
        x: float,
        y: float,
        width: float,
        height: float,
        label: str | None = None,
) -> Box:
    """Create a box on the current canvas."""
    b = Box(x=x, y=y, width=width, height=height, label=label)
    _current_canvas().boxes.append(b)
    return b


def connect(source: HasBounds, target: HasBounds, **options: Any) -> int:
    """Connect two elements on the current canvas.

    Per-call options take precedence over the canvas defaults.

    Returns:
        The connector handle
    """
    c = _current_canvas()
    return c.manager.register(source, target, {**c.defaults, **options})
