"""Label anchor placement along connector routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import LabelPlacement, Point, RoutingKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .models import Positioning


def place_label(route: Sequence[Point]) -> Point:
    """Midpoint of the longest horizontal segment of ``route``.

    Vertical segments are skipped. Among equally long runs the first one
    wins. Routes without any horizontal run fall back to their first point.
    """
    best_dx = 0.0
    best: Point | None = None
    for a, b in zip(route, route[1:]):
        dx = b.x - a.x
        if dx == 0:
            continue
        if abs(dx) > best_dx:
            best_dx = abs(dx)
            best = Point(a.x + dx * 0.5, a.y + (b.y - a.y) * 0.5)
    return best if best is not None else route[0]


def label_placement(positioning: Positioning, kind: RoutingKind) -> LabelPlacement:
    """Where to put a connector's label, and how to rotate it."""
    if kind is RoutingKind.DIRECT:
        start, end = positioning.start, positioning.end
        return LabelPlacement(
            Point((start.x + end.x) / 2, (start.y + end.y) / 2),
            positioning.rotation_start,
        )
    return LabelPlacement(place_label(positioning.route))
