"""Resolve connector anchors into absolute geometry."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .models import Axis, Point, Positioning, RoutingKind, bounds_of
from .routing import route_orthogonal
from .tips import tip_length

if TYPE_CHECKING:
    from .config import ConnectorConfig
    from .models import HasBounds, RelativeAnchor

ORIGIN = Point(0, 0)


def resolve_point(
    element: HasBounds,
    anchor: RelativeAnchor,
    scroll: Point = ORIGIN,
    parent: HasBounds | None = None,
) -> Point:
    """Absolute point of ``anchor`` inside ``element``.

    Scroll offset is added and the parent frame's origin subtracted, so the
    result lives in the parent's coordinate space.
    """
    point = bounds_of(element).point_at(anchor) + scroll
    if parent is not None:
        point = point - Point(parent.x, parent.y)
    return point


def _direction(a: Point, b: Point) -> float:
    return math.atan2(b.y - a.y, b.x - a.x)


def _inset(point: Point, rotation: float, distance: float) -> Point:
    return Point(
        point.x - math.cos(rotation) * distance,
        point.y - math.sin(rotation) * distance,
    )


def calculate_positioning(
    source: HasBounds,
    target: HasBounds,
    config: ConnectorConfig,
    scroll: Point = ORIGIN,
) -> Positioning:
    """Compute start/end points, end rotations and the route of a connector.

    Args:
        source: Element the connector leaves from
        target: Element the connector points to
        config: Resolved connector configuration
        scroll: Ambient scroll offset

    Returns:
        Positioning with tip insets already applied to both ends; the start
        inset is limited to the length of the first leg
    """
    start = resolve_point(source, config.start_anchor, scroll, config.parent)
    end = resolve_point(target, config.end_anchor, scroll, config.parent)
    positioning = Positioning(start=start, end=end, route=[start, end])

    if config.kind is RoutingKind.DIRECT:
        rotation = _direction(start, end)
        positioning.rotation_start = rotation
        positioning.rotation_end = rotation
    else:
        route = route_orthogonal(
            start, config.start_anchor, end, config.end_anchor, Axis.UNCONSTRAINED
        )
        # Coincident anchors route to [end]; keep the two-point invariant
        if len(route) >= 2:
            positioning.route = route
            positioning.rotation_start = _direction(route[0], route[1])
            positioning.rotation_end = _direction(route[-2], route[-1])

    size = tip_length(config.width)
    if config.end_tip.is_present:
        positioning.end = _inset(positioning.end, positioning.rotation_end, size)
        positioning.route[-1] = positioning.end
    if config.start_tip.is_present:
        # Never move the start past the end of the first leg
        first, second = positioning.route[0], positioning.route[1]
        leg = math.hypot(second.x - first.x, second.y - first.y)
        positioning.start = _inset(positioning.start, positioning.rotation_start, -min(size, leg))
        positioning.route[0] = positioning.start

    return positioning
