"""Recursive orthogonal (elbow) routing between two anchor points."""

from __future__ import annotations

import math

from .errors import RoutingError
from .log import get_logger
from .models import CENTER, Axis, Point, RelativeAnchor

logger = get_logger(__name__)

# Points closer than this on both axes are treated as coincident
EPSILON = 0.1
# Every step covers at least this fraction of the remaining distance
MIN_STEP_RATIO = 0.10
# Defensive cap; converging routes need only a handful of steps
MAX_ROUTE_DEPTH = 64


def _sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def _choose_centered_direction(dx: float, dy: float, last_axis: Axis) -> tuple[int, int]:
    """Step along the dominant axis, unless the previous step used it."""
    if abs(dx) > abs(dy):
        horizontal = last_axis is not Axis.HORIZONTAL
    else:
        horizontal = last_axis is Axis.VERTICAL
    if horizontal:
        return _sign(dx) or 1, 0
    return 0, _sign(dy) or 1


def _choose_corner_direction(
    direction: tuple[int, int],
    anchor: RelativeAnchor,
    last_axis: Axis,
) -> tuple[int, int]:
    """Reduce a corner exit to one axis, favoring the side the anchor leans to."""
    if abs(anchor.x - 0.5) > abs(anchor.y - 0.5):
        horizontal = last_axis is not Axis.HORIZONTAL
    else:
        horizontal = last_axis is Axis.VERTICAL
    if horizontal:
        return direction[0], 0
    return 0, direction[1]


def route_orthogonal(
    start: Point,
    start_anchor: RelativeAnchor,
    end: Point,
    end_anchor: RelativeAnchor,
    last_axis: Axis = Axis.UNCONSTRAINED,
    _depth: int = 0,
) -> list[Point]:
    """Compute an axis-aligned point sequence from ``start`` to ``end``.

    The first step leaves through the side ``start_anchor`` points at; later
    steps alternate axes until the remaining gap drops below ``EPSILON``.

    Args:
        start: Absolute start point
        start_anchor: Relative anchor of the start, used as exit-side bias
        end: Absolute end point
        end_anchor: Relative anchor of the end
        last_axis: Axis of the previous step (UNCONSTRAINED on the first call)

    Returns:
        Points beginning with ``start`` and ending with ``end``; just
        ``[end]`` when the two already coincide.

    Raises:
        RoutingError: if the route does not converge within MAX_ROUTE_DEPTH
    """
    if _depth > MAX_ROUTE_DEPTH:
        raise RoutingError(
            f"orthogonal route from {start} to {end} did not converge "
            f"after {MAX_ROUTE_DEPTH} steps"
        )

    direction = (_sign(start_anchor.x - 0.5), _sign(start_anchor.y - 0.5))
    dx = end.x - start.x
    dy = end.y - start.y
    if abs(dx) < EPSILON and abs(dy) < EPSILON:
        logger.debug("orthogonal route converged after %d steps", _depth)
        return [end]

    if direction == (0, 0):
        direction = _choose_centered_direction(dx, dy, last_axis)
    elif direction[0] != 0 and direction[1] != 0:
        direction = _choose_corner_direction(direction, start_anchor, last_axis)

    distance_sq = dx * dx + dy * dy
    min_distance = math.sqrt(distance_sq) * MIN_STEP_RATIO
    step_x = max(abs(dx), min_distance)
    step_y = max(abs(dy), min_distance)

    candidate = Point(start.x + step_x * direction[0], start.y + step_y * direction[1])
    rest_x = end.x - candidate.x
    rest_y = end.y - candidate.y
    if rest_x * rest_x + rest_y * rest_y >= distance_sq:
        # Overshooting; take a small step instead
        candidate = Point(
            start.x + min_distance * direction[0],
            start.y + min_distance * direction[1],
        )

    axis = Axis.VERTICAL if direction[0] == 0 else Axis.HORIZONTAL
    return [start, *route_orthogonal(candidate, CENTER, end, end_anchor, axis, _depth + 1)]
