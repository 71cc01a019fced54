"""Data models for arrowline connectors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence


class Axis(Enum):
    """Axis of the previous orthogonal routing step."""

    UNCONSTRAINED = "unconstrained"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class RoutingKind(Enum):
    """How a connector travels between its two anchors."""

    DIRECT = "direct"
    ORTHOGONAL = "orthogonal"


class TipKind(Enum):
    """Glyphs that can decorate a connector endpoint."""

    NONE = "none"
    ARROW = "arrow"
    TRIANGLE = "triangle"
    CIRCLE = "circle"
    SQUARE = "square"
    DIAMOND = "diamond"


@dataclass(frozen=True)
class Point:
    """An absolute point in the shared drawing space."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class RelativeAnchor:
    """Fractional position inside an element's bounding box.

    (0.5, 0.5) is the center and carries no preferred exit side. Any other
    value biases the first routing step towards the nearest side(s).
    """

    x: float = 0.5
    y: float = 0.5


CENTER = RelativeAnchor(0.5, 0.5)


@dataclass(frozen=True)
class TipSpec:
    """A tip glyph; ``flip`` mirrors the glyph along its forward axis."""

    kind: TipKind = TipKind.NONE
    flip: bool = False

    @property
    def is_present(self) -> bool:
        return self.kind is not TipKind.NONE


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle (origin plus size)."""

    x: float
    y: float
    width: float
    height: float

    def point_at(self, anchor: RelativeAnchor) -> Point:
        return Point(self.x + self.width * anchor.x, self.y + self.height * anchor.y)


class HasBounds(Protocol):
    """Anything laid out as an axis-aligned box can anchor a connector."""

    x: float
    y: float
    width: float
    height: float


@dataclass(eq=False)
class Box:
    """A simple anchor element.

    Hosts with their own layout objects do not need this; it exists for the
    DSL and the command line, where there is no other element model.
    """

    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0
    label: str | None = None

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


def bounds_of(element: HasBounds) -> Rect:
    """Snapshot an element's current bounding box."""
    return Rect(element.x, element.y, element.width, element.height)


@dataclass
class Positioning:
    """Derived geometry of one connector, recomputed on every invalidation."""

    start: Point
    end: Point
    rotation_start: float = 0.0
    rotation_end: float = 0.0
    route: list[Point] = field(default_factory=list)


@dataclass(frozen=True)
class LabelPlacement:
    """Where a connector's label text goes."""

    point: Point
    rotation: float = 0.0


def points(coords: Sequence[tuple[float, float]]) -> list[Point]:
    """Build a list of points from coordinate pairs."""
    return [Point(x, y) for x, y in coords]
