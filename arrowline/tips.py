"""Tip glyphs drawn at connector endpoints.

Glyphs are authored in a local frame pointing along +x, starting at the
pen position. Each one returns the pen to where it started so the route
can continue from there.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .errors import ConfigurationError
from .models import TipKind

if TYPE_CHECKING:
    from .models import TipSpec
    from .path import PathBuilder

# Glyph length along the route, in multiples of the connector width
TIP_LENGTH_FACTOR = 3


def tip_length(width: float) -> float:
    """Distance an endpoint is inset to leave room for its tip."""
    return width * TIP_LENGTH_FACTOR


def _arrow(builder: PathBuilder, s: float, f: float) -> None:
    builder.line_relative(f * 3 * s, 0)
    builder.move_relative(f * -3 * s, 3 * s)
    builder.line_relative(f * 3 * s, -3 * s)
    builder.line_relative(f * -3 * s, -3 * s)
    builder.move_relative(0, 3 * s)


def _triangle(builder: PathBuilder, s: float, f: float) -> None:
    builder.line_relative(0, 1.5 * s)
    builder.line_relative(f * 3 * s, -1.5 * s)
    builder.line_relative(f * -3 * s, -1.5 * s)
    builder.line_relative(0, 1.5 * s)


def _circle(builder: PathBuilder, s: float, f: float) -> None:
    radius = 1.5 * s
    builder.move_relative(f * 2 * radius, 0)
    builder.arc_relative(radius, radius, 0, True, False, f * -2 * radius, 0)
    builder.arc_relative(radius, radius, 0, True, False, f * 2 * radius, 0)
    builder.move_relative(f * -2 * radius, 0)


def _square(builder: PathBuilder, s: float, f: float) -> None:
    builder.line_relative(0, 1.5 * s)
    builder.line_relative(f * 3 * s, 0)
    builder.line_relative(0, -3 * s)
    builder.line_relative(f * -3 * s, 0)
    builder.line_relative(0, 1.5 * s)


def _diamond(builder: PathBuilder, s: float, f: float) -> None:
    # Edges are 1.5 sizes long, at 45 degrees to the route
    d = 1.5 * s / math.sqrt(2)
    builder.line_relative(f * d, d)
    builder.line_relative(f * d, -d)
    builder.line_relative(f * -d, -d)
    builder.line_relative(f * -d, d)


_GLYPHS = {
    TipKind.ARROW: _arrow,
    TipKind.TRIANGLE: _triangle,
    TipKind.CIRCLE: _circle,
    TipKind.SQUARE: _square,
    TipKind.DIAMOND: _diamond,
}


def emit_tip(tip: TipSpec, rotation: float, size: float, builder: PathBuilder) -> None:
    """Draw ``tip`` at the pen position, oriented along ``rotation``.

    Args:
        tip: Tip to draw; TipKind.NONE draws nothing
        rotation: Route direction at this endpoint, in radians
        size: Glyph unit, normally the connector width
        builder: Path being emitted; its rotation is restored afterwards

    Raises:
        ConfigurationError: for a kind with no glyph
    """
    if tip.kind is TipKind.NONE:
        return
    glyph = _GLYPHS.get(tip.kind)
    if glyph is None:
        raise ConfigurationError(f"No glyph for tip kind {tip.kind!r}")

    builder.rotate(rotation)
    try:
        glyph(builder, size, -1 if tip.flip else 1)
    finally:
        builder.rotate(-rotation)
