"""Turtle-style SVG path builder.

Relative commands are interpreted in a local frame rotated by an
accumulator, so a shape authored once "pointing along +x" can be drawn
along any direction. Absolute commands ignore the rotation.
"""

from __future__ import annotations

import math


def format_number(value: float) -> str:
    """Format a coordinate compactly: ``6.0`` -> ``6``, ``-0.0`` -> ``0``."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


class PathBuilder:
    """Emits ``M m L l a`` path commands."""

    def __init__(self, x: float, y: float):
        self.rotation = 0.0
        self._tokens: list[str] = [f"M {format_number(x)} {format_number(y)}"]

    def rotate(self, delta: float) -> None:
        self.rotation += delta

    def set_rotation(self, rotation: float) -> None:
        self.rotation = rotation

    def transpose(self, dx: float, dy: float) -> tuple[float, float]:
        """Rotate a local-frame vector by the current rotation."""
        cos = math.cos(self.rotation)
        sin = math.sin(self.rotation)
        return dx * cos - dy * sin, dx * sin + dy * cos

    def move_relative(self, dx: float, dy: float) -> None:
        x, y = self.transpose(dx, dy)
        self._emit("m", x, y)

    def line_relative(self, dx: float, dy: float) -> None:
        x, y = self.transpose(dx, dy)
        self._emit("l", x, y)

    def arc_relative(
        self,
        rx: float,
        ry: float,
        rotation_deg: float,
        large_arc: bool | int,
        sweep: bool | int,
        dx: float,
        dy: float,
    ) -> None:
        """Elliptical arc; only the endpoint delta follows the rotation."""
        x, y = self.transpose(dx, dy)
        self._emit(
            "a",
            rx,
            ry,
            rotation_deg,
            1 if large_arc else 0,
            1 if sweep else 0,
            x,
            y,
        )

    def line_absolute(self, x: float, y: float) -> None:
        self._emit("L", x, y)

    def serialize(self) -> str:
        return " ".join(self._tokens)

    def __str__(self) -> str:
        return self.serialize()

    def _emit(self, command: str, *args: float) -> None:
        self._tokens.append(" ".join([command, *(format_number(a) for a in args)]))
