"""SVG renderer using drawsvg."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import drawsvg as draw

from .path import format_number

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .manager import ConnectorManager, RenderedConnector
    from .models import Box, HasBounds

# Labels sit this far above their anchor point
LABEL_OFFSET = 7


class Theme:
    """Colors and fonts for rendered scenes."""

    def __init__(
        self,
        background: str = "#ffffff",
        element_fill: str = "#f8fafc",
        element_stroke: str = "#cbd5e1",
        text_color: str = "#1e293b",
        label_color: str = "#64748b",
        font_family: str = "JetBrains Mono, Consolas, monospace",
        label_font_size: float = 11,
    ):
        self.background = background
        self.element_fill = element_fill
        self.element_stroke = element_stroke
        self.text_color = text_color
        self.label_color = label_color
        self.font_family = font_family
        self.label_font_size = label_font_size


DEFAULT_THEME = Theme()


class ConnectorRenderer:
    """Renders a manager's connectors (and optionally their anchors) to SVG."""

    def __init__(self, theme: Theme | None = None):
        self.theme = theme or DEFAULT_THEME

    def render(
        self,
        manager: ConnectorManager,
        width: float,
        height: float,
        elements: Iterable[HasBounds] = (),
    ) -> draw.Drawing:
        """Render to an SVG Drawing object."""
        d = draw.Drawing(width, height)
        d.append(draw.Rectangle(0, 0, width, height, fill=self.theme.background))

        for element in elements:
            self._render_element(d, element)

        # Connectors on top so tips are visible
        for connector in manager:
            if connector.rendered is not None:
                self.render_connector(d, connector.rendered)

        return d

    def _render_element(self, d: draw.Drawing, element: HasBounds | Box) -> None:
        d.append(
            draw.Rectangle(
                element.x,
                element.y,
                element.width,
                element.height,
                fill=self.theme.element_fill,
                stroke=self.theme.element_stroke,
                stroke_width=1,
                rx=6,
                ry=6,
            )
        )
        label = getattr(element, "label", None)
        if label:
            d.append(
                draw.Text(
                    label,
                    13,
                    element.x + element.width / 2,
                    element.y + element.height / 2,
                    fill=self.theme.text_color,
                    font_family=self.theme.font_family,
                    text_anchor="middle",
                    dominant_baseline="middle",
                )
            )

    def render_connector(self, d: draw.Drawing, rendered: RenderedConnector) -> None:
        """Append one connector's path and label."""
        config = rendered.config
        d.append(
            draw.Path(
                d=rendered.d,
                stroke=config.color,
                stroke_width=config.width,
                fill="none",
            )
        )

        if config.label is None or rendered.label is None:
            return

        point = rendered.label.point
        x, y = format_number(point.x), format_number(point.y)
        transform = f"translate(0 -{LABEL_OFFSET})"
        if rendered.label.rotation:
            degrees = format_number(math.degrees(rendered.label.rotation))
            transform = f"rotate({degrees} {x} {y}) {transform}"
        d.append(
            draw.Text(
                config.label,
                self.theme.label_font_size,
                point.x,
                point.y,
                fill=self.theme.label_color,
                font_family=self.theme.font_family,
                text_anchor="middle",
                transform=transform,
            )
        )


def render_to_svg(
    manager: ConnectorManager,
    width: float,
    height: float,
    filename: str | None = None,
    elements: Iterable[HasBounds] = (),
) -> str:
    """Render every registered connector to SVG.

    Args:
        manager: Manager holding the connectors
        width: Canvas width
        height: Canvas height
        filename: Optional filename to save to (without extension)
        elements: Anchor elements to outline underneath the connectors

    Returns:
        SVG content as string
    """
    renderer = ConnectorRenderer()
    drawing = renderer.render(manager, width, height, elements)

    if filename:
        drawing.save_svg(f"{filename}.svg")

    return drawing.as_svg()
