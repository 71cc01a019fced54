"""Command line: render a JSON scene of boxes and connectors to SVG."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .errors import ArrowlineError, ConfigurationError
from .log import get_logger, setup_logging
from .manager import ConnectorManager
from .models import Box, Point
from .renderer import render_to_svg

logger = get_logger(__name__)


def _parse_scroll(value: Any) -> Point:
    try:
        x, y = value
        return Point(float(x), float(y))
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid scroll {value!r}, expected [x, y]") from e


def load_scene(data: Any) -> tuple[ConnectorManager, dict[str, Box]]:
    """Build boxes and register connectors from a parsed scene."""
    if not isinstance(data, dict):
        raise ConfigurationError("Scene must be a JSON object")
    elements = data.get("elements", {})
    if not isinstance(elements, dict):
        raise ConfigurationError("'elements' must be an object mapping names to boxes")
    connectors = data.get("connectors", [])
    if not isinstance(connectors, list):
        raise ConfigurationError("'connectors' must be a list")

    boxes: dict[str, Box] = {}
    for name, spec in elements.items():
        try:
            boxes[name] = Box(
                x=float(spec["x"]),
                y=float(spec["y"]),
                width=float(spec["width"]),
                height=float(spec["height"]),
                label=spec.get("label"),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ConfigurationError(f"Invalid element {name!r}: {e}") from e

    manager = ConnectorManager(scroll=_parse_scroll(data.get("scroll", (0, 0))))

    for index, spec in enumerate(connectors):
        if not isinstance(spec, dict):
            raise ConfigurationError(f"Connector #{index} must be an object, got {spec!r}")
        options = dict(spec)
        try:
            source = boxes[options.pop("from")]
            target = boxes[options.pop("to")]
        except (KeyError, TypeError) as e:
            raise ConfigurationError(f"Connector #{index} refers to unknown element {e}") from e
        parent = options.get("parent")
        if parent is not None:
            if not isinstance(parent, str) or parent not in boxes:
                raise ConfigurationError(f"Connector #{index} has unknown parent {parent!r}")
            options["parent"] = boxes[parent]
        manager.register(source, target, options)

    return manager, boxes


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="arrowline",
        description="Render connectors between boxes to SVG.",
    )
    p.add_argument("-v", "--verbose", action="count", default=0,
                   help="Log more (repeat for debug output).")
    sub = p.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a JSON scene to SVG.")
    render.add_argument("scene", type=Path,
                        help="Scene file with 'elements' and 'connectors'.")
    render.add_argument("-o", "--output", type=Path, default=None,
                        help="Output .svg file; stdout if omitted.")
    render.add_argument("--width", type=float, default=None,
                        help="Canvas width (overrides the scene's).")
    render.add_argument("--height", type=float, default=None,
                        help="Canvas height (overrides the scene's).")
    return p


def _render(ns: argparse.Namespace) -> None:
    try:
        data = json.loads(ns.scene.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read scene {ns.scene}: {e}") from e

    manager, boxes = load_scene(data)
    try:
        width = ns.width if ns.width is not None else float(data.get("width", 800))
        height = ns.height if ns.height is not None else float(data.get("height", 600))
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid canvas size: {e}") from e
    svg = render_to_svg(manager, width, height, elements=boxes.values())

    if ns.output is None:
        sys.stdout.write(svg)
    else:
        ns.output.write_text(svg, encoding="utf-8")
        logger.info("Wrote %d connectors to %s", len(manager), ns.output)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    setup_logging(logging.DEBUG if ns.verbose > 1 else logging.INFO if ns.verbose else logging.WARNING)

    try:
        _render(ns)
    except ArrowlineError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
