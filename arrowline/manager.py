"""Registry of connectors and their full-recompute pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

import networkx as nx

from .config import ConnectorConfig, resolve_config
from .errors import ArrowlineError, UnknownConnectorError
from .labels import label_placement
from .log import get_logger
from .models import Point, RoutingKind
from .path import PathBuilder
from .positioning import ORIGIN, calculate_positioning
from .tips import emit_tip

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from .models import HasBounds, LabelPlacement, Positioning

logger = get_logger(__name__)


@dataclass(frozen=True)
class RenderedConnector:
    """What the drawing layer needs for one connector."""

    d: str
    config: ConnectorConfig
    label: LabelPlacement | None = None


@dataclass(eq=False)
class Connector:
    """A registered connector. Its anchor elements are borrowed, never owned."""

    handle: int
    source: HasBounds
    target: HasBounds
    config: ConnectorConfig
    positioning: Positioning | None = field(default=None, repr=False)
    rendered: RenderedConnector | None = field(default=None, repr=False)


Listener = Callable[[int, RenderedConnector], None]


def build_path(positioning: Positioning, config: ConnectorConfig) -> str:
    """Serialize a positioned connector, tips included, to a path ``d`` string."""
    builder = PathBuilder(positioning.start.x, positioning.start.y)
    emit_tip(config.start_tip, positioning.rotation_start, config.width, builder)
    if config.kind is RoutingKind.DIRECT:
        builder.line_absolute(positioning.end.x, positioning.end.y)
    else:
        for point in positioning.route[1:]:
            builder.line_absolute(point.x, point.y)
    emit_tip(config.end_tip, positioning.rotation_end, config.width, builder)
    return builder.serialize()


class ConnectorManager:
    """Owns registered connectors and recomputes them when layout changes.

    Nothing listens to the host's events implicitly; integration code calls
    ``invalidate_all`` (or a narrower variant) whenever anchor elements may
    have moved.

    Usage:
        manager = ConnectorManager()
        handle = manager.register(a, b, kind="orthogonal", label="calls")
        a.move_to(200, 40)
        manager.invalidate_element(a)
    """

    def __init__(self, listener: Listener | None = None, scroll: Point = ORIGIN):
        self.listener = listener
        self.scroll = scroll
        self._connectors: dict[int, Connector] = {}
        self._next_handle = 0
        # Elements are nodes (keyed by identity), connectors are keyed edges
        self._graph = nx.MultiDiGraph()

    def __len__(self) -> int:
        return len(self._connectors)

    def __iter__(self) -> Iterator[Connector]:
        return iter(list(self._connectors.values()))

    def get(self, handle: int) -> Connector:
        try:
            return self._connectors[handle]
        except KeyError:
            raise UnknownConnectorError(handle) from None

    def register(
        self,
        source: HasBounds,
        target: HasBounds,
        config: Mapping[str, Any] | ConnectorConfig | None = None,
        **options: Any,
    ) -> int:
        """Add a connector from ``source`` to ``target`` and draw it once.

        Nothing is registered if the first draw fails.

        Returns:
            Handle identifying the connector (registration order)
        """
        resolved = resolve_config(config, **options)
        connector = Connector(self._next_handle, source, target, resolved)
        positioning, rendered = self._compute(connector)

        handle = connector.handle
        self._next_handle += 1
        self._connectors[handle] = connector
        self._graph.add_node(id(source), element=source)
        self._graph.add_node(id(target), element=target)
        self._graph.add_edge(id(source), id(target), key=handle)
        logger.info(
            "Registered connector %d (%s, %s -> %s)",
            handle,
            resolved.kind.value,
            resolved.start_tip.kind.value,
            resolved.end_tip.kind.value,
        )

        self._store(connector, positioning, rendered)
        return handle

    def unregister(self, handle: int) -> None:
        connector = self.get(handle)
        del self._connectors[handle]
        u, v = id(connector.source), id(connector.target)
        self._graph.remove_edge(u, v, key=handle)
        for node in {u, v}:
            if self._graph.degree(node) == 0:
                self._graph.remove_node(node)
        logger.info("Unregistered connector %d", handle)

    def connectors_for(self, element: HasBounds) -> list[Connector]:
        """Connectors attached to ``element`` at either end, in registration order."""
        node = id(element)
        if node not in self._graph:
            return []
        handles = {key for _, _, key in self._graph.out_edges(node, keys=True)}
        handles.update(key for _, _, key in self._graph.in_edges(node, keys=True))
        return [self._connectors[h] for h in sorted(handles)]

    def invalidate(self, handle: int) -> RenderedConnector:
        return self._recompute(self.get(handle))

    def invalidate_element(self, element: HasBounds) -> None:
        self._recompute_many(self.connectors_for(element))

    def invalidate_all(self) -> None:
        logger.debug("Recomputing %d connectors", len(self._connectors))
        self._recompute_many(list(self._connectors.values()))

    def set_scroll_offset(self, x: float, y: float) -> None:
        self.scroll = Point(x, y)
        self.invalidate_all()

    def _recompute_many(self, connectors: list[Connector]) -> None:
        """Recompute every connector, then raise the first failure, if any.

        A failing connector keeps its previous geometry.
        """
        first_error: ArrowlineError | None = None
        for connector in connectors:
            try:
                self._recompute(connector)
            except ArrowlineError as e:
                logger.error("Connector %d failed to recompute: %s", connector.handle, e)
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error

    def _compute(self, connector: Connector) -> tuple[Positioning, RenderedConnector]:
        config = connector.config
        positioning = calculate_positioning(
            connector.source, connector.target, config, self.scroll
        )
        label = label_placement(positioning, config.kind) if config.label is not None else None
        return positioning, RenderedConnector(build_path(positioning, config), config, label)

    def _store(
        self,
        connector: Connector,
        positioning: Positioning,
        rendered: RenderedConnector,
    ) -> None:
        previous = connector.rendered
        connector.positioning = positioning
        connector.rendered = rendered
        logger.debug("Connector %d: %s", connector.handle, rendered.d)

        if self.listener is not None and rendered != previous:
            self.listener(connector.handle, rendered)

    def _recompute(self, connector: Connector) -> RenderedConnector:
        positioning, rendered = self._compute(connector)
        self._store(connector, positioning, rendered)
        return rendered
