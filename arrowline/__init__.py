"""arrowline - directional connectors between boxes, rendered as SVG paths.

Example usage:
    from arrowline import canvas, box, connect

    with canvas(400, 200, filename="flow"):
        a = box(20, 20, 80, 40, label="A")
        b = box(260, 120, 80, 40, label="B")
        connect(a, b, kind="orthogonal", start_anchor=(1, 0.5), label="next")
"""

from .config import (
    ConnectorConfig,
    resolve_config,
)
from .dsl import (
    Canvas,
    box,
    canvas,
    connect,
)
from .errors import (
    ArrowlineError,
    ConfigurationError,
    RoutingError,
    UnknownConnectorError,
)
from .labels import (
    label_placement,
    place_label,
)
from .manager import (
    Connector,
    ConnectorManager,
    RenderedConnector,
    build_path,
)
from .models import (
    CENTER,
    Axis,
    Box,
    LabelPlacement,
    Point,
    Positioning,
    Rect,
    RelativeAnchor,
    RoutingKind,
    TipKind,
    TipSpec,
)
from .path import (
    PathBuilder,
)
from .positioning import (
    calculate_positioning,
    resolve_point,
)
from .renderer import (
    DEFAULT_THEME,
    ConnectorRenderer,
    Theme,
    render_to_svg,
)
from .routing import (
    route_orthogonal,
)
from .tips import (
    emit_tip,
)

__version__ = "0.1.0"

__all__ = [
    # DSL functions
    "canvas",
    "box",
    "connect",
    "Canvas",
    # Models
    "Point",
    "Rect",
    "Box",
    "RelativeAnchor",
    "CENTER",
    "Axis",
    "RoutingKind",
    "TipKind",
    "TipSpec",
    "Positioning",
    "LabelPlacement",
    # Configuration
    "ConnectorConfig",
    "resolve_config",
    # Geometry
    "PathBuilder",
    "route_orthogonal",
    "emit_tip",
    "calculate_positioning",
    "resolve_point",
    "place_label",
    "label_placement",
    # Connectors
    "ConnectorManager",
    "Connector",
    "RenderedConnector",
    "build_path",
    # Rendering
    "render_to_svg",
    "ConnectorRenderer",
    "Theme",
    "DEFAULT_THEME",
    # Errors
    "ArrowlineError",
    "ConfigurationError",
    "RoutingError",
    "UnknownConnectorError",
    # Version
    "__version__",
]
