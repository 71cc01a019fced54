"""Connector configuration and default resolution."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from .errors import ConfigurationError
from .models import CENTER, RelativeAnchor, RoutingKind, TipKind, TipSpec

if TYPE_CHECKING:
    from .models import HasBounds


@dataclass(frozen=True)
class ConnectorConfig:
    """Fully resolved, immutable connector options."""

    width: float = 2.0  # Stroke thickness; also the tip glyph unit
    color: str = "black"
    kind: RoutingKind = RoutingKind.DIRECT
    start_tip: TipSpec = TipSpec(TipKind.NONE, flip=True)  # Already flipped
    end_tip: TipSpec = TipSpec(TipKind.ARROW)
    start_anchor: RelativeAnchor = CENTER
    end_anchor: RelativeAnchor = CENTER
    label: str | None = None
    # Element whose origin connector coordinates are relative to
    parent: HasBounds | None = None


# Alternate spellings accepted for some options
_ALIASES = {
    "line_kind": "kind",
    "from_pos": "start_anchor",
    "to_pos": "end_anchor",
    "starttip": "start_tip",
    "endtip": "end_tip",
}

_FIELDS = frozenset(
    ("width", "color", "kind", "start_tip", "end_tip", "start_anchor", "end_anchor", "label", "parent")
)


def parse_kind(value: RoutingKind | str) -> RoutingKind:
    """Convert a string literal to RoutingKind."""
    if isinstance(value, RoutingKind):
        return value
    try:
        return RoutingKind(str(value).lower())
    except ValueError:
        raise ConfigurationError(
            f"Invalid routing kind {value!r}, must be 'direct' or 'orthogonal'"
        ) from None


def _parse_tip_kind(value: TipKind | str) -> TipKind:
    if isinstance(value, TipKind):
        return value
    try:
        return TipKind(str(value).lower())
    except ValueError:
        names = ", ".join(k.value for k in TipKind)
        raise ConfigurationError(f"Unknown tip kind {value!r}, expected one of: {names}") from None


def parse_tip(value: TipSpec | TipKind | str | Mapping[str, Any]) -> TipSpec:
    """Accept a TipSpec, a TipKind, a kind name or a ``{"kind", "flip"}`` mapping."""
    if isinstance(value, TipSpec):
        return value
    if isinstance(value, Mapping):
        unknown = set(value) - {"kind", "flip"}
        if unknown:
            raise ConfigurationError(f"Unknown tip option(s): {', '.join(sorted(unknown))}")
        flip = value.get("flip", False)
        if not isinstance(flip, bool):
            raise ConfigurationError(f"Tip flip must be true or false, got {flip!r}")
        return TipSpec(_parse_tip_kind(value.get("kind", TipKind.NONE)), flip)
    return TipSpec(_parse_tip_kind(value))


def parse_anchor(value: RelativeAnchor | tuple[float, float] | Mapping[str, float]) -> RelativeAnchor:
    """Accept a RelativeAnchor, an ``(x, y)`` pair or an ``{"x", "y"}`` mapping."""
    if isinstance(value, RelativeAnchor):
        return value
    try:
        if isinstance(value, Mapping):
            x, y = value["x"], value["y"]
        else:
            x, y = value
        return RelativeAnchor(float(x), float(y))
    except (KeyError, TypeError, ValueError):
        raise ConfigurationError(f"Invalid anchor {value!r}, expected (x, y)") from None


def _parse_width(value: Any) -> float:
    try:
        width = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid width {value!r}") from None
    if not math.isfinite(width) or width <= 0:
        raise ConfigurationError(f"Width must be a positive number, got {value!r}")
    return width


def resolve_config(
    options: Mapping[str, Any] | ConnectorConfig | None = None,
    **overrides: Any,
) -> ConnectorConfig:
    """Build a complete ConnectorConfig from partial options.

    The caller's mapping is read, never modified. Options left unset (or set
    to None) take their defaults. The start tip's ``flip`` is toggled here,
    once, so that a start arrow points away from the line just as the end
    arrow does; a ConnectorConfig passed in is already resolved and only has
    ``overrides`` applied.

    Args:
        options: Partial options, or an already resolved config
        **overrides: Options taking precedence over ``options``

    Returns:
        A new ConnectorConfig

    Raises:
        ConfigurationError: on unknown option names or invalid values
    """
    if isinstance(options, ConnectorConfig):
        if not overrides:
            return options
        base = options
        raw: dict[str, Any] = {}
    else:
        base = ConnectorConfig()
        raw = {}
        for name, value in (options or {}).items():
            raw[_ALIASES.get(name, name)] = value
    for name, value in overrides.items():
        raw[_ALIASES.get(name, name)] = value

    unknown = set(raw) - _FIELDS
    if unknown:
        raise ConfigurationError(f"Unknown connector option(s): {', '.join(sorted(unknown))}")

    values: dict[str, Any] = {}
    for name, value in raw.items():
        if value is None:
            continue
        if name == "width":
            values[name] = _parse_width(value)
        elif name == "color":
            values[name] = str(value)
        elif name == "kind":
            values[name] = parse_kind(value)
        elif name == "start_tip":
            tip = parse_tip(value)
            values[name] = replace(tip, flip=not tip.flip)
        elif name == "end_tip":
            values[name] = parse_tip(value)
        elif name in ("start_anchor", "end_anchor"):
            values[name] = parse_anchor(value)
        else:
            values[name] = value

    return replace(base, **values)
