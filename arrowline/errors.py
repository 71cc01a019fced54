"""Exception hierarchy for arrowline."""

from __future__ import annotations


class ArrowlineError(Exception):
    """Base class for all arrowline errors."""


class ConfigurationError(ArrowlineError, ValueError):
    """Invalid connector option, including an unknown tip kind."""


class RoutingError(ArrowlineError):
    """The orthogonal router failed to converge within its depth cap."""


class UnknownConnectorError(ArrowlineError, KeyError):
    """A handle that is not (or no longer) registered."""
