# TraceStyler
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Exception types raised by the style resolution engine."""

from __future__ import annotations

__all__ = [
    "StylingError",
    "DuplicateColumnKeyError",
    "UnknownPaletteError",
    "UnknownColumnError",
    "MissingColumnStyleError",
    "StyleCallbackError",
    "StyleShapeError",
]


class StylingError(RuntimeError):
    """Base class for configuration and resolution failures."""


class DuplicateColumnKeyError(StylingError, ValueError):
    """Two column specs passed to one color scheme share a key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Duplicate column key: {key!r}")
        self.key = key


class UnknownPaletteError(StylingError, LookupError):
    """A palette name was requested that has not been registered."""

    def __init__(self, name: str, available: tuple[str, ...] = ()) -> None:
        message = f"Unknown palette: {name!r}"
        if available:
            message += f" (registered: {', '.join(available)})"
        super().__init__(message)
        self.name = name


class UnknownColumnError(StylingError, LookupError):
    """A column key is not part of the color scheme's configuration."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Column {key!r} is not configured in this color scheme")
        self.key = key


class MissingColumnStyleError(StylingError, LookupError):
    """A static style table has no entry for the requested column."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No style entry for column {key!r}")
        self.key = key


class StyleCallbackError(StylingError):
    """A style callback raised or returned a malformed bundle."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Style callback failed for column {key!r}: {reason}")
        self.key = key
        self.reason = reason


class StyleShapeError(StylingError, ValueError):
    """A static style entry does not have the shape the chart encoding draws."""

    def __init__(self, key: str, encoding: str, reason: str) -> None:
        super().__init__(f"Style entry for column {key!r} cannot style a {encoding} chart: {reason}")
        self.key = key
        self.encoding = encoding
