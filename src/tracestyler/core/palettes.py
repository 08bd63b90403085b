# TraceStyler
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Named, ordered color palettes used to assign colors to columns.

The builtin palettes are the qualitative ColorBrewer and Tableau tables that
ship with matplotlib, stored as lowercase ``#rrggbb`` strings. Further
palettes can be registered by name; a registered palette never changes.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import matplotlib
from matplotlib.colors import is_color_like, to_hex

from tracestyler.errors import UnknownPaletteError

log = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_PALETTE",
    "BUILTIN_PALETTES",
    "Palette",
    "PaletteRegistry",
    "default_registry",
    "lookup_palette",
    "register_palette",
    "palette_names",
]

DEFAULT_PALETTE = "Paired"

# Qualitative matplotlib colormaps exposed as palettes
BUILTIN_PALETTES: tuple[str, ...] = (
    "Paired",
    "Set1",
    "Set2",
    "Set3",
    "Dark2",
    "Accent",
    "Pastel1",
    "Pastel2",
    "tab10",
    "tab20",
)


@dataclass(frozen=True)
class Palette:
    """A fixed-length ordered color table."""

    name: str
    colors: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[str]:
        return iter(self.colors)

    def __getitem__(self, index: int) -> str:
        return self.colors[index]


def _builtin_colors(name: str) -> tuple[str, ...]:
    cmap = matplotlib.colormaps[name]
    return tuple(to_hex(rgb) for rgb in cmap.colors)


class PaletteRegistry:
    """Registry of palettes keyed by name."""

    def __init__(self, *, builtins: bool = True) -> None:
        self._palettes: dict[str, Palette] = {}
        self._lock = threading.Lock()
        if builtins:
            for name in BUILTIN_PALETTES:
                self._palettes[name] = Palette(name=name, colors=_builtin_colors(name))

    def register(self, name: str, colors: Iterable[str]) -> Palette:
        """Register a new palette and return it.

        Raises:
            ValueError: if the name is taken, the palette is empty, or a
                color is not understood by matplotlib.
        """

        if not name:
            raise ValueError("Palette name must be a non-empty string")
        values = tuple(colors)
        if not values:
            raise ValueError(f"Palette {name!r} must contain at least one color")
        invalid = [c for c in values if not isinstance(c, str) or not is_color_like(c)]
        if invalid:
            raise ValueError(f"Palette {name!r} has invalid colors: {invalid!r}")

        palette = Palette(name=name, colors=values)
        with self._lock:
            if name in self._palettes:
                raise ValueError(f"Palette {name!r} is already registered")
            self._palettes[name] = palette
        log.debug("Registered palette %s with %d colors", name, len(values))
        return palette

    def lookup(self, name: str) -> Palette:
        """Return the palette registered under ``name``."""

        try:
            return self._palettes[name]
        except KeyError:
            raise UnknownPaletteError(name, self.names()) from None

    def names(self) -> tuple[str, ...]:
        return tuple(self._palettes)

    def __contains__(self, name: object) -> bool:
        return name in self._palettes

    def __len__(self) -> int:
        return len(self._palettes)


_DEFAULT_REGISTRY = PaletteRegistry()


def default_registry() -> PaletteRegistry:
    """Return the process-wide palette registry."""

    return _DEFAULT_REGISTRY


def lookup_palette(name: str = DEFAULT_PALETTE) -> Palette:
    return _DEFAULT_REGISTRY.lookup(name)


def register_palette(name: str, colors: Iterable[str]) -> Palette:
    return _DEFAULT_REGISTRY.register(name, colors)


def palette_names() -> tuple[str, ...]:
    return _DEFAULT_REGISTRY.names()
