# TraceStyler
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Interaction states and the four-state style container."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

__all__ = [
    "ElementState",
    "InteractionContext",
    "ElementStateStyling",
    "resolve_state",
]

T = TypeVar("T")
U = TypeVar("U")


class ElementState(str, Enum):
    """Presentation mode of a drawn element."""

    NORMAL = "normal"
    HIGHLIGHTED = "highlighted"
    SELECTED = "selected"
    MUTED = "muted"


@dataclass(frozen=True)
class InteractionContext:
    """Current selection and hover, recreated by the caller on every event."""

    selected_key: str | None = None
    highlighted_key: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.selected_key is None and self.highlighted_key is None


EMPTY_CONTEXT = InteractionContext()


def resolve_state(column_key: str, context: InteractionContext | None) -> ElementState:
    """Return the state ``column_key`` is drawn in under ``context``.

    A selection always wins: the selected column is SELECTED and every other
    column is MUTED, whatever is highlighted. Without a selection only the
    highlighted column changes state.
    """

    ctx = context or EMPTY_CONTEXT
    if ctx.selected_key is not None:
        if ctx.selected_key == column_key:
            return ElementState.SELECTED
        return ElementState.MUTED
    if ctx.highlighted_key is not None and ctx.highlighted_key == column_key:
        return ElementState.HIGHLIGHTED
    return ElementState.NORMAL


@dataclass(frozen=True)
class ElementStateStyling(Generic[T]):
    """One property bundle per interaction state."""

    normal: T
    highlighted: T
    selected: T
    muted: T

    def for_state(self, state: ElementState | str) -> T:
        return getattr(self, ElementState(state).value)

    def map(self, fn: Callable[[ElementState, T], U]) -> ElementStateStyling[U]:
        return ElementStateStyling(
            **{state.value: fn(state, self.for_state(state)) for state in ElementState}
        )

    def to_dict(self) -> dict[str, T]:
        return {state.value: self.for_state(state) for state in ElementState}

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ElementStateStyling[Any]:
        """Build from a ``{"normal": ..., "highlighted": ..., ...}`` mapping."""

        missing = [state.value for state in ElementState if state.value not in mapping]
        if missing:
            raise ValueError(f"State styling is missing states: {', '.join(missing)}")
        extra = sorted(set(mapping) - {state.value for state in ElementState})
        if extra:
            raise ValueError(f"Unknown states in styling: {', '.join(extra)}")
        return cls(**{state.value: mapping[state.value] for state in ElementState})

    @classmethod
    def uniform(cls, value: T) -> ElementStateStyling[T]:
        return cls(normal=value, highlighted=value, selected=value, muted=value)
