# commands/effects.py

from dataclasses import dataclass
from typing import Iterable, Union

from ..session.state import SessionState


@dataclass(frozen=True)
class SetColor:
    color: str


@dataclass(frozen=True)
class ToggleMatrix:
    pass


@dataclass(frozen=True)
class ClearScrollback:
    pass


@dataclass(frozen=True)
class ResetSession:
    pass


StateEffect = Union[SetColor, ToggleMatrix, ClearScrollback, ResetSession]


def apply_effect(state: SessionState, effect: StateEffect) -> SessionState:
    """Apply a single declarative effect and return the new state."""
    if isinstance(effect, SetColor):
        return state.with_color(effect.color)
    if isinstance(effect, ToggleMatrix):
        return state.toggle_matrix()
    if isinstance(effect, ClearScrollback):
        return state.clear_scrollback()
    if isinstance(effect, ResetSession):
        return state.reset()
    raise TypeError(f"Unknown state effect: {effect!r}")


def apply_effects(state: SessionState, effects: Iterable[StateEffect]) -> SessionState:
    for effect in effects:
        state = apply_effect(state, effect)
    return state
