# session/state.py

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Tuple

# Color token -> hex value used by the renderer
COLORS = {
    'green': '#00ff00',
    'blue': '#00ffff',
    'purple': '#ff00ff',
}
DEFAULT_COLOR = 'green'

WELCOME_LINES = (
    'Welcome to TechOS Terminal v1.0.0',
    'Type "help" to see available commands.',
)
RESET_LINE = 'Terminal reset.'


class WindowMode(Enum):
    NORMAL = "normal"
    MINIMIZED = "minimized"
    FULLSCREEN = "fullscreen"


@dataclass(frozen=True)
class SessionState:
    """
    Aggregate state of one terminal session.

    The state is immutable: every transition returns a new instance, so the
    interpreter can stay a plain function of (state, input).

    - scrollback: the visible transcript, oldest line first
    - text_color: one of the COLORS tokens
    - matrix_mode: whether the matrix backdrop is drawn
    - window_mode: owned by the window chrome, never changed by commands
    """
    scrollback: Tuple[str, ...] = WELCOME_LINES
    text_color: str = DEFAULT_COLOR
    matrix_mode: bool = False
    window_mode: WindowMode = WindowMode.NORMAL

    def __post_init__(self):
        if self.text_color not in COLORS:
            raise ValueError(f"Unknown color token: {self.text_color}")
        if not isinstance(self.scrollback, tuple):
            object.__setattr__(self, 'scrollback', tuple(self.scrollback))

    @property
    def color_hex(self) -> str:
        return COLORS[self.text_color]

    def append_lines(self, lines: Iterable[str]) -> "SessionState":
        """Return a copy with lines appended to the scrollback."""
        return replace(self, scrollback=self.scrollback + tuple(lines))

    def clear_scrollback(self) -> "SessionState":
        return replace(self, scrollback=())

    def with_color(self, color: str) -> "SessionState":
        return replace(self, text_color=color)

    def toggle_matrix(self) -> "SessionState":
        return replace(self, matrix_mode=not self.matrix_mode)

    def with_window_mode(self, mode: WindowMode) -> "SessionState":
        return replace(self, window_mode=WindowMode(mode))

    def reset(self) -> "SessionState":
        """Partial reset: only the scrollback is replaced."""
        return replace(self, scrollback=(RESET_LINE,))
