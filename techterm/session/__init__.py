# session/__init__.py

from .buffer import LineBuffer
from .history import CommandHistory, Direction
from .state import COLORS, DEFAULT_COLOR, SessionState, WindowMode

__all__ = [
    'LineBuffer', 'CommandHistory', 'Direction',
    'COLORS', 'DEFAULT_COLOR', 'SessionState', 'WindowMode',
]
