# controller.py

import logging
from typing import Callable, Dict, List, Optional

from .commands import build_registry, interpret
from .commands.effects import ResetSession, apply_effect
from .session import (CommandHistory, DEFAULT_COLOR, Direction, LineBuffer,
                      SessionState, WindowMode)

SCROLLBACK_CHANGED = 'scrollback_changed'
COLOR_CHANGED = 'color_changed'
MATRIX_MODE_CHANGED = 'matrix_mode_changed'
WINDOW_MODE_CHANGED = 'window_mode_changed'


class TerminalSession:
    """
    Session controller for one terminal.

    Owns the session state, the command history and the line buffer, feeds
    submitted lines through the interpreter and tells subscribers what
    changed. Every call runs to completion before returning; the host is
    expected to drive it from a single thread.
    """

    def __init__(self, clock=None, rng=None, color: str = DEFAULT_COLOR,
                 registry=None, logger=None):
        self.logger = logger or logging.getLogger(__name__)
        self.state = SessionState(text_color=color)
        self.history = CommandHistory(logger=self.logger)
        self.line_buffer = LineBuffer()
        self.registry = registry or build_registry(clock=clock, rng=rng, logger=self.logger)
        self._hooks: Dict[str, List[Callable]] = {
            SCROLLBACK_CHANGED: [],
            COLOR_CHANGED: [],
            MATRIX_MODE_CHANGED: [],
            WINDOW_MODE_CHANGED: [],
        }

    # ── Subscriptions ───────────────────────────────────────────────────────

    def subscribe(self, event: str, callback: Callable) -> None:
        if event not in self._hooks:
            raise ValueError(f"Unknown session event: {event}")
        self._hooks[event].append(callback)

    def on_scrollback_changed(self, callback: Callable[[List[str]], None]) -> None:
        self.subscribe(SCROLLBACK_CHANGED, callback)

    def on_color_changed(self, callback: Callable[[str], None]) -> None:
        self.subscribe(COLOR_CHANGED, callback)

    def on_matrix_mode_changed(self, callback: Callable[[bool], None]) -> None:
        self.subscribe(MATRIX_MODE_CHANGED, callback)

    def on_window_mode_changed(self, callback: Callable[[WindowMode], None]) -> None:
        self.subscribe(WINDOW_MODE_CHANGED, callback)

    # ── Input ───────────────────────────────────────────────────────────────

    def set_line(self, text: str) -> None:
        """Mirror the prompt's current text into the line buffer."""
        self.line_buffer.set(text)

    def submit(self) -> List[str]:
        """Submit whatever is in the line buffer."""
        return self.submit_line(self.line_buffer.text)

    def submit_line(self, text: str) -> List[str]:
        """
        Interpret a completed line.

        Blank lines are ignored entirely: nothing reaches the history or the
        scrollback. Returns the handler's output lines.
        """
        line = text.strip()
        if not line:
            return []
        self.history.push(line)
        self.line_buffer.clear()
        self.logger.debug(f"Submitted: {line}")
        new_state, lines = interpret(line, self.state, self.registry)
        self._commit(new_state)
        return lines

    def navigate(self, direction) -> str:
        """Move through the history and mirror the entry into the line buffer."""
        text = self.history.navigate(Direction(direction))
        if text is not None:
            self.line_buffer.set(text)
        return self.line_buffer.text

    # ── Queries ─────────────────────────────────────────────────────────────

    def get_scrollback(self) -> List[str]:
        return list(self.state.scrollback)

    def get_current_color(self) -> str:
        return self.state.text_color

    @property
    def matrix_mode(self) -> bool:
        return self.state.matrix_mode

    @property
    def window_mode(self) -> WindowMode:
        return self.state.window_mode

    # ── External notifications ──────────────────────────────────────────────

    def reset(self) -> None:
        """Close affordance: scrollback becomes a single notice, the rest stays."""
        self.logger.debug("Session reset requested")
        self._commit(apply_effect(self.state, ResetSession()))

    def set_window_mode(self, mode) -> None:
        """Record a window mode change made by the window chrome."""
        self._commit(self.state.with_window_mode(mode))

    # ── Internals ───────────────────────────────────────────────────────────

    def _commit(self, new_state: SessionState) -> None:
        old_state, self.state = self.state, new_state
        changes = []
        if new_state.scrollback != old_state.scrollback:
            changes.append((SCROLLBACK_CHANGED, list(new_state.scrollback)))
        if new_state.text_color != old_state.text_color:
            changes.append((COLOR_CHANGED, new_state.text_color))
        if new_state.matrix_mode != old_state.matrix_mode:
            changes.append((MATRIX_MODE_CHANGED, new_state.matrix_mode))
        if new_state.window_mode != old_state.window_mode:
            changes.append((WINDOW_MODE_CHANGED, new_state.window_mode))

        # notify everyone, then surface the first failure
        errors = []
        for event, value in changes:
            errors.extend(self._emit(event, value))
        if errors:
            raise errors[0]

    def _emit(self, event: str, value) -> List[Exception]:
        self.logger.debug(f"Session event: {event}")
        errors = []
        for callback in self._hooks[event]:
            try:
                callback(value)
            except Exception as e:
                self.logger.error(f"Error in {event} subscriber: {e}", exc_info=True)
                errors.append(e)
        return errors
