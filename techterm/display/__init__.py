# display/__init__.py

import logging

from ..session.state import WindowMode
from .terminal import DisplayTerminal
from .style import DisplayStyle
from .animations import DisplayAnimations
from .chrome import TITLE, WindowChrome

class Display:
    """
    Coordinates terminal display components in a hierarchical structure.

    Component Hierarchy:
    DisplayTerminal (base) → DisplayStyle → DisplayAnimations
    """
    def __init__(self, rng=None, logger=None):
        """Initialize components in dependency order."""
        self.terminal = DisplayTerminal()
        self.style = DisplayStyle(terminal=self.terminal)
        self.animations = DisplayAnimations(terminal=self.terminal, style=self.style, rng=rng)
        self.logger = logger or logging.getLogger(__name__)
        self.chrome = None
        self.dirty = True

    def bind(self, session) -> WindowChrome:
        """
        Wire the display to a session: subscribe to its change notifications
        and route key bindings to history navigation and the window chrome.
        """
        self.chrome = WindowChrome(session, self.terminal, logger=self.logger)

        def mark_dirty(_value):
            self.dirty = True

        session.on_scrollback_changed(mark_dirty)
        session.on_color_changed(mark_dirty)
        session.on_matrix_mode_changed(mark_dirty)
        session.on_window_mode_changed(mark_dirty)

        def on_navigate(direction, current_text):
            session.set_line(current_text)
            return session.navigate(direction)

        self.terminal.set_handlers(
            on_navigate=on_navigate,
            on_window_action=self.chrome.handle_action
        )
        return self.chrome

    def compose(self, state) -> str:
        """Build the full screen for a session state as one ANSI string."""
        minimized = state.window_mode is WindowMode.MINIMIZED
        parts = [self.style.render_title_bar(
            TITLE,
            minimized=minimized,
            fullscreen=state.window_mode is WindowMode.FULLSCREEN
        )]
        if minimized:
            return ''.join(parts)
        if state.matrix_mode:
            parts.append(self.animations.render_matrix_frame())
        parts.append(self.style.render_scrollback(state.scrollback, state.text_color))
        return ''.join(parts)

    async def render(self, state) -> None:
        await self.terminal.update_display(self.compose(state))
        self.dirty = False

    async def read_line(self, state):
        """Prompt for the next line in the session color."""
        return await self.terminal.get_user_input(
            prompt_color=self.style.get_prompt_style(state.text_color),
            allow_empty=state.window_mode is WindowMode.MINIMIZED
        )

__all__ = ['Display']
