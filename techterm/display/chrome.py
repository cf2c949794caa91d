# display/chrome.py

import logging

from ..session.state import WindowMode

TITLE = "TechOS Terminal"


class WindowChrome:
    """
    Minimize, fullscreen and close controls around the terminal.

    The chrome owns the window mode: it drives the host primitive (the
    alternate screen buffer for fullscreen) and then notifies the session,
    which only records the new mode.
    """

    def __init__(self, session, terminal, logger=None):
        self.session = session
        self.terminal = terminal
        self.logger = logger or logging.getLogger(__name__)

    @property
    def mode(self) -> WindowMode:
        return self.session.window_mode

    def toggle_minimize(self) -> WindowMode:
        if self.mode is WindowMode.MINIMIZED:
            # Restoring returns to fullscreen if the host is still in it
            new_mode = WindowMode.FULLSCREEN if self.terminal.in_alternate_screen else WindowMode.NORMAL
        else:
            new_mode = WindowMode.MINIMIZED
        self.logger.debug(f"Window {self.mode.value} -> {new_mode.value}")
        self.session.set_window_mode(new_mode)
        return new_mode

    def toggle_fullscreen(self) -> WindowMode:
        if self.terminal.in_alternate_screen:
            self.terminal.exit_alternate_screen()
            new_mode = WindowMode.NORMAL
        else:
            self.terminal.enter_alternate_screen()
            new_mode = WindowMode.FULLSCREEN
        self.logger.debug(f"Window {self.mode.value} -> {new_mode.value}")
        self.session.set_window_mode(new_mode)
        return new_mode

    def close(self) -> None:
        self.session.reset()

    def handle_action(self, action: str) -> None:
        """Dispatch a key-binding action name."""
        actions = {
            "minimize": self.toggle_minimize,
            "fullscreen": self.toggle_fullscreen,
            "close": self.close,
        }
        if action not in actions:
            raise ValueError(f"Unknown window action: {action}")
        actions[action]()
