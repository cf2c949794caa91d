# display/terminal.py
import sys
import shutil
import asyncio
from dataclasses import dataclass
from typing import Callable, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.validation import Validator, ValidationError
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings

from ..session.history import Direction


@dataclass
class TerminalSize:
    """Terminal dimensions."""

    columns: int
    lines: int


class DisplayTerminal:
    """Low-level terminal operations and I/O."""

    def __init__(self):
        """Initialize terminal state."""
        self._cursor_visible = True
        self._in_alternate_screen = False
        self._prompt_prefix = "❯ "
        self._reset_style = "\033[0m"
        self._current_buffer = ""
        self._last_size = self.get_size()
        # Callbacks wired by Display.bind()
        self._on_navigate: Optional[Callable[[Direction, str], str]] = None
        self._on_window_action: Optional[Callable[[str], None]] = None
        self.key_bindings = self._setup_key_bindings()
        self._prompt_session = None

    class NonEmptyValidator(Validator):
        def validate(self, document):
            if not document.text.strip():
                raise ValidationError(message="", cursor_position=0)

    def set_handlers(self, on_navigate=None, on_window_action=None) -> None:
        """Register the callbacks invoked from key bindings."""
        self._on_navigate = on_navigate
        self._on_window_action = on_window_action

    def _setup_key_bindings(self) -> KeyBindings:
        """
        Up/Down walk the command history, F11 toggles fullscreen, Ctrl-W
        minimizes or restores and Ctrl-X closes (resets) the terminal.
        """
        kb = KeyBindings()

        def navigate(event, direction):
            if self._on_navigate is None:
                return
            buffer = event.current_buffer
            text = self._on_navigate(direction, buffer.text)
            buffer.text = text
            buffer.cursor_position = len(text)

        def window_action(event, action):
            if self._on_window_action is None:
                return
            self._on_window_action(action)
            # Leave the prompt so the caller redraws with the new window state
            event.app.exit(result=None)

        @kb.add("up")
        def _(event):
            navigate(event, Direction.PREVIOUS)

        @kb.add("down")
        def _(event):
            navigate(event, Direction.NEXT)

        @kb.add("f11")
        def _(event):
            window_action(event, "fullscreen")

        @kb.add("c-w")
        def _(event):
            window_action(event, "minimize")

        @kb.add("c-x")
        def _(event):
            window_action(event, "close")

        return kb

    @property
    def prompt_session(self) -> PromptSession:
        """Create the prompt session on first use; it binds to the real tty."""
        if self._prompt_session is None:
            self._prompt_session = PromptSession(
                key_bindings=self.key_bindings, complete_while_typing=False
            )
        return self._prompt_session

    @property
    def width(self) -> int:
        """Return terminal width."""
        return self.get_size().columns

    @property
    def height(self) -> int:
        """Return terminal height."""
        return self.get_size().lines

    def get_size(self) -> TerminalSize:
        """Get terminal dimensions."""
        size = shutil.get_terminal_size()
        return TerminalSize(columns=size.columns, lines=size.lines)

    def _is_terminal(self) -> bool:
        """Return True if stdout is a terminal."""
        return sys.stdout.isatty()

    def _manage_cursor(self, show: bool) -> None:
        """Toggle cursor visibility based on 'show' flag."""
        if self._cursor_visible != show and self._is_terminal():
            self._cursor_visible = show
            sys.stdout.write("\033[?25h" if show else "\033[?25l")
            sys.stdout.flush()

    def show_cursor(self) -> None:
        self._manage_cursor(True)

    def hide_cursor(self) -> None:
        self._manage_cursor(False)

    @property
    def in_alternate_screen(self) -> bool:
        return self._in_alternate_screen

    def enter_alternate_screen(self) -> None:
        """Switch to the alternate screen buffer, the terminal's fullscreen."""
        if not self._in_alternate_screen and self._is_terminal():
            sys.stdout.write("\033[?1049h")
            sys.stdout.flush()
        self._in_alternate_screen = True

    def exit_alternate_screen(self) -> None:
        if self._in_alternate_screen and self._is_terminal():
            sys.stdout.write("\033[?1049l")
            sys.stdout.flush()
        self._in_alternate_screen = False

    def reset(self) -> None:
        """Reset terminal: leave fullscreen, show cursor and clear screen."""
        self.exit_alternate_screen()
        self.show_cursor()
        self.clear_screen()

    def clear_screen(self) -> None:
        """Clear the terminal screen and reset cursor position."""
        if self._is_terminal():
            sys.stdout.write("\033[2J\033[H")
            sys.stdout.flush()
        self._current_buffer = ""

    def write(self, text: str = "", newline: bool = False) -> None:
        """Write text to stdout; append newline if requested."""
        try:
            sys.stdout.write(text)
            if newline:
                sys.stdout.write("\n")
            sys.stdout.flush()
            self._current_buffer += text
            if newline:
                self._current_buffer += "\n"
        except IOError:
            pass  # Ignore pipe errors

    async def update_display(self, content: str = "") -> None:
        """
        Redraw the whole screen with content.
        A full clear happens only when the terminal was resized.
        """
        self.hide_cursor()
        current_size = self.get_size()
        if (
            current_size.columns != self._last_size.columns
            or current_size.lines != self._last_size.lines
        ):
            self.clear_screen()
            self._last_size = current_size
        elif self._is_terminal():
            sys.stdout.write("\033[H")
        sys.stdout.write(self._reset_style + content)
        # Erase whatever the previous frame left below the new content
        if self._is_terminal():
            sys.stdout.write("\033[0J")
        sys.stdout.flush()
        self._current_buffer = content
        await self.yield_to_event_loop()

    async def get_user_input(self, prompt_color: str = "#00ff00",
                             allow_empty: bool = False) -> Optional[str]:
        """
        Read one line through prompt_toolkit.

        Returns the stripped line, or None when a window key binding ended
        the prompt early. EOFError and KeyboardInterrupt propagate.
        """
        self.show_cursor()
        try:
            result = await self.prompt_session.prompt_async(
                FormattedText([(prompt_color, self._prompt_prefix)]),
                validator=None if allow_empty else self.NonEmptyValidator(),
                validate_while_typing=False,
            )
        finally:
            self.write(self._reset_style)
            self.hide_cursor()
        if result is None:
            return None
        return result.strip()

    async def yield_to_event_loop(self) -> None:
        """Yield control to the event loop briefly."""
        await asyncio.sleep(0)

