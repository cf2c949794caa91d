# interface.py

import asyncio
from typing import Optional

from .logger import Logger
from .display import Display
from .controller import TerminalSession
from .session.state import DEFAULT_COLOR, WindowMode

class Interface:
    """
    Main entry point that assembles our Display and TerminalSession.
    """

    def __init__(self, logging_enabled: bool = False,
                 log_file: Optional[str] = None,
                 color: str = DEFAULT_COLOR,
                 clock=None,
                 rng=None):
        """
        Initialize components with optional logging and injected sources.

        Args:
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for stdout.
            color: Initial text color token (green, blue or purple).
            clock: Callable returning the current datetime, used by `date`.
            rng: random.Random-like source for `joke` and the matrix backdrop.
        """
        self._init_components(logging_enabled, log_file, color, clock, rng)

    def _init_components(self, logging_enabled: bool, log_file: Optional[str],
                         color: str, clock, rng) -> None:
        try:
            self.logger = Logger(__name__, logging_enabled, log_file)
            self.session = TerminalSession(clock=clock, rng=rng, color=color, logger=self.logger)
            self.display = Display(rng=rng, logger=self.logger)
            self.chrome = self.display.bind(self.session)
            self.logger.debug(f"Initialized with color: {color}")
        except Exception as e:
            if hasattr(self, 'logger'):
                self.logger.error(f"Init error: {e}")
            raise

    async def run(self) -> None:
        """Read, interpret and redraw until the user ends the session."""
        while True:
            if self.display.dirty:
                await self.display.render(self.session.state)
            try:
                line = await self.display.read_line(self.session.state)
            except (EOFError, KeyboardInterrupt):
                self.logger.debug("Input closed, ending session")
                break

            if line is None:
                # A window key binding ended the prompt
                continue
            if self.session.window_mode is WindowMode.MINIMIZED:
                # Enter on the minimized title bar restores the window
                self.chrome.toggle_minimize()
                continue
            self.session.set_line(line)
            self.session.submit()

    def start(self) -> None:
        """Run the terminal until Ctrl-D or Ctrl-C."""
        try:
            asyncio.run(self.run())
        except KeyboardInterrupt:
            print("\nExiting...")
        finally:
            self.display.terminal.reset()
