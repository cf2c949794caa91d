# test_interface.py

import pytest
import random
from datetime import datetime
from unittest.mock import AsyncMock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from techterm import Interface, Logger
from techterm.session import WindowMode


class TestInterface:
    """The async input loop with the prompt and screen mocked out."""

    def setup_method(self):
        self.interface = Interface(
            clock=lambda: datetime(2026, 10, 19, 18, 0, 0),
            rng=random.Random(0)
        )

        async def render(state):
            self.interface.display.dirty = False
        self.interface.display.render = AsyncMock(side_effect=render)

    def feed(self, *lines):
        self.interface.display.read_line = AsyncMock(side_effect=[*lines, EOFError()])

    @pytest.mark.asyncio
    async def test_lines_are_submitted_until_eof(self):
        self.feed("color blue", "date", "clear", "echo done")
        await self.interface.run()
        assert self.interface.session.get_scrollback() == ["> echo done", "done"]
        assert self.interface.session.get_current_color() == "blue"
        assert self.interface.session.history.entries == ["echo done", "clear", "date", "color blue"]

    @pytest.mark.asyncio
    async def test_prompt_text_replaces_line_buffer(self):
        self.interface.session.set_line("stale draft")
        self.feed("whoami")
        await self.interface.run()
        assert self.interface.session.history.entries == ["whoami"]
        assert self.interface.session.line_buffer.text == ""

    @pytest.mark.asyncio
    async def test_keyboard_interrupt_ends_loop(self):
        self.interface.display.read_line = AsyncMock(side_effect=KeyboardInterrupt())
        await self.interface.run()
        self.interface.display.render.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_redraws_only_when_dirty(self):
        self.feed(None, "whoami")
        await self.interface.run()
        # initial frame, then once more after whoami changed the scrollback
        assert self.interface.display.render.await_count == 2

    @pytest.mark.asyncio
    async def test_enter_restores_minimized_window(self):
        self.interface.chrome.toggle_minimize()
        self.feed("")
        await self.interface.run()
        assert self.interface.session.window_mode is WindowMode.NORMAL
        assert len(self.interface.session.history) == 0

    def test_invalid_color_fails_init(self):
        with pytest.raises(ValueError):
            Interface(color="ultraviolet")


class TestLogger:

    def test_disabled_logger_is_silent(self):
        logger = Logger("techterm.test.silent")
        logger.debug("nothing")

    def test_writes_to_file(self, tmp_path):
        log_file = tmp_path / "logs" / "debug.log"
        logger = Logger("techterm.test.file", logging_enabled=True, log_file=str(log_file))
        logger.debug("submitted whoami")
        logger.error("handler failed")
        content = log_file.read_text()
        assert "DEBUG - submitted whoami" in content
        assert "ERROR - handler failed" in content


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
