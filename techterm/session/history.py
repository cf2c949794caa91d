# session/history.py

from enum import Enum
from typing import List, Optional


class Direction(Enum):
    PREVIOUS = "previous"
    NEXT = "next"


class CommandHistory:
    """
    Most-recent-first log of submitted commands with a browsing cursor.

    The cursor is -1 while the user is typing a fresh line; index i means
    the line buffer mirrors entries[i]. Navigation only moves the cursor,
    the entries themselves are never rewritten.
    """

    def __init__(self, logger=None):
        self.entries: List[str] = []
        self.index: int = -1
        self.logger = logger

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_browsing(self) -> bool:
        return self.index != -1

    def push(self, line: str) -> None:
        """Record a submitted line at the front and stop browsing."""
        self.entries.insert(0, line)
        self.index = -1

    def previous(self) -> Optional[str]:
        """
        Step towards older entries.

        Returns the text the line buffer should now show, or None when
        already at the oldest entry (or the history is empty).
        """
        if self.index < len(self.entries) - 1:
            self.index += 1
            return self.entries[self.index]
        return None

    def next(self) -> Optional[str]:
        """
        Step towards newer entries.

        Returns the new buffer text, "" when leaving browsing mode, or None
        when not browsing.
        """
        if self.index > 0:
            self.index -= 1
            return self.entries[self.index]
        if self.index == 0:
            self.index = -1
            return ""
        return None

    def navigate(self, direction) -> Optional[str]:
        direction = Direction(direction)
        result = self.previous() if direction is Direction.PREVIOUS else self.next()
        if self.logger:
            self.logger.debug(f"History {direction.value}: index={self.index} of {len(self.entries)}")
        return result
