# test_history.py

import pytest
import random

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from techterm.session import CommandHistory, Direction, LineBuffer


class TestCommandHistory:
    """Cursor movement over a most-recent-first history."""

    def setup_method(self):
        self.history = CommandHistory()

    def test_push_is_most_recent_first(self):
        self.history.push("a")
        self.history.push("b")
        assert self.history.entries == ["b", "a"]
        assert self.history.index == -1

    def test_empty_history_navigation_is_noop(self):
        assert self.history.previous() is None
        assert self.history.next() is None
        assert self.history.index == -1

    def test_previous_walks_to_oldest_and_stops(self):
        self.history.push("a")
        self.history.push("b")
        assert self.history.previous() == "b"
        assert self.history.previous() == "a"
        assert self.history.previous() is None
        assert self.history.index == 1

    def test_next_walks_back_to_live_line(self):
        self.history.push("a")
        self.history.push("b")
        self.history.previous()
        self.history.previous()
        assert self.history.next() == "b"
        assert self.history.next() == ""
        assert self.history.index == -1
        assert self.history.next() is None

    def test_push_resets_cursor(self):
        self.history.push("a")
        self.history.previous()
        assert self.history.is_browsing
        self.history.push("b")
        assert not self.history.is_browsing

    def test_navigation_never_mutates_entries(self):
        for line in ["one", "two", "three"]:
            self.history.push(line)
        for direction in [Direction.PREVIOUS, Direction.NEXT, Direction.PREVIOUS, Direction.PREVIOUS]:
            self.history.navigate(direction)
        assert self.history.entries == ["three", "two", "one"]

    def test_navigate_accepts_direction_values(self):
        self.history.push("a")
        assert self.history.navigate("previous") == "a"
        with pytest.raises(ValueError):
            self.history.navigate("sideways")

    def test_cursor_stays_in_range(self):
        rng = random.Random(7)
        for i in range(5):
            self.history.push(f"cmd{i}")
        for _ in range(500):
            self.history.navigate(rng.choice([Direction.PREVIOUS, Direction.NEXT]))
            assert -1 <= self.history.index <= len(self.history) - 1


class TestLineBuffer:

    def test_mutation(self):
        buffer = LineBuffer()
        assert buffer.text == ""
        buffer.set("echo hi")
        assert str(buffer) == "echo hi"
        buffer.set("help")
        assert buffer.text == "help"
        buffer.clear()
        assert buffer.text == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
