# commands/interpreter.py

from typing import List, Optional, Tuple

from ..session.state import SessionState
from .effects import apply_effects
from .registry import CommandRegistry


def split_output(output_text: Optional[str]) -> List[str]:
    """One scrollback line per newline-separated chunk; None yields nothing."""
    if output_text is None:
        return []
    return output_text.split('\n')


def echo_line(line: str) -> str:
    return f"> {line}"


def interpret(raw_line: str, state: SessionState,
              registry: CommandRegistry) -> Tuple[SessionState, List[str]]:
    """
    Run one submitted line against the registry.

    The echo and the handler output are appended first and the handler's
    effects applied after, in one step. That ordering is what makes `clear`
    leave an empty scrollback with no echo.

    Returns the new state and the handler's output lines.
    """
    result = registry.resolve(raw_line)
    lines = split_output(result.output_text)
    new_state = state.append_lines([echo_line(raw_line), *lines])
    new_state = apply_effects(new_state, result.effects)
    return new_state, lines
