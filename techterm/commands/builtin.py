# commands/builtin.py

import random
from datetime import datetime
from typing import Callable, Optional

from ..session.state import COLORS
from .calculator import CalculatorError, evaluate, format_number
from .effects import ClearScrollback, SetColor, ToggleMatrix
from .registry import CommandRegistry, CommandResult

# Keep in sync with the registrations in BuiltinCommands.register
HELP_TEXT = """Available commands:
- help: Display this help message
- clear: Clear the terminal screen
- echo [text]: Display the text
- date: Show current date and time
- matrix: Toggle Matrix-style animation
- whoami: Display current user
- color [green/blue/purple]: Change terminal text color
- systeminfo: Display system information
- joke: Tell a random programming joke
- calc [expression]: Simple calculator (e.g., calc 2 + 2)"""

SYSTEM_INFO = """OS: TechOS v1.0.0
Terminal: Python Terminal
Memory: 640K (should be enough for anybody)
CPU: Quantum Core i9
Resolution: Yes
Status: Optimal"""

JOKES = [
    "Why do programmers prefer dark mode? Because light attracts bugs!",
    "How many programmers does it take to change a light bulb? None, that's a hardware problem!",
    "Why do Python developers need glasses? Because they can't C!",
]

USER = 'guest@TechOS'
MATRIX_MESSAGE = 'Matrix mode toggled...'
INVALID_EXPRESSION = 'Invalid expression'


def format_timestamp(moment: datetime) -> str:
    """Render a timestamp as M/D/YYYY, h:mm:ss AM."""
    hour = moment.hour % 12 or 12
    meridiem = 'AM' if moment.hour < 12 else 'PM'
    return (f"{moment.month}/{moment.day}/{moment.year}, "
            f"{hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}")


class BuiltinCommands:
    """
    The fixed TechOS command set.

    The clock and random source are injected so date and joke output can be
    pinned down in tests.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None, rng=None):
        self.clock = clock or datetime.now
        self.rng = rng or random.Random()

    def register(self, registry: CommandRegistry) -> CommandRegistry:
        registry.register('help', self.cmd_help)
        registry.register('clear', self.cmd_clear)
        registry.register('date', self.cmd_date)
        registry.register('matrix', self.cmd_matrix)
        registry.register('whoami', self.cmd_whoami)
        registry.register('systeminfo', self.cmd_systeminfo)
        registry.register('joke', self.cmd_joke)
        # Order matters: a rule returning None falls through to the next one
        registry.register_prefix('echo ', self.cmd_echo)
        registry.register_prefix('color ', self.cmd_color)
        registry.register_prefix('calc ', self.cmd_calc)
        return registry

    # ── Exact commands ──────────────────────────────────────────────────────

    def cmd_help(self, args: str) -> CommandResult:
        return CommandResult(HELP_TEXT)

    def cmd_clear(self, args: str) -> CommandResult:
        return CommandResult(None, (ClearScrollback(),))

    def cmd_date(self, args: str) -> CommandResult:
        return CommandResult(format_timestamp(self.clock()))

    def cmd_matrix(self, args: str) -> CommandResult:
        return CommandResult(MATRIX_MESSAGE, (ToggleMatrix(),))

    def cmd_whoami(self, args: str) -> CommandResult:
        return CommandResult(USER)

    def cmd_systeminfo(self, args: str) -> CommandResult:
        return CommandResult(SYSTEM_INFO)

    def cmd_joke(self, args: str) -> CommandResult:
        return CommandResult(self.rng.choice(JOKES))

    # ── Prefix rules ────────────────────────────────────────────────────────

    def cmd_echo(self, text: str) -> CommandResult:
        return CommandResult(text)

    def cmd_color(self, color: str) -> Optional[CommandResult]:
        if color not in COLORS:
            return None
        return CommandResult(f"Terminal color changed to {color}", (SetColor(color),))

    def cmd_calc(self, expression: str) -> CommandResult:
        try:
            result = evaluate(expression)
        except (CalculatorError, RecursionError):
            return CommandResult(INVALID_EXPRESSION)
        return CommandResult(f"{expression} = {format_number(result)}")


def build_registry(clock=None, rng=None, logger=None) -> CommandRegistry:
    return BuiltinCommands(clock=clock, rng=rng).register(CommandRegistry(logger=logger))
