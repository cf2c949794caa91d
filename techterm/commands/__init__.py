# commands/__init__.py

from .builtin import BuiltinCommands, build_registry
from .calculator import CalculatorError
from .effects import ClearScrollback, ResetSession, SetColor, StateEffect, ToggleMatrix
from .interpreter import interpret, split_output
from .registry import CommandRegistry, CommandResult, CommandSpec

__all__ = [
    'BuiltinCommands', 'build_registry', 'CalculatorError',
    'ClearScrollback', 'ResetSession', 'SetColor', 'StateEffect', 'ToggleMatrix',
    'interpret', 'split_output',
    'CommandRegistry', 'CommandResult', 'CommandSpec',
]
