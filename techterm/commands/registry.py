# commands/registry.py

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .effects import StateEffect


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a handler.

    output_text=None appends nothing; "" appends one blank line.
    """
    output_text: Optional[str] = None
    effects: Tuple[StateEffect, ...] = ()


Handler = Callable[[str], CommandResult]
# Prefix handlers may return None to fall through to the next rule
PrefixHandler = Callable[[str], Optional[CommandResult]]


@dataclass(frozen=True)
class CommandSpec:
    name: str
    handler: Handler


@dataclass(frozen=True)
class PrefixRule:
    prefix: str
    handler: PrefixHandler


def unknown_command(line: str) -> CommandResult:
    return CommandResult(f"Command not found: {line}. Type 'help' for available commands.")


class CommandRegistry:
    """
    Maps command names to handlers.

    Lookup order:
    1. the first whitespace token, lowercased, against the exact names
    2. the raw line against each prefix rule, in registration order
    3. the unknown-command message
    """

    def __init__(self, logger=None):
        self.commands: Dict[str, CommandSpec] = {}
        self.prefix_rules: List[PrefixRule] = []
        self.logger = logger or logging.getLogger(__name__)

    def register(self, name: str, handler: Handler) -> None:
        key = name.lower()
        if key in self.commands:
            raise ValueError(f"Command '{key}' already registered")
        self.commands[key] = CommandSpec(key, handler)

    def register_prefix(self, prefix: str, handler: PrefixHandler) -> None:
        if any(rule.prefix == prefix for rule in self.prefix_rules):
            raise ValueError(f"Prefix '{prefix}' already registered")
        self.prefix_rules.append(PrefixRule(prefix, handler))

    @property
    def names(self) -> List[str]:
        return list(self.commands)

    def resolve(self, line: str) -> CommandResult:
        """Find and run the handler for an already trimmed, non-empty line."""
        name, *rest = line.split(None, 1)
        spec = self.commands.get(name.lower())
        if spec:
            self.logger.debug(f"Dispatching '{spec.name}'")
            return spec.handler(rest[0] if rest else "")

        for rule in self.prefix_rules:
            if line.startswith(rule.prefix):
                result = rule.handler(line[len(rule.prefix):])
                if result is not None:
                    self.logger.debug(f"Dispatching prefix rule '{rule.prefix.strip()}'")
                    return result
                self.logger.debug(f"Prefix rule '{rule.prefix.strip()}' fell through")

        self.logger.debug(f"Unknown command: {line}")
        return unknown_command(line)
