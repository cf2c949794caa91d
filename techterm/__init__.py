# __init__.py

from .logger import Logger
from .controller import TerminalSession
from .interface import Interface

__all__ = ["Interface", "Logger", "TerminalSession"]
