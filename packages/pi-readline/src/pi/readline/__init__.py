"""pi-readline: interactive line editor for raw-mode terminals."""

from pi.readline.buffer import LineBuffer
from pi.readline.config import ReadlineConfig
from pi.readline.decoder import EscState, KeyDecoder, PasteMode
from pi.readline.errors import (
    EndOfInput,
    ReadlineError,
    ReadlineInterrupt,
    TerminalSetupError,
)
from pi.readline.history import History
from pi.readline.readline import Prompt, Readline
from pi.readline.terminal import KeySource, ProcessTerminal, Terminal, raw_mode

__all__ = [
    # Session
    "Prompt",
    "Readline",
    "ReadlineConfig",
    # Editing
    "EscState",
    "History",
    "KeyDecoder",
    "LineBuffer",
    "PasteMode",
    # Errors
    "EndOfInput",
    "ReadlineError",
    "ReadlineInterrupt",
    "TerminalSetupError",
    # Terminal
    "KeySource",
    "ProcessTerminal",
    "Terminal",
    "raw_mode",
]
