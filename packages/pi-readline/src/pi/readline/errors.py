"""Exceptions raised by :meth:`pi.readline.Readline.readline`."""

from __future__ import annotations


class ReadlineError(Exception):
    """Base class for line editor errors."""


class ReadlineInterrupt(ReadlineError):
    """The user pressed ctrl+c while a line was being read."""


class EndOfInput(ReadlineError, EOFError):
    """Input ended.

    Raised when the key source has closed, and also when ctrl+d is pressed
    on an empty line; callers cannot tell the two apart.
    """


class TerminalSetupError(ReadlineError):
    """Raw mode could not be entered on the input terminal."""
