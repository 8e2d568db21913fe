"""Terminal I/O for the line editor.

Provides the ``Terminal`` protocol used for display, a concrete
``ProcessTerminal`` bound to ``sys.stdin``/``sys.stdout``, the
:func:`raw_mode` scoped acquisition, and the ``KeySource`` background
reader that hands decoded code points to the edit loop one at a time.
"""

from __future__ import annotations

import codecs
import contextlib
import logging
import queue
import sys
import termios
import threading
import tty
from typing import BinaryIO, ContextManager, Iterator, Protocol, TextIO

from pi.readline import keys
from pi.readline.errors import EndOfInput, TerminalSetupError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Raw mode
# ---------------------------------------------------------------------------


@contextlib.contextmanager
def raw_mode(fd: int) -> Iterator[None]:
    """Put *fd* into raw mode for the duration of the ``with`` block.

    The previous terminal attributes are restored on every exit path.
    Raises :class:`TerminalSetupError` if *fd* is not a terminal.
    """
    try:
        original = termios.tcgetattr(fd)
        tty.setraw(fd)
    except (termios.error, OSError) as exc:
        raise TerminalSetupError(f"cannot enter raw mode on fd {fd}: {exc}") from exc

    logger.debug("raw mode entered on fd %d", fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, original)
        logger.debug("terminal mode restored on fd %d", fd)


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Display operations and raw-mode scope used by the line editor."""

    def raw_mode(self) -> ContextManager[None]: ...

    def write(self, data: str) -> None: ...

    def cursor_left(self, columns: int) -> None: ...

    def cursor_right(self, columns: int) -> None: ...

    def clear_to_eol(self) -> None: ...

    def clear_screen(self) -> None: ...

    def enable_bracketed_paste(self) -> None: ...

    def disable_bracketed_paste(self) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Terminal backed by the process's standard input and output.

    If *write_log* is set, everything written to the terminal is also
    appended to that file.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        write_log: str = "",
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._write_log_path = write_log

    def raw_mode(self) -> ContextManager[None]:
        try:
            fd = self._stdin.fileno()
        except (OSError, ValueError) as exc:
            raise TerminalSetupError(f"stdin has no file descriptor: {exc}") from exc
        return raw_mode(fd)

    # -- write --------------------------------------------------------------

    def write(self, data: str) -> None:
        """Write data to stdout and optionally to the write log."""
        self._raw_write(data)

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a") as f:
                    f.write(data)
            except OSError:
                pass

    # -- cursor / screen manipulation --------------------------------------

    def cursor_left(self, columns: int) -> None:
        if columns > 0:
            self.write(keys.CURSOR_LEFT_FMT.format(columns))

    def cursor_right(self, columns: int) -> None:
        if columns > 0:
            self.write(keys.CURSOR_RIGHT_FMT.format(columns))

    def clear_to_eol(self) -> None:
        self.write(keys.CLEAR_TO_EOL)

    def clear_screen(self) -> None:
        self.write(keys.CLEAR_SCREEN)

    def enable_bracketed_paste(self) -> None:
        self.write(keys.BRACKETED_PASTE_ENABLE)

    def disable_bracketed_paste(self) -> None:
        self.write(keys.BRACKETED_PASTE_DISABLE)

    # -- private: raw write ------------------------------------------------

    def _raw_write(self, data: str) -> None:
        """Write directly to stdout, bypassing buffering."""
        try:
            self._stdout.write(data)
            self._stdout.flush()
        except OSError:
            pass


# ---------------------------------------------------------------------------
# Key source
# ---------------------------------------------------------------------------

_CLOSED = object()


class KeySource:
    """Reads code points from a byte stream on a background thread.

    Each decoded code point is handed over through a single-slot queue and
    the reader waits until the consumer has taken it, so at most one code
    point is in flight and input order is preserved. When the stream ends
    or fails the handoff is closed and :meth:`read` raises
    :class:`EndOfInput` from then on. The reader never restarts.
    """

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin.buffer
        self._handoff: queue.Queue[object] = queue.Queue(maxsize=1)
        self._closed = False
        self._thread = threading.Thread(
            target=self._ioloop, name="pi-readline-keys", daemon=True
        )
        self._thread.start()

    @property
    def closed(self) -> bool:
        return self._closed

    def read(self) -> str:
        """Block until the next code point arrives and return it."""
        if self._closed:
            raise EndOfInput("input closed")

        item = self._handoff.get()
        self._handoff.task_done()
        if item is _CLOSED:
            self._closed = True
            raise EndOfInput("input closed")
        return item  # type: ignore[return-value]

    def _ioloop(self) -> None:
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

        while True:
            try:
                data = self._stream.read(1)
            except (OSError, ValueError) as exc:
                logger.debug("key source read failed: %s", exc)
                break
            if not data:
                break
            for ch in decoder.decode(data):
                self._deliver(ch)

        # A truncated multi-byte sequence at end of stream decodes to U+FFFD
        for ch in decoder.decode(b"", final=True):
            self._deliver(ch)

        logger.debug("key source closed")
        self._handoff.put(_CLOSED)

    def _deliver(self, ch: str) -> None:
        self._handoff.put(ch)
        self._handoff.join()
