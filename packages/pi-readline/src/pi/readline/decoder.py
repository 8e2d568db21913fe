"""Key decoding state machine for a single line read.

A :class:`KeyDecoder` is fed one code point at a time. Plain characters
are inserted into the :class:`~pi.readline.buffer.LineBuffer`, control
characters are dispatched straight away, and ``ESC`` / ``ESC [`` prefixes
move the decoder into the :attr:`EscState.ESC` and :attr:`EscState.ESC_EX`
states, each handled by its own method.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable

from pi.readline import keys
from pi.readline.buffer import LineBuffer
from pi.readline.errors import EndOfInput, ReadlineInterrupt
from pi.readline.history import History

logger = logging.getLogger(__name__)


class EscState(enum.Enum):
    NORMAL = "normal"
    ESC = "esc"
    ESC_EX = "esc-ex"


class PasteMode(enum.Enum):
    NONE = "none"
    START = "start"
    END = "end"


class KeyDecoder:
    """Turns code points into buffer and history operations.

    Parameters
    ----------
    buf:
        The line being edited.
    history:
        Session history; committed lines are appended to it.
    read:
        Blocking source of further code points, used to finish reading a
        bracketed paste marker. Must raise :class:`EndOfInput` when input
        has ended.
    """

    def __init__(
        self,
        buf: LineBuffer,
        history: History,
        read: Callable[[], str],
    ) -> None:
        self.buf = buf
        self.history = history
        self._read = read
        # Every read starts on the live line
        self.history.pos = history.size()

        self.state = EscState.NORMAL
        self.paste_mode = PasteMode.NONE
        # ESC [ 3 ~ leaves a stray "~" that must not be inserted
        self.absorb_next = False
        self.draft = ""

        self._handlers: dict[EscState, Callable[[str], str | None]] = {
            EscState.NORMAL: self._handle_normal,
            EscState.ESC: self._handle_esc,
            EscState.ESC_EX: self._handle_esc_ex,
        }

    def feed(self, ch: str) -> str | None:
        """Process one code point.

        Returns the committed line once Enter is pressed and None otherwise.
        Raises :class:`ReadlineInterrupt` on ctrl+c and :class:`EndOfInput`
        on ctrl+d with an empty line.
        """
        return self._handlers[self.state](ch)

    # -- ESC [ ----------------------------------------------------------------

    def _handle_esc_ex(self, ch: str) -> None:
        self.state = EscState.NORMAL

        if ch == keys.KEY_UP:
            self._history_prev()
        elif ch == keys.KEY_DOWN:
            self._history_next()
        elif ch == keys.KEY_LEFT:
            self.buf.move_left()
        elif ch == keys.KEY_RIGHT:
            self.buf.move_right()
        elif ch == keys.CHAR_BRACKETED_PASTE:
            self._read_paste_marker()
        elif ch == keys.KEY_DEL:
            if self.buf.size() > 0:
                self.buf.delete()
            self.absorb_next = True
        elif ch == keys.META_START:
            self.buf.move_to_start()
        elif ch == keys.META_END:
            self.buf.move_to_end()
        else:
            logger.debug("ignoring unknown escape sequence ESC [ %r", ch)
        return None

    def _history_prev(self) -> None:
        if self.history.pos <= 0:
            return
        if self.history.pos == self.history.size():
            self.draft = str(self.buf)
        entry = self.history.prev()
        if entry is not None:
            self.buf.replace(entry)

    def _history_next(self) -> None:
        if self.history.pos >= self.history.size():
            return
        entry = self.history.next()
        if self.history.pos == self.history.size():
            self.buf.replace(self.draft)
        elif entry is not None:
            self.buf.replace(entry)

    def _read_paste_marker(self) -> None:
        # Blocks until three more code points arrive or input ends
        code = "".join(self._read() for _ in range(keys.BRACKETED_PASTE_CODE_LEN))
        if code == keys.BRACKETED_PASTE_START_CODE:
            self.paste_mode = PasteMode.START
        elif code == keys.BRACKETED_PASTE_END_CODE:
            self.paste_mode = PasteMode.END
        else:
            logger.debug("ignoring unknown paste code %r", code)
            return
        logger.debug("bracketed paste mode: %s", self.paste_mode.value)

    # -- ESC ------------------------------------------------------------------

    def _handle_esc(self, ch: str) -> None:
        self.state = EscState.NORMAL

        if ch == keys.META_WORD_LEFT:
            self.buf.move_left_word()
        elif ch == keys.META_WORD_RIGHT:
            self.buf.move_right_word()
        elif ch == keys.CHAR_ESCAPE_EX:
            self.state = EscState.ESC_EX
        else:
            logger.debug("ignoring unknown meta key ESC %r", ch)
        return None

    # -- plain input ----------------------------------------------------------

    def _handle_normal(self, ch: str) -> str | None:
        buf = self.buf

        if ch == keys.CHAR_NULL:
            pass
        elif ch == keys.CHAR_ESC:
            self.state = EscState.ESC
        elif ch == keys.CHAR_INTERRUPT:
            raise ReadlineInterrupt()
        elif ch == keys.CHAR_LINE_START:
            buf.move_to_start()
        elif ch == keys.CHAR_LINE_END:
            buf.move_to_end()
        elif ch == keys.CHAR_BACKWARD:
            buf.move_left()
        elif ch == keys.CHAR_FORWARD:
            buf.move_right()
        elif ch in (keys.CHAR_BACKSPACE, keys.CHAR_CTRL_H):
            buf.remove()
        elif ch == keys.CHAR_TAB:
            for _ in range(keys.TAB_WIDTH):
                buf.add(keys.CHAR_SPACE)
        elif ch == keys.CHAR_DELETE:
            if buf.size() == 0:
                raise EndOfInput("ctrl+d on empty line")
            buf.delete()
        elif ch == keys.CHAR_KILL:
            buf.delete_remaining()
        elif ch == keys.CHAR_CTRL_U:
            buf.delete_before()
        elif ch == keys.CHAR_CTRL_L:
            buf.clear_screen()
        elif ch == keys.CHAR_CTRL_W:
            buf.delete_word()
        elif ch == keys.CHAR_ENTER:
            return self._commit()
        elif self.absorb_next:
            self.absorb_next = False
        elif ch >= keys.CHAR_SPACE:
            buf.add(ch)
        return None

    def _commit(self) -> str:
        output = str(self.buf)
        if output:
            self.history.add(output)
        self.buf.move_to_end()

        if self.paste_mode is PasteMode.START:
            output = keys.PASTE_MARKER + output
        elif self.paste_mode is PasteMode.END:
            output = output + keys.PASTE_MARKER
        return output
