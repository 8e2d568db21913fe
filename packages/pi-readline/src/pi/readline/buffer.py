"""Editable single-line text buffer with a cursor."""

from __future__ import annotations

from pi.readline.terminal import Terminal
from pi.readline.utils import char_width, text_width


class LineBuffer:
    """A line of code points plus a cursor, kept in sync with the screen.

    The cursor always satisfies ``0 <= cursor <= size``. Every mutating
    operation redraws the part of the line it changed; the terminal cursor
    is assumed to sit at the buffer cursor before each call.
    """

    def __init__(self, prompt: str, terminal: Terminal) -> None:
        self._prompt = prompt
        self._terminal = terminal
        self._chars: list[str] = []
        self._pos: int = 0

    # -- observers ----------------------------------------------------------

    @property
    def cursor(self) -> int:
        return self._pos

    def is_empty(self) -> bool:
        return not self._chars

    def size(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    # -- insertion / deletion ----------------------------------------------

    def add(self, ch: str) -> None:
        """Insert *ch* at the cursor and advance past it."""
        self._chars.insert(self._pos, ch)
        self._pos += 1
        if self._pos == len(self._chars):
            self._terminal.write(ch)
        else:
            self._redraw(0, self._pos - 1)

    def remove(self) -> None:
        """Delete the code point before the cursor (backspace)."""
        if self._pos == 0:
            return
        back = char_width(self._chars[self._pos - 1])
        del self._chars[self._pos - 1]
        self._pos -= 1
        self._redraw(back, self._pos)

    def delete(self) -> None:
        """Delete the code point under the cursor."""
        if self._pos >= len(self._chars):
            return
        del self._chars[self._pos]
        self._redraw(0, self._pos)

    def delete_word(self) -> None:
        """Delete the whitespace-delimited word before the cursor."""
        start = self._word_start()
        if start == self._pos:
            return
        back = self._width(start, self._pos)
        del self._chars[start : self._pos]
        self._pos = start
        self._redraw(back, start)

    def delete_before(self) -> None:
        """Delete everything from the start of the line to the cursor."""
        if self._pos == 0:
            return
        back = self._width(0, self._pos)
        del self._chars[: self._pos]
        self._pos = 0
        self._redraw(back, 0)

    def delete_remaining(self) -> None:
        """Delete everything from the cursor to the end of the line."""
        if self._pos >= len(self._chars):
            return
        del self._chars[self._pos :]
        self._terminal.clear_to_eol()

    def replace(self, text: str) -> None:
        """Replace the whole line with *text*, leaving the cursor at its end."""
        back = self._width(0, self._pos)
        self._chars = list(text)
        self._pos = len(self._chars)
        self._redraw(back, 0)

    # -- movement -----------------------------------------------------------

    def move_left(self) -> None:
        if self._pos > 0:
            self._pos -= 1
            self._terminal.cursor_left(char_width(self._chars[self._pos]))

    def move_right(self) -> None:
        if self._pos < len(self._chars):
            self._terminal.cursor_right(char_width(self._chars[self._pos]))
            self._pos += 1

    def move_left_word(self) -> None:
        self._move_to(self._word_start())

    def move_right_word(self) -> None:
        pos = self._pos
        size = len(self._chars)
        while pos < size and self._chars[pos].isspace():
            pos += 1
        while pos < size and not self._chars[pos].isspace():
            pos += 1
        self._move_to(pos)

    def move_to_start(self) -> None:
        self._move_to(0)

    def move_to_end(self) -> None:
        self._move_to(len(self._chars))

    # -- display ------------------------------------------------------------

    def clear_screen(self) -> None:
        """Clear the screen and redraw the prompt and line."""
        self._terminal.clear_screen()
        self._terminal.write(self._prompt + str(self))
        self._terminal.cursor_left(self._width(self._pos, len(self._chars)))

    # -- private ------------------------------------------------------------

    def _word_start(self) -> int:
        pos = self._pos
        while pos > 0 and self._chars[pos - 1].isspace():
            pos -= 1
        while pos > 0 and not self._chars[pos - 1].isspace():
            pos -= 1
        return pos

    def _move_to(self, pos: int) -> None:
        if pos < self._pos:
            self._terminal.cursor_left(self._width(pos, self._pos))
        elif pos > self._pos:
            self._terminal.cursor_right(self._width(self._pos, pos))
        self._pos = pos

    def _width(self, start: int, end: int) -> int:
        return text_width("".join(self._chars[start:end]))

    def _redraw(self, back: int, start: int) -> None:
        """Rewrite the line from index *start* and park the cursor.

        *back* is the number of columns the terminal cursor must move left
        to reach the column of *start*.
        """
        self._terminal.cursor_left(back)
        self._terminal.write("".join(self._chars[start:]))
        self._terminal.clear_to_eol()
        self._terminal.cursor_left(self._width(self._pos, len(self._chars)))
