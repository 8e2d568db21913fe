"""Code points and escape sequences understood by the line editor.

Input constants are single code points as delivered by the key source.
Output constants are ANSI escape sequences written to the terminal.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Control characters
# ---------------------------------------------------------------------------

CHAR_NULL = "\x00"
CHAR_LINE_START = "\x01"  # ctrl+a
CHAR_BACKWARD = "\x02"  # ctrl+b
CHAR_INTERRUPT = "\x03"  # ctrl+c
CHAR_DELETE = "\x04"  # ctrl+d
CHAR_LINE_END = "\x05"  # ctrl+e
CHAR_FORWARD = "\x06"  # ctrl+f
CHAR_BELL = "\x07"
CHAR_CTRL_H = "\x08"
CHAR_TAB = "\x09"
CHAR_CTRL_J = "\x0a"
CHAR_KILL = "\x0b"  # ctrl+k
CHAR_CTRL_L = "\x0c"
CHAR_ENTER = "\x0d"
CHAR_CTRL_U = "\x15"
CHAR_CTRL_W = "\x17"
CHAR_ESC = "\x1b"
CHAR_SPACE = " "
CHAR_BACKSPACE = "\x7f"

# Second byte of a CSI sequence (ESC [)
CHAR_ESCAPE_EX = "["

# Alt+b / alt+f arrive as ESC followed by the letter
META_WORD_LEFT = "b"
META_WORD_RIGHT = "f"

# ---------------------------------------------------------------------------
# Final bytes after ESC [
# ---------------------------------------------------------------------------

KEY_UP = "A"
KEY_DOWN = "B"
KEY_RIGHT = "C"
KEY_LEFT = "D"
KEY_DEL = "3"  # ESC [ 3 ~, the trailing "~" is absorbed separately
META_END = "F"
META_START = "H"

# ESC [ 2 0 0 ~ / ESC [ 2 0 1 ~
CHAR_BRACKETED_PASTE = "2"
BRACKETED_PASTE_START_CODE = "00~"
BRACKETED_PASTE_END_CODE = "01~"
BRACKETED_PASTE_CODE_LEN = 3

TAB_WIDTH = 8

# ---------------------------------------------------------------------------
# Output sequences
# ---------------------------------------------------------------------------

CURSOR_LEFT_FMT = "\x1b[{}D"
CURSOR_RIGHT_FMT = "\x1b[{}C"
CLEAR_TO_EOL = "\x1b[K"
CLEAR_SCREEN = "\x1b[2J\x1b[H"
COLOR_GREY = "\x1b[38;5;245m"
COLOR_DEFAULT = "\x1b[0m"
BRACKETED_PASTE_ENABLE = "\x1b[?2004h"
BRACKETED_PASTE_DISABLE = "\x1b[?2004l"

PASTE_MARKER = '"""'
