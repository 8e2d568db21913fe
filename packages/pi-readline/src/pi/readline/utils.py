"""Display width helpers.

Columns are measured per code point with :mod:`wcwidth`; control and
other non-printing code points occupy zero columns.
"""

from __future__ import annotations

import wcwidth as _wcwidth


def char_width(ch: str) -> int:
    """Return the number of terminal columns *ch* occupies."""
    width = _wcwidth.wcwidth(ch)
    return width if width > 0 else 0


def text_width(text: str) -> int:
    """Return the number of terminal columns *text* occupies."""
    return sum(char_width(ch) for ch in text)
