"""In-memory history of submitted lines."""

from __future__ import annotations


class History:
    """Append-only list of submitted lines with a navigation position.

    ``pos`` stays within ``0 <= pos <= size``; ``pos == size`` means the
    user is on the live line rather than browsing. Entries are never
    removed or changed once added.
    """

    def __init__(self) -> None:
        self._entries: list[str] = []
        self.pos: int = 0
        self.enabled: bool = True

    def add(self, line: str) -> None:
        """Record *line* and return to the live position.

        Empty lines are ignored, as is everything while history is disabled.
        """
        if not self.enabled or not line:
            return
        self._entries.append(line)
        self.pos = len(self._entries)

    def prev(self) -> str | None:
        """Step back one entry and return it, or None if at the oldest."""
        if self.pos <= 0:
            return None
        self.pos -= 1
        return self._entries[self.pos]

    def next(self) -> str | None:
        """Step forward one entry.

        Returns the entry at the new position, or None when the step lands
        on the live position (or the cursor was already there).
        """
        if self.pos >= len(self._entries):
            return None
        self.pos += 1
        if self.pos == len(self._entries):
            return None
        return self._entries[self.pos]

    def size(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
