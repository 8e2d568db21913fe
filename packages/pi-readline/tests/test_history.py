"""Tests for pi.readline.history.History."""

from __future__ import annotations

from pi.readline.history import History


def make_history(*lines: str) -> History:
    history = History()
    for line in lines:
        history.add(line)
    return history


class TestHistoryAdd:
    def test_starts_empty_at_live_position(self) -> None:
        history = History()
        assert history.size() == 0
        assert history.pos == 0
        assert history.enabled is True

    def test_add_appends_and_resets_pos(self) -> None:
        history = make_history("one")
        assert history.entries == ["one"]
        assert history.pos == 1
        history.add("two")
        assert history.size() == 2
        assert history.pos == 2

    def test_add_empty_line_is_ignored(self) -> None:
        history = make_history("one")
        history.add("")
        assert history.entries == ["one"]
        assert history.pos == 1

    def test_add_resets_pos_after_browsing(self) -> None:
        history = make_history("one", "two")
        history.prev()
        history.prev()
        assert history.pos == 0
        history.add("three")
        assert history.pos == 3

    def test_disabled_history_does_not_grow(self) -> None:
        history = make_history("one")
        history.enabled = False
        history.add("two")
        assert history.entries == ["one"]

    def test_disabled_history_still_navigates(self) -> None:
        history = make_history("one")
        history.enabled = False
        assert history.prev() == "one"
        assert history.pos == 0

    def test_entries_is_a_copy(self) -> None:
        history = make_history("one")
        history.entries.append("two")
        assert len(history) == 1


class TestHistoryNavigation:
    def test_prev_walks_back_to_oldest(self) -> None:
        history = make_history("one", "two")
        assert history.prev() == "two"
        assert history.pos == 1
        assert history.prev() == "one"
        assert history.pos == 0

    def test_prev_at_oldest_returns_none(self) -> None:
        history = make_history("one")
        history.prev()
        assert history.prev() is None
        assert history.pos == 0

    def test_prev_on_empty_returns_none(self) -> None:
        history = History()
        assert history.prev() is None
        assert history.pos == 0

    def test_next_walks_forward(self) -> None:
        history = make_history("one", "two", "three")
        history.prev()
        history.prev()
        history.prev()
        assert history.next() == "two"
        assert history.pos == 1

    def test_next_onto_live_position_returns_none(self) -> None:
        history = make_history("one")
        history.prev()
        assert history.next() is None
        assert history.pos == 1

    def test_next_at_live_position_is_noop(self) -> None:
        history = make_history("one")
        assert history.next() is None
        assert history.pos == 1

    def test_pos_stays_in_bounds(self) -> None:
        history = make_history("a", "b", "c")
        for step in [History.prev] * 5 + [History.next] * 5 + [History.prev] * 2:
            step(history)
            assert 0 <= history.pos <= history.size()
