"""Interactive line reading session."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pi.readline import keys
from pi.readline.buffer import LineBuffer
from pi.readline.decoder import KeyDecoder
from pi.readline.history import History
from pi.readline.terminal import KeySource, ProcessTerminal, Terminal
from pi.readline.utils import text_width

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Prompt:
    """Prompt and placeholder strings, with a switch to the alternates."""

    prompt: str = ">>> "
    alt_prompt: str = "... "
    placeholder: str = ""
    alt_placeholder: str = ""
    use_alt: bool = False

    @property
    def current(self) -> str:
        return self.alt_prompt if self.use_alt else self.prompt

    @property
    def current_placeholder(self) -> str:
        return self.alt_placeholder if self.use_alt else self.placeholder


class Readline:
    """A line editing session over one terminal.

    The key source and history live as long as the session; each call to
    :meth:`readline` gets a fresh line buffer and decoder.
    """

    def __init__(
        self,
        prompt: Prompt,
        *,
        terminal: Terminal | None = None,
        key_source: KeySource | None = None,
        history: History | None = None,
        bracketed_paste: bool = True,
    ) -> None:
        self.prompt = prompt
        self.terminal: Terminal = terminal if terminal is not None else ProcessTerminal()
        self.key_source = key_source if key_source is not None else KeySource()
        self.history = history if history is not None else History()
        self.bracketed_paste = bracketed_paste

    def history_enable(self) -> None:
        self.history.enabled = True

    def history_disable(self) -> None:
        self.history.enabled = False

    def readline(self) -> str:
        """Read one line from the terminal.

        Returns the submitted line, wrapped in triple-quote markers when a
        bracketed paste marker was seen. Raises
        :class:`~pi.readline.errors.ReadlineInterrupt` on ctrl+c,
        :class:`~pi.readline.errors.EndOfInput` when input ends and
        :class:`~pi.readline.errors.TerminalSetupError` if raw mode cannot
        be entered.
        """
        prompt = self.prompt
        term = self.terminal
        term.write(prompt.current)

        with term.raw_mode():
            if self.bracketed_paste:
                term.enable_bracketed_paste()
            try:
                line = self._edit(prompt)
            finally:
                if self.bracketed_paste:
                    term.disable_bracketed_paste()

        logger.debug("read line of %d characters", len(line))
        return line

    def _edit(self, prompt: Prompt) -> str:
        term = self.terminal
        buf = LineBuffer(prompt.current, term)
        decoder = KeyDecoder(buf, self.history, self.key_source.read)
        placeholder = prompt.current_placeholder

        while True:
            if buf.is_empty() and placeholder:
                term.write(keys.COLOR_GREY + placeholder)
                term.cursor_left(text_width(placeholder))
                term.write(keys.COLOR_DEFAULT)

            ch = self.key_source.read()

            if buf.is_empty() and placeholder:
                term.clear_to_eol()

            line = decoder.feed(ch)
            if line is not None:
                term.write("\r\n")
                return line
