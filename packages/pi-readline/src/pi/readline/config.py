"""Configuration for the interactive line reader."""

from __future__ import annotations

import os
from dataclasses import dataclass

from pi.readline.readline import Prompt

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ReadlineConfig:
    """Prompt text and session switches."""

    prompt: str = ">>> "
    alt_prompt: str = "... "
    placeholder: str = "Send a message (/? for help)"
    alt_placeholder: str = 'Use """ to end multi-line input'
    history: bool = True
    bracketed_paste: bool = True
    write_log: str = ""

    @classmethod
    def from_env(cls) -> ReadlineConfig:
        """Build a config from ``PI_READLINE_*`` environment variables."""
        config = cls()
        if "PI_READLINE_PROMPT" in os.environ:
            config.prompt = os.environ["PI_READLINE_PROMPT"]
        if "PI_READLINE_PLACEHOLDER" in os.environ:
            config.placeholder = os.environ["PI_READLINE_PLACEHOLDER"]
        if os.environ.get("PI_READLINE_NO_HISTORY", "").lower() in _TRUTHY:
            config.history = False
        config.write_log = os.environ.get("PI_READLINE_WRITE_LOG", "")
        return config

    def to_prompt(self, use_alt: bool = False) -> Prompt:
        return Prompt(
            prompt=self.prompt,
            alt_prompt=self.alt_prompt,
            placeholder=self.placeholder,
            alt_placeholder=self.alt_placeholder,
            use_alt=use_alt,
        )
