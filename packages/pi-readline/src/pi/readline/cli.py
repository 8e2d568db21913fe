"""CLI entry point for pi-readline. Uses Click for argument parsing."""

from __future__ import annotations

import dataclasses
import logging

import click

from pi.readline import keys
from pi.readline.config import ReadlineConfig
from pi.readline.errors import EndOfInput, ReadlineInterrupt, TerminalSetupError
from pi.readline.readline import Readline
from pi.readline.terminal import ProcessTerminal

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _setup_logging(level: str, log_file: str | None) -> None:
    # The terminal is in raw mode while reading, so only warnings reach stderr
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=getattr(logging, level.upper()),
            format=_LOG_FORMAT,
        )
    else:
        logging.basicConfig(level=logging.WARNING, format=_LOG_FORMAT)


def run(rl: Readline) -> None:
    """Read lines until input ends, echoing each one.

    A line opening with a triple-quote paste marker starts a block that
    continues on the alternate prompt until a line closes it. ctrl+c
    prints the exit hint and drops any open block.
    """
    base_prompt = rl.prompt
    block: list[str] = []

    while True:
        try:
            line = rl.readline()
        except EndOfInput:
            return
        except ReadlineInterrupt:
            click.echo("\nUse Ctrl + d or /bye to exit.")
            block.clear()
            rl.prompt = base_prompt
            continue

        if block:
            block.append(line)
            if line.endswith(keys.PASTE_MARKER):
                click.echo("\n".join(block))
                block.clear()
                rl.prompt = base_prompt
            continue

        if line.startswith(keys.PASTE_MARKER) and not line.endswith(keys.PASTE_MARKER):
            block.append(line)
            rl.prompt = dataclasses.replace(base_prompt, use_alt=True)
            continue

        if line.strip() == "/bye":
            return
        click.echo(line)


@click.command()
@click.option("--prompt", default=None, help="Primary prompt")
@click.option("--alt-prompt", default=None, help="Prompt used inside a pasted block")
@click.option("--placeholder", default=None, help="Dimmed hint shown on an empty line")
@click.option("--no-history", is_flag=True, help="Do not record submitted lines")
@click.option("--no-bracketed-paste", is_flag=True, help="Leave bracketed paste off")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="info",
    help="Log level used with --log-file",
)
@click.option("--log-file", default=None, help="Write logs to this file")
def main(prompt, alt_prompt, placeholder, no_history, no_bracketed_paste, log_level, log_file):
    """Read and echo lines with interactive editing."""
    _setup_logging(log_level, log_file)

    config = ReadlineConfig.from_env()
    if prompt is not None:
        config.prompt = prompt
    if alt_prompt is not None:
        config.alt_prompt = alt_prompt
    if placeholder is not None:
        config.placeholder = placeholder
    if no_history:
        config.history = False
    if no_bracketed_paste:
        config.bracketed_paste = False

    rl = Readline(
        config.to_prompt(),
        terminal=ProcessTerminal(write_log=config.write_log),
        bracketed_paste=config.bracketed_paste,
    )
    if not config.history:
        rl.history_disable()

    try:
        run(rl)
    except TerminalSetupError as exc:
        logger.error("%s", exc)
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    main()
