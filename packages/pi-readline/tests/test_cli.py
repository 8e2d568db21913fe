"""Tests for the pi-readline CLI."""

from __future__ import annotations

from click.testing import CliRunner

from pi.readline import cli
from pi.readline.errors import EndOfInput, ReadlineInterrupt, TerminalSetupError
from pi.readline.readline import Prompt


class FakeReadline:
    """Stands in for Readline, returning or raising scripted results."""

    instances: list[FakeReadline] = []
    script: list[object] = []

    def __init__(self, prompt: Prompt, **kwargs: object) -> None:
        self.prompt = prompt
        self.kwargs = kwargs
        self.results = list(self.script)
        self.prompts: list[Prompt] = []
        self.history_enabled = True
        FakeReadline.instances.append(self)

    def readline(self) -> str:
        self.prompts.append(self.prompt)
        item = self.results.pop(0) if self.results else EndOfInput()
        if isinstance(item, Exception):
            raise item
        return item  # type: ignore[return-value]

    def history_disable(self) -> None:
        self.history_enabled = False


def make_fake(*results: object) -> FakeReadline:
    FakeReadline.script = list(results)
    return FakeReadline(Prompt(prompt="> ", alt_prompt=". "))


class TestRun:
    def test_echoes_lines_until_end_of_input(self, capsys) -> None:
        rl = make_fake("hello", "world")
        cli.run(rl)  # type: ignore[arg-type]
        assert capsys.readouterr().out == "hello\nworld\n"

    def test_bye_stops_reading(self, capsys) -> None:
        rl = make_fake("one", "/bye", "two")
        cli.run(rl)  # type: ignore[arg-type]
        assert capsys.readouterr().out == "one\n"
        assert rl.results == ["two"]

    def test_interrupt_prints_hint_and_continues(self, capsys) -> None:
        rl = make_fake(ReadlineInterrupt(), "after")
        cli.run(rl)  # type: ignore[arg-type]
        out = capsys.readouterr().out
        assert "Use Ctrl + d or /bye to exit." in out
        assert out.endswith("after\n")

    def test_pasted_block_uses_alt_prompt(self, capsys) -> None:
        rl = make_fake('"""first', "second", 'third"""', "plain")
        cli.run(rl)  # type: ignore[arg-type]
        assert capsys.readouterr().out == '"""first\nsecond\nthird"""\nplain\n'
        assert [p.use_alt for p in rl.prompts] == [False, True, True, False, False]

    def test_single_line_block_is_echoed(self, capsys) -> None:
        rl = make_fake('"""one line"""')
        cli.run(rl)  # type: ignore[arg-type]
        assert capsys.readouterr().out == '"""one line"""\n'

    def test_interrupt_abandons_block(self, capsys) -> None:
        rl = make_fake('"""first', ReadlineInterrupt(), "next")
        cli.run(rl)  # type: ignore[arg-type]
        out = capsys.readouterr().out
        assert "first" not in out
        assert out == "\nUse Ctrl + d or /bye to exit.\nnext\n"
        assert rl.prompts[-1].use_alt is False


class TestMain:
    def setup_method(self) -> None:
        FakeReadline.instances = []
        FakeReadline.script = []

    def test_options_reach_readline(self, monkeypatch) -> None:
        monkeypatch.setattr(cli, "Readline", FakeReadline)
        FakeReadline.script = ["hi"]
        result = CliRunner().invoke(
            cli.main,
            ["--prompt", "$ ", "--placeholder", "hint", "--no-history", "--no-bracketed-paste"],
        )
        assert result.exit_code == 0
        assert result.output == "hi\n"
        rl = FakeReadline.instances[0]
        assert rl.prompt.prompt == "$ "
        assert rl.prompt.placeholder == "hint"
        assert rl.kwargs["bracketed_paste"] is False
        assert rl.history_enabled is False

    def test_setup_failure_exits_with_error(self, monkeypatch) -> None:
        monkeypatch.setattr(cli, "Readline", FakeReadline)
        FakeReadline.script = [TerminalSetupError("not a terminal")]
        result = CliRunner().invoke(cli.main, [])
        assert result.exit_code == 1
        assert "not a terminal" in result.output
