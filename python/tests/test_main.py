"""Command-line entry point."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

import main
from backend.models.level import RuleSet
from main import app

runner = CliRunner()


def test_print_board_shows_phrase_and_board() -> None:
    result = runner.invoke(app, ["--print-board"])
    assert result.exit_code == 0
    assert "Spell: toemah@protonmail.com" in result.output
    for fragment in ("toe", "mah", "@", "pro", "ton", "mail", "com"):
        assert fragment in result.output
    assert "P" in result.output


def test_help_lists_options() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "--push-limit" in result.output
    assert "--frontend" in result.output


def test_negative_push_limit_is_a_usage_error() -> None:
    result = runner.invoke(app, ["--push-limit", "-1", "--print-board"])
    assert result.exit_code == 2


def test_push_limit_from_environment() -> None:
    result = runner.invoke(
        app, ["--print-board"], env={"PHRASE_PUSH_PUSH_LIMIT": "1"}
    )
    assert result.exit_code == 0


def test_menu_quits_on_zero() -> None:
    result = runner.invoke(app, [], input="0\n")
    assert result.exit_code == 0
    assert "Goodbye" in result.output


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        ([], RuleSet(push_limit=1)),
        (["--push-limit", "0"], RuleSet(push_limit=0)),
        (["--chain"], RuleSet(push_limit=None)),
    ],
)
def test_rules_handed_to_the_frontend(
    monkeypatch: pytest.MonkeyPatch, args: list[str], expected: RuleSet
) -> None:
    launched: list[RuleSet] = []
    monkeypatch.setattr(main, "_launch", lambda frontend, level, rules: launched.append(rules))

    result = runner.invoke(app, ["-f", "vanilla", *args])

    assert result.exit_code == 0
    assert launched == [expected]
