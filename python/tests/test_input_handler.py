"""Key mapping for the terminal frontends."""

from __future__ import annotations

import pytest

from backend.models.board import Direction
from frontend.cli.input_handler import _decode_escape, _resolve, to_direction


@pytest.mark.parametrize(
    ("ch", "action"),
    [
        ("w", "up"),
        ("S", "down"),
        ("a", "left"),
        ("D", "right"),
        ("q", "quit"),
        ("\x03", "quit"),
        ("r", "restart"),
        ("?", "help"),
        ("p", "print"),
        ("\r", "enter"),
        ("x", "x"),
        ("\x07", ""),
    ],
)
def test_resolve_maps_keys_to_actions(ch: str, action: str) -> None:
    assert _resolve(ch) == action


@pytest.mark.parametrize("direction", list(Direction))
def test_movement_actions_become_directions(direction: Direction) -> None:
    assert to_direction(direction.value) is direction


@pytest.mark.parametrize("action", ["quit", "restart", "", "x", None])
def test_other_actions_are_not_moves(action: str | None) -> None:
    assert to_direction(action) is None


@pytest.mark.parametrize(
    ("rest", "action"),
    [
        ("[A", "up"),
        ("[B", "down"),
        ("[C", "right"),
        ("[D", "left"),
        ("[Z", ""),
        ("", "quit"),
        ("x", "quit"),
        ("[", ""),
    ],
)
def test_escape_sequences(rest: str, action: str) -> None:
    pending = iter(rest)
    assert _decode_escape(lambda: next(pending, None)) == action
