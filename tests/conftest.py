"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from atomic_chess.core.notation import STARTING_FEN, position_from_fen
from atomic_chess.core.position import Position
from atomic_chess.game.state import GameState


@pytest.fixture
def state() -> GameState:
    """A fresh game from the standard opening position."""
    return GameState()


@pytest.fixture
def start_position() -> Position:
    return position_from_fen(STARTING_FEN)
