"""Atomic chess move-legality and game-state engine.

The functions below are the whole surface a UI shell needs::

    import atomic_chess

    state = atomic_chess.new_game()
    result = atomic_chess.try_move(state, "e2", "e4")
    if result is None:
        ...  # rejected, nothing changed
    atomic_chess.legal_destinations_from(state, "g8")
    atomic_chess.is_game_over(state)  # GameOutcome.NONE
"""

from __future__ import annotations

from atomic_chess.core import (
    Board,
    Color,
    GameOutcome,
    MoveKind,
    MoveResult,
    Piece,
    PieceType,
    Position,
    Square,
    position_from_fen,
    position_to_fen,
)
from atomic_chess.game import GameController, GamePhase, GameState, RuleOptions


def new_game(options: RuleOptions | None = None, fen: str | None = None) -> GameState:
    """Start a game from the standard opening position (or *fen*)."""
    state = GameState(options or RuleOptions())
    if fen is not None:
        state.setup(fen)
    return state


def try_move(
    state: GameState, from_sq: Square | str, to_sq: Square | str
) -> MoveResult | None:
    return state.try_move(from_sq, to_sq)


def legal_destinations_from(state: GameState, square: Square | str) -> list[Square]:
    return state.legal_destinations_from(square)


def promote(state: GameState, square: Square | str, piece_type: PieceType) -> bool:
    return state.promote(square, piece_type)


def is_game_over(state: GameState) -> GameOutcome:
    return state.game_over()


__all__ = [
    "Board",
    "Color",
    "GameController",
    "GameOutcome",
    "GamePhase",
    "GameState",
    "MoveKind",
    "MoveResult",
    "Piece",
    "PieceType",
    "Position",
    "RuleOptions",
    "Square",
    "is_game_over",
    "legal_destinations_from",
    "new_game",
    "position_from_fen",
    "position_to_fen",
    "promote",
    "try_move",
]
