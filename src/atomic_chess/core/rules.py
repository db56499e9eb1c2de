"""High-level atomic rules: checkmate, stalemate, explosion wins, draws."""

from __future__ import annotations

from typing import TYPE_CHECKING

from atomic_chess.core.enums import Color, GameOutcome
from atomic_chess.core.move_generator import MoveGenerator, is_atomic_check

if TYPE_CHECKING:
    from atomic_chess.core.position import Position

DEFAULT_FIFTY_MOVE_LIMIT = 50


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Outcome precedence: draw, stalemate, white win, black win.
    # A win is either checkmate or the enemy king having exploded.

    @staticmethod
    def is_in_check(position: Position, color: Color | None = None) -> bool:
        color = position.side_to_move if color is None else color
        return is_atomic_check(position.board, color)

    @staticmethod
    def has_legal_moves(position: Position, color: Color | None = None) -> bool:
        return MoveGenerator(position, color).has_legal_moves()

    @staticmethod
    def is_checkmate(position: Position, color: Color | None = None) -> bool:
        """*color*'s king is in atomic check and *color* cannot move."""
        color = position.side_to_move if color is None else color
        if not Rules.is_in_check(position, color):
            return False
        return not Rules.has_legal_moves(position, color)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        """Side to move is not in check, cannot move, and still has a king."""
        color = position.side_to_move
        if not position.board.has_king(color):
            return False
        if Rules.is_in_check(position, color):
            return False
        return not Rules.has_legal_moves(position, color)

    @staticmethod
    def is_win(position: Position, color: Color) -> bool:
        """*color* has won: the enemy king is gone or checkmated."""
        enemy = color.opposite
        if not position.board.has_king(enemy):
            return True
        return Rules.is_checkmate(position, enemy)

    @staticmethod
    def is_fifty_move_draw(
        position: Position, limit: int = DEFAULT_FIFTY_MOVE_LIMIT
    ) -> bool:
        return position.halfmove_clock >= limit

    @staticmethod
    def is_threefold_repetition(position: Position) -> bool:
        return position.repetition_count() >= 3

    @staticmethod
    def is_draw(
        position: Position,
        fifty_move_limit: int = DEFAULT_FIFTY_MOVE_LIMIT,
        threefold_repetition: bool = True,
    ) -> bool:
        if Rules.is_fifty_move_draw(position, fifty_move_limit):
            return True
        return threefold_repetition and Rules.is_threefold_repetition(position)

    @staticmethod
    def game_outcome(
        position: Position,
        fifty_move_limit: int = DEFAULT_FIFTY_MOVE_LIMIT,
        threefold_repetition: bool = True,
    ) -> GameOutcome:
        """Determine whether (and how) the game has ended."""
        if Rules.is_draw(position, fifty_move_limit, threefold_repetition):
            return GameOutcome.DRAW
        if Rules.is_stalemate(position):
            return GameOutcome.STALEMATE
        for color in (Color.WHITE, Color.BLACK):
            if Rules.is_win(position, color):
                return GameOutcome.win_for(color)
        return GameOutcome.NONE
