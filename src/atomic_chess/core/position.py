"""Position — complete game state (board + metadata) and move commit."""

from __future__ import annotations

from atomic_chess.core.board import Board
from atomic_chess.core.castling import rights_from_flags
from atomic_chess.core.enums import CastlingRights, Color, MoveFlag
from atomic_chess.core.move import MoveResult
from atomic_chess.core.piece import Piece
from atomic_chess.core.types import Square


class Position:
    """Full position: board + side to move + castling + en passant + clocks.

    Also keeps the placement history used for repetition counting.  The
    position is only ever changed through :meth:`commit` and
    :meth:`replace_piece`; move evaluation works on board copies.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
        "_placements",
        "_placement_counts",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        placement = self.board.placement()
        self._placements: list[str] = [placement]
        self._placement_counts: dict[str, int] = {placement: 1}

    # ── Core move operations ─────────────────────────────────────────────

    def commit(self, result: MoveResult) -> None:
        """Make *result* the current position and update all bookkeeping.

        The turn switches first (clock tick, en passant cleared), then the
        move's flags are applied, so a fresh double step survives.
        """
        self.halfmove_clock += 1
        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1
        self.side_to_move = self.side_to_move.opposite
        self.en_passant = None

        flags = result.flags
        if flags & MoveFlag.RESETS_HALFMOVE:
            self.halfmove_clock = 0
        if flags & MoveFlag.DOUBLE_STEP:
            self.en_passant = result.en_passant_square
        self.castling &= ~rights_from_flags(flags)

        self.board = result.board.copy()
        self._record_placement()

    def replace_piece(self, sq: Square, piece: Piece) -> None:
        """Overwrite the occupant of *sq* (promotion) without switching turns.

        The latest repetition entry is rewritten to match the new placement.
        """
        self._forget_latest_placement()
        self.board[sq] = piece
        self._record_placement()

    # ── Repetition bookkeeping ───────────────────────────────────────────

    def repetition_count(self) -> int:
        """How many times the current placement has occurred."""
        return self._placement_counts.get(self.board.placement(), 0)

    @property
    def placement_history(self) -> tuple[str, ...]:
        return tuple(self._placements)

    def _record_placement(self) -> None:
        placement = self.board.placement()
        self._placements.append(placement)
        counts = self._placement_counts
        counts[placement] = counts.get(placement, 0) + 1

    def _forget_latest_placement(self) -> None:
        placement = self._placements.pop()
        count = self._placement_counts[placement] - 1
        if count:
            self._placement_counts[placement] = count
        else:
            del self._placement_counts[placement]

    # ── Copy / comparison ────────────────────────────────────────────────

    def copy(self) -> Position:
        pos = Position.__new__(Position)
        pos.board = self.board.copy()
        pos.side_to_move = self.side_to_move
        pos.castling = self.castling
        pos.en_passant = self.en_passant
        pos.halfmove_clock = self.halfmove_clock
        pos.fullmove_number = self.fullmove_number
        pos._placements = self._placements.copy()
        pos._placement_counts = self._placement_counts.copy()
        return pos

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
            and self._placements == other._placements
        )

    def __repr__(self) -> str:
        return (
            f"Position(side_to_move={self.side_to_move}, castling={self.castling!r}, "
            f"en_passant={self.en_passant}, halfmove_clock={self.halfmove_clock}, "
            f"fullmove_number={self.fullmove_number})\n{self.board!r}"
        )
