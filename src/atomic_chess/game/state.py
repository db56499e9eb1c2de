"""Game state machine — owns the position, validates and commits moves."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from atomic_chess.core.enums import Color, GameOutcome, PieceType
from atomic_chess.core.move import MoveResult
from atomic_chess.core.move_generator import MoveGenerator
from atomic_chess.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from atomic_chess.core.patterns import PROMOTION_TYPES
from atomic_chess.core.piece import Piece
from atomic_chess.core.position import Position
from atomic_chess.core.rules import Rules
from atomic_chess.core.types import Square, as_square, square_name
from atomic_chess.game.interfaces import GamePhase, RuleOptions

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Manages one game: position, phase, pending promotion, outcome.

    This is a pure data/logic class — no threading, no UI.  The position is
    changed only here, and only after a move has been found legal; rejected
    moves leave every field untouched.
    """

    options: RuleOptions = field(default_factory=RuleOptions)
    position: Position = field(init=False)
    phase: GamePhase = field(default=GamePhase.AWAITING_MOVE, init=False)
    outcome: GameOutcome = field(default=GameOutcome.NONE, init=False)
    pending_promotion: Square | None = field(default=None, init=False)
    start_fen: str = field(default=STARTING_FEN, init=False)

    def __post_init__(self) -> None:
        self.setup()

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_fen = fen or STARTING_FEN
        self.position = position_from_fen(self.start_fen)
        self.phase = GamePhase.AWAITING_MOVE
        self.outcome = GameOutcome.NONE
        self.pending_promotion = None
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def try_move(
        self, from_sq: Square | str, to_sq: Square | str
    ) -> MoveResult | None:
        """Play *from_sq* → *to_sq* if legal; return None (no change) otherwise."""
        from_sq = as_square(from_sq)
        to_sq = as_square(to_sq)
        if self.phase != GamePhase.AWAITING_MOVE:
            _LOGGER.debug(
                "Rejected %s%s: game is in phase %s",
                square_name(from_sq),
                square_name(to_sq),
                self.phase.name,
            )
            return None

        move = next(
            (m for m in self.legal_moves_from(from_sq) if m.to_sq == to_sq), None
        )
        if move is None:
            _LOGGER.debug(
                "Rejected illegal move %s%s", square_name(from_sq), square_name(to_sq)
            )
            return None

        self.position.commit(move)
        _LOGGER.debug(
            "Played %s (%s), exploded %d square(s)",
            move.uci,
            move.kind.value,
            len(move.explosions),
        )

        if move.is_promotion:
            self.phase = GamePhase.AWAITING_PROMOTION
            self.pending_promotion = move.to_sq
        else:
            self._check_game_over()
        return move

    def promote(self, square: Square | str, piece_type: PieceType) -> bool:
        """Replace the pawn awaiting promotion on *square* with *piece_type*.

        The turn already passed to the opponent when the pawn moved; this
        only swaps the piece.  Returns False if nothing awaits promotion there.
        """
        if piece_type not in PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {piece_type!r}")
        square = as_square(square)
        if self.phase != GamePhase.AWAITING_PROMOTION:
            return False
        if square != self.pending_promotion:
            return False

        pawn = self.position.board[square]
        assert pawn is not None
        self.position.replace_piece(square, Piece(pawn.color, piece_type))
        _LOGGER.debug(
            "Promoted pawn on %s to %s", square_name(square), piece_type.name.lower()
        )

        self.phase = GamePhase.AWAITING_MOVE
        self.pending_promotion = None
        self._check_game_over()
        return True

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def fen(self) -> str:
        return position_to_fen(self.position)

    def game_over(self) -> GameOutcome:
        """How the game ended, or ``GameOutcome.NONE`` while it is running."""
        return self.outcome

    def legal_moves(self) -> list[MoveResult]:
        """Legal moves in the current position (none unless awaiting a move)."""
        if self.phase != GamePhase.AWAITING_MOVE:
            return []
        return MoveGenerator(self.position).generate_legal_moves()

    def legal_moves_from(self, square: Square | str) -> list[MoveResult]:
        if self.phase != GamePhase.AWAITING_MOVE:
            return []
        return MoveGenerator(self.position).legal_moves_from(as_square(square))

    def legal_destinations_from(self, square: Square | str) -> list[Square]:
        return [move.to_sq for move in self.legal_moves_from(square)]

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        outcome = Rules.game_outcome(
            self.position,
            fifty_move_limit=self.options.fifty_move_limit,
            threefold_repetition=self.options.threefold_repetition,
        )
        if outcome.is_over:
            self.outcome = outcome
            self.phase = GamePhase.GAME_OVER
            _LOGGER.info("Game over: %s (%s)", outcome.value, self.fen)
