"""GameController — the façade a UI shell talks to.

Wraps a :class:`GameState` and emits events via simple callbacks so the UI
(animations, promotion picker, game-over dialog) or tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from atomic_chess.core.enums import GameOutcome, PieceType
from atomic_chess.core.move import MoveResult
from atomic_chess.core.types import Square
from atomic_chess.game.interfaces import GamePhase, RuleOptions
from atomic_chess.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveResult, "GameState"], None]
PromotionCallback = Callable[[Square], None]  # square awaiting a piece choice
GameOverCallback = Callable[[GameOutcome], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_promotion_required: list[PromotionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Routes moves and promotion choices to the game state and notifies
    listeners of what happened.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "events")

    def __init__(self, options: RuleOptions | None = None) -> None:
        self._state = GameState(options or RuleOptions())
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        """Reset to the starting position (or *fen*)."""
        self._state.setup(fen)
        _LOGGER.debug("New game from %s", self._state.start_fen)
        if self._state.is_game_over:
            self._emit_game_over(self._state.outcome)
        else:
            self._emit_phase(self._state.phase)

    def submit_move(
        self, from_sq: Square | str, to_sq: Square | str
    ) -> MoveResult | None:
        """Submit a move. Returns the result if legal and applied."""
        move = self._state.try_move(from_sq, to_sq)
        if move is None:
            return None

        self._emit_move(move)

        if self._state.phase == GamePhase.AWAITING_PROMOTION:
            self._emit_phase(GamePhase.AWAITING_PROMOTION)
            self._emit_promotion_required(move.to_sq)
        elif self._state.is_game_over:
            self._emit_game_over(self._state.outcome)
        return move

    def choose_promotion(self, piece_type: PieceType) -> bool:
        """Complete a pending promotion. Returns True on success."""
        square = self._state.pending_promotion
        if square is None or not self._state.promote(square, piece_type):
            return False

        if self._state.is_game_over:
            self._emit_game_over(self._state.outcome)
        else:
            self._emit_phase(GamePhase.AWAITING_MOVE)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: MoveResult) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_promotion_required(self, square: Square) -> None:
        for cb in self.events.on_promotion_required:
            cb(square)

    def _emit_game_over(self, outcome: GameOutcome) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(outcome)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
