"""Game-layer vocabulary: FSM phases and rule configuration."""

from __future__ import annotations

from enum import IntEnum, auto

from atomic_chess.core.rules import DEFAULT_FIFTY_MOVE_LIMIT


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for an atomic chess game."""

    AWAITING_MOVE = auto()
    AWAITING_PROMOTION = auto()  # pawn reached the last rank, piece not chosen yet
    GAME_OVER = auto()


# ── Rule configuration ───────────────────────────────────────────────────────


class RuleOptions:
    """Immutable set of optional draw rules.

    Args:
        fifty_move_limit: Halfmove-clock value (in plies) that ends the game
            as a draw.
        threefold_repetition: Whether a piece placement seen three times
            ends the game as a draw.
    """

    __slots__ = ("fifty_move_limit", "threefold_repetition")

    def __init__(
        self,
        fifty_move_limit: int = DEFAULT_FIFTY_MOVE_LIMIT,
        threefold_repetition: bool = True,
    ) -> None:
        if fifty_move_limit < 1:
            raise ValueError(f"Invalid fifty-move limit: {fifty_move_limit!r}")
        self.fifty_move_limit = fifty_move_limit
        self.threefold_repetition = threefold_repetition

    # Common presets
    @classmethod
    def standard(cls) -> RuleOptions:
        return cls()

    @classmethod
    def without_repetition(cls) -> RuleOptions:
        """Fifty-move rule only; positions may repeat freely."""
        return cls(threefold_repetition=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleOptions):
            return NotImplemented
        return (
            self.fifty_move_limit == other.fifty_move_limit
            and self.threefold_repetition == other.threefold_repetition
        )

    def __repr__(self) -> str:
        return (
            f"RuleOptions(fifty_move_limit={self.fifty_move_limit}, "
            f"threefold_repetition={self.threefold_repetition})"
        )
