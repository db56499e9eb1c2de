"""Move result value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from atomic_chess.core.enums import Color, MoveFlag, MoveKind
from atomic_chess.core.piece import Piece
from atomic_chess.core.types import Square, square_name

if TYPE_CHECKING:
    from atomic_chess.core.board import Board

Relocation = tuple[Square, Square]


@dataclass(frozen=True, slots=True)
class Mutation:
    """Output of an explosion/mutation primitive: a fresh board plus what changed."""

    board: Board
    explosions: tuple[Square, ...] = ()
    moves: tuple[Relocation, ...] = ()


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Everything a caller needs to know about one legal move.

    ``board`` is the position after the move; ``explosions`` lists every
    square emptied by a detonation (origin, captured square, the en passant
    destination, then the blast neighbors).  ``flags`` tell the game state
    which bookkeeping to do.
    """

    from_sq: Square
    to_sq: Square
    kind: MoveKind
    color: Color
    piece: Piece
    board: Board = field(compare=False, repr=False)
    explosions: tuple[Square, ...] = ()
    moves: tuple[Relocation, ...] = ()
    flags: MoveFlag = MoveFlag.NONE
    en_passant_square: Square | None = None

    # ── Derived ──────────────────────────────────────────────────────────

    @property
    def is_capture(self) -> bool:
        return bool(self.flags & MoveFlag.CAPTURE)

    @property
    def is_promotion(self) -> bool:
        return bool(self.flags & MoveFlag.PROMOTION)

    @property
    def is_double_step(self) -> bool:
        return bool(self.flags & MoveFlag.DOUBLE_STEP)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.uci

    @property
    def uci(self) -> str:
        """Long-algebraic from/to pair, e.g. ``e2e4``."""
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
