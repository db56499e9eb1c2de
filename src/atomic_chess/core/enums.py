"""Core enumerations and flags for the atomic chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveKind(Enum):
    """How a move changes the board."""

    STANDARD = "standard move"
    DOUBLE_STEP = "double step"
    CAPTURE = "capture"
    EN_PASSANT = "en passant"
    CASTLE_KINGSIDE = "kingside castle"
    CASTLE_QUEENSIDE = "queenside castle"

    @property
    def explodes(self) -> bool:
        return self in (MoveKind.CAPTURE, MoveKind.EN_PASSANT)

    @property
    def is_castle(self) -> bool:
        return self in (MoveKind.CASTLE_KINGSIDE, MoveKind.CASTLE_QUEENSIDE)


class MoveFlag(IntFlag):
    """State updates a committed move asks the game state to perform."""

    NONE = 0
    PAWN_MOVE = auto()
    CAPTURE = auto()
    PROMOTION = auto()
    DOUBLE_STEP = auto()
    DISABLE_WHITE_KINGSIDE = auto()
    DISABLE_WHITE_QUEENSIDE = auto()
    DISABLE_BLACK_KINGSIDE = auto()
    DISABLE_BLACK_QUEENSIDE = auto()

    RESETS_HALFMOVE = PAWN_MOVE | CAPTURE


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH


class GameOutcome(Enum):
    """Result reported by the game-over check."""

    NONE = "none"
    WHITE_WIN = "white win"
    BLACK_WIN = "black win"
    DRAW = "draw"
    STALEMATE = "stalemate"

    @property
    def is_over(self) -> bool:
        return self is not GameOutcome.NONE

    @classmethod
    def win_for(cls, color: Color) -> GameOutcome:
        return cls.WHITE_WIN if color == Color.WHITE else cls.BLACK_WIN
