"""Static movement geometry: step vectors, step limits, castling paths.

Vectors are ``(d_rank, d_file)`` pairs.  Move and capture geometry are kept
apart because they differ for pawns (forward vs diagonal) and for the king,
which never captures: a capture would detonate right next to it.
"""

from __future__ import annotations

from dataclasses import dataclass

from atomic_chess.core.enums import Color, MoveKind, PieceType
from atomic_chess.core.types import Square, make_square

Vector = tuple[int, int]

KNIGHT_OFFSETS: tuple[Vector, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

BISHOP_DIRS: tuple[Vector, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[Vector, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[Vector, ...] = BISHOP_DIRS + ROOK_DIRS
KING_OFFSETS: tuple[Vector, ...] = QUEEN_DIRS

SLIDING_STEPS = 7

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


@dataclass(frozen=True, slots=True)
class StepPattern:
    vectors: tuple[Vector, ...]
    steps: int


def _pawn_direction(color: Color) -> int:
    return 1 if color == Color.WHITE else -1


# -- Precomputed lookup tables ---------------------------------------------


def _build_patterns(
    capture: bool,
) -> dict[tuple[Color, PieceType], StepPattern]:
    table: dict[tuple[Color, PieceType], StepPattern] = {}
    for color in Color:
        fwd = _pawn_direction(color)
        if capture:
            king = StepPattern((), 0)
            pawn = StepPattern(((fwd, -1), (fwd, 1)), 1)
        else:
            king = StepPattern(KING_OFFSETS, 1)
            pawn = StepPattern(((fwd, 0),), 1)
        table[(color, PieceType.KING)] = king
        table[(color, PieceType.QUEEN)] = StepPattern(QUEEN_DIRS, SLIDING_STEPS)
        table[(color, PieceType.BISHOP)] = StepPattern(BISHOP_DIRS, SLIDING_STEPS)
        table[(color, PieceType.KNIGHT)] = StepPattern(KNIGHT_OFFSETS, 1)
        table[(color, PieceType.ROOK)] = StepPattern(ROOK_DIRS, SLIDING_STEPS)
        table[(color, PieceType.PAWN)] = pawn
    return table


MOVE_PATTERNS = _build_patterns(capture=False)
CAPTURE_PATTERNS = _build_patterns(capture=True)


def move_pattern(color: Color, piece_type: PieceType) -> StepPattern:
    return MOVE_PATTERNS[(color, piece_type)]


def capture_pattern(color: Color, piece_type: PieceType) -> StepPattern:
    return CAPTURE_PATTERNS[(color, piece_type)]


def pawn_direction(color: Color) -> int:
    """+1 for white (up the board), -1 for black."""
    return _pawn_direction(color)


def pawn_start_rank(color: Color) -> int:
    return 1 if color == Color.WHITE else 6


def last_rank(color: Color) -> int:
    return 7 if color == Color.WHITE else 0


def home_rank(color: Color) -> int:
    return 0 if color == Color.WHITE else 7


# ── Castling paths ──────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class CastlePath:
    """Fixed squares involved in one castle for one color."""

    kind: MoveKind
    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square
    between: tuple[Square, ...]  # must be empty
    king_path: tuple[Square, ...]  # must not be attacked (destination included)


def _castle_path(color: Color, kind: MoveKind) -> CastlePath:
    r = home_rank(color)
    if kind == MoveKind.CASTLE_KINGSIDE:
        return CastlePath(
            kind=kind,
            king_from=make_square(4, r),
            king_to=make_square(6, r),
            rook_from=make_square(7, r),
            rook_to=make_square(5, r),
            between=(make_square(5, r), make_square(6, r)),
            king_path=(make_square(5, r), make_square(6, r)),
        )
    return CastlePath(
        kind=kind,
        king_from=make_square(4, r),
        king_to=make_square(2, r),
        rook_from=make_square(0, r),
        rook_to=make_square(3, r),
        between=(make_square(3, r), make_square(2, r), make_square(1, r)),
        king_path=(make_square(3, r), make_square(2, r)),
    )


CASTLE_PATHS: dict[tuple[Color, MoveKind], CastlePath] = {
    (color, kind): _castle_path(color, kind)
    for color in Color
    for kind in (MoveKind.CASTLE_KINGSIDE, MoveKind.CASTLE_QUEENSIDE)
}


def castle_path(color: Color, kind: MoveKind) -> CastlePath:
    return CASTLE_PATHS[(color, kind)]


def king_home(color: Color) -> Square:
    return make_square(4, home_rank(color))
