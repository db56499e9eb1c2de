"""Core domain layer — pure atomic chess logic with zero external dependencies.

Quick start::

    from atomic_chess.core import MoveGenerator, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    gen = MoveGenerator(pos)
    for move in gen.generate_legal_moves():
        print(move, move.explosions)
"""

from atomic_chess.core.board import Board
from atomic_chess.core.enums import (
    CastlingRights,
    Color,
    GameOutcome,
    MoveFlag,
    MoveKind,
    PieceType,
)
from atomic_chess.core.move import MoveResult, Mutation
from atomic_chess.core.move_generator import (
    MoveGenerator,
    is_atomic_check,
    is_square_attacked,
)
from atomic_chess.core.notation import (
    STARTING_FEN,
    position_from_fen,
    position_to_fen,
)
from atomic_chess.core.piece import Piece
from atomic_chess.core.position import Position
from atomic_chess.core.rules import Rules
from atomic_chess.core.types import (
    Square,
    as_square,
    file_of,
    make_square,
    neighbors,
    offset_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameOutcome",
    "MoveFlag",
    "MoveKind",
    "PieceType",
    # Types / helpers
    "Square",
    "as_square",
    "file_of",
    "make_square",
    "neighbors",
    "offset_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "MoveGenerator",
    "MoveResult",
    "Mutation",
    "Piece",
    "Position",
    "Rules",
    "is_atomic_check",
    "is_square_attacked",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
