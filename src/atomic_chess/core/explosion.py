"""Explosion & mutation primitives.

Each function takes a board, leaves it untouched, and returns a
:class:`Mutation` holding a modified copy.  No legality is checked here:
a capture that blows up the mover's own king is computed faithfully, and it
is the move generator's job to throw such results away.
"""

from __future__ import annotations

from atomic_chess.core.board import Board
from atomic_chess.core.enums import Color, MoveKind
from atomic_chess.core.move import Mutation
from atomic_chess.core.patterns import castle_path, last_rank
from atomic_chess.core.piece import Piece
from atomic_chess.core.types import Square, file_of, make_square, neighbors, rank_of


def standard_move(board: Board, from_sq: Square, to_sq: Square) -> Mutation:
    """Relocate the occupant of *from_sq* to the empty *to_sq*."""
    result = board.copy()
    _relocate(result, from_sq, to_sq)
    return Mutation(result, moves=((from_sq, to_sq),))


def capture(board: Board, from_sq: Square, to_sq: Square) -> Mutation:
    """Capture on *to_sq*; the capturer, the victim and the blast all vanish."""
    result = board.copy()
    explosions = [from_sq, to_sq]
    result[from_sq] = None
    result[to_sq] = None
    explosions.extend(_detonate(result, to_sq))
    return Mutation(result, tuple(explosions), ((from_sq, to_sq),))


def en_passant(board: Board, from_sq: Square, to_sq: Square) -> Mutation:
    """En passant: the victim sits beside the origin, the blast centres on *to_sq*.

    The capturing pawn detonates on arrival, so *to_sq* is listed too.
    """
    result = board.copy()
    victim_sq = en_passant_victim(from_sq, to_sq)
    explosions = [from_sq, victim_sq, to_sq]
    result[from_sq] = None
    result[victim_sq] = None
    explosions.extend(_detonate(result, to_sq))
    return Mutation(result, tuple(explosions), ((from_sq, to_sq),))


def castle(board: Board, color: Color, kind: MoveKind) -> Mutation:
    """Slide king and rook along their fixed castling paths."""
    path = castle_path(color, kind)
    result = board.copy()
    _relocate(result, path.king_from, path.king_to)
    _relocate(result, path.rook_from, path.rook_to)
    return Mutation(
        result,
        moves=((path.king_from, path.king_to), (path.rook_from, path.rook_to)),
    )


def en_passant_victim(from_sq: Square, to_sq: Square) -> Square:
    """Square of the pawn taken en passant: origin rank, destination file."""
    return make_square(file_of(to_sq), rank_of(from_sq))


def blast_radius(board: Board, center: Square) -> list[Square]:
    """Neighbors of *center* that an explosion there would clear (non-pawns)."""
    return [
        sq
        for sq in neighbors(center)
        if (piece := board[sq]) is not None and not piece.is_pawn
    ]


def is_promotion_square(piece: Piece | None, sq: Square) -> bool:
    """True for a pawn standing on its farthest rank."""
    if piece is None or not piece.is_pawn:
        return False
    return rank_of(sq) == last_rank(piece.color)


def _detonate(board: Board, center: Square) -> list[Square]:
    cleared = blast_radius(board, center)
    for sq in cleared:
        board[sq] = None
    return cleared


def _relocate(board: Board, from_sq: Square, to_sq: Square) -> None:
    board[to_sq] = board[from_sq]
    board[from_sq] = None
