"""Castling-right invalidation shared by every move kind."""

from __future__ import annotations

from collections.abc import Iterable

from atomic_chess.core.board import Board
from atomic_chess.core.enums import CastlingRights, Color, MoveFlag, PieceType
from atomic_chess.core.types import Square, make_square

_ROOK_CORNERS: dict[Square, tuple[Color, CastlingRights]] = {
    make_square(0, 0): (Color.WHITE, CastlingRights.WHITE_QUEENSIDE),
    make_square(7, 0): (Color.WHITE, CastlingRights.WHITE_KINGSIDE),
    make_square(0, 7): (Color.BLACK, CastlingRights.BLACK_QUEENSIDE),
    make_square(7, 7): (Color.BLACK, CastlingRights.BLACK_KINGSIDE),
}

_KING_RIGHTS: dict[Color, CastlingRights] = {
    Color.WHITE: CastlingRights.WHITE_BOTH,
    Color.BLACK: CastlingRights.BLACK_BOTH,
}

_DISABLE_FLAGS: dict[CastlingRights, MoveFlag] = {
    CastlingRights.WHITE_KINGSIDE: MoveFlag.DISABLE_WHITE_KINGSIDE,
    CastlingRights.WHITE_QUEENSIDE: MoveFlag.DISABLE_WHITE_QUEENSIDE,
    CastlingRights.BLACK_KINGSIDE: MoveFlag.DISABLE_BLACK_KINGSIDE,
    CastlingRights.BLACK_QUEENSIDE: MoveFlag.DISABLE_BLACK_QUEENSIDE,
}


def lost_rights(before: Board, vacated: Iterable[Square]) -> CastlingRights:
    """Rights lost because pieces left (or were blown off) *vacated* squares.

    *before* is the board prior to the move.  A king leaving any square
    costs its side both rights; a rook leaving its corner costs that side.
    """
    lost = CastlingRights.NONE
    for sq in vacated:
        piece = before[sq]
        if piece is None:
            continue
        if piece.piece_type == PieceType.KING:
            lost |= _KING_RIGHTS[piece.color]
        elif piece.piece_type == PieceType.ROOK and sq in _ROOK_CORNERS:
            color, right = _ROOK_CORNERS[sq]
            if piece.color == color:
                lost |= right
    return lost


def disable_flags(rights: CastlingRights) -> MoveFlag:
    """Translate lost castling rights into move flags."""
    flags = MoveFlag.NONE
    for right, flag in _DISABLE_FLAGS.items():
        if rights & right:
            flags |= flag
    return flags


def rights_from_flags(flags: MoveFlag) -> CastlingRights:
    """Castling rights a move's DISABLE_* flags ask to clear."""
    rights = CastlingRights.NONE
    for right, flag in _DISABLE_FLAGS.items():
        if flags & flag:
            rights |= right
    return rights
