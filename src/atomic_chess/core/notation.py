"""FEN parsing and serialisation.

Positions without a king are accepted: in atomic chess a king may already
have been blown off the board.
"""

from __future__ import annotations

from atomic_chess.core.board import Board
from atomic_chess.core.enums import CastlingRights, Color
from atomic_chess.core.piece import Piece
from atomic_chess.core.position import Position
from atomic_chess.core.types import (
    Square,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


def board_from_placement(placement: str) -> Board:
    """Parse the FEN piece-placement field into a :class:`Board`."""
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")
    board = Board()
    kings: set[Color] = set()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                piece = Piece.from_char(ch)
                if piece.is_king:
                    if piece.color in kings:
                        side = piece.color.name.lower()
                        raise ValueError(
                            f"Invalid FEN board (two {side} kings): {placement!r}"
                        )
                    kings.add(piece.color)
                board[make_square(file, rank)] = piece
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return board


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    board = board_from_placement(placement)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            right = _CASTLING_CHARS.get(ch)
            if right is None or ch in seen:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_ep_rank = 5 if side == Color.WHITE else 2
        if rank_of(ep) != expected_ep_rank:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    # 5–6. Clocks (optional)
    halfmove = _parse_counter(parts, 4, default=0, minimum=0, name="halfmove clock")
    fullmove = _parse_counter(parts, 5, default=1, minimum=1, name="fullmove number")

    return Position(board, side, castling, ep, halfmove, fullmove)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return (
        f"{pos.board.placement()} {side_str} {castling_str} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )


def _parse_counter(
    parts: list[str], index: int, *, default: int, minimum: int, name: str
) -> int:
    if len(parts) <= index:
        return default
    try:
        value = int(parts[index])
    except ValueError:
        raise ValueError(f"Invalid FEN {name}: {parts[index]!r}") from None
    if value < minimum:
        raise ValueError(f"Invalid FEN {name}: {parts[index]!r}")
    return value
