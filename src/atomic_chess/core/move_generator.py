"""Legal and pseudo-legal move generation + atomic attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from atomic_chess.core import explosion
from atomic_chess.core.castling import disable_flags, lost_rights
from atomic_chess.core.enums import CastlingRights, Color, MoveFlag, MoveKind, PieceType
from atomic_chess.core.move import MoveResult, Mutation
from atomic_chess.core.patterns import (
    capture_pattern,
    castle_path,
    move_pattern,
    pawn_direction,
    pawn_start_rank,
)
from atomic_chess.core.piece import Piece
from atomic_chess.core.types import Square, is_adjacent, offset_square, rank_of

if TYPE_CHECKING:
    from atomic_chess.core.board import Board
    from atomic_chess.core.position import Position


_CASTLE_RIGHTS: dict[tuple[Color, MoveKind], CastlingRights] = {
    (Color.WHITE, MoveKind.CASTLE_KINGSIDE): CastlingRights.WHITE_KINGSIDE,
    (Color.WHITE, MoveKind.CASTLE_QUEENSIDE): CastlingRights.WHITE_QUEENSIDE,
    (Color.BLACK, MoveKind.CASTLE_KINGSIDE): CastlingRights.BLACK_KINGSIDE,
    (Color.BLACK, MoveKind.CASTLE_QUEENSIDE): CastlingRights.BLACK_QUEENSIDE,
}


# -- Attack detection ------------------------------------------------------


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Could a piece of *by_color* capture on *sq*?

    For every enemy piece kind we walk that kind's capture vectors backwards
    from *sq*; the first occupant met must be exactly that kind.  Kings have
    no capture vectors, so they never attack anything.
    """
    for piece_type in PieceType:
        attacker = Piece(by_color, piece_type)
        pattern = capture_pattern(by_color, piece_type)
        for d_rank, d_file in pattern.vectors:
            for step in range(1, pattern.steps + 1):
                from_sq = offset_square(sq, -step * d_rank, -step * d_file)
                if from_sq is None:
                    break
                found = board[from_sq]
                if found is None:
                    continue
                if found == attacker:
                    return True
                break
    return False


def is_atomic_check(board: Board, color: Color) -> bool:
    """Is *color*'s king in atomic check?

    A missing king (either side) is never in check.  Touching kings are
    never in check either: capturing one would blow up the capturer's own.
    """
    king_sq = board.king_square(color)
    enemy_king_sq = board.king_square(color.opposite)
    if king_sq is None or enemy_king_sq is None:
        return False
    if is_adjacent(king_sq, enemy_king_sq):
        return False
    return is_square_attacked(board, king_sq, color.opposite)


def is_king_safe(board: Board, color: Color) -> bool:
    """The king survived and is not in atomic check."""
    return board.has_king(color) and not is_atomic_check(board, color)


class MoveGenerator:
    """Generates legal moves for one side of a :class:`Position`.

    The position is never modified: every candidate is evaluated on a fresh
    board copy produced by :mod:`atomic_chess.core.explosion`.
    """

    __slots__ = ("_pos", "_board", "_color")

    def __init__(self, position: Position, color: Color | None = None) -> None:
        self._pos = position
        self._board = position.board
        self._color = position.side_to_move if color is None else color

    @property
    def color(self) -> Color:
        return self._color

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[MoveResult]:
        """All strictly legal moves for the generator's side."""
        legal: list[MoveResult] = []
        for sq in self._board.all_pieces(self._color):
            legal.extend(self.legal_moves_from(sq))
        return legal

    def legal_moves_from(self, from_sq: Square) -> list[MoveResult]:
        """Legal moves of the piece on *from_sq* (empty if not ours)."""
        color = self._color
        return [
            move
            for move in self.pseudo_legal_moves_from(from_sq)
            if is_king_safe(move.board, color)
        ]

    def legal_destinations_from(self, from_sq: Square) -> list[Square]:
        return [move.to_sq for move in self.legal_moves_from(from_sq)]

    def has_legal_moves(self) -> bool:
        color = self._color
        for sq in self._board.all_pieces(color):
            for move in self.pseudo_legal_moves_from(sq):
                if is_king_safe(move.board, color):
                    return True
        return False

    def pseudo_legal_moves_from(self, from_sq: Square) -> list[MoveResult]:
        """Candidates consistent with geometry; own-king safety not checked."""
        piece = self._board[from_sq]
        if piece is None or piece.color != self._color:
            return []

        moves: list[MoveResult] = []
        self._gen_standard(from_sq, piece, moves)
        self._gen_captures(from_sq, piece, moves)
        if piece.piece_type == PieceType.PAWN:
            self._gen_double_step(from_sq, piece, moves)
            self._gen_en_passant(from_sq, piece, moves)
        elif piece.piece_type == PieceType.KING:
            self._gen_castling(from_sq, piece, moves)
        return moves

    def is_in_check(self, color: Color | None = None) -> bool:
        return is_atomic_check(self._board, self._color if color is None else color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_standard(
        self, sq: Square, piece: Piece, moves: list[MoveResult]
    ) -> None:
        board = self._board
        pattern = move_pattern(piece.color, piece.piece_type)
        for d_rank, d_file in pattern.vectors:
            for step in range(1, pattern.steps + 1):
                to_sq = offset_square(sq, step * d_rank, step * d_file)
                if to_sq is None or not board.is_empty(to_sq):
                    break
                mutation = explosion.standard_move(board, sq, to_sq)
                moves.append(
                    self._materialize(MoveKind.STANDARD, sq, to_sq, piece, mutation)
                )

    def _gen_captures(
        self, sq: Square, piece: Piece, moves: list[MoveResult]
    ) -> None:
        board = self._board
        pattern = capture_pattern(piece.color, piece.piece_type)
        for d_rank, d_file in pattern.vectors:
            for step in range(1, pattern.steps + 1):
                to_sq = offset_square(sq, step * d_rank, step * d_file)
                if to_sq is None:
                    break
                target = board[to_sq]
                if target is None:
                    continue
                if target.color != piece.color:
                    mutation = explosion.capture(board, sq, to_sq)
                    moves.append(
                        self._materialize(MoveKind.CAPTURE, sq, to_sq, piece, mutation)
                    )
                break

    def _gen_double_step(
        self, sq: Square, piece: Piece, moves: list[MoveResult]
    ) -> None:
        if rank_of(sq) != pawn_start_rank(piece.color):
            return
        board = self._board
        fwd = pawn_direction(piece.color)
        skipped = offset_square(sq, fwd, 0)
        to_sq = offset_square(sq, 2 * fwd, 0)
        if skipped is None or to_sq is None:
            return
        if not board.is_empty(skipped) or not board.is_empty(to_sq):
            return
        mutation = explosion.standard_move(board, sq, to_sq)
        moves.append(
            self._materialize(
                MoveKind.DOUBLE_STEP,
                sq,
                to_sq,
                piece,
                mutation,
                en_passant_square=skipped,
            )
        )

    def _gen_en_passant(
        self, sq: Square, piece: Piece, moves: list[MoveResult]
    ) -> None:
        target = self._pos.en_passant
        if target is None or self._color != self._pos.side_to_move:
            return
        pattern = capture_pattern(piece.color, piece.piece_type)
        for d_rank, d_file in pattern.vectors:
            to_sq = offset_square(sq, d_rank, d_file)
            if to_sq != target:
                continue
            victim = self._board[explosion.en_passant_victim(sq, to_sq)]
            if victim is None or victim.color == piece.color or not victim.is_pawn:
                continue
            mutation = explosion.en_passant(self._board, sq, to_sq)
            moves.append(
                self._materialize(MoveKind.EN_PASSANT, sq, to_sq, piece, mutation)
            )

    def _gen_castling(
        self, king_sq: Square, piece: Piece, moves: list[MoveResult]
    ) -> None:
        board = self._board
        color = piece.color
        opponent = color.opposite
        rook = Piece(color, PieceType.ROOK)

        for kind in (MoveKind.CASTLE_KINGSIDE, MoveKind.CASTLE_QUEENSIDE):
            if not self._pos.castling & _CASTLE_RIGHTS[(color, kind)]:
                continue
            path = castle_path(color, kind)
            if king_sq != path.king_from or board[path.rook_from] != rook:
                continue
            if any(not board.is_empty(sq) for sq in path.between):
                continue
            if is_atomic_check(board, color):
                return
            if any(is_square_attacked(board, sq, opponent) for sq in path.king_path):
                continue
            mutation = explosion.castle(board, color, kind)
            moves.append(
                self._materialize(kind, king_sq, path.king_to, piece, mutation)
            )

    # -- Result construction ------------------------------------------------

    def _materialize(
        self,
        kind: MoveKind,
        from_sq: Square,
        to_sq: Square,
        piece: Piece,
        mutation: Mutation,
        en_passant_square: Square | None = None,
    ) -> MoveResult:
        flags = MoveFlag.NONE
        if piece.piece_type == PieceType.PAWN:
            flags |= MoveFlag.PAWN_MOVE
        if kind.explodes:
            flags |= MoveFlag.CAPTURE
        if kind == MoveKind.DOUBLE_STEP:
            flags |= MoveFlag.DOUBLE_STEP
        if kind == MoveKind.STANDARD and explosion.is_promotion_square(piece, to_sq):
            flags |= MoveFlag.PROMOTION

        vacated = set(mutation.explosions)
        vacated.update(origin for origin, _ in mutation.moves)
        flags |= disable_flags(lost_rights(self._board, vacated))

        return MoveResult(
            from_sq=from_sq,
            to_sq=to_sq,
            kind=kind,
            color=piece.color,
            piece=piece,
            board=mutation.board,
            explosions=mutation.explosions,
            moves=mutation.moves,
            flags=flags,
            en_passant_square=en_passant_square,
        )
