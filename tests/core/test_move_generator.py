"""Tests for MoveGenerator and atomic attack detection."""

from atomic_chess.core.enums import Color, MoveFlag, MoveKind, PieceType
from atomic_chess.core.move_generator import (
    MoveGenerator,
    is_atomic_check,
    is_square_attacked,
)
from atomic_chess.core.notation import STARTING_FEN, position_from_fen
from atomic_chess.core.position import Position
from atomic_chess.core.types import (
    A6, C1, C5, D1, D2, D4, D6, E1, E2, E3, E4, E5, F1, G1, H1,
    parse_square,
)


def _destinations(fen: str, square: str) -> set[int]:
    pos = position_from_fen(fen)
    return set(MoveGenerator(pos).legal_destinations_from(parse_square(square)))


def _perft(pos: Position, depth: int) -> int:
    if depth == 0:
        return 1
    total = 0
    for move in MoveGenerator(pos).generate_legal_moves():
        child = pos.copy()
        child.commit(move)
        total += _perft(child, depth - 1)
    return total


class TestStartingPosition:
    def test_twenty_moves(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert len(MoveGenerator(pos).generate_legal_moves()) == 20

    def test_perft_depth_2(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert _perft(pos, 2) == 400

    def test_knight_destinations(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        gen = MoveGenerator(pos)
        assert set(gen.legal_destinations_from(G1)) == {
            parse_square("f3"),
            parse_square("h3"),
        }

    def test_opponent_piece_has_no_moves(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert MoveGenerator(pos).legal_moves_from(parse_square("e7")) == []

    def test_empty_square_has_no_moves(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert MoveGenerator(pos).legal_moves_from(E4) == []

    def test_generation_does_not_touch_position(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        snapshot = pos.copy()
        MoveGenerator(pos).generate_legal_moves()
        assert pos == snapshot


class TestPawnMoves:
    def test_double_step_records_skipped_square(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        moves = {m.to_sq: m for m in MoveGenerator(pos).legal_moves_from(E2)}
        assert set(moves) == {E3, E4}
        double = moves[E4]
        assert double.kind == MoveKind.DOUBLE_STEP
        assert double.en_passant_square == E3
        assert double.flags & MoveFlag.DOUBLE_STEP
        assert moves[E3].en_passant_square is None

    def test_blocked_pawn(self) -> None:
        assert _destinations("4k3/8/8/8/8/4n3/4P3/4K3 w - - 0 1", "e2") == set()

    def test_double_step_destination_blocked(self) -> None:
        assert _destinations("4k3/8/8/8/4n3/8/4P3/4K3 w - - 0 1", "e2") == {E3}

    def test_pawn_never_captures_forward(self) -> None:
        assert _destinations("4k3/8/8/8/8/4p3/4P3/4K3 w - - 0 1", "e2") == set()

    def test_diagonal_capture(self) -> None:
        dests = _destinations("4k3/8/8/8/8/3p4/4P3/K7 w - - 0 1", "e2")
        assert parse_square("d3") in dests

    def test_promotion_flag(self) -> None:
        pos = position_from_fen("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        (move,) = MoveGenerator(pos).legal_moves_from(parse_square("a7"))
        assert move.is_promotion
        assert move.kind == MoveKind.STANDARD


class TestEnPassant:
    FEN = "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1"

    def test_available_on_target(self) -> None:
        pos = position_from_fen(self.FEN)
        moves = {m.to_sq: m for m in MoveGenerator(pos).legal_moves_from(E5)}
        assert D6 in moves
        assert moves[D6].kind == MoveKind.EN_PASSANT
        assert moves[D6].is_capture

    def test_unavailable_without_target(self) -> None:
        fen = self.FEN.replace(" d6 ", " - ")
        assert D6 not in _destinations(fen, "e5")


class TestSlidingPieces:
    def test_rook_stops_at_first_occupant(self) -> None:
        # Black pawn a3 shields the black rook a4.
        dests = _destinations("4k3/8/8/8/r7/p7/8/R3K3 w - - 0 1", "a1")
        assert dests == {
            parse_square("a2"),
            parse_square("a3"),
            parse_square("b1"),
            C1,
            D1,
        }

    def test_rook_captures_only_first_piece(self) -> None:
        pos = position_from_fen("4k3/8/8/8/r7/p7/8/R3K3 w - - 0 1")
        moves = MoveGenerator(pos).pseudo_legal_moves_from(parse_square("a1"))
        captures = {m.to_sq for m in moves if m.is_capture}
        assert captures == {parse_square("a3")}

    def test_bishop_blocked_by_own_piece(self) -> None:
        dests = _destinations("4k3/8/8/8/8/2P5/8/B3K3 w - - 0 1", "a1")
        assert dests == {parse_square("b2")}

    def test_queen_never_captures_through(self) -> None:
        # Knight a4 stands in front of the rook a6.
        fen = "k7/8/r7/8/n7/8/8/Q3K3 w - - 0 1"
        dests = _destinations(fen, "a1")
        assert parse_square("a4") in dests
        assert parse_square("a5") not in dests
        assert parse_square("a6") not in dests
        pos = position_from_fen(fen)
        moves = MoveGenerator(pos).legal_moves_from(parse_square("a1"))
        assert {m.to_sq for m in moves if m.is_capture} == {parse_square("a4")}


class TestKingMoves:
    def test_king_cannot_capture(self) -> None:
        dests = _destinations("4k3/8/8/8/8/8/4r3/4K3 w - - 0 1", "e1")
        assert E2 not in dests
        assert dests == {D1, F1}

    def test_king_cannot_capture_undefended_piece(self) -> None:
        dests = _destinations("k7/8/8/8/8/8/4n3/4K3 w - - 0 1", "e1")
        assert E2 not in dests


class TestSelfDestruction:
    def test_capture_next_to_own_king_is_illegal(self) -> None:
        dests = _destinations("k7/8/8/8/3R4/8/3n4/4K3 w - - 0 1", "d4")
        assert D2 not in dests
        assert parse_square("d3") in dests

    def test_pseudo_legal_still_lists_it(self) -> None:
        pos = position_from_fen("k7/8/8/8/3R4/8/3n4/4K3 w - - 0 1")
        pseudo = MoveGenerator(pos).pseudo_legal_moves_from(D4)
        assert D2 in {m.to_sq for m in pseudo}


class TestAtomicCheck:
    # Kings touch; the white rook on c5 looks along rank 5 at the black king.
    ADJACENT = "8/8/n7/2R1k3/3K4/8/8/8 b - - 0 1"

    def test_rook_attacks_the_king_square(self) -> None:
        pos = position_from_fen(self.ADJACENT)
        assert is_square_attacked(pos.board, E5, Color.WHITE)

    def test_adjacent_kings_are_never_in_check(self) -> None:
        pos = position_from_fen(self.ADJACENT)
        assert not is_atomic_check(pos.board, Color.BLACK)
        assert not is_atomic_check(pos.board, Color.WHITE)

    def test_capturing_rook_beside_enemy_king_is_legal(self) -> None:
        pos = position_from_fen(self.ADJACENT)
        moves = {m.to_sq: m for m in MoveGenerator(pos).legal_moves_from(A6)}
        assert C5 in moves
        assert moves[C5].explosions == (A6, C5, D4)
        assert moves[C5].board.king_square(Color.WHITE) is None

    def test_quiet_move_allowed_while_kings_touch(self) -> None:
        pos = position_from_fen(self.ADJACENT)
        assert parse_square("b8") in MoveGenerator(pos).legal_destinations_from(A6)

    def test_missing_king_is_not_in_check(self) -> None:
        pos = position_from_fen("4r3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert not is_atomic_check(pos.board, Color.WHITE)

    def test_ordinary_check(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert is_atomic_check(pos.board, Color.WHITE)
        assert MoveGenerator(pos).is_in_check()

    def test_kings_attack_nothing(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/4k3/4K3 w - - 0 1")
        assert not is_square_attacked(pos.board, E1, Color.BLACK)

    def test_blocked_slider(self) -> None:
        pos = position_from_fen("4r3/8/8/8/4P3/8/8/4K3 w - - 0 1")
        assert not is_square_attacked(pos.board, E1, Color.BLACK)
        assert is_square_attacked(pos.board, parse_square("e7"), Color.BLACK)


class TestCastling:
    BOTH = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"

    def test_both_sides_available(self) -> None:
        dests = _destinations(self.BOTH, "e1")
        assert G1 in dests
        assert C1 in dests

    def test_kingside_result(self) -> None:
        pos = position_from_fen(self.BOTH)
        moves = {m.to_sq: m for m in MoveGenerator(pos).legal_moves_from(E1)}
        castle = moves[G1]
        assert castle.kind == MoveKind.CASTLE_KINGSIDE
        assert castle.moves == ((E1, G1), (H1, F1))
        assert castle.explosions == ()
        assert castle.board[F1] is not None
        assert castle.board[F1].piece_type == PieceType.ROOK

    def test_not_through_attacked_square(self) -> None:
        assert G1 not in _destinations("4kr2/8/8/8/8/8/8/4K2R w K - 0 1", "e1")

    def test_not_onto_attacked_square(self) -> None:
        assert G1 not in _destinations("4k1r1/8/8/8/8/8/8/4K2R w K - 0 1", "e1")

    def test_not_out_of_check(self) -> None:
        assert G1 not in _destinations("4k3/8/8/8/8/8/8/r3K2R w K - 0 1", "e1")

    def test_not_when_blocked(self) -> None:
        assert G1 not in _destinations("4k3/8/8/8/8/8/8/4KB1R w K - 0 1", "e1")

    def test_not_without_rook(self) -> None:
        assert G1 not in _destinations("4k3/8/8/8/8/8/8/4K3 w K - 0 1", "e1")

    def test_not_without_right(self) -> None:
        assert G1 not in _destinations("4k3/8/8/8/8/8/8/4K2R w - - 0 1", "e1")

    def test_castling_disables_own_rights(self) -> None:
        pos = position_from_fen(self.BOTH)
        moves = {m.to_sq: m for m in MoveGenerator(pos).legal_moves_from(E1)}
        flags = moves[G1].flags
        assert flags & MoveFlag.DISABLE_WHITE_KINGSIDE
        assert flags & MoveFlag.DISABLE_WHITE_QUEENSIDE
        assert not flags & MoveFlag.DISABLE_BLACK_KINGSIDE


class TestHasLegalMoves:
    def test_start(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert MoveGenerator(pos).has_legal_moves()

    def test_for_other_color(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert MoveGenerator(pos, Color.BLACK).has_legal_moves()

    def test_none_without_pieces(self) -> None:
        pos = position_from_fen("8/8/8/8/8/p7/P7/4K3 b - - 0 1")
        assert not MoveGenerator(pos).has_legal_moves()
