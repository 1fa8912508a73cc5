"""Tests for GameState."""

import pytest

from chess4d.core.board import Board
from chess4d.core.enums import Color, GameResult, PieceType
from chess4d.core.piece import Piece
from chess4d.game.interfaces import GamePhase, MoveRejection
from chess4d.game.state import GameState, MoveOutcome, MoveRecord


class TestGameStateSetup:
    def test_setup_default(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.phase == GamePhase.AWAITING_SELECTION
        assert gs.result == GameResult.IN_PROGRESS
        assert gs.current_player == Color.WHITE
        assert gs.ply_count == 0
        assert gs.captured_pieces == {Color.WHITE: [], Color.BLACK: []}

    def test_setup_custom_board(self, make_board) -> None:
        board = make_board([])
        gs = GameState()
        gs.setup(board, Color.BLACK)
        assert gs.board is board
        assert gs.current_player == Color.BLACK

    def test_setup_resets(self) -> None:
        gs = GameState()
        gs.setup()
        gs.apply_move((0, 1, 0, 0), (0, 1, 2, 1))
        assert gs.ply_count == 1
        gs.setup()
        assert gs.ply_count == 0
        assert gs.current_player == Color.WHITE
        assert gs.board.get((0, 1, 0, 0)) is not None


class TestSelection:
    def test_select_and_clear(self) -> None:
        gs = GameState()
        gs.setup()
        gs.select((0, 1, 0, 0))
        assert gs.phase == GamePhase.PIECE_SELECTED
        assert gs.selected_piece is gs.board.get((0, 1, 0, 0))
        gs.clear_selection()
        assert gs.selected is None
        assert gs.phase == GamePhase.AWAITING_SELECTION

    def test_selection_is_looked_up_each_time(self) -> None:
        gs = GameState()
        gs.setup()
        gs.select((0, 1, 0, 0))
        gs.board.set((0, 1, 0, 0), None)
        assert gs.selected == (0, 1, 0, 0)
        assert gs.selected_piece is None

    def test_selection_of_wrong_color_reads_as_none(self) -> None:
        gs = GameState()
        gs.setup()
        gs.select((0, 1, 0, 3))
        assert gs.selected_piece is None


class TestGameStateMoves:
    def test_apply_move_records(self) -> None:
        gs = GameState()
        gs.setup()
        record, captured = gs.apply_move((0, 1, 0, 0), (0, 1, 2, 1))
        assert captured is None
        assert record == MoveRecord(
            from_coord=(0, 1, 0, 0),
            to_coord=(0, 1, 2, 1),
            piece_type=PieceType.KNIGHT,
            captured=None,
            player=Color.WHITE,
        )
        assert gs.current_player == Color.BLACK
        assert gs.move_history == [record]

    def test_apply_move_books_capture_under_captor(self) -> None:
        gs = GameState()
        gs.setup()
        record, captured = gs.apply_move((0, 0, 0, 1), (1, 0, 0, 2))
        assert captured is not None
        assert record.captured == PieceType.PAWN
        assert gs.captured_pieces[Color.WHITE] == [captured]
        assert gs.captured_pieces[Color.BLACK] == []

    def test_apply_move_clears_selection(self) -> None:
        gs = GameState()
        gs.setup()
        gs.select((0, 1, 0, 0))
        gs.apply_move((0, 1, 0, 0), (0, 1, 2, 1))
        assert gs.selected is None
        assert gs.phase == GamePhase.AWAITING_SELECTION

    def test_apply_move_from_empty_square_raises(self) -> None:
        gs = GameState()
        gs.setup()
        with pytest.raises(ValueError, match="No piece"):
            gs.apply_move((2, 2, 2, 2), (2, 2, 2, 3))


class TestGameStateTermination:
    def test_check_game_over_in_progress(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.check_game_over() == GameResult.IN_PROGRESS
        assert not gs.game_over
        assert gs.winner is None

    def test_check_game_over_stalemate(self) -> None:
        board = Board()
        board.set((0, 0, 0, 0), Piece(PieceType.KING, Color.BLACK))
        for coord in [
            (1, 0, 0, 0), (0, 1, 0, 0), (0, 0, 1, 0),
            (1, 1, 0, 0), (1, 0, 1, 0), (0, 1, 1, 0),
            (0, 0, 0, 1), (1, 0, 0, 1), (0, 1, 0, 1), (0, 0, 1, 1),
        ]:  # fmt: skip
            board.set(coord, Piece(PieceType.PAWN, Color.BLACK))
        board.set((3, 3, 3, 3), Piece(PieceType.KING, Color.WHITE))

        gs = GameState()
        gs.setup(board, Color.BLACK)
        assert gs.check_game_over() == GameResult.DRAW
        assert gs.game_over
        assert gs.winner is None


class TestSnapshot:
    def test_snapshot_fields(self) -> None:
        gs = GameState()
        gs.setup()
        gs.select((0, 1, 0, 0))
        snap = gs.snapshot()
        assert snap.current_player == Color.WHITE
        assert not snap.game_over
        assert snap.winner is None
        assert not snap.in_check
        assert snap.selected_piece == (0, 1, 0, 0)
        assert snap.move_history == ()
        assert snap.captured_pieces == {Color.WHITE: (), Color.BLACK: ()}

    def test_snapshot_is_detached(self) -> None:
        gs = GameState()
        gs.setup()
        gs.apply_move((0, 0, 0, 1), (1, 0, 0, 2))
        snap = gs.snapshot()
        gs.apply_move((0, 1, 0, 3), (0, 1, 2, 2))
        assert len(snap.move_history) == 1
        snapped = snap.captured_pieces[Color.WHITE][0]
        assert snapped is not gs.captured_pieces[Color.WHITE][0]
        assert snapped == gs.captured_pieces[Color.WHITE][0]

    def test_as_dict(self) -> None:
        gs = GameState()
        gs.setup()
        gs.apply_move((0, 0, 0, 1), (1, 0, 0, 2))
        data = gs.snapshot().as_dict()
        assert data["current_player"] == "black"
        assert data["winner"] is None
        assert data["selected_piece"] is None
        assert data["move_history"] == [
            {
                "notation": "(0,0,0,1)x(1,0,0,2)",
                "from": [0, 0, 0, 1],
                "to": [1, 0, 0, 2],
                "piece": "pawn",
                "captured": "pawn",
                "player": "white",
            }
        ]
        assert data["captured_pieces"] == {"white": ["pawn"], "black": []}


class TestMoveOutcome:
    def test_rejected(self) -> None:
        outcome = MoveOutcome.rejected(MoveRejection.ILLEGAL_MOVE, "Invalid move")
        assert not outcome.success
        assert outcome.reason == MoveRejection.ILLEGAL_MOVE
        assert outcome.record is None
        assert outcome.promotion is None


class TestMoveNotation:
    def test_quiet_piece_move(self) -> None:
        gs = GameState()
        gs.setup()
        record, _ = gs.apply_move((0, 1, 0, 0), (0, 1, 2, 1))
        assert record.notation == "N(0,1,0,0)-(0,1,2,1)"

    def test_capture(self) -> None:
        record = MoveRecord(
            from_coord=(1, 1, 0, 0),
            to_coord=(1, 1, 3, 3),
            piece_type=PieceType.QUEEN,
            captured=PieceType.ROOK,
            player=Color.WHITE,
        )
        assert record.notation == "Q(1,1,0,0)x(1,1,3,3)"

    def test_pawn_has_no_letter(self) -> None:
        record = MoveRecord(
            from_coord=(2, 2, 0, 1),
            to_coord=(2, 2, 0, 3),
            piece_type=PieceType.PAWN,
            captured=None,
            player=Color.WHITE,
        )
        assert record.notation == "(2,2,0,1)-(2,2,0,3)"
        captured = MoveRecord(
            (0, 0, 0, 1), (1, 0, 0, 2), PieceType.PAWN, PieceType.PAWN, Color.WHITE
        )
        assert captured.notation == "(0,0,0,1)x(1,0,0,2)"

    def test_black_pieces_use_uppercase(self) -> None:
        gs = GameState()
        gs.setup(current_player=Color.BLACK)
        record, _ = gs.apply_move((0, 1, 0, 3), (0, 1, 2, 2))
        assert record.notation == "N(0,1,0,3)-(0,1,2,2)"
