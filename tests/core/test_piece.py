"""Tests for Piece."""

import pytest

from chess4d.core.enums import Color, PieceType
from chess4d.core.piece import Piece


class TestPieceText:
    @pytest.mark.parametrize(
        "char, color, kind",
        [
            ("K", Color.WHITE, PieceType.KING),
            ("n", Color.BLACK, PieceType.KNIGHT),
            ("P", Color.WHITE, PieceType.PAWN),
            ("q", Color.BLACK, PieceType.QUEEN),
        ],
    )
    def test_from_char(self, char: str, color: Color, kind: PieceType) -> None:
        piece = Piece.from_char(char, (1, 2, 3, 0))
        assert (piece.color, piece.piece_type) == (color, kind)
        assert piece.position == (1, 2, 3, 0)
        assert str(piece) == char

    @pytest.mark.parametrize("char", ["x", "", "KK", "1"])
    def test_from_char_rejects(self, char: str) -> None:
        with pytest.raises(ValueError, match="Unknown piece letter"):
            Piece.from_char(char)

    def test_symbol(self) -> None:
        assert Piece(PieceType.KNIGHT, Color.BLACK).symbol == "♞"
        assert Piece(PieceType.KING, Color.WHITE).symbol == "♔"


class TestPieceCopy:
    def test_clone_is_independent(self) -> None:
        rook = Piece(PieceType.ROOK, Color.WHITE, (0, 0, 0, 0), has_moved=True)
        twin = rook.clone()
        assert twin == rook
        assert twin is not rook
        twin.position = (3, 3, 3, 3)
        assert rook.position == (0, 0, 0, 0)

    def test_defaults(self) -> None:
        pawn = Piece(PieceType.PAWN, Color.BLACK)
        assert pawn.position == (0, 0, 0, 0)
        assert not pawn.has_moved


class TestPieceMoves:
    def test_valid_moves_follow_board(self, initial_board) -> None:
        rook = initial_board.get((0, 0, 0, 0))
        assert rook is not None
        assert rook.valid_moves(initial_board) == [
            (0, 0, 1, 0),
            (0, 0, 2, 0),
            (0, 0, 3, 0),
        ]

    def test_off_board_piece_has_no_moves(self, empty_board) -> None:
        stray = Piece(PieceType.QUEEN, Color.WHITE, (4, 0, 0, 0))
        assert stray.valid_moves(empty_board) == []
        assert not stray.can_move_to(empty_board, (3, 0, 0, 0))
