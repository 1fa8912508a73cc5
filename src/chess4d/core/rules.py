"""Rules: check, check-safe moves, checkmate, stalemate, game result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chess4d.core.enums import Color, GameResult
from chess4d.core.move_generator import attacks_square, pseudo_legal_moves

if TYPE_CHECKING:
    from chess4d.core.board import Board
    from chess4d.core.piece import Piece
    from chess4d.core.types import Coord


class Rules:
    """Stateless rules checker that operates on a :class:`Board`.

    Every hypothetical move is played on a full clone of the board, so the
    board passed in is never mutated.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        king = board.find_king(color)
        if king is None:
            return False
        return attacks_square(board, color.opposite, king.position)

    @staticmethod
    def would_be_in_check(board: Board, piece: Piece, target: Coord) -> bool:
        """Whether moving *piece* to *target* leaves its own king attacked."""
        scratch = board.clone()
        scratch.move_piece(piece.position, target)
        return Rules.is_in_check(scratch, piece.color)

    @staticmethod
    def safe_moves(board: Board, piece: Piece) -> list[Coord]:
        """Pseudo-legal moves of *piece* that keep its king out of check."""
        return [
            target
            for target in pseudo_legal_moves(piece, board)
            if not Rules.would_be_in_check(board, piece, target)
        ]

    @staticmethod
    def has_safe_moves(board: Board, color: Color) -> bool:
        for piece in board.pieces_by_color(color):
            for target in pseudo_legal_moves(piece, board):
                if not Rules.would_be_in_check(board, piece, target):
                    return True
        return False

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.has_safe_moves(board, color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not Rules.has_safe_moves(board, color)

    @staticmethod
    def game_result(board: Board, side_to_move: Color) -> GameResult:
        """Determine the result with *side_to_move* to play."""
        if Rules.has_safe_moves(board, side_to_move):
            return GameResult.IN_PROGRESS
        if Rules.is_in_check(board, side_to_move):
            return GameResult.win_for(side_to_move.opposite)
        return GameResult.DRAW  # stalemate
