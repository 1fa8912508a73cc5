"""Core domain layer — pure 4D chess logic with zero external dependencies.

Quick start::

    from chess4d.core import Board, Rules, coord_name

    board = Board.initial()
    knight = board.get((0, 1, 0, 0))
    for target in Rules.safe_moves(board, knight):
        print(coord_name(target))
"""

from chess4d.core.board import Board
from chess4d.core.enums import Color, GameResult, PieceType
from chess4d.core.move_generator import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    is_promotion_square,
    pseudo_legal_moves,
)
from chess4d.core.piece import Piece, piece_letter
from chess4d.core.rules import Rules
from chess4d.core.types import (
    AXES,
    BOARD_SIZE,
    Coord,
    coord_name,
    is_valid_coord,
    iter_coords,
    make_coord,
    parse_coord,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "AXES",
    "BOARD_SIZE",
    "Coord",
    "coord_name",
    "is_valid_coord",
    "iter_coords",
    "make_coord",
    "parse_coord",
    # Direction tables
    "BISHOP_DIRS",
    "KING_OFFSETS",
    "KNIGHT_OFFSETS",
    "QUEEN_DIRS",
    "ROOK_DIRS",
    # Domain objects
    "Board",
    "Piece",
    "Rules",
    "is_promotion_square",
    "piece_letter",
    "pseudo_legal_moves",
]
