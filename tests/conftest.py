"""Shared pytest fixtures and position builders used across the test suite."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from chess4d.core.board import Board
from chess4d.core.enums import Color, PieceType
from chess4d.core.piece import Piece
from chess4d.core.types import Coord
from chess4d.game.controller import GameController

WHITE_KING_FAR: Coord = (0, 0, 0, 0)
BLACK_KING_FAR: Coord = (3, 3, 3, 3)


def build_board(
    placements: Iterable[tuple[Coord, Color, PieceType]],
    *,
    kings: bool = True,
) -> Board:
    """Board holding *placements*, plus both kings in far corners unless told not to."""
    board = Board()
    if kings:
        board.set(WHITE_KING_FAR, Piece(PieceType.KING, Color.WHITE))
        board.set(BLACK_KING_FAR, Piece(PieceType.KING, Color.BLACK))
    for coord, color, piece_type in placements:
        board.set(coord, Piece(piece_type, color))
    return board


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def controller() -> GameController:
    return GameController()


@pytest.fixture
def make_board():
    """Factory fixture around :func:`build_board`."""
    return build_board
