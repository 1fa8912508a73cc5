"""Pseudo-legal move generation and attack detection on the 4D board."""

from __future__ import annotations

from collections.abc import Callable
from itertools import combinations, permutations
from typing import TYPE_CHECKING

from chess4d.core.enums import Color, PieceType
from chess4d.core.types import (
    SQUARE_COUNT,
    Z,
    Coord,
    coord_from_index,
    coord_index,
    is_valid_coord,
    offset,
)

if TYPE_CHECKING:
    from chess4d.core.board import Board
    from chess4d.core.piece import Piece

Direction = tuple[int, int, int, int]

_SIGN_PAIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))


def _unit(axis: int, sign: int) -> Direction:
    delta = [0, 0, 0, 0]
    delta[axis] = sign
    return (delta[0], delta[1], delta[2], delta[3])


def _build_rook_dirs() -> tuple[Direction, ...]:
    return tuple(_unit(axis, sign) for axis in range(4) for sign in (1, -1))


def _build_bishop_dirs() -> tuple[Direction, ...]:
    dirs: list[Direction] = []
    for a, b in combinations(range(4), 2):
        for sa, sb in _SIGN_PAIRS:
            delta = [0, 0, 0, 0]
            delta[a] = sa
            delta[b] = sb
            dirs.append((delta[0], delta[1], delta[2], delta[3]))
    return tuple(dirs)


def _build_knight_offsets() -> tuple[Direction, ...]:
    # Ordered pairs: the first axis takes the 2-step, the second the 1-step.
    offsets: list[Direction] = []
    for long_axis, short_axis in permutations(range(4), 2):
        for long_step in (2, -2):
            for short_step in (1, -1):
                delta = [0, 0, 0, 0]
                delta[long_axis] = long_step
                delta[short_axis] = short_step
                offsets.append((delta[0], delta[1], delta[2], delta[3]))
    return tuple(offsets)


ROOK_DIRS: tuple[Direction, ...] = _build_rook_dirs()
BISHOP_DIRS: tuple[Direction, ...] = _build_bishop_dirs()
QUEEN_DIRS: tuple[Direction, ...] = ROOK_DIRS + BISHOP_DIRS
KING_OFFSETS: tuple[Direction, ...] = QUEEN_DIRS
KNIGHT_OFFSETS: tuple[Direction, ...] = _build_knight_offsets()

# Sideways part of a pawn capture; the forward z step is added per color.
PAWN_CAPTURE_SIDESTEPS: tuple[tuple[int, int, int], ...] = (
    (1, 0, 0),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
    (0, 0, 1),
    (0, 0, -1),
)

PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
PROMOTION_Z: dict[Color, int] = {Color.WHITE: 3, Color.BLACK: 0}


def is_promotion_square(color: Color, coord: Coord) -> bool:
    """Whether a *color* pawn standing on *coord* is due for promotion."""
    return coord[Z] == PROMOTION_Z[color]


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(offsets: tuple[Direction, ...]) -> tuple[tuple[Coord, ...], ...]:
    targets: list[tuple[Coord, ...]] = []
    for index in range(SQUARE_COUNT):
        origin = coord_from_index(index)
        moves = [offset(origin, d) for d in offsets]
        targets.append(tuple(m for m in moves if is_valid_coord(m)))
    return tuple(targets)


def _build_rays(
    directions: tuple[Direction, ...],
) -> tuple[tuple[tuple[Coord, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Coord, ...], ...]] = []
    for index in range(SQUARE_COUNT):
        origin = coord_from_index(index)
        square_rays: list[tuple[Coord, ...]] = []
        for direction in directions:
            ray: list[Coord] = []
            current = offset(origin, direction)
            while is_valid_coord(current):
                ray.append(current)
                current = offset(current, direction)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_ROOK_RAYS = _build_rays(ROOK_DIRS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Target predicates -------------------------------------------------------


def is_capturable(board: Board, piece: Piece, target: Coord) -> bool:
    """*target* holds a piece of the opposing color."""
    occupant = board.get(target)
    return occupant is not None and occupant.color != piece.color


def is_valid_target(board: Board, piece: Piece, target: Coord) -> bool:
    """*target* is on the board and either empty or capturable."""
    if not is_valid_coord(target):
        return False
    occupant = board.get(target)
    return occupant is None or occupant.color != piece.color


# -- Per-kind generators -----------------------------------------------------


def _slide(
    piece: Piece, board: Board, rays: tuple[tuple[Coord, ...], ...]
) -> list[Coord]:
    moves: list[Coord] = []
    for ray in rays:
        for target in ray:
            occupant = board.get(target)
            if occupant is None:
                moves.append(target)
                continue
            if occupant.color != piece.color:
                moves.append(target)
            break
    return moves


def _leap(piece: Piece, board: Board, targets: tuple[Coord, ...]) -> list[Coord]:
    return [t for t in targets if is_valid_target(board, piece, t)]


def _rook_moves(piece: Piece, board: Board) -> list[Coord]:
    return _slide(piece, board, _ROOK_RAYS[coord_index(piece.position)])


def _bishop_moves(piece: Piece, board: Board) -> list[Coord]:
    return _slide(piece, board, _BISHOP_RAYS[coord_index(piece.position)])


def _queen_moves(piece: Piece, board: Board) -> list[Coord]:
    return _slide(piece, board, _QUEEN_RAYS[coord_index(piece.position)])


def _king_moves(piece: Piece, board: Board) -> list[Coord]:
    return _leap(piece, board, _KING_TARGETS[coord_index(piece.position)])


def _knight_moves(piece: Piece, board: Board) -> list[Coord]:
    return _leap(piece, board, _KNIGHT_TARGETS[coord_index(piece.position)])


def _pawn_moves(piece: Piece, board: Board) -> list[Coord]:
    moves: list[Coord] = []
    w, x, y, z = piece.position
    step = PAWN_DIRECTION[piece.color]

    one = (w, x, y, z + step)
    if board.is_empty(one):
        moves.append(one)
        if not piece.has_moved:
            two = (w, x, y, z + 2 * step)
            if board.is_empty(two):
                moves.append(two)

    for dw, dx, dy in PAWN_CAPTURE_SIDESTEPS:
        target = (w + dw, x + dx, y + dy, z + step)
        if is_valid_coord(target) and is_capturable(board, piece, target):
            moves.append(target)
    return moves


_GENERATORS: dict[PieceType, Callable[[Piece, Board], list[Coord]]] = {
    PieceType.PAWN: _pawn_moves,
    PieceType.KNIGHT: _knight_moves,
    PieceType.BISHOP: _bishop_moves,
    PieceType.ROOK: _rook_moves,
    PieceType.QUEEN: _queen_moves,
    PieceType.KING: _king_moves,
}


# -- Public API ---------------------------------------------------------------


def pseudo_legal_moves(piece: Piece, board: Board) -> list[Coord]:
    """All targets *piece* may move to, ignoring own-king safety."""
    if not is_valid_coord(piece.position):
        return []
    return _GENERATORS[piece.piece_type](piece, board)


def attacks_square(board: Board, color: Color, target: Coord) -> bool:
    """Whether any *color* piece has a pseudo-legal move onto *target*."""
    target = tuple(target)
    for attacker in board.pieces_by_color(color):
        if target in pseudo_legal_moves(attacker, board):
            return True
    return False
