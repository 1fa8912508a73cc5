"""Board - piece placement on a 4x4x4x4 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chess4d.core.enums import Color, PieceType
from chess4d.core.piece import Piece
from chess4d.core.types import (
    BOARD_SIZE,
    SQUARE_COUNT,
    Coord,
    coord_from_index,
    coord_index,
    is_valid_coord,
)

# Back pieces as (w, x) on the home layer; pawns fill w 0–1 on the next layer.
_BACK_PIECES: tuple[tuple[int, int, PieceType], ...] = (
    (0, 0, PieceType.ROOK),
    (0, 3, PieceType.ROOK),
    (0, 1, PieceType.KNIGHT),
    (0, 2, PieceType.KNIGHT),
    (1, 0, PieceType.BISHOP),
    (1, 3, PieceType.BISHOP),
    (1, 1, PieceType.QUEEN),
    (1, 2, PieceType.KING),
)
_HOME_Z: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 3}
_PAWN_Z: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 2}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Board:
    """Mutable 256-square board.

    Every read and write is bounds-checked: out-of-range coordinates read as
    ``None`` and writes to them are refused.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * SQUARE_COUNT

    # -- Element access -----------------------------------------------------

    @staticmethod
    def is_valid_coord(coord: Coord) -> bool:
        return is_valid_coord(coord)

    def get(self, coord: Coord) -> Piece | None:
        if not is_valid_coord(coord):
            return None
        return self._squares[coord_index(coord)]

    def __getitem__(self, coord: Coord) -> Piece | None:
        return self.get(coord)

    def set(self, coord: Coord, piece: Piece | None) -> bool:
        """Place *piece* (or clear the cell). ``False`` if *coord* is off-board."""
        if not is_valid_coord(coord):
            return False
        coord = tuple(coord)
        self._squares[coord_index(coord)] = piece
        if piece is not None:
            piece.position = coord
        return True

    def is_empty(self, coord: Coord) -> bool:
        """Valid and unoccupied. Off-board cells are not addressable, so never empty."""
        if not is_valid_coord(coord):
            return False
        return self._squares[coord_index(coord)] is None

    # -- Geometry -----------------------------------------------------------

    def is_path_clear(self, from_coord: Coord, to_coord: Coord) -> bool:
        """Whether every cell strictly between the endpoints is empty.

        Each axis steps by its own sign and stops once it reaches the target
        value, so paths need not be straight lines. Interior cells off the
        board count as clear.
        """
        steps = [_sign(t - f) for f, t in zip(from_coord, to_coord)]
        target = list(to_coord)
        current = [f + s for f, s in zip(from_coord, steps)]

        while current != target:
            if (
                is_valid_coord(current)
                and self._squares[coord_index(current)] is not None
            ):
                return False
            for axis in range(4):
                if current[axis] != target[axis]:
                    current[axis] += steps[axis]
        return True

    # -- Mutation -----------------------------------------------------------

    def move_piece(self, from_coord: Coord, to_coord: Coord) -> Piece | None:
        """Relocate the piece on *from_coord* without any legality check.

        Returns the piece that stood on *to_coord* (the capture), if any.
        Does nothing if *from_coord* is empty or *to_coord* is off-board.
        """
        piece = self.get(from_coord)
        if piece is None or not is_valid_coord(to_coord):
            return None

        captured = self.get(to_coord)
        self.set(from_coord, None)
        self.set(to_coord, piece)
        piece.has_moved = True
        return captured

    def clear(self) -> None:
        self._squares = [None] * SQUARE_COUNT

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Coord, Piece]]:
        """``(coord, piece)`` for every occupied cell, in scan order."""
        for index, piece in enumerate(self._squares):
            if piece is not None:
                yield coord_from_index(index), piece

    def pieces_by_color(self, color: Color) -> list[Piece]:
        return [p for p in self._squares if p is not None and p.color == color]

    def find_king(self, color: Color) -> Piece | None:
        for piece in self._squares:
            if (
                piece is not None
                and piece.piece_type == PieceType.KING
                and piece.color == color
            ):
                return piece
        return None

    # -- Copying ------------------------------------------------------------

    def clone(self) -> Board:
        """Deep copy: every piece is an independent clone."""
        b = Board()
        b._squares = [p.clone() if p is not None else None for p in self._squares]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Starting position: 16 pieces per side."""
        b = cls()
        for color in Color:
            home_z = _HOME_Z[color]
            for w, x, piece_type in _BACK_PIECES:
                b.set((w, x, 0, home_z), Piece(piece_type, color))

            pawn_z = _PAWN_Z[color]
            for w in range(2):
                for x in range(BOARD_SIZE):
                    b.set((w, x, 0, pawn_z), Piece(PieceType.PAWN, color))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        blocks: list[str] = []
        for w in range(BOARD_SIZE):
            for z in range(BOARD_SIZE):
                rows = [f"w={w} z={z}"]
                for y in range(BOARD_SIZE - 1, -1, -1):
                    row = []
                    for x in range(BOARD_SIZE):
                        p = self.get((w, x, y, z))
                        row.append(str(p) if p else ".")
                    rows.append(f"{y} {' '.join(row)}")
                rows.append("  0 1 2 3")
                blocks.append("\n".join(rows))
        return "\n\n".join(blocks)
