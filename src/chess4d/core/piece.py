"""Piece record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chess4d.core import move_generator
from chess4d.core.enums import Color, PieceType
from chess4d.core.types import Coord

if TYPE_CHECKING:
    from chess4d.core.board import Board

# Per kind: white letter, white glyph, black glyph.  Black letters are lowercase.
_GLYPHS: dict[PieceType, tuple[str, str, str]] = {
    PieceType.PAWN: ("P", "♙", "♟"),
    PieceType.KNIGHT: ("N", "♘", "♞"),
    PieceType.BISHOP: ("B", "♗", "♝"),
    PieceType.ROOK: ("R", "♖", "♜"),
    PieceType.QUEEN: ("Q", "♕", "♛"),
    PieceType.KING: ("K", "♔", "♚"),
}

_LETTERS: dict[tuple[Color, PieceType], str] = {}
_UNICODE: dict[tuple[Color, PieceType], str] = {}
for _kind, (_letter, _white, _black) in _GLYPHS.items():
    _LETTERS[(Color.WHITE, _kind)] = _letter
    _LETTERS[(Color.BLACK, _kind)] = _letter.lower()
    _UNICODE[(Color.WHITE, _kind)] = _white
    _UNICODE[(Color.BLACK, _kind)] = _black

_BY_LETTER: dict[str, tuple[Color, PieceType]] = {v: k for k, v in _LETTERS.items()}


def piece_letter(piece_type: PieceType) -> str:
    """Uppercase letter for *piece_type*, e.g. ``'N'`` for a knight."""
    return _GLYPHS[piece_type][0]


@dataclass(slots=True)
class Piece:
    """A piece on the board.

    ``piece_type`` and ``color`` never change; promotion replaces the whole
    piece.  ``position`` is kept in sync by :class:`Board` and always equals
    the coordinate of the cell that holds the piece.
    """

    piece_type: PieceType
    color: Color
    position: Coord = (0, 0, 0, 0)
    has_moved: bool = False

    # ── Movement ─────────────────────────────────────────────────────────

    def valid_moves(self, board: Board) -> list[Coord]:
        """Pseudo-legal targets (own-king safety is not considered)."""
        return move_generator.pseudo_legal_moves(self, board)

    def can_move_to(self, board: Board, target: Coord) -> bool:
        return tuple(target) in self.valid_moves(board)

    # ── Copying ──────────────────────────────────────────────────────────

    def clone(self) -> Piece:
        return Piece(self.piece_type, self.color, self.position, self.has_moved)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Letter (uppercase = white, lowercase = black)."""
        return _LETTERS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, position: Coord = (0, 0, 0, 0)) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight."""
        try:
            color, kind = _BY_LETTER[char]
        except KeyError:
            raise ValueError(f"Unknown piece letter: {char!r}") from None
        return cls(kind, color, position)

    @property
    def symbol(self) -> str:
        """Glyph used by text renderers."""
        return _UNICODE[(self.color, self.piece_type)]
