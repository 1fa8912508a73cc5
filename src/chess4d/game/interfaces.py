"""Abstract interfaces for the game layer.

A renderer is written against :class:`IGameController` and never touches
engine internals.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chess4d.core.enums import PieceType
    from chess4d.core.piece import Piece
    from chess4d.core.types import Coord
    from chess4d.game.state import GameSnapshot, MoveOutcome


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    AWAITING_SELECTION = auto()
    PIECE_SELECTED = auto()
    GAME_OVER = auto()


class MoveRejection(IntEnum):
    """Why :meth:`IGameController.make_move` refused a move."""

    NO_SELECTION = auto()
    GAME_OVER = auto()
    ILLEGAL_MOVE = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def select_piece(self, coord: Coord) -> Piece | None:
        """Select the current player's piece on *coord*, or clear the selection."""

    @abstractmethod
    def clear_selection(self) -> None:
        """Drop the current selection, if any."""

    @abstractmethod
    def valid_moves_for_selected(self) -> list[Coord]:
        """Check-safe targets for the selected piece."""

    @abstractmethod
    def make_move(self, target: Coord) -> MoveOutcome:
        """Move the selected piece to *target*."""

    @abstractmethod
    def promote_pawn(self, coord: Coord, new_kind: PieceType | str) -> bool:
        """Replace the pawn on *coord*. Returns True on success."""

    @abstractmethod
    def reset(self) -> None:
        """Discard the game and set up the starting position."""

    @abstractmethod
    def get_state(self) -> GameSnapshot:
        """Read-only snapshot for rendering."""
