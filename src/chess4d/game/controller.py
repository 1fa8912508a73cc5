"""GameController — the central orchestrator of a 4D chess game.

Coordinates: Board, GameState, Rules.
Emits events via simple callbacks so a renderer / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chess4d.core.board import Board
from chess4d.core.enums import Color, GameResult, PieceType
from chess4d.core.move_generator import is_promotion_square
from chess4d.core.piece import Piece
from chess4d.core.rules import Rules
from chess4d.core.types import Coord, coord_name
from chess4d.game.interfaces import GamePhase, IGameController, MoveRejection
from chess4d.game.state import (
    GameSnapshot,
    GameState,
    MoveOutcome,
    MoveRecord,
    PromotionNotice,
)

_LOGGER = logging.getLogger(__name__)

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, MoveOutcome], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Runs a single game: selection, check-safe move filtering, move
    execution, promotion and end-of-game detection.

    Every rule violation is reported as a return value; nothing here raises
    for bad input from the renderer.  All calls are synchronous and meant to
    be made from one thread.
    """

    __slots__ = ("_state", "events")

    def __init__(
        self, board: Board | None = None, current_player: Color = Color.WHITE
    ) -> None:
        self._state = GameState()
        self._state.setup(board, current_player)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def current_player(self) -> Color:
        return self._state.current_player

    @property
    def selected_piece(self) -> Piece | None:
        return self._state.selected_piece

    # ── IGameController impl ─────────────────────────────────────────────

    def select_piece(self, coord: Coord) -> Piece | None:
        piece = self._state.board.get(coord)
        if (
            self._state.game_over
            or piece is None
            or piece.color != self._state.current_player
        ):
            _LOGGER.debug("Selection refused at %s", coord)
            self.clear_selection()
            return None

        was_selected = self._state.phase == GamePhase.PIECE_SELECTED
        self._state.select(coord)
        _LOGGER.debug("Selected %s on %s", piece.piece_type, coord_name(piece.position))
        if not was_selected:
            self._emit_phase(GamePhase.PIECE_SELECTED)
        return piece

    def clear_selection(self) -> None:
        had_selection = self._state.phase == GamePhase.PIECE_SELECTED
        self._state.clear_selection()
        if had_selection:
            self._emit_phase(GamePhase.AWAITING_SELECTION)

    def valid_moves_for_selected(self) -> list[Coord]:
        piece = self._state.selected_piece
        if piece is None:
            return []
        return Rules.safe_moves(self._state.board, piece)

    def make_move(self, target: Coord) -> MoveOutcome:
        if self._state.game_over:
            return MoveOutcome.rejected(MoveRejection.GAME_OVER, "Game is over")

        piece = self._state.selected_piece
        if piece is None:
            return MoveOutcome.rejected(
                MoveRejection.NO_SELECTION, "No piece selected"
            )

        target = tuple(target)
        if target not in self.valid_moves_for_selected():
            _LOGGER.debug(
                "Rejected %s %s -> %s",
                piece.piece_type,
                coord_name(piece.position),
                target,
            )
            return MoveOutcome.rejected(MoveRejection.ILLEGAL_MOVE, "Invalid move")

        record, captured = self._state.apply_move(piece.position, target)
        _LOGGER.debug(
            "%s %s %s -> %s%s",
            record.player,
            record.piece_type,
            coord_name(record.from_coord),
            coord_name(record.to_coord),
            f" x {record.captured}" if record.captured is not None else "",
        )

        moved = self._state.board.get(target)
        promotion: PromotionNotice | None = None
        if (
            moved is not None
            and moved.piece_type == PieceType.PAWN
            and is_promotion_square(moved.color, target)
        ):
            promotion = PromotionNotice(position=target, color=moved.color)

        outcome = self._conclude_move(record, captured, promotion)
        self._emit_move(record, outcome)
        if outcome.game_over:
            self._emit_game_over(self._state.result)
        else:
            self._emit_phase(GamePhase.AWAITING_SELECTION)
        return outcome

    def promote_pawn(self, coord: Coord, new_kind: PieceType | str) -> bool:
        pawn = self._state.board.get(coord)
        if pawn is None or pawn.piece_type != PieceType.PAWN:
            return False
        try:
            kind = PieceType.parse(new_kind)
        except ValueError:
            return False
        if kind not in PROMOTION_TYPES:
            return False

        promoted = Piece(kind, pawn.color, has_moved=True)
        self._state.board.set(coord, promoted)
        _LOGGER.info(
            "%s pawn on %s promoted to %s", pawn.color, coord_name(coord), kind
        )

        # The new piece may have changed the side to move's fate.
        if not self._state.game_over and (
            self._state.check_game_over() != GameResult.IN_PROGRESS
        ):
            self._emit_game_over(self._state.result)
        return True

    def reset(self) -> None:
        self.load_position(None)
        _LOGGER.info("Game reset")

    def get_state(self) -> GameSnapshot:
        return self._state.snapshot()

    # ── Setup ────────────────────────────────────────────────────────────

    def load_position(
        self, board: Board | None, current_player: Color = Color.WHITE
    ) -> None:
        """Start over from *board* (``None`` = starting position)."""
        self._state = GameState()
        self._state.setup(board, current_player)
        self._emit_phase(GamePhase.AWAITING_SELECTION)

    # ── Rule queries ─────────────────────────────────────────────────────

    def is_in_check(self, color: Color, board: Board | None = None) -> bool:
        return Rules.is_in_check(board if board is not None else self.board, color)

    def is_checkmate(self, color: Color) -> bool:
        return Rules.is_checkmate(self.board, color)

    def is_stalemate(self, color: Color) -> bool:
        return Rules.is_stalemate(self.board, color)

    def would_be_in_check(self, piece: Piece, target: Coord) -> bool:
        return Rules.would_be_in_check(self.board, piece, target)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _conclude_move(
        self,
        record: MoveRecord,
        captured: Piece | None,
        promotion: PromotionNotice | None,
    ) -> MoveOutcome:
        """Evaluate the new side to move and build the outcome."""
        result = self._state.check_game_over()

        if result in (GameResult.WHITE_WINS, GameResult.BLACK_WINS):
            winner = self._state.winner
            _LOGGER.info(
                "Checkmate, %s wins after %d plies", winner, self._state.ply_count
            )
            return MoveOutcome(
                success=True,
                message=f"Checkmate! {winner} wins!",
                check=True,
                game_over=True,
                winner=winner,
                promotion=promotion,
                record=record,
                captured=captured,
            )

        if result == GameResult.DRAW:
            _LOGGER.info("Stalemate after %d plies", self._state.ply_count)
            return MoveOutcome(
                success=True,
                message="Stalemate!",
                game_over=True,
                stalemate=True,
                promotion=promotion,
                record=record,
                captured=captured,
            )

        in_check = Rules.is_in_check(self._state.board, self._state.current_player)
        return MoveOutcome(
            success=True,
            message="Check!" if in_check else None,
            check=in_check,
            promotion=promotion,
            record=record,
            captured=captured,
        )

    def _emit_move(self, record: MoveRecord, outcome: MoveOutcome) -> None:
        for cb in self.events.on_move:
            cb(record, outcome)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
