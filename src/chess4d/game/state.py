"""Game state — turn, phase, selection, move history and captures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from chess4d.core.board import Board
from chess4d.core.enums import Color, GameResult, PieceType
from chess4d.core.piece import Piece, piece_letter
from chess4d.core.rules import Rules
from chess4d.core.types import Coord
from chess4d.game.interfaces import GamePhase, MoveRejection


def _coord_text(coord: Coord) -> str:
    return "(" + ",".join(str(v) for v in coord) + ")"


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    from_coord: Coord
    to_coord: Coord
    piece_type: PieceType
    captured: PieceType | None
    player: Color

    @property
    def notation(self) -> str:
        """History text such as ``N(0,1,0,0)-(0,1,2,1)``; ``x`` marks a capture.

        Pawn moves carry no letter.
        """
        letter = ""
        if self.piece_type != PieceType.PAWN:
            letter = piece_letter(self.piece_type)
        sep = "-" if self.captured is None else "x"
        return letter + _coord_text(self.from_coord) + sep + _coord_text(self.to_coord)

    def as_dict(self) -> dict[str, Any]:
        return {
            "notation": self.notation,
            "from": list(self.from_coord),
            "to": list(self.to_coord),
            "piece": str(self.piece_type),
            "captured": str(self.captured) if self.captured is not None else None,
            "player": str(self.player),
        }


@dataclass(frozen=True, slots=True)
class PromotionNotice:
    """A pawn reached its last rank and waits for ``promote_pawn``."""

    position: Coord
    color: Color


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of :meth:`GameController.make_move`."""

    success: bool
    message: str | None = None
    reason: MoveRejection | None = None
    check: bool = False
    game_over: bool = False
    winner: Color | None = None
    stalemate: bool = False
    promotion: PromotionNotice | None = None
    record: MoveRecord | None = None
    captured: Piece | None = None

    @classmethod
    def rejected(cls, reason: MoveRejection, message: str) -> MoveOutcome:
        return cls(success=False, message=message, reason=reason)


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Read-only view of the game handed to renderers."""

    current_player: Color
    game_over: bool
    winner: Color | None
    in_check: bool
    selected_piece: Coord | None
    move_history: tuple[MoveRecord, ...]
    captured_pieces: dict[Color, tuple[Piece, ...]]

    def as_dict(self) -> dict[str, Any]:
        """Plain-primitive form: colors and kinds as names, coords as lists."""
        return {
            "current_player": str(self.current_player),
            "game_over": self.game_over,
            "winner": str(self.winner) if self.winner is not None else None,
            "in_check": self.in_check,
            "selected_piece": (
                list(self.selected_piece) if self.selected_piece is not None else None
            ),
            "move_history": [r.as_dict() for r in self.move_history],
            "captured_pieces": {
                str(color): [str(p.piece_type) for p in pieces]
                for color, pieces in self.captured_pieces.items()
            },
        }


def _empty_captures() -> dict[Color, list[Piece]]:
    return {Color.WHITE: [], Color.BLACK: []}


@dataclass
class GameState:
    """Owns the board and everything that changes from move to move.

    This is a pure data/logic class: legality is the controller's job.
    """

    board: Board = field(init=False)
    current_player: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.AWAITING_SELECTION, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    selected: Coord | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    captured_pieces: dict[Color, list[Piece]] = field(
        default_factory=_empty_captures, init=False
    )

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self, board: Board | None = None, current_player: Color = Color.WHITE
    ) -> None:
        """Initialise (or reset) the game. Nothing from the previous game survives."""
        self.board = board if board is not None else Board.initial()
        self.current_player = current_player
        self.phase = GamePhase.AWAITING_SELECTION
        self.result = GameResult.IN_PROGRESS
        self.selected = None
        self.move_history = []
        self.captured_pieces = _empty_captures()

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, coord: Coord) -> None:
        self.selected = tuple(coord)
        self.phase = GamePhase.PIECE_SELECTED

    def clear_selection(self) -> None:
        self.selected = None
        if self.phase == GamePhase.PIECE_SELECTED:
            self.phase = GamePhase.AWAITING_SELECTION

    @property
    def selected_piece(self) -> Piece | None:
        """The selected piece, looked up afresh on the board."""
        if self.selected is None:
            return None
        piece = self.board.get(self.selected)
        if piece is None or piece.color != self.current_player:
            return None
        return piece

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(
        self, from_coord: Coord, to_coord: Coord
    ) -> tuple[MoveRecord, Piece | None]:
        """Play a validated move, flip the turn and return the history record.

        Caller is responsible for legality check.
        """
        mover = self.current_player
        piece = self.board.get(from_coord)
        if piece is None:
            raise ValueError(f"No piece on {from_coord!r}")

        from_coord = tuple(from_coord)
        to_coord = tuple(to_coord)
        captured = self.board.move_piece(from_coord, to_coord)
        if captured is not None:
            self.captured_pieces[mover].append(captured)

        record = MoveRecord(
            from_coord=from_coord,
            to_coord=to_coord,
            piece_type=piece.piece_type,
            captured=captured.piece_type if captured is not None else None,
            player=mover,
        )
        self.move_history.append(record)

        self.current_player = mover.opposite
        self.selected = None
        self.phase = GamePhase.AWAITING_SELECTION
        return record, captured

    def check_game_over(self) -> GameResult:
        """Evaluate the side to move and end the game if it has no safe move."""
        result = Rules.game_result(self.board, self.current_player)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.selected = None
            self.phase = GamePhase.GAME_OVER
        return result

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Color | None:
        if self.result == GameResult.WHITE_WINS:
            return Color.WHITE
        if self.result == GameResult.BLACK_WINS:
            return Color.BLACK
        return None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            current_player=self.current_player,
            game_over=self.game_over,
            winner=self.winner,
            in_check=Rules.is_in_check(self.board, self.current_player),
            selected_piece=self.selected,
            move_history=tuple(self.move_history),
            captured_pieces={
                color: tuple(p.clone() for p in pieces)
                for color, pieces in self.captured_pieces.items()
            },
        )
