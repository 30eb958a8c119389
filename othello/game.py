from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

BOARD_SIZE = 8
FILES = "abcdefgh"

DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class Side(Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> "Side":
        return Side.WHITE if self is Side.BLACK else Side.BLACK

    @property
    def symbol(self) -> str:
        return "B" if self is Side.BLACK else "W"


_SYMBOLS: Dict[str, Optional[Side]] = {"B": Side.BLACK, "W": Side.WHITE, ".": None}


def square_index(row: int, col: int) -> int:
    return row * BOARD_SIZE + col


@dataclass(frozen=True)
class Move:
    """A disc placement together with the opponent discs it flips."""

    square: int
    side: Side
    flips: Tuple[int, ...] = ()

    @property
    def row(self) -> int:
        return self.square // BOARD_SIZE

    @property
    def col(self) -> int:
        return self.square % BOARD_SIZE

    @property
    def notation(self) -> str:
        return f"{FILES[self.col]}{self.row + 1}"

    @staticmethod
    def parse_square(notation: str) -> int:
        if not isinstance(notation, str):
            raise ValueError(f"Invalid square: {notation!r}")
        text = notation.strip().lower()
        if len(text) != 2 or text[0] not in FILES or not text[1].isdigit():
            raise ValueError(f"Invalid square: {notation!r}")
        row = int(text[1]) - 1
        if not 0 <= row < BOARD_SIZE:
            raise ValueError(f"Invalid square: {notation!r}")
        return square_index(row, FILES.index(text[0]))

    def __str__(self) -> str:
        return self.notation


@dataclass(frozen=True)
class GameState:
    """Immutable board position plus the side to move.

    Cells are stored row-major from a1 (index 0) to h8 (index 63).
    """

    cells: Tuple[Optional[Side], ...]
    to_move: Side = Side.BLACK

    @classmethod
    def initial(cls) -> "GameState":
        cells: List[Optional[Side]] = [None] * (BOARD_SIZE * BOARD_SIZE)
        cells[square_index(3, 3)] = Side.WHITE
        cells[square_index(4, 4)] = Side.WHITE
        cells[square_index(3, 4)] = Side.BLACK
        cells[square_index(4, 3)] = Side.BLACK
        return cls(tuple(cells), Side.BLACK)

    @classmethod
    def from_rows(cls, rows: Sequence[str], to_move: Side = Side.BLACK) -> "GameState":
        """Build a position from eight strings of ``B``, ``W`` and ``.``, rank 1 first."""
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        cells: List[Optional[Side]] = []
        for row in rows:
            row = row.replace(" ", "")
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Bad row: {row!r}")
            for ch in row.upper():
                if ch not in _SYMBOLS:
                    raise ValueError(f"Bad cell {ch!r} in row {row!r}")
                cells.append(_SYMBOLS[ch])
        return cls(tuple(cells), to_move)

    def to_rows(self) -> List[str]:
        return [
            "".join(cell.symbol if cell else "." for cell in self.cells[r * BOARD_SIZE:(r + 1) * BOARD_SIZE])
            for r in range(BOARD_SIZE)
        ]

    def count(self, side: Side) -> int:
        return sum(1 for cell in self.cells if cell is side)

    def _flips_for(self, square: int, side: Side) -> Tuple[int, ...]:
        if self.cells[square] is not None:
            return ()
        row, col = divmod(square, BOARD_SIZE)
        flips: List[int] = []
        for dr, dc in DIRECTIONS:
            run: List[int] = []
            r, c = row + dr, col + dc
            while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
                cell = self.cells[square_index(r, c)]
                if cell is side.opponent:
                    run.append(square_index(r, c))
                elif cell is side:
                    flips.extend(run)
                    break
                else:
                    break
                r, c = r + dr, c + dc
        return tuple(flips)

    def legal_moves(self, side: Optional[Side] = None) -> List[Move]:
        """Legal placements for ``side`` (default: side to move), row-major order."""
        side = side or self.to_move
        moves: List[Move] = []
        for square in range(BOARD_SIZE * BOARD_SIZE):
            flips = self._flips_for(square, side)
            if flips:
                moves.append(Move(square, side, flips))
        return moves

    def has_legal_move(self, side: Side) -> bool:
        return any(self._flips_for(sq, side) for sq in range(BOARD_SIZE * BOARD_SIZE))

    def apply(self, move: Move) -> "GameState":
        cells = list(self.cells)
        cells[move.square] = move.side
        for sq in move.flips:
            cells[sq] = move.side
        return GameState(tuple(cells), move.side.opponent)

    def passed(self) -> "GameState":
        return GameState(self.cells, self.to_move.opponent)

    def is_game_over(self) -> bool:
        return not self.has_legal_move(Side.BLACK) and not self.has_legal_move(Side.WHITE)

    def winner(self) -> Optional[Side]:
        black, white = self.count(Side.BLACK), self.count(Side.WHITE)
        if black == white:
            return None
        return Side.BLACK if black > white else Side.WHITE


class OthelloRules:
    """Move generation and application used by the search."""

    def legal_moves(self, state: GameState, side: Side) -> List[Move]:
        return state.legal_moves(side)

    def apply_move(self, state: GameState, move: Move) -> GameState:
        return state.apply(move)


@dataclass
class Game:
    """Mutable game orchestration for the web layer.

    Owns the current position and the move history, and hands the turn over
    automatically when the side to move has no legal placement.
    """

    state: GameState = field(default_factory=GameState.initial)
    history: List[str] = field(default_factory=list)

    def reset(self, state: Optional[GameState] = None) -> None:
        self.state = state or GameState.initial()
        self.history = []
        self._skip_forced_passes()

    @property
    def turn(self) -> Side:
        return self.state.to_move

    def get_legal_moves(self) -> List[str]:
        return [m.notation for m in self.state.legal_moves()]

    def is_game_over(self) -> bool:
        return self.state.is_game_over()

    def get_result(self) -> Optional[str]:
        if not self.is_game_over():
            return None
        winner = self.state.winner()
        return winner.value if winner else "draw"

    def play(self, notation: str) -> Move:
        square = Move.parse_square(notation)
        for move in self.state.legal_moves():
            if move.square == square:
                self.push(move)
                return move
        raise ValueError(f"Illegal move for {self.turn.value}: {notation}")

    def push(self, move: Move) -> None:
        if move.side is not self.turn:
            raise ValueError(f"It is {self.turn.value}'s turn")
        self.state = self.state.apply(move)
        self.history.append(move.notation)
        self._skip_forced_passes()

    def _skip_forced_passes(self) -> None:
        if self.is_game_over():
            return
        if not self.state.has_legal_move(self.turn):
            self.history.append("pass")
            self.state = self.state.passed()

    def snapshot(self) -> Dict[str, object]:
        return {
            "board": self.state.to_rows(),
            "turn": self.turn.value,
            "legal_moves": self.get_legal_moves(),
            "game_over": self.is_game_over(),
            "result": self.get_result(),
            "score": {
                Side.BLACK.value: self.state.count(Side.BLACK),
                Side.WHITE.value: self.state.count(Side.WHITE),
            },
            "last_move": self.history[-1] if self.history else None,
            "history": list(self.history),
        }
