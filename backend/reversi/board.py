from typing import List, Optional, Tuple, Sequence
import copy

# Constants
SIZE = 8
EMPTY = 0
BLACK = 1
WHITE = -1

Coord = Tuple[int, int]

_CELL_CHARS = {
    "B": BLACK, "X": BLACK,
    "W": WHITE, "O": WHITE,
    ".": EMPTY, "-": EMPTY,
}


def opponent(player: int) -> int:
    return -player


def player_name(player: int) -> str:
    if player == BLACK:
        return "black"
    if player == WHITE:
        return "white"
    return "empty"


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < SIZE and 0 <= c < SIZE


class Board:
    """Plain 8x8 occupancy grid. Rules live in ``reversi.rules``."""

    def __init__(self, grid: Optional[List[List[int]]] = None):
        if grid is not None:
            self.grid = copy.deepcopy(grid)
        else:
            self.grid = [[EMPTY for _ in range(SIZE)] for _ in range(SIZE)]
            self.reset()

    def reset(self):
        """Clear the grid and set the standard four-piece start"""
        for r in range(SIZE):
            for c in range(SIZE):
                self.grid[r][c] = EMPTY

        # D4 (3,3) = White, E5 (4,4) = White
        # E4 (3,4) = Black, D5 (4,3) = Black
        mid = SIZE // 2
        self.grid[mid - 1][mid - 1] = WHITE
        self.grid[mid][mid] = WHITE
        self.grid[mid - 1][mid] = BLACK
        self.grid[mid][mid - 1] = BLACK

    @classmethod
    def empty(cls) -> 'Board':
        return cls([[EMPTY for _ in range(SIZE)] for _ in range(SIZE)])

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """Build a board from 8 strings, e.g. ``"...WB..."``.

        ``B``/``X`` are black, ``W``/``O`` white, ``.``/``-`` empty.
        Whitespace inside a row is ignored.
        """
        cleaned = ["".join(row.split()) for row in rows]
        if len(cleaned) != SIZE or any(len(row) != SIZE for row in cleaned):
            raise ValueError(f"Expected {SIZE} rows of {SIZE} cells")

        board = cls.empty()
        for r, row in enumerate(cleaned):
            for c, ch in enumerate(row.upper()):
                if ch not in _CELL_CHARS:
                    raise ValueError(f"Unknown cell {ch!r} at ({r}, {c})")
                board.grid[r][c] = _CELL_CHARS[ch]
        return board

    def copy(self) -> 'Board':
        """Create a deep copy of the board"""
        return Board(self.grid)

    def get(self, r: int, c: int) -> int:
        return self.grid[r][c]

    def set(self, r: int, c: int, value: int):
        self.grid[r][c] = value

    def count(self) -> Tuple[int, int]:
        """Return (black_count, white_count)"""
        black_count = sum(1 for row in self.grid for cell in row if cell == BLACK)
        white_count = sum(1 for row in self.grid for cell in row if cell == WHITE)
        return black_count, white_count

    def occupied(self) -> int:
        return sum(self.count())

    def snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        """Immutable copy of the grid, safe to hand to listeners"""
        return tuple(tuple(row) for row in self.grid)

    def rows(self) -> List[List[int]]:
        return [list(row) for row in self.grid]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __repr__(self) -> str:
        chars = {BLACK: "B", WHITE: "W", EMPTY: "."}
        body = "/".join("".join(chars[cell] for cell in row) for row in self.grid)
        return f"Board({body})"
