from typing import Dict, List, Optional

from .board import Board, Coord, EMPTY, SIZE, in_bounds, opponent, player_name
from .errors import IllegalMoveError

LegalMoves = Dict[Coord, List[Coord]]

DIRECTIONS = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]


def _line_in_direction(board: Board, r: int, c: int, dr: int, dc: int, player: int) -> List[Coord]:
    """Opponent pieces bracketed by ``player`` along one ray, or []"""
    other = opponent(player)
    line = []
    r += dr
    c += dc

    # Collect the run of opponent pieces
    while in_bounds(r, c) and board.grid[r][c] == other:
        line.append((r, c))
        r += dr
        c += dc

    # The run only counts if it ends on our own piece
    if line and in_bounds(r, c) and board.grid[r][c] == player:
        return line
    return []


def captures_for(board: Board, r: int, c: int, player: int) -> List[Coord]:
    """Pieces flipped by ``player`` playing at (r, c); empty if illegal"""
    if not in_bounds(r, c) or board.grid[r][c] != EMPTY:
        return []

    captured = []
    for dr, dc in DIRECTIONS:
        captured.extend(_line_in_direction(board, r, c, dr, dc, player))
    return captured


def legal_moves(board: Board, player: int) -> LegalMoves:
    """Map every legal square for ``player`` to the pieces it captures.

    Keys are inserted in row-major order. The result describes this board
    only and must be recomputed after any mutation.
    """
    moves: LegalMoves = {}
    for r in range(SIZE):
        for c in range(SIZE):
            captured = captures_for(board, r, c, player)
            if captured:
                moves[(r, c)] = captured
    return moves


def has_legal_move(board: Board, player: int) -> bool:
    for r in range(SIZE):
        for c in range(SIZE):
            if board.grid[r][c] == EMPTY and captures_for(board, r, c, player):
                return True
    return False


def apply_move(board: Board, player: int, coord: Coord,
               captures: Optional[List[Coord]] = None) -> List[Coord]:
    """Place ``player`` at ``coord`` and flip the captured pieces in place.

    Captures are recomputed from the board; a caller-supplied list must
    match them exactly or the move is treated as stale. Returns the flips.
    """
    r, c = coord
    flips = captures_for(board, r, c, player)
    if not flips:
        raise IllegalMoveError(
            "Move captures nothing",
            context={"r": r, "c": c, "player": player_name(player)},
        )
    if captures is not None and sorted(tuple(p) for p in captures) != sorted(flips):
        raise IllegalMoveError(
            "Capture list does not match the board",
            context={"r": r, "c": c, "player": player_name(player)},
        )

    board.grid[r][c] = player
    for fr, fc in flips:
        board.grid[fr][fc] = player
    return flips
