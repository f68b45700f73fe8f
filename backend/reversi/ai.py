import random
from typing import Callable, Optional

from .board import Coord
from .config import AIStrategy
from .errors import NoLegalMoveError
from .rules import LegalMoves

Strategy = Callable[[LegalMoves, random.Random], Coord]


def choose_basic(moves: LegalMoves, rng: Optional[random.Random] = None) -> Coord:
    """Pick a legal square uniformly at random"""
    if not moves:
        raise NoLegalMoveError("Basic strategy called with no legal moves")
    rng = rng or random.Random()
    keys = list(moves.keys())
    return keys[rng.randrange(len(keys))]


def choose_advanced(moves: LegalMoves, rng: Optional[random.Random] = None) -> Coord:
    """Greedy: the square that flips the most pieces right now.

    Ties keep the first square in row-major order. ``rng`` is unused and
    only accepted so both strategies share a signature.
    """
    if not moves:
        raise NoLegalMoveError("Advanced strategy called with no legal moves")

    best_move = None
    best_count = -1
    for coord in sorted(moves):
        if len(moves[coord]) > best_count:
            best_count = len(moves[coord])
            best_move = coord
    return best_move


STRATEGIES = {
    AIStrategy.BASIC: choose_basic,
    AIStrategy.ADVANCED: choose_advanced,
}


def get_strategy(name: AIStrategy) -> Strategy:
    return STRATEGIES[AIStrategy(name)]
