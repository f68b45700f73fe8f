"""
Turn controller for a single Reversi game.

The controller owns the board and whose turn it is. It applies moves through
the rules engine, settles forced passes and game over after every move, and
reports what happened to a listener. It never sleeps or schedules anything;
pacing is up to whoever listens.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .ai import get_strategy
from .board import Board, Coord, BLACK, WHITE, opponent, player_name
from .config import GameConfig
from .rules import LegalMoves, apply_move, legal_moves

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    AWAITING_HUMAN = "awaiting_human"
    AWAITING_AI = "awaiting_ai"
    TRANSITIONING = "transitioning"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameOutcome:
    black: int
    white: int

    @property
    def winner(self) -> int:
        """BLACK, WHITE, or 0 for a draw"""
        if self.black > self.white:
            return BLACK
        if self.white > self.black:
            return WHITE
        return 0

    @property
    def total(self) -> int:
        return self.black + self.white


class GameListener:
    """Receives game events. Override what you need; the rest are no-ops."""

    def on_board_changed(self, snapshot: Tuple[Tuple[int, ...], ...]) -> None:
        pass

    def on_legal_moves_available(self, player: int, moves: LegalMoves) -> None:
        pass

    def on_move_applied(self, player: int, move: Coord, captured: List[Coord]) -> None:
        pass

    def on_pass(self, player: int) -> None:
        pass

    def on_game_over(self, outcome: GameOutcome) -> None:
        pass


class GameController:
    def __init__(self, config: Optional[GameConfig] = None,
                 listener: Optional[GameListener] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.listener = listener or GameListener()
        self.rng = rng or random.Random(self.config.seed)
        self.strategy = get_strategy(self.config.ai_strategy)

        self._board = Board()
        self.current = BLACK
        self.phase = Phase.TRANSITIONING
        self.outcome: Optional[GameOutcome] = None
        self.last_pass: Optional[int] = None
        self.reset()

    # -- state ---------------------------------------------------------

    @property
    def board(self) -> Board:
        """A copy; mutate the game only through play() / play_ai()"""
        return self._board.copy()

    def is_ai(self, player: int) -> bool:
        return self.config.opponent_is_ai and player == self.config.ai_player

    def legal_moves(self) -> LegalMoves:
        """Fresh legal moves for the current player ({} once the game is over)"""
        if self.phase == Phase.GAME_OVER:
            return {}
        return legal_moves(self._board, self.current)

    def score(self) -> Tuple[int, int]:
        return self._board.count()

    @property
    def is_over(self) -> bool:
        return self.phase == Phase.GAME_OVER

    # -- commands ------------------------------------------------------

    def reset(self):
        """Back to the starting position with black to move"""
        self._board.reset()
        self.outcome = None
        self.last_pass = None
        self.phase = Phase.TRANSITIONING
        logger.debug("New game: ai=%s ai_player=%s strategy=%s",
                     self.config.opponent_is_ai, player_name(self.config.ai_player),
                     self.config.ai_strategy.value)
        self.listener.on_board_changed(self._board.snapshot())
        self._settle(BLACK)

    def load_position(self, board: Board, player: int):
        """Replace the board and settle the turn for ``player``"""
        self._board = board.copy()
        self.outcome = None
        self.last_pass = None
        self.phase = Phase.TRANSITIONING
        self.listener.on_board_changed(self._board.snapshot())
        self._settle(player)

    def play(self, r: int, c: int) -> bool:
        """Commit a human move. Anything not currently offered is ignored."""
        if self.phase != Phase.AWAITING_HUMAN:
            return False
        moves = legal_moves(self._board, self.current)
        if (r, c) not in moves:
            return False
        self._commit(self.current, (r, c), moves[(r, c)])
        return True

    def play_ai(self) -> Optional[Coord]:
        """Let the AI make one move if it is the AI's turn"""
        if self.phase != Phase.AWAITING_AI:
            return None
        moves = legal_moves(self._board, self.current)
        move = self.strategy(moves, self.rng)
        self._commit(self.current, move, moves[move])
        return move

    def run_ai_turns(self) -> List[Coord]:
        """Play AI moves until a human is to move or the game ends"""
        played = []
        while self.phase == Phase.AWAITING_AI:
            played.append(self.play_ai())
        return played

    # -- internals -----------------------------------------------------

    def _commit(self, player: int, move: Coord, captures: List[Coord]):
        self.phase = Phase.TRANSITIONING
        self.last_pass = None
        flips = apply_move(self._board, player, move, captures)
        logger.debug("%s plays %s flipping %d", player_name(player), move, len(flips))
        self.listener.on_move_applied(player, move, list(flips))
        self.listener.on_board_changed(self._board.snapshot())
        self._settle(opponent(player))

    def _settle(self, player: int):
        """Give the turn to ``player``, or pass it back, or end the game"""
        moves = legal_moves(self._board, player)
        if not moves:
            other = opponent(player)
            moves = legal_moves(self._board, other)
            if not moves:
                self._finish()
                return
            logger.debug("%s has no legal move and passes", player_name(player))
            self.last_pass = player
            self.listener.on_pass(player)
            player = other

        self.current = player
        if self.is_ai(player):
            self.phase = Phase.AWAITING_AI
        else:
            self.phase = Phase.AWAITING_HUMAN
            self.listener.on_legal_moves_available(player, moves)

    def _finish(self):
        black, white = self._board.count()
        self.outcome = GameOutcome(black=black, white=white)
        self.phase = Phase.GAME_OVER
        logger.info("Game over: black %d, white %d", black, white)
        self.listener.on_game_over(self.outcome)
