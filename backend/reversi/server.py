import logging
from typing import List, Optional, Tuple

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .ai import STRATEGIES
from .board import Coord, SIZE
from .config import GameConfig, load_config
from .errors import ReversiError
from .game import GameController, GameListener, Phase
from .rules import LegalMoves

logger = logging.getLogger(__name__)


class Move(BaseModel):
    r: int
    c: int


class MoveRequest(BaseModel):
    r: int = Field(ge=0, lt=SIZE)
    c: int = Field(ge=0, lt=SIZE)


class LegalMove(BaseModel):
    r: int
    c: int
    flips: List[List[int]]


class GameState(BaseModel):
    grid: List[List[int]]
    to_move: int
    phase: Phase
    black: int
    white: int
    legal: List[List[int]]
    moves: List[LegalMove]
    terminal: bool
    winner: Optional[int]
    last_move: Optional[Move] = None
    last_flips: List[List[int]] = []
    passed: Optional[int] = None
    accepted: bool = True


class Recorder(GameListener):
    """Keeps the latest events so each response can describe them"""

    def __init__(self):
        self.clear()

    def clear(self):
        self.last_move: Optional[Coord] = None
        self.last_flips: List[Coord] = []
        self.human_moves: LegalMoves = {}
        self._move_applied = False

    def on_board_changed(self, snapshot: Tuple[Tuple[int, ...], ...]) -> None:
        # A change without a move is a reset or a loaded position
        if not self._move_applied:
            self.last_move = None
            self.last_flips = []
        self._move_applied = False
        self.human_moves = {}

    def on_legal_moves_available(self, player: int, moves: LegalMoves) -> None:
        self.human_moves = moves

    def on_move_applied(self, player: int, move: Coord, captured: List[Coord]) -> None:
        self.last_move = move
        self.last_flips = captured
        self._move_applied = True


def create_app(config: Optional[GameConfig] = None) -> FastAPI:
    config = config or load_config()
    recorder = Recorder()
    game = GameController(config, listener=recorder)

    app = FastAPI(title="Reversi")

    # Enable CORS for local development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Allow all origins for local dev
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.game = game
    app.state.recorder = recorder

    def to_state(accepted: bool = True) -> GameState:
        """Convert controller + recorded events to GameState"""
        black_count, white_count = game.score()
        legal = [[0 for _ in range(SIZE)] for _ in range(SIZE)]
        moves = []
        for (r, c), flips in recorder.human_moves.items():
            legal[r][c] = 1
            moves.append(LegalMove(r=r, c=c, flips=[[fr, fc] for fr, fc in flips]))

        last_move = None
        if recorder.last_move is not None:
            last_move = Move(r=recorder.last_move[0], c=recorder.last_move[1])

        return GameState(
            grid=game.board.rows(),
            to_move=game.current,
            phase=game.phase,
            black=black_count,
            white=white_count,
            legal=legal,
            moves=moves,
            terminal=game.is_over,
            winner=game.outcome.winner if game.outcome else None,
            last_move=last_move,
            last_flips=[[fr, fc] for fr, fc in recorder.last_flips],
            passed=game.last_pass,
            accepted=accepted,
        )

    @app.post("/new", response_model=GameState)
    async def new_game():
        """Start a new game with the startup configuration"""
        game.reset()
        return to_state()

    @app.get("/state", response_model=GameState)
    async def get_state():
        """Get current game state"""
        return to_state()

    @app.post("/move", response_model=GameState)
    async def make_move(move: MoveRequest):
        """Commit a human move; anything not offered is a no-op"""
        accepted = game.play(move.r, move.c)
        if not accepted:
            logger.debug("Ignored move (%d, %d) in phase %s", move.r, move.c, game.phase.value)
        return to_state(accepted)

    @app.post("/ai_move", response_model=GameState)
    async def ai_move():
        """AI plays for the side to move"""
        if game.is_over:
            raise HTTPException(status_code=400, detail="Game is over")
        if game.phase != Phase.AWAITING_AI:
            raise HTTPException(status_code=400, detail="Not the AI's turn")

        try:
            game.play_ai()
        except ReversiError as e:
            logger.error("AI move failed: %s", e, exc_info=True)
            raise HTTPException(status_code=400, detail=e.to_dict())
        return to_state()

    @app.get("/info")
    async def get_info():
        """Get engine information"""
        return {
            "engine": "Direction-scan legality + greedy/random policies",
            "board_size": SIZE,
            "opponent_is_ai": config.opponent_is_ai,
            "ai_player": config.ai_player,
            "ai_strategy": config.ai_strategy.value,
            "strategies": [s.value for s in STRATEGIES],
        }

    return app
