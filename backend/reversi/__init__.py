"""Reversi: rules engine, turn controller and two simple AI opponents."""

from .board import Board, BLACK, WHITE, EMPTY, SIZE
from .config import AIStrategy, GameConfig
from .game import GameController, GameListener, GameOutcome, Phase
from .rules import apply_move, captures_for, has_legal_move, legal_moves

__all__ = [
    "AIStrategy",
    "BLACK",
    "Board",
    "EMPTY",
    "GameConfig",
    "GameController",
    "GameListener",
    "GameOutcome",
    "Phase",
    "SIZE",
    "WHITE",
    "apply_move",
    "captures_for",
    "has_legal_move",
    "legal_moves",
]
