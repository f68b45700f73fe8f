"""Shared fixtures for the reversi tests."""

import pytest

from reversi.board import Board
from reversi.config import AIStrategy, GameConfig
from reversi.game import GameListener


class RecordingListener(GameListener):
    def __init__(self):
        self.events = []

    def on_board_changed(self, snapshot):
        self.events.append(("board", snapshot))

    def on_legal_moves_available(self, player, moves):
        self.events.append(("legal", player, dict(moves)))

    def on_move_applied(self, player, move, captured):
        self.events.append(("move", player, move, list(captured)))

    def on_pass(self, player):
        self.events.append(("pass", player))

    def on_game_over(self, outcome):
        self.events.append(("over", outcome))

    def of(self, kind):
        return [e for e in self.events if e[0] == kind]


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def two_humans():
    return GameConfig(opponent_is_ai=False)


@pytest.fixture
def vs_greedy_white():
    return GameConfig(opponent_is_ai=True, ai_player=-1, ai_strategy=AIStrategy.ADVANCED)


@pytest.fixture
def black_blocked_board():
    """Black cannot move; white can take (0,2) or (7,2)."""
    return Board.from_rows([
        "WB......",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
        "WB......",
    ])
