import random

from reversi.board import Board, BLACK, WHITE, EMPTY
from reversi.config import AIStrategy, GameConfig
from reversi.game import GameController, GameOutcome, Phase


def test_new_game(two_humans):
    game = GameController(two_humans)
    assert game.board == Board()
    assert game.current == BLACK
    assert game.phase == Phase.AWAITING_HUMAN
    assert len(game.legal_moves()) == 4
    assert game.outcome is None


def test_turns_alternate(two_humans):
    game = GameController(two_humans)
    assert game.play(2, 3)
    assert game.current == WHITE
    assert game.phase == Phase.AWAITING_HUMAN
    assert game.score() == (4, 1)


def test_illegal_play_is_ignored(two_humans, listener):
    game = GameController(two_humans, listener=listener)
    before = len(listener.events)
    assert not game.play(0, 0)
    assert not game.play(3, 3)
    assert game.board == Board()
    assert game.current == BLACK
    assert len(listener.events) == before


def test_human_cannot_play_for_ai(vs_greedy_white):
    game = GameController(vs_greedy_white)
    assert game.play(2, 3)
    assert game.phase == Phase.AWAITING_AI
    board = game.board
    assert not game.play(2, 2)
    assert game.board == board


def test_greedy_ai_reply(vs_greedy_white):
    game = GameController(vs_greedy_white)
    assert game.play_ai() is None

    game.play(2, 3)
    # White's three replies each flip one piece; (2,2) comes first
    assert game.play_ai() == (2, 2)
    assert game.current == BLACK
    assert game.phase == Phase.AWAITING_HUMAN
    assert game.score() == (3, 3)


def test_ai_as_first_mover():
    config = GameConfig(ai_player=BLACK, ai_strategy=AIStrategy.ADVANCED)
    game = GameController(config)
    assert game.phase == Phase.AWAITING_AI
    assert game.legal_moves() != {}

    assert game.run_ai_turns() == [(2, 3)]
    assert game.current == WHITE
    assert game.phase == Phase.AWAITING_HUMAN


def test_forced_pass(two_humans, listener, black_blocked_board):
    game = GameController(two_humans, listener=listener)
    game.load_position(black_blocked_board, BLACK)

    assert game.current == WHITE
    assert game.last_pass == BLACK
    assert set(game.legal_moves()) == {(0, 2), (7, 2)}
    assert listener.of("pass") == [("pass", BLACK)]


def test_mover_plays_again_when_opponent_blocked(two_humans, listener, black_blocked_board):
    game = GameController(two_humans, listener=listener)
    game.load_position(black_blocked_board, BLACK)

    assert game.play(0, 2)
    # Black is still stuck, so white goes again
    assert game.current == WHITE
    assert game.phase == Phase.AWAITING_HUMAN
    assert game.last_pass == BLACK

    assert game.play(7, 2)
    assert game.phase == Phase.GAME_OVER
    assert game.outcome == GameOutcome(black=0, white=6)
    assert game.outcome.winner == WHITE


def test_ai_keeps_playing_through_passes(black_blocked_board):
    config = GameConfig(ai_player=WHITE, ai_strategy=AIStrategy.ADVANCED)
    game = GameController(config)
    game.load_position(black_blocked_board, BLACK)

    assert game.phase == Phase.AWAITING_AI
    assert game.run_ai_turns() == [(0, 2), (7, 2)]
    assert game.is_over


def test_game_over_on_full_board(two_humans, listener):
    board = Board.from_rows(["BBBBBBBB"] * 4 + ["WWWWWWWW"] * 4)
    game = GameController(two_humans, listener=listener)
    game.load_position(board, BLACK)

    assert game.phase == Phase.GAME_OVER
    assert game.outcome == GameOutcome(black=32, white=32)
    assert game.outcome.winner == 0
    assert game.outcome.total == board.occupied()
    assert listener.of("over") == [("over", game.outcome)]


def test_game_over_when_both_blocked(two_humans):
    board = Board.empty()
    board.set(0, 0, BLACK)
    board.set(0, 1, BLACK)
    board.set(7, 7, WHITE)
    game = GameController(two_humans)
    game.load_position(board, WHITE)

    assert game.is_over
    assert game.outcome.black + game.outcome.white == board.occupied()
    assert game.outcome.winner == BLACK
    assert game.legal_moves() == {}
    assert not game.play(0, 2)


def test_reset_after_moves(two_humans):
    game = GameController(two_humans)
    game.play(2, 3)
    game.play(2, 2)
    game.reset()
    assert game.board == Board()
    assert game.current == BLACK
    assert game.last_pass is None


def test_board_property_is_a_copy(two_humans):
    game = GameController(two_humans)
    board = game.board
    board.set(0, 0, BLACK)
    assert game.board.get(0, 0) == EMPTY


def test_listener_events_for_human_move(vs_greedy_white, listener):
    game = GameController(vs_greedy_white, listener=listener)
    assert [e[0] for e in listener.events] == ["board", "legal"]
    assert listener.events[1][1] == BLACK

    listener.events.clear()
    game.play(2, 3)
    assert [e[0] for e in listener.events] == ["move", "board"]
    assert listener.events[0][1:] == (BLACK, (2, 3), [(3, 3)])
    # Board snapshot is taken after the flips
    assert listener.events[1][1][3][3] == BLACK

    listener.events.clear()
    game.play_ai()
    kinds = [e[0] for e in listener.events]
    assert kinds == ["move", "board", "legal"]
    assert listener.events[2][1] == BLACK


def test_full_random_game_terminates(two_humans):
    rng = random.Random(99)
    game = GameController(two_humans)
    for _ in range(100):
        if game.is_over:
            break
        moves = list(game.legal_moves())
        assert moves
        before = game.board.occupied()
        assert game.play(*rng.choice(moves))
        assert game.board.occupied() == before + 1
    assert game.is_over
    assert game.outcome.total == game.board.occupied()


def test_seeded_basic_games_repeat():
    config = GameConfig(opponent_is_ai=True, ai_player=BLACK, seed=5)
    first = GameController(config)
    second = GameController(config)
    assert first.run_ai_turns() == second.run_ai_turns()
