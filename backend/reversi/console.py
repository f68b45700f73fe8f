# Terminal front end: prints the board and reads moves from stdin
from typing import Callable, List, Optional, Tuple

from .board import Coord, BLACK, WHITE, SIZE, player_name
from .game import GameController, GameListener, GameOutcome
from .rules import LegalMoves

BLACK_STONE = "●"      # U+25CF
WHITE_STONE = "○"      # U+25CB
EMPTY_POINT = "·"      # U+00B7
HINT_POINT = "*"

COLUMNS = "abcdefgh"


def board_to_lines(grid, hints: Optional[LegalMoves] = None) -> List[str]:
    """Render a grid (rows of ints) as text, marking ``hints`` with *"""
    hints = hints or {}
    lines = ["  " + " ".join(COLUMNS[:SIZE])]
    for r in range(SIZE):
        row = [
            BLACK_STONE if grid[r][c] == BLACK else
            WHITE_STONE if grid[r][c] == WHITE else
            HINT_POINT if (r, c) in hints else
            EMPTY_POINT
            for c in range(SIZE)
        ]
        lines.append(f"{r + 1} " + " ".join(row))
    return lines


def parse_move(text: str) -> Optional[Coord]:
    """Accept ``d3`` (column letter, row number) or ``2 3`` (row col, 0-based)"""
    text = text.strip().lower()
    if len(text) == 2 and text[0] in COLUMNS and text[1].isdigit():
        r, c = int(text[1]) - 1, COLUMNS.index(text[0])
    else:
        parts = text.replace(",", " ").split()
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            return None
        r, c = int(parts[0]), int(parts[1])
    if 0 <= r < SIZE and 0 <= c < SIZE:
        return r, c
    return None


def format_move(move: Coord) -> str:
    return f"{COLUMNS[move[1]]}{move[0] + 1}"


class ConsoleView(GameListener):
    def __init__(self, out: Callable[..., None] = print):
        self.out = out
        self.grid: Tuple[Tuple[int, ...], ...] = ()
        self.hints: LegalMoves = {}

    def on_board_changed(self, snapshot):
        self.grid = snapshot
        self.hints = {}

    def on_legal_moves_available(self, player, moves):
        self.hints = moves

    def on_move_applied(self, player, move, captured):
        self.out(f"{player_name(player)} plays {format_move(move)}, flipping {len(captured)}")

    def on_pass(self, player):
        self.out(f"{player_name(player)} has no legal move and passes")

    def on_game_over(self, outcome: GameOutcome):
        self.show()
        if outcome.winner == 0:
            result = "Draw"
        else:
            result = f"{player_name(outcome.winner).capitalize()} wins"
        self.out(f"Game over. Black {outcome.black} - White {outcome.white}. {result}.")

    def show(self, header: Optional[str] = None):
        if header:
            self.out(header)
        for line in board_to_lines(self.grid, self.hints):
            self.out(line)
        self.out()


def run(game: GameController, view: ConsoleView, read: Optional[Callable[[str], str]] = None):
    """Play until game over or end of input"""
    read = read or input
    while not game.is_over:
        game.run_ai_turns()
        if game.is_over:
            break

        black, white = game.score()
        view.show(f"Black {black} - White {white}   {player_name(game.current)} to move")
        try:
            text = read("move> ")
        except EOFError:
            break
        if text.strip().lower() in ("q", "quit", "exit"):
            break
        if text.strip().lower() in ("r", "reset", "new"):
            game.reset()
            continue

        move = parse_move(text)
        if move is None or not game.play(*move):
            view.out("Not a legal move")
