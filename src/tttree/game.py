"""
TicTacToe game rules.

Board: 3x3 Board of Symbol values
  - X: first player (human), scored negatively
  - O: second player (AI), scored positively

Lines are checked row by row with the matching column (row 0, column 0,
row 1, column 1, ...), then the two diagonals; the first complete line wins.
"""

from enum import Enum
from typing import List, Optional

from .board import Board, Symbol
from .config import DEFAULT_CONFIG, GameConfig
from .errors import ConfigurationError, LogicError

# Winning lines as (row, col) triples, in scan order
WIN_LINES = [
    ((0, 0), (0, 1), (0, 2)), ((0, 0), (1, 0), (2, 0)),  # row 0, col 0
    ((1, 0), (1, 1), (1, 2)), ((0, 1), (1, 1), (2, 1)),  # row 1, col 1
    ((2, 0), (2, 1), (2, 2)), ((0, 2), (1, 2), (2, 2)),  # row 2, col 2
    ((0, 0), (1, 1), (2, 2)), ((0, 2), (1, 1), (2, 0)),  # diagonals
]


class Outcome(Enum):
    X_WINS = "X"
    O_WINS = "O"
    DRAW = "-"


def _check_size(board: Board):
    if board.shape != (3, 3):
        raise LogicError(f"rules are defined for 3x3 boards, got {board.height}x{board.width}")


def get_next(symbol: Symbol) -> Symbol:
    """Return the opponent of ``symbol``."""
    if symbol == Symbol.X:
        return Symbol.O
    if symbol == Symbol.O:
        return Symbol.X
    raise ConfigurationError(f"no player follows {symbol!r}")


def winner(board: Board) -> Optional[Symbol]:
    """Return the symbol owning the first complete line, or None."""
    _check_size(board)
    for a, b, c in WIN_LINES:
        v = board[a]
        if v != Symbol.EMPTY and v == board[b] == board[c]:
            return v
    return None


def is_full(board: Board) -> bool:
    _check_size(board)
    return board.find(Symbol.EMPTY) == -1


def is_draw(board: Board) -> bool:
    return is_full(board) and winner(board) is None


def outcome(board: Board) -> Optional[Outcome]:
    """
    Classify a board.

    Returns:
        Outcome.X_WINS / O_WINS / DRAW, or None while the game is running.
    """
    w = winner(board)
    if w == Symbol.X:
        return Outcome.X_WINS
    if w == Symbol.O:
        return Outcome.O_WINS
    if is_full(board):
        return Outcome.DRAW
    return None


def is_over(board: Board) -> bool:
    return outcome(board) is not None


def score(board: Board, config: GameConfig = DEFAULT_CONFIG) -> float:
    """Terminal score of a finished board (AI perspective)."""
    result = outcome(board)
    if result is Outcome.X_WINS:
        return config.player_win_score
    if result is Outcome.O_WINS:
        return config.ai_win_score
    if result is Outcome.DRAW:
        return config.draw_score
    raise LogicError("score is only defined for finished games")


def legal_moves(board: Board) -> List[int]:
    """Return list of legal move indices (empty squares)."""
    return board.empty_cells()


def apply_move(board: Board, symbol: Symbol, index: int) -> Board:
    """Apply move and return new board."""
    if board[index] != Symbol.EMPTY:
        raise LogicError(f"cell {index} is already taken")
    new_board = board.clone()
    new_board[index] = symbol
    return new_board


def side_to_move(board: Board, first_player: Symbol = Symbol.X) -> Symbol:
    """Infer side to move from the piece counts."""
    first_cnt = board.count(lambda v: v == first_player)
    second_cnt = board.count(lambda v: v == get_next(first_player))
    return first_player if first_cnt == second_cnt else get_next(first_player)
