"""
Game driver: alternates turns between a human (X) and either the search
tree AI or a second human (O) until the game is over.
"""

import logging
from typing import Callable, Optional, Tuple

from . import console
from .board import Board, Symbol
from .config import DEFAULT_CONFIG, GameConfig
from .errors import LogicError
from .game import Outcome, get_next, is_over, outcome
from .symmetries import Transform, apply_transform, find_transform, inverse
from .tree import SearchTree

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
ReadMove = Callable[[Board, Optional[Cell]], Cell]
Render = Callable[[Board, Optional[Cell]], None]


class Game:
    """
    One game session.

    Args:
        config: who opens and how deep the AI searches
        ai_mode: O is played by the search tree if True, by a human otherwise
        read_move: returns the (row, col) picked for a board, empty cells only
        render: draws a board, optionally highlighting a cell
    """

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        ai_mode: bool = True,
        read_move: ReadMove = console.read_move,
        render: Render = console.render,
    ):
        self.config = config
        self.ai_mode = ai_mode
        self.read_move = read_move
        self.render = render

        self._board = Board(Symbol.EMPTY, 3, 3)
        self._current = config.first_player
        self.tree: Optional[SearchTree] = None
        if ai_mode:
            self.tree = SearchTree(config)
            self.tree.expand()

    @property
    def board(self) -> Board:
        return self._board.clone()

    @property
    def current_player(self) -> Symbol:
        return self._current

    def ai_step(self):
        """Let the tree pick O's move and apply it to the live board."""
        if self.tree is None:
            raise LogicError("no search tree in player-vs-player mode")
        logger.info("AI step start")

        transform = Transform.IDENTITY
        if self._board != self.tree.value:
            logger.debug("Moving tree to the live board")
            self.tree.move_to_state(self._board)
            transform = find_transform(self._board, self.tree.value)
            logger.debug("Live board maps onto tree root via %r", transform)
            self.tree.expand()

        self.tree.move_to_best()
        self.tree.expand()
        self._board = apply_transform(self.tree.value, inverse(transform))

    def player_step(self, symbol: Symbol):
        """Ask the human for a cell and place ``symbol`` there."""
        row, col = self.read_move(self.board, None)
        if self._board[row, col] != Symbol.EMPTY:
            raise LogicError(f"cell ({row}, {col}) is already taken")
        self._board[row, col] = symbol
        logger.debug("%s played (%d, %d)", symbol, row, col)

    def step(self):
        """Play one turn for the side to move."""
        if self._current == Symbol.O and self.ai_mode:
            self.ai_step()
        else:
            self.player_step(self._current)
        self._current = get_next(self._current)

    def play(self) -> Outcome:
        """Run turns until the game ends; returns the result."""
        while not is_over(self._board):
            self.step()
        self.render(self.board, None)

        result = outcome(self._board)
        logger.info("Game over: %s", result.name)
        return result


def describe_outcome(result: Outcome) -> str:
    if result is Outcome.X_WINS:
        return "X wins!"
    if result is Outcome.O_WINS:
        return "O wins!"
    return "Draw!"
