"""
Evaluation functions.

Plays the search-tree AI (O) against random and minimax opponents (X),
alternating who opens each game.
"""

from dataclasses import replace
from typing import Callable, Dict, Optional, Tuple

import numpy as np
from tqdm.auto import tqdm, trange

from .board import Board, Symbol
from .config import GameConfig
from .game import Outcome, side_to_move
from .minimax import minimax_value_and_moves
from .session import Game

Cell = Tuple[int, int]


def _quiet_render(board: Board, cursor: Optional[Cell] = None):
    pass


def random_player(rng: np.random.Generator) -> Callable[[Board, Optional[Cell]], Cell]:
    """X opponent picking uniformly among empty cells."""
    def read_move(board: Board, cursor: Optional[Cell] = None) -> Cell:
        moves = board.empty_cells()
        return divmod(moves[int(rng.integers(0, len(moves)))], board.width)
    return read_move


def minimax_player(
    rng: np.random.Generator,
    first_player: Symbol,
    optimal_random: bool = True,
) -> Callable[[Board, Optional[Cell]], Cell]:
    """
    X opponent playing a minimax-optimal move.

    Args:
        optimal_random: If True, samples uniformly among the optimal moves
    """
    def read_move(board: Board, cursor: Optional[Cell] = None) -> Cell:
        _, best_moves = minimax_value_and_moves(board, side_to_move(board, first_player))
        action = best_moves[int(rng.integers(0, len(best_moves)))] if optimal_random else best_moves[0]
        return divmod(action, board.width)
    return read_move


def _play_series(
    config: GameConfig,
    games: int,
    make_opponent: Callable[[GameConfig], Callable],
    desc: str,
) -> Dict[str, float]:
    wins = draws = losses = 0

    for g in trange(games, desc=desc, leave=False):
        # AI opens every other game
        first = Symbol.X if g % 2 == 0 else Symbol.O
        seed = None if config.seed is None else config.seed + g
        game_config = replace(config, first_player=first, seed=seed)
        game = Game(game_config, ai_mode=True,
                    read_move=make_opponent(game_config), render=_quiet_render)
        result = game.play()

        if result is Outcome.O_WINS:
            wins += 1
        elif result is Outcome.DRAW:
            draws += 1
        else:
            losses += 1

    tqdm.write(f"{desc}: {wins}W / {draws}D / {losses}L over {games} games")
    total = max(1, wins + draws + losses)
    return {
        "games": wins + draws + losses,
        "ai_w": wins / total,
        "ai_d": draws / total,
        "ai_l": losses / total,
    }


def eval_vs_random(config: GameConfig, games: int = 100, seed: int = 0) -> Dict[str, float]:
    """
    Evaluate the tree AI vs a random opponent.

    Returns:
        Dict with 'games', 'ai_w', 'ai_d', 'ai_l'
    """
    rng = np.random.default_rng(seed)
    return _play_series(config, games, lambda cfg: random_player(rng), "vs random")


def eval_vs_minimax(
    config: GameConfig,
    games: int = 100,
    seed: int = 0,
    optimal_random: bool = True,
) -> Dict[str, float]:
    """
    Evaluate the tree AI vs a minimax opponent.

    Returns:
        Dict with 'games', 'ai_w', 'ai_d', 'ai_l'
    """
    rng = np.random.default_rng(seed)
    return _play_series(
        config, games,
        lambda cfg: minimax_player(rng, cfg.first_player, optimal_random),
        "vs minimax",
    )
