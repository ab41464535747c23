"""
Perfect-play opponent for evaluating the search tree.

Negamax over the full game, memoized per (cells, side to move). Values are
+1/0/-1 for the mover, independent of the tree's score constants.
"""

from typing import Dict, List, Tuple

from .board import Board, Symbol
from .game import apply_move, get_next, legal_moves, winner, is_full


# (cells, side to move) -> (value, optimal cell indices)
_MINIMAX_CACHE: Dict[Tuple[Tuple[Symbol, ...], Symbol], Tuple[int, Tuple[int, ...]]] = {}


def minimax_value_and_moves(board: Board, player: Symbol) -> Tuple[int, List[int]]:
    """
    Game-theoretic value of ``board`` for ``player`` and every move keeping it.

    Args:
        board: Current board state
        player: Side to move (X or O)

    Returns:
        (value, best_moves) where:
        - value: +1 (win), 0 (draw), -1 (loss) from the mover's perspective
        - best_moves: list of cell indices achieving the optimal value
    """
    key = (board.cells(), player)
    if key in _MINIMAX_CACHE:
        v, best = _MINIMAX_CACHE[key]
        return v, list(best)

    w = winner(board)
    if w is not None or is_full(board):
        if w is None:
            v = 0
        elif w == player:
            v = +1
        else:
            v = -1
        _MINIMAX_CACHE[key] = (v, tuple())
        return v, []

    best_v = -2
    best_moves: List[int] = []

    for action in legal_moves(board):
        next_board = apply_move(board, player, action)
        child_v, _ = minimax_value_and_moves(next_board, get_next(player))
        v_here = -child_v  # child value is from the opponent's side

        if v_here > best_v:
            best_v = v_here
            best_moves = [action]
        elif v_here == best_v:
            best_moves.append(action)

    _MINIMAX_CACHE[key] = (best_v, tuple(best_moves))
    return best_v, best_moves


def clear_cache():
    """Forget every solved position."""
    _MINIMAX_CACHE.clear()


def cache_size() -> int:
    """Number of solved positions held in memory."""
    return len(_MINIMAX_CACHE)
