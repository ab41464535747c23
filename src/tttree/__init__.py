"""
TicTacToe search-tree AI.

This package builds a weighted decision tree over future boards, merges
sibling states that are rotations/reflections of each other, and picks the
AI's moves from the propagated scores.
"""

from .errors import TicTacToeError, ConfigurationError, BoundsError, LogicError
from .board import Board, Symbol
from .symmetries import (
    Transform,
    CANONICAL_ORDER,
    apply_transform,
    find_transform,
    inverse,
    similar,
    rotate,
)
from .game import (
    Outcome,
    get_next,
    winner,
    is_full,
    is_draw,
    is_over,
    outcome,
    score,
    legal_moves,
    apply_move,
    side_to_move,
)
from .config import GameConfig, DIFFICULTY_DEPTHS, DEFAULT_CONFIG, parse_symbol
from .tree import SearchTree, NodeInfo
from .minimax import minimax_value_and_moves
from .session import Game, describe_outcome
from .eval import eval_vs_random, eval_vs_minimax

__version__ = "0.1.0"
__all__ = [
    "TicTacToeError",
    "ConfigurationError",
    "BoundsError",
    "LogicError",
    "Board",
    "Symbol",
    "Transform",
    "CANONICAL_ORDER",
    "apply_transform",
    "find_transform",
    "inverse",
    "similar",
    "rotate",
    "Outcome",
    "get_next",
    "winner",
    "is_full",
    "is_draw",
    "is_over",
    "outcome",
    "score",
    "legal_moves",
    "apply_move",
    "side_to_move",
    "GameConfig",
    "DIFFICULTY_DEPTHS",
    "DEFAULT_CONFIG",
    "parse_symbol",
    "SearchTree",
    "NodeInfo",
    "minimax_value_and_moves",
    "Game",
    "describe_outcome",
    "eval_vs_random",
    "eval_vs_minimax",
]
