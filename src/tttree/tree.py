"""
Game-state decision tree for picking AI moves.

Nodes are kept in an arena keyed by integer handles; a node refers to its
parent by handle, so discarding a subtree is just dropping its handles.

Scoring:
  - leaf (finished game): terminal score from the rules
  - internal node: sum(child.score * child.weight) / 10

The divisor is fixed, not the total child weight, so internal scores are not
a normalized mean. Siblings that are D4 images of each other are merged into
one node whose weight counts the merged paths.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Tuple

import numpy as np

from .board import Board, Symbol
from .config import DEFAULT_CONFIG, GameConfig
from .errors import ConfigurationError, LogicError
from .game import get_next, is_over, score
from .symmetries import similar

logger = logging.getLogger(__name__)

# Fixed divisor of the internal-node score
SCORE_DIVISOR = 10.0


@dataclass
class Node:
    board: Board
    is_leaf: bool
    weight: int = 1
    score: float = 0.0
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)


class NodeInfo(NamedTuple):
    """Read-only snapshot of a node."""
    handle: int
    board: Board
    weight: int
    score: float
    is_leaf: bool
    parent: Optional[int]
    children: Tuple[int, ...]


class SearchTree:
    """
    Weighted search tree over future boards.

    The tree owns every node and board; everything returned to callers is a
    clone or an immutable snapshot.
    """

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        board: Optional[Board] = None,
        to_move: Optional[Symbol] = None,
    ):
        self.config = config
        self._rng = np.random.default_rng(config.seed)
        self._nodes: Dict[int, Node] = {}
        self._next_handle = 0

        to_move = config.first_player if to_move is None else to_move
        if to_move not in (Symbol.X, Symbol.O):
            raise ConfigurationError(f"side to move must be X or O, got {to_move!r}")
        self._to_move = to_move

        start = board.clone() if board is not None else Board(Symbol.EMPTY, 3, 3)
        self._root = self._new_node(start)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    @property
    def root(self) -> int:
        return self._root

    @property
    def to_move(self) -> Symbol:
        return self._to_move

    @property
    def value(self) -> Board:
        """Clone of the root board."""
        return self._nodes[self._root].board.clone()

    @property
    def score(self) -> float:
        return self._nodes[self._root].score

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, handle: int) -> bool:
        return handle in self._nodes

    def describe(self, handle: Optional[int] = None) -> NodeInfo:
        """Snapshot of ``handle`` (default: the root)."""
        handle = self._root if handle is None else handle
        node = self._node(handle)
        return NodeInfo(
            handle=handle,
            board=node.board.clone(),
            weight=node.weight,
            score=node.score,
            is_leaf=node.is_leaf,
            parent=node.parent,
            children=tuple(node.children),
        )

    def children(self, handle: Optional[int] = None) -> List[NodeInfo]:
        handle = self._root if handle is None else handle
        return [self.describe(h) for h in self._node(handle).children]

    def _node(self, handle: int) -> Node:
        try:
            return self._nodes[handle]
        except KeyError:
            raise LogicError(f"node {handle} is not part of the tree") from None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def _new_node(self, board: Board, parent: Optional[int] = None) -> int:
        handle = self._next_handle
        self._next_handle += 1
        node = Node(board=board, is_leaf=is_over(board), parent=parent)
        if node.is_leaf:
            node.score = score(board, self.config)
        self._nodes[handle] = node
        return handle

    def _calculate_score(self, handle: Optional[int]):
        """Recompute scores from ``handle`` up to the root."""
        while handle is not None:
            node = self._nodes[handle]
            if node.is_leaf:
                node.score = score(node.board, self.config)
            else:
                total = 0.0
                for h in node.children:
                    child = self._nodes[h]
                    total += child.score * child.weight / SCORE_DIVISOR
                node.score = total
            handle = node.parent

    def add_child(self, parent: int, board: Board) -> Optional[int]:
        """
        Insert ``board`` under ``parent``.

        If a sibling is a symmetric image of ``board`` its weight is bumped
        instead.

        Returns:
            Handle of the new child, or None if it was merged.
        """
        return self._insert(parent, board.clone())

    def _insert(self, parent: int, board: Board) -> Optional[int]:
        node = self._node(parent)
        added = None
        for h in node.children:
            sibling = self._nodes[h]
            if similar(sibling.board, board):
                sibling.weight += 1
                break
        else:
            added = self._new_node(board, parent)
            node.children.append(added)

        self._calculate_score(parent)
        return added

    def expand(
        self,
        depth: Optional[int] = None,
        handle: Optional[int] = None,
        symbol: Optional[Symbol] = None,
    ):
        """
        Grow the tree ``depth`` plies below ``handle``.

        Defaults to the root, the side to move and ``config.depth``. Nodes
        that already have children are not regenerated; only their
        depth-capped descendants are extended.
        """
        depth = self.config.depth if depth is None else depth
        if depth < 0:
            raise ConfigurationError(f"search depth must not be negative, got {depth}")
        handle = self._root if handle is None else handle
        symbol = self._to_move if symbol is None else symbol
        before = len(self._nodes)

        stack = [(handle, symbol, depth)]
        while stack:
            h, sym, budget = stack.pop()
            node = self._node(h)
            if node.is_leaf or budget == 0:
                continue

            if not node.children:
                for i in range(node.board.count(lambda v: v == Symbol.EMPTY)):
                    candidate = node.board.clone()
                    candidate.replace_nth(Symbol.EMPTY, sym, i)
                    self._insert(h, candidate)

            nxt = get_next(sym)
            for child in reversed(node.children):
                stack.append((child, nxt, budget - 1))

        logger.debug("Expanded node %d by %d plies: %d new nodes (%d total)",
                     handle, depth, len(self._nodes) - before, len(self._nodes))

    # ------------------------------------------------------------------
    # Root advance
    # ------------------------------------------------------------------
    def _dispose(self, handle: int) -> int:
        """Drop ``handle`` and its whole subtree; returns nodes freed."""
        freed = 0
        stack = [handle]
        while stack:
            node = self._nodes.pop(stack.pop())
            stack.extend(node.children)
            node.children.clear()
            node.parent = None
            freed += 1
        return freed

    def advance_root(self, target: Optional[int]) -> int:
        """Make the root's child ``target`` the new root."""
        if target is None:
            raise LogicError("cannot advance the root to a null node")
        root = self._nodes[self._root]
        if target not in root.children:
            raise LogicError(f"node {target} is not a child of the root")

        root.children.remove(target)
        self._nodes[target].parent = None
        freed = self._dispose(self._root)

        self._root = target
        self._to_move = get_next(self._to_move)
        logger.debug("Advanced root to node %d, freed %d nodes, %s to move",
                     target, freed, self._to_move)
        return target

    def move_to_state(self, board: Board) -> int:
        """Advance the root to the child matching ``board`` up to symmetry."""
        for h in self._nodes[self._root].children:
            if similar(board, self._nodes[h].board):
                return self.advance_root(h)
        raise LogicError("board is not reachable in one move from the current root")

    def best_moves(self) -> List[int]:
        """Handles of the root children sharing the maximum score."""
        children = self._nodes[self._root].children
        if not children:
            raise LogicError("root has no children; expand the tree first")
        best_score = max(self._nodes[h].score for h in children)
        return [h for h in children if self._nodes[h].score == best_score]

    def move_to_best(self) -> int:
        """Advance the root to a best-scored child, breaking ties at random."""
        candidates = self.best_moves()
        choice = candidates[int(self._rng.integers(0, len(candidates)))]
        logger.debug("Best move: node %d (score %.3f) among %d ties",
                     choice, self._nodes[choice].score, len(candidates))
        return self.advance_root(choice)
