"""
D4 symmetries of a board (8 transforms).

A transform is a combination of three flags:
  VERTICAL:   mirror rows (top <-> bottom)
  HORIZONTAL: mirror columns (left <-> right)
  TRANSPOSE:  swap rows and columns

Cell (i, j) of the transformed board is read from the source after applying
TRANSPOSE, then VERTICAL, then HORIZONTAL to (i, j).
"""

from enum import IntFlag
from functools import lru_cache
from operator import itemgetter
from typing import Callable, Optional, Tuple

import torch

from .board import Board


class Transform(IntFlag):
    IDENTITY = 0
    VERTICAL = 1
    HORIZONTAL = 2
    TRANSPOSE = 4


# Order in which find_transform tries the group elements
CANONICAL_ORDER: Tuple[Transform, ...] = (
    Transform.IDENTITY,
    Transform.VERTICAL,
    Transform.HORIZONTAL,
    Transform.VERTICAL | Transform.HORIZONTAL,
    Transform.TRANSPOSE,
    Transform.TRANSPOSE | Transform.VERTICAL,
    Transform.TRANSPOSE | Transform.HORIZONTAL,
    Transform.TRANSPOSE | Transform.VERTICAL | Transform.HORIZONTAL,
)

_TV = Transform.TRANSPOSE | Transform.VERTICAL
_TH = Transform.TRANSPOSE | Transform.HORIZONTAL


def inverse(transform: Transform) -> Transform:
    """Return the group element undoing ``transform``."""
    if transform == _TV:
        return _TH
    if transform == _TH:
        return _TV
    return Transform(transform)


def transformed_shape(transform: Transform, height: int, width: int) -> Tuple[int, int]:
    if transform & Transform.TRANSPOSE:
        return width, height
    return height, width


@lru_cache(maxsize=None)
def permutation(transform: Transform, height: int = 3, width: int = 3) -> torch.Tensor:
    """
    Permutation map for one transform.

    Returns:
        [height * width] long tensor ``mp`` such that
        ``out[k] = src[mp[k]]`` (row-major, in the transformed shape).
    """
    out_h, out_w = transformed_shape(transform, height, width)
    mp = [0] * (height * width)
    for i in range(out_h):
        for j in range(out_w):
            r, c = (j, i) if transform & Transform.TRANSPOSE else (i, j)
            if transform & Transform.VERTICAL:
                r = height - 1 - r
            if transform & Transform.HORIZONTAL:
                c = width - 1 - c
            mp[i * out_w + j] = r * width + c
    return torch.tensor(mp, dtype=torch.long)


@lru_cache(maxsize=None)
def _gather(transform: Transform, height: int, width: int) -> Callable:
    # itemgetter over the tensor map; single-cell boards need a tuple result too
    idx = permutation(transform, height, width).tolist()
    if len(idx) == 1:
        return lambda cells: (cells[idx[0]],)
    return itemgetter(*idx)


def apply_transform(board: Board, transform: Transform) -> Board:
    """Return a new board holding ``board`` viewed through ``transform``."""
    h, w = board.shape
    out_h, out_w = transformed_shape(transform, h, w)
    cells = _gather(Transform(transform), h, w)(board.cells())
    return Board.from_rows([cells[r * out_w:(r + 1) * out_w] for r in range(out_h)])


def find_transform(a: Board, b: Board) -> Optional[Transform]:
    """
    Find the first transform (in CANONICAL_ORDER) mapping ``a`` onto ``b``.

    Returns:
        The transform T with apply_transform(a, T) == b, or None if the boards
        are not symmetric images of each other.
    """
    h, w = a.shape
    target = b.cells()
    for t in CANONICAL_ORDER:
        if transformed_shape(t, h, w) != b.shape:
            continue
        if _gather(t, h, w)(a.cells()) == target:
            return t
    return None


def similar(a: Board, b: Board) -> bool:
    """True if some D4 transform maps ``a`` onto ``b``."""
    return find_transform(a, b) is not None


def rotate(board: Board, transform: Transform) -> None:
    """Apply ``transform`` to ``board`` in place (square boards only)."""
    if not board.is_square():
        return
    board.copy_from(apply_transform(board, transform))
