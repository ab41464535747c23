"""
Board representation.

Board: flat row-major list of Symbol values
  - Symbol.X: first player (human)
  - Symbol.O: second player (AI)
  - Symbol.EMPTY: free cell

Cells are addressed either by (row, col) or by a linear row-major index.
"""

from enum import Enum
from typing import Callable, Iterator, List, Sequence, Tuple, Union

from .errors import BoundsError

Key = Union[int, Tuple[int, int]]


class Symbol(str, Enum):
    X = "X"
    O = "O"
    EMPTY = "."

    def __str__(self) -> str:
        return self.value


class Board:
    """
    Fixed-size 2D grid of symbols.

    Boards handed out by the search tree are always clones, so callers may
    mutate them freely.
    """

    __slots__ = ("_height", "_width", "_cells")

    def __init__(self, fill: Symbol = Symbol.EMPTY, height: int = 3, width: int = 3):
        if height <= 0 or width <= 0:
            raise BoundsError(f"board dimensions must be positive, got {height}x{width}")
        self._height = height
        self._width = width
        self._cells: List[Symbol] = [Symbol(fill)] * (height * width)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Union[Symbol, str]]]) -> "Board":
        """
        Build a board from nested rows.

        Rows may hold Symbol members or their characters, so both
        ``[[Symbol.X, ...], ...]`` and ``["X..", ".O.", "..."]`` work.
        """
        if not rows or not rows[0]:
            raise BoundsError("board must have at least one row and column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise BoundsError("all rows must have the same length")

        board = cls(Symbol.EMPTY, len(rows), width)
        board._cells = [Symbol(v) for row in rows for v in row]
        return board

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------
    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def shape(self) -> Tuple[int, int]:
        return self._height, self._width

    @property
    def size(self) -> int:
        return len(self._cells)

    def is_square(self) -> bool:
        return self._height == self._width

    # ------------------------------------------------------------------
    # Indexed access
    # ------------------------------------------------------------------
    def _offset(self, key: Key) -> int:
        if isinstance(key, tuple):
            row, col = key
            if not (0 <= row < self._height and 0 <= col < self._width):
                raise BoundsError(f"cell ({row}, {col}) outside {self._height}x{self._width} board")
            return row * self._width + col
        if not 0 <= key < len(self._cells):
            raise BoundsError(f"index {key} outside {self._height}x{self._width} board")
        return key

    def __getitem__(self, key: Key) -> Symbol:
        return self._cells[self._offset(key)]

    def __setitem__(self, key: Key, value: Symbol) -> None:
        self._cells[self._offset(key)] = Symbol(value)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def cells(self) -> Tuple[Symbol, ...]:
        """Row-major snapshot of all cells."""
        return tuple(self._cells)

    def rows(self) -> List[List[Symbol]]:
        w = self._width
        return [self._cells[r * w:(r + 1) * w] for r in range(self._height)]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def count(self, predicate: Callable[[Symbol], bool]) -> int:
        """Number of cells for which ``predicate`` holds."""
        return sum(1 for v in self._cells if predicate(v))

    def find(self, value: Symbol) -> int:
        """Row-major index of the first ``value``, or -1."""
        for i, v in enumerate(self._cells):
            if v == value:
                return i
        return -1

    def empty_cells(self) -> List[int]:
        return [i for i, v in enumerate(self._cells) if v == Symbol.EMPTY]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def replace_nth(self, value: Symbol, new_value: Symbol, n: int = 0) -> int:
        """
        Replace the n-th (0-indexed) occurrence of ``value``.

        Returns:
            Index of the replaced cell, or -1 if there are fewer than n + 1
            occurrences (the board is left unchanged).
        """
        for i, v in enumerate(self._cells):
            if v == value:
                if n == 0:
                    self._cells[i] = Symbol(new_value)
                    return i
                n -= 1
        return -1

    def copy_from(self, other: "Board") -> None:
        """Overwrite this board with the shape and cells of ``other``."""
        self._height = other._height
        self._width = other._width
        self._cells = list(other._cells)

    def clone(self) -> "Board":
        board = Board.__new__(Board)
        board._height = self._height
        board._width = self._width
        board._cells = list(self._cells)
        return board

    # ------------------------------------------------------------------
    # Comparison / display
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._height == other._height
            and self._width == other._width
            and self._cells == other._cells
        )

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return "\n".join("| " + " ".join(v.value for v in row) + " |" for row in self.rows())

    def __repr__(self) -> str:
        body = ", ".join(repr("".join(v.value for v in row)) for row in self.rows())
        return f"Board.from_rows([{body}])"

