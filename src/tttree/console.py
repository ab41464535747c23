"""
Console rendering and human input.
"""

from typing import Callable, Optional, Tuple

from .board import Board, Symbol

Cell = Tuple[int, int]


def format_board(board: Board, cursor: Optional[Cell] = None) -> str:
    """Framed grid; the cursor cell is shown in parentheses."""
    frame = "=" * (board.width * 4 - 1)
    lines = [frame]
    for r, row in enumerate(board.rows()):
        lines.append("|".join(
            f"({v.value})" if cursor == (r, c) else f" {v.value} "
            for c, v in enumerate(row)
        ))
    lines.append(frame)
    return "\n".join(lines)


def render(board: Board, cursor: Optional[Cell] = None):
    """Pretty print board."""
    print(format_board(board, cursor))


def parse_cell(text: str, board: Board) -> Optional[Cell]:
    """
    Parse ``row col`` or a row-major index.

    Returns None for anything malformed, out of range or already taken.
    """
    parts = text.replace(",", " ").split()
    try:
        numbers = [int(p) for p in parts]
    except ValueError:
        return None

    if len(numbers) == 1:
        index = numbers[0]
        if not 0 <= index < board.size:
            return None
        cell = divmod(index, board.width)
    elif len(numbers) == 2:
        cell = (numbers[0], numbers[1])
        if not (0 <= cell[0] < board.height and 0 <= cell[1] < board.width):
            return None
    else:
        return None

    if board[cell] != Symbol.EMPTY:
        return None
    return cell


def read_move(
    board: Board,
    cursor: Optional[Cell] = None,
    prompt: Callable[[str], str] = input,
) -> Cell:
    """Ask until the user picks an empty cell."""
    moves = board.empty_cells()
    while True:
        render(board, cursor)
        cell = parse_cell(prompt(f"Your move (row col, or index {moves}): "), board)
        if cell is not None:
            return cell
        print("Invalid move, try again")
