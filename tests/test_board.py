"""
Tests for the board, symmetry resolver and rules.
"""

import pytest

from tttree.board import Board, Symbol
from tttree.config import GameConfig
from tttree.errors import BoundsError, ConfigurationError, LogicError
from tttree.game import (
    Outcome,
    apply_move,
    get_next,
    is_draw,
    is_full,
    is_over,
    legal_moves,
    outcome,
    score,
    side_to_move,
    winner,
)
from tttree.symmetries import (
    CANONICAL_ORDER,
    Transform,
    apply_transform,
    find_transform,
    inverse,
    permutation,
    rotate,
    similar,
)

X, O, E = Symbol.X, Symbol.O, Symbol.EMPTY

SAMPLE_BOARDS = [
    Board(),
    Board.from_rows(["X..", "...", "..."]),
    Board.from_rows(["XO.", "...", "..X"]),
    Board.from_rows(["XO.", ".X.", "O.."]),
    Board.from_rows(["XOX", "OXO", "OXO"]),
]


# ════════════════════════════════════════════════════════════════════════════
#  BOARD TESTS
# ════════════════════════════════════════════════════════════════════════════

class TestBoard:
    def test_filled_construction(self):
        b = Board(X, 2, 4)
        assert b.shape == (2, 4)
        assert b.size == 8
        assert all(v == X for v in b)

    def test_invalid_dimensions(self):
        with pytest.raises(BoundsError):
            Board(E, 0, 3)

    def test_row_col_and_linear_access_agree(self):
        b = Board()
        b[1, 2] = O
        assert b[5] == O
        b[7] = X
        assert b[2, 1] == X

    def test_set_accepts_characters(self):
        b = Board()
        b[0] = "X"
        assert b[0] is X

    @pytest.mark.parametrize("key", [(3, 0), (0, 3), (-1, 0), (0, -1), 9, -1])
    def test_out_of_bounds(self, key):
        b = Board()
        with pytest.raises(BoundsError):
            b[key]
        with pytest.raises(BoundsError):
            b[key] = X

    def test_bounds_error_is_index_error(self):
        with pytest.raises(IndexError):
            Board()[10]

    def test_count(self):
        b = Board.from_rows(["XO.", ".X.", "..."])
        assert b.count(lambda v: v == X) == 2
        assert b.count(lambda v: v == E) == 6

    def test_find(self):
        b = Board.from_rows(["XO.", ".X.", "..."])
        assert b.find(O) == 1
        assert b.find(E) == 2
        assert Board(X).find(E) == -1

    def test_replace_nth(self):
        b = Board.from_rows(["X..", ".X.", "..."])
        assert b.replace_nth(E, O, 0) == 1
        assert b.replace_nth(E, O, 2) == 5
        assert b.rows()[1] == [E, X, O]

    def test_replace_nth_missing_occurrence(self):
        b = Board.from_rows(["XXX", "XXX", "XX."])
        before = b.clone()
        assert b.replace_nth(E, O, 1) == -1
        assert b == before

    def test_equality_includes_dimensions(self):
        assert Board(E, 3, 3) == Board(E, 3, 3)
        assert Board(E, 3, 3) != Board(E, 1, 9)
        assert Board(E, 2, 3) != Board(E, 3, 2)
        assert Board.from_rows(["X.."]) != Board.from_rows(["..X"])

    def test_clone_is_independent(self):
        a = Board.from_rows(["X..", "...", "..."])
        b = a.clone()
        b[4] = O
        assert a[4] == E
        assert a != b

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Board())

    def test_from_rows_rejects_ragged(self):
        with pytest.raises(BoundsError):
            Board.from_rows(["XX", "X"])

    def test_str(self):
        b = Board.from_rows(["XO.", "...", "..X"])
        assert str(b) == "| X O . |\n| . . . |\n| . . X |"

    def test_empty_cells(self):
        b = Board.from_rows(["XO.", "...", "OXX"])
        assert b.empty_cells() == [2, 3, 4, 5]


# ════════════════════════════════════════════════════════════════════════════
#  SYMMETRY TESTS
# ════════════════════════════════════════════════════════════════════════════

class TestSymmetries:
    def test_group_has_eight_distinct_elements(self):
        assert len(set(CANONICAL_ORDER)) == 8
        assert CANONICAL_ORDER[0] == Transform.IDENTITY

    def test_permutation_maps(self):
        assert permutation(Transform.IDENTITY).tolist() == list(range(9))
        assert permutation(Transform.TRANSPOSE).tolist() == [0, 3, 6, 1, 4, 7, 2, 5, 8]
        assert permutation(Transform.VERTICAL).tolist() == [6, 7, 8, 3, 4, 5, 0, 1, 2]

    @pytest.mark.parametrize("t", CANONICAL_ORDER)
    @pytest.mark.parametrize("b", SAMPLE_BOARDS)
    def test_inverse_undoes_transform(self, t, b):
        assert apply_transform(apply_transform(b, t), inverse(t)) == b

    @pytest.mark.parametrize("t", CANONICAL_ORDER)
    def test_inverse_on_non_square_board(self, t):
        b = Board.from_rows(["XO.", "..O"])
        assert apply_transform(apply_transform(b, t), inverse(t)) == b

    def test_quarter_turns_pair_up(self):
        tv = Transform.TRANSPOSE | Transform.VERTICAL
        th = Transform.TRANSPOSE | Transform.HORIZONTAL
        assert inverse(tv) == th
        assert inverse(th) == tv

    def test_transpose_vertical_is_clockwise_turn(self):
        b = Board.from_rows([".X.", "...", "..."])
        out = apply_transform(b, Transform.TRANSPOSE | Transform.VERTICAL)
        assert out == Board.from_rows(["...", "..X", "..."])

    def test_transpose_swaps_dimensions(self):
        b = Board.from_rows(["XO.", "..O"])
        out = apply_transform(b, Transform.TRANSPOSE)
        assert out.shape == (3, 2)
        assert out == Board.from_rows(["X.", "O.", ".O"])

    def test_apply_does_not_mutate_source(self):
        b = Board.from_rows(["X..", "...", "..."])
        apply_transform(b, Transform.HORIZONTAL)
        assert b == Board.from_rows(["X..", "...", "..."])

    @pytest.mark.parametrize("b", SAMPLE_BOARDS)
    def test_similar_to_itself(self, b):
        assert similar(b, b)
        assert find_transform(b, b) == Transform.IDENTITY

    @pytest.mark.parametrize("a", SAMPLE_BOARDS)
    @pytest.mark.parametrize("b", SAMPLE_BOARDS)
    def test_similar_is_symmetric(self, a, b):
        assert similar(a, b) == similar(b, a)

    def test_corners_are_similar(self):
        a = Board.from_rows(["X..", "...", "..."])
        b = Board.from_rows(["...", "...", "..X"])
        assert find_transform(b, a) == Transform.VERTICAL | Transform.HORIZONTAL
        assert apply_transform(b, find_transform(b, a)) == a

    def test_first_match_in_canonical_order(self):
        # both HORIZONTAL and TRANSPOSE|VERTICAL map top-left to top-right here
        a = Board.from_rows(["X..", "...", "..."])
        b = Board.from_rows(["..X", "...", "..."])
        assert find_transform(a, b) == Transform.HORIZONTAL

    def test_corner_and_edge_not_similar(self):
        a = Board.from_rows(["X..", "...", "..."])
        b = Board.from_rows([".X.", "...", "..."])
        assert find_transform(a, b) is None
        assert not similar(a, b)

    def test_different_shapes_not_similar(self):
        assert not similar(Board(E, 3, 3), Board(E, 1, 9))

    def test_rotate_in_place(self):
        b = Board.from_rows(["X..", "...", "..."])
        rotate(b, Transform.HORIZONTAL)
        assert b == Board.from_rows(["..X", "...", "..."])

    def test_rotate_non_square_is_noop(self):
        b = Board.from_rows(["XO.", "..O"])
        rotate(b, Transform.TRANSPOSE)
        assert b == Board.from_rows(["XO.", "..O"])


# ════════════════════════════════════════════════════════════════════════════
#  RULES TESTS
# ════════════════════════════════════════════════════════════════════════════

class TestRules:
    def test_top_row_win(self):
        assert winner(Board.from_rows(["XXX", "...", "..."])) == X

    def test_column_win(self):
        assert winner(Board.from_rows([".O.", ".O.", ".O."])) == O

    def test_diagonal_wins(self):
        assert winner(Board.from_rows(["O..", ".O.", "..O"])) == O
        assert winner(Board.from_rows(["..X", ".X.", "X.."])) == X

    def test_full_board_draw(self):
        b = Board.from_rows(["XOX", "OXO", "OXO"])
        assert winner(b) is None
        assert is_full(b)
        assert is_draw(b)
        assert is_over(b)
        assert outcome(b) is Outcome.DRAW

    def test_running_game(self):
        b = Board.from_rows(["XO.", "...", "..."])
        assert winner(b) is None
        assert not is_full(b)
        assert not is_draw(b)
        assert not is_over(b)
        assert outcome(b) is None

    def test_win_on_full_board_is_not_draw(self):
        b = Board.from_rows(["XXX", "OOX", "XOO"])
        assert is_full(b)
        assert not is_draw(b)
        assert outcome(b) is Outcome.X_WINS

    def test_scores(self):
        assert score(Board.from_rows(["XXX", "OO.", "..."])) == -100.0
        assert score(Board.from_rows(["OOO", "XX.", "X.."])) == 100.0
        assert score(Board.from_rows(["XOX", "OXO", "OXO"])) == 0.0

    def test_score_uses_config(self):
        config = GameConfig(player_win_score=-1.0, ai_win_score=2.0, draw_score=0.5)
        assert score(Board.from_rows(["XXX", "OO.", "..."]), config) == -1.0
        assert score(Board.from_rows(["OOO", "XX.", "X.."]), config) == 2.0
        assert score(Board.from_rows(["XOX", "OXO", "OXO"]), config) == 0.5

    def test_score_of_running_game_fails(self):
        with pytest.raises(LogicError):
            score(Board.from_rows(["X..", "...", "..."]))

    def test_wrong_size_board_fails(self):
        with pytest.raises(LogicError):
            winner(Board(E, 4, 4))
        with pytest.raises(LogicError):
            is_over(Board(E, 3, 2))

    def test_get_next(self):
        assert get_next(X) == O
        assert get_next(O) == X
        with pytest.raises(ConfigurationError):
            get_next(E)

    def test_legal_moves_and_apply_move(self):
        b = Board.from_rows(["XO.", "...", "..."])
        assert legal_moves(b) == [2, 3, 4, 5, 6, 7, 8]
        after = apply_move(b, X, 4)
        assert after[1, 1] == X
        assert b[1, 1] == E
        with pytest.raises(LogicError):
            apply_move(b, O, 0)

    def test_side_to_move(self):
        assert side_to_move(Board()) == X
        assert side_to_move(Board.from_rows(["X..", "...", "..."])) == O
        assert side_to_move(Board(), first_player=O) == O
        assert side_to_move(Board.from_rows(["O..", "...", "..."]), first_player=O) == X
