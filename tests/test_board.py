"""
Board tests: placing marks, empty cells and line detection.
"""

import random

import pytest

from engine.ai_player import RandomAI
from engine.board import Board, Mark
from engine.config import GameConfig
from engine.exceptions import InvalidBoard, InvalidIndex
from engine.game_loop import GameLoop


class TestBoardBasics:

    def test_new_board_is_empty(self):
        board = Board()
        assert board.empty_indexes() == list(range(9))
        assert all(board.is_empty(i) for i in range(9))
        assert not board.is_full()

    def test_place(self):
        board = Board()
        board.place(4, Mark.X)
        assert board.get(4) == Mark.X
        assert not board.is_empty(4)

    def test_empty_indexes_shrink_by_one_per_place(self):
        board = Board()
        order = [4, 0, 8, 2, 6, 1, 7, 3, 5]
        mark = Mark.X
        for placed, index in enumerate(order, start=1):
            before = board.empty_indexes()
            board.place(index, mark)
            after = board.empty_indexes()
            assert len(after) == len(before) - 1
            assert index not in after
            assert len(after) == 9 - placed
            mark = mark.opposite()
        assert board.is_full()

    def test_empty_indexes_are_ascending(self):
        board = Board.from_string("X_O_X_O__")
        assert board.empty_indexes() == [1, 3, 5, 7, 8]

    def test_place_occupied_cell_raises(self):
        board = Board()
        board.place(0, Mark.X)
        with pytest.raises(InvalidIndex):
            board.place(0, Mark.O)
        assert board.get(0) == Mark.X
        assert str(board) == "X________"

    @pytest.mark.parametrize("index", [-1, 9, 100])
    def test_out_of_range_index_raises(self, index):
        board = Board()
        with pytest.raises(InvalidIndex):
            board.is_empty(index)
        with pytest.raises(InvalidIndex):
            board.place(index, Mark.X)
        assert board == Board()

    def test_non_integer_index_raises(self):
        with pytest.raises(InvalidIndex):
            Board().is_empty("4")

    def test_clear_undoes_place(self):
        board = Board.from_string("XO_______")
        board.place(4, Mark.X)
        board.clear(4)
        assert board == Board.from_string("XO_______")

    def test_clear_empty_cell_raises(self):
        with pytest.raises(InvalidIndex):
            Board().clear(3)

    def test_copy_is_independent(self):
        board = Board.from_string("X________")
        copy = board.copy()
        copy.place(1, Mark.O)
        assert board.is_empty(1)
        assert not copy.is_empty(1)


class TestFromString:

    def test_parses_marks_and_blanks(self):
        board = Board.from_string("X.o _____")
        assert board.cells[:4] == (Mark.X, None, Mark.O, None)

    def test_accepts_rows_with_separators(self):
        board = Board.from_string("XX_|OO_|___")
        assert str(board) == "XX_OO____"

    @pytest.mark.parametrize("text", ["XX", "XX_OO_____", "XX_OO___Z"])
    def test_malformed_text_raises(self, text):
        with pytest.raises(InvalidBoard):
            Board.from_string(text)

    def test_invalid_board_is_an_invalid_index(self):
        assert issubclass(InvalidBoard, InvalidIndex)


class TestWinner:

    @pytest.mark.parametrize("line", GameConfig.WINNING_LINES)
    def test_every_line_wins(self, line):
        board = Board()
        for index in line:
            board.place(index, Mark.O)
        assert board.winner(Mark.O)
        assert not board.winner(Mark.X)

    def test_two_in_a_row_is_not_a_win(self):
        board = Board.from_string("XX_OO____")
        assert not board.winner(Mark.X)
        assert not board.winner(Mark.O)

    def test_bent_line_is_not_a_win(self):
        board = Board.from_string("XX___X___")
        assert not board.winner(Mark.X)

    def test_full_board_without_line(self):
        board = Board.from_string("XOXXOOOXX")
        assert board.is_full()
        assert not board.winner(Mark.X)
        assert not board.winner(Mark.O)

    @pytest.mark.parametrize("seed", range(20))
    def test_both_sides_never_win_together(self, seed):
        rng = random.Random(seed)

        def check(board, move):
            assert not (board.winner(Mark.X) and board.winner(Mark.O))

        game = GameLoop(RandomAI(Mark.X, rng), RandomAI(Mark.O, rng), on_move=check)
        game.play()
