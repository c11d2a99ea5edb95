import pytest

from conftest import ScriptedMover
from engine.board import Mark
from engine.exceptions import GameException, GameFinished, InvalidIndex, MarkMismatch
from engine.game_loop import GameLoop, LoopState, Move
from engine.win_checker import GameOutcome, WinChecker


def make_game(x_moves, o_moves, on_move=None):
    return GameLoop(ScriptedMover(Mark.X, x_moves), ScriptedMover(Mark.O, o_moves), on_move)


class TestGameLoop:

    def test_initial_state(self):
        game = make_game([], [])
        assert game.state == LoopState.AWAITING_X
        assert game.current_mark == Mark.X
        assert game.outcome == GameOutcome.IN_PROGRESS
        assert game.board.empty_indexes() == list(range(9))
        assert game.empty_cells == 9

    def test_sides_alternate(self):
        game = make_game([4], [0])
        game.step()
        assert game.state == LoopState.AWAITING_O
        assert game.current_mover is game.movers[Mark.O]
        game.step()
        assert game.state == LoopState.AWAITING_X
        assert str(game.board) == "O___X____"

    def test_x_wins(self):
        game = make_game([0, 1, 2], [3, 4])
        assert game.play() == GameOutcome.X_WINS
        assert game.state == LoopState.FINISHED
        assert game.is_finished
        assert game.current_mark is None
        assert game.current_mover is None
        assert len(game.moves) == 5
        assert game.get_winning_line() == (0, 1, 2)

    def test_o_wins(self):
        game = make_game([0, 1, 8], [2, 4, 6])
        assert game.play() == GameOutcome.O_WINS
        assert game.get_winning_line() == (2, 4, 6)

    def test_draw(self):
        # Ends on XOXXOOOXX
        game = make_game([0, 2, 3, 7, 8], [1, 4, 5, 6])
        assert game.play() == GameOutcome.DRAW
        assert str(game.board) == "XOXXOOOXX"
        assert game.empty_cells == 0
        assert WinChecker().check_outcome(game.board) == GameOutcome.DRAW

    def test_no_moves_after_finish(self):
        game = make_game([0, 1, 2, 5], [3, 4])
        game.play()
        with pytest.raises(GameFinished):
            game.step()
        # X's spare move was never requested
        assert game.movers[Mark.X].moves == [5]

    def test_illegal_move_is_rejected_without_change(self):
        game = make_game([4], [4])
        game.step()
        with pytest.raises(InvalidIndex):
            game.step()
        assert game.state == LoopState.AWAITING_O
        assert len(game.moves) == 1
        assert game.empty_cells == 8
        assert str(game.board) == "____X____"

    def test_out_of_range_move_is_rejected(self):
        game = make_game([9], [])
        with pytest.raises(InvalidIndex):
            game.step()
        assert game.board.empty_indexes() == list(range(9))

    def test_history(self):
        game = make_game([0, 1, 2], [3, 4])
        game.play()
        assert game.moves[0] == Move(mark=Mark.X, index=0, move_number=1)
        assert game.moves[1] == Move(mark=Mark.O, index=3, move_number=2)
        assert [m.move_number for m in game.moves] == [1, 2, 3, 4, 5]

    def test_empty_counter_matches_board(self):
        def check(board, move):
            assert len(board.empty_indexes()) == 9 - move.move_number

        make_game([0, 2, 3, 7, 8], [1, 4, 5, 6], on_move=check).play()

    def test_on_move_called_after_every_move(self):
        seen = []
        game = make_game([0, 1, 2], [3, 4], on_move=lambda board, move: seen.append((str(board), move.index)))
        game.play()
        assert [index for _, index in seen] == [0, 3, 1, 4, 2]
        assert seen[0][0] == "X________"
        assert seen[-1][0] == "XXXOO____"

    def test_movers_see_the_live_board(self):
        game = make_game([0, 1], [4, 8])
        game.step()
        game.step()
        game.step()
        assert game.movers[Mark.O].boards_seen == ["X________"]
        assert game.movers[Mark.X].boards_seen == ["_________", "X___O____"]

    def test_marks_must_match_sides(self):
        with pytest.raises(MarkMismatch):
            GameLoop(ScriptedMover(Mark.O, []), ScriptedMover(Mark.X, []))
        with pytest.raises(MarkMismatch):
            GameLoop(ScriptedMover(Mark.X, []), ScriptedMover(Mark.X, []))

    def test_mark_mismatch_is_a_game_exception(self):
        assert issubclass(MarkMismatch, GameException)
