import pytest

from beancounter.core.bean import Bean
from beancounter.core.board import BoardEngine
from beancounter.core.exceptions import BoardIndexError
from beancounter.core.policy import RandomPolicy, SkillPolicy


def skill_beans(slot_count, *levels):
    return [Bean(SkillPolicy.with_level(slot_count, level)) for level in levels]


def run_to_end(board):
    steps = 0
    while board.advance_step():
        steps += 1
    return steps


class TestConstruction:
    def test_empty_board(self):
        board = BoardEngine(4)

        assert board.slot_count == 4
        assert board.get_slot_counts() == [0, 0, 0, 0]
        assert board.get_remaining_bean_count() == 0
        assert board.get_in_flight_count() == 0
        assert board.is_finished()

    @pytest.mark.parametrize("slot_count", [0, -3])
    def test_rejects_non_positive_slot_count(self, slot_count):
        with pytest.raises(ValueError):
            BoardEngine(slot_count)


class TestReset:
    def test_reset_places_first_bean_at_top(self):
        board = BoardEngine(3)
        board.reset(skill_beans(3, 1, 1, 1))

        assert board.get_remaining_bean_count() == 2
        assert board.get_in_flight_x(0) == 0
        assert board.get_in_flight_x(1) is None
        assert board.get_in_flight_count() == 1
        assert board.get_average_slot_bean_count() == 0.0

    def test_single_slot_no_beans(self):
        board = BoardEngine(1)
        board.reset([])

        assert board.get_remaining_bean_count() == 0
        assert board.get_in_flight_x(0) is None
        assert board.get_average_slot_bean_count() == 0
        assert board.advance_step() is False

    def test_reset_discards_previous_state(self):
        board = BoardEngine(3)
        board.reset(skill_beans(3, 0, 2))
        run_to_end(board)
        assert board.count_beans_in_slots() == 2

        board.reset(skill_beans(3, 1))

        assert board.count_beans_in_slots() == 0
        assert board.get_remaining_bean_count() == 0
        assert board.get_in_flight_x(0) == 0

    def test_reset_restarts_bean_progress(self):
        board = BoardEngine(3)
        beans = skill_beans(3, 2)
        beans[0].decide_next()
        assert beans[0].steps_taken == 2

        board.reset(beans)
        assert beans[0].steps_taken == 1


class TestAdvanceStep:
    def test_skill_bean_with_level_two_lands_in_last_slot(self):
        board = BoardEngine(3)
        board.reset(skill_beans(3, 2))

        assert board.advance_step() is True
        assert board.get_in_flight_x(1) == 1
        assert board.advance_step() is True
        assert board.get_in_flight_x(2) == 2
        assert board.advance_step() is True
        assert board.get_slot_counts() == [0, 0, 1]
        assert board.advance_step() is False
        assert [board.get_in_flight_x(y) for y in range(3)] == [None, None, None]

    def test_one_row_per_step_and_one_insertion(self, scripted_rng):
        rng = scripted_rng(bits=[1, 0, 1, 1])
        first, second = Bean(RandomPolicy(3, rng)), Bean(RandomPolicy(3, rng))
        board = BoardEngine(3)
        board.reset([first, second])

        assert board.advance_step()
        assert [board.get_in_flight_x(y) for y in range(3)] == [0, 1, None]
        assert board.advance_step()
        assert [board.get_in_flight_x(y) for y in range(3)] == [None, 1, 1]
        assert board.advance_step()
        assert [board.get_in_flight_x(y) for y in range(3)] == [None, None, 2]
        assert board.get_slot_beans(1) == [first]
        assert board.advance_step()
        assert board.get_slot_beans(2) == [second]
        assert not board.advance_step()
        assert rng.randint_calls == 4

    def test_lower_rows_decide_first(self, scripted_rng):
        rng = scripted_rng(bits=[1, 0, 0])
        first, second = Bean(RandomPolicy(3, rng)), Bean(RandomPolicy(3, rng))
        board = BoardEngine(3)
        board.reset([first, second])
        board.advance_step()  # first draws 1
        board.advance_step()  # first draws 0, then second draws 0

        assert board.get_in_flight_x(2) == 1
        assert board.get_in_flight_x(1) == 0

    def test_single_slot_board(self):
        board = BoardEngine(1)
        board.reset(skill_beans(1, 0, 3))

        assert board.advance_step()
        assert board.get_slot_counts() == [1]
        assert board.get_in_flight_x(0) == 0
        assert board.advance_step()
        assert board.get_slot_counts() == [2]
        assert not board.advance_step()

    @pytest.mark.parametrize("bean_count, slot_count", [(1, 1), (1, 3), (4, 2), (5, 5)])
    def test_step_count(self, bean_count, slot_count):
        board = BoardEngine(slot_count)
        board.reset(skill_beans(slot_count, *([0] * bean_count)))
        assert run_to_end(board) == bean_count + slot_count - 1

    def test_out_of_range_indices_fail_fast(self):
        board = BoardEngine(3)
        with pytest.raises(BoardIndexError):
            board.get_in_flight_x(3)
        with pytest.raises(BoardIndexError):
            board.get_in_flight_x(-1)
        with pytest.raises(IndexError):
            board.get_slot_count(5)
        with pytest.raises(IndexError):
            board.get_slot_beans(-1)


class TestStatistics:
    def test_average_matches_weighted_mean(self):
        board = BoardEngine(3)
        board.reset(skill_beans(3, 0, 0, 2))
        run_to_end(board)

        assert board.get_slot_counts() == [2, 0, 1]
        assert board.count_beans_in_slots() == 3
        assert board.get_slot_count(0) == 2
        assert board.get_average_slot_bean_count() == pytest.approx(0.6667, abs=1e-4)

    def test_skill_levels_beyond_range_are_capped(self):
        board = BoardEngine(3)
        board.reset(skill_beans(3, -1, 7))
        run_to_end(board)

        assert board.get_slot_counts() == [1, 0, 1]


class TestHalfFilters:
    def test_upper_half_removes_low_slots_oldest_first(self):
        board = BoardEngine(3)
        beans = skill_beans(3, 0, 1, 1, 2)
        board.reset(beans)
        run_to_end(board)
        assert board.get_slot_counts() == [1, 2, 1]

        board.upper_half()

        assert board.get_slot_counts() == [0, 1, 1]
        assert board.get_slot_beans(1) == [beans[2]]

    def test_lower_half_removes_high_slots_oldest_first(self):
        board = BoardEngine(3)
        beans = skill_beans(3, 0, 1, 1, 2)
        board.reset(beans)
        run_to_end(board)

        board.lower_half()

        assert board.get_slot_counts() == [1, 1, 0]
        assert board.get_slot_beans(1) == [beans[2]]

    def test_odd_total_keeps_larger_half(self):
        board = BoardEngine(3)
        board.reset(skill_beans(3, 0, 0, 2))
        run_to_end(board)
        board.upper_half()
        assert board.get_slot_counts() == [1, 0, 1]

        board = BoardEngine(3)
        board.reset(skill_beans(3, 0, 0, 2))
        run_to_end(board)
        board.lower_half()
        assert board.get_slot_counts() == [2, 0, 0]

    def test_filters_on_empty_board(self):
        board = BoardEngine(2)
        board.upper_half()
        board.lower_half()
        assert board.get_slot_counts() == [0, 0]


class TestRepeat:
    def test_skill_mode_repeat_gives_identical_counts(self, scripted_rng):
        rng = scripted_rng(gaussians=[-1.0, 0.0, 0.4, 2.5, -0.3])
        beans = [Bean.create(5, False, rng) for _ in range(5)]
        board = BoardEngine(5)
        board.reset(beans)
        run_to_end(board)
        first = board.get_slot_counts()

        board.repeat()
        assert board.get_remaining_bean_count() == 4
        assert board.get_in_flight_x(0) == 0
        run_to_end(board)

        assert board.get_slot_counts() == first
        assert rng.gauss_calls == 5

    def test_repeat_collects_rows_then_slots(self):
        board = BoardEngine(3)
        a, b, c, d = skill_beans(3, 2, 0, 1, 1)
        board.reset([a, b, c, d])
        for _ in range(3):
            board.advance_step()
        assert [board.get_in_flight_x(y) for y in range(3)] == [0, 1, 0]
        assert board.get_slot_beans(2) == [a]

        board.repeat()

        assert board.get_slot_counts() == [0, 0, 0]
        assert board.get_in_flight_x(0) == 0
        assert board.get_remaining_bean_count() == 3
        assert all(bean.steps_taken == 1 for bean in (a, b, c, d))

        run_to_end(board)
        assert board.get_slot_beans(0) == [b]
        assert board.get_slot_beans(1) == [d, c]
        assert board.get_slot_beans(2) == [a]

    def test_repeat_keeps_remaining_pool(self):
        board = BoardEngine(2)
        beans = skill_beans(2, 1, 1, 1)
        board.reset(beans)
        board.advance_step()
        board.repeat()

        assert board.total_bean_count() == 3
        run_to_end(board)
        assert board.get_slot_counts() == [0, 3]

    def test_repeat_on_empty_board(self):
        board = BoardEngine(2)
        board.reset([])
        board.repeat()
        assert board.is_finished()
        assert not board.advance_step()


def test_luck_beans_follow_the_shared_source(always_right_rng):
    board = BoardEngine(4)
    board.reset([Bean(RandomPolicy(4, always_right_rng)) for _ in range(3)])
    run_to_end(board)
    assert board.get_slot_counts() == [0, 0, 0, 3]


def test_repr():
    board = BoardEngine(2)
    board.reset(skill_beans(2, 0, 0))
    assert repr(board) == "BoardEngine(slot_count=2, remaining=1, in_flight=1, slots=[0, 0])"
