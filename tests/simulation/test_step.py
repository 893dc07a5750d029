"""Tests for single-tick advance and the collision predicate."""

from __future__ import annotations

from fractions import Fraction

from parachute_trains.domain.agent import ChaseDirection, Direction, Phase
from parachute_trains.domain.scenario import create_initial_scenario
from parachute_trains.simulation.step import advance, detect_collision


class TestDetectCollision:
    def test_same_cell(self) -> None:
        assert detect_collision(2, 4, 3, 3) == Fraction(3)

    def test_swap_uses_pre_tick_midpoint(self) -> None:
        assert detect_collision(1, 2, 2, 1) == Fraction(3, 2)

    def test_swap_from_reversed_order(self) -> None:
        assert detect_collision(2, 1, 1, 2) == Fraction(3, 2)

    def test_parallel_motion_is_not_collision(self) -> None:
        assert detect_collision(0, 1, 1, 2) is None
        assert detect_collision(5, 2, 4, 1) is None

    def test_multi_cell_crossing(self) -> None:
        assert detect_collision(0, 4, 5, -1) == Fraction(2)


class TestAdvance:
    def test_first_tick_moves_both_forward(self) -> None:
        nxt = advance(create_initial_scenario(2))
        assert nxt.step_index == 1
        assert (nxt.agent_1.absolute_position, nxt.agent_2.absolute_position) == (1, 3)
        assert (nxt.agent_1.relative_position, nxt.agent_2.relative_position) == (1, 1)
        assert not nxt.collided

    def test_markers_never_change(self) -> None:
        scenario = create_initial_scenario(4)
        for _ in range(30):
            nxt = advance(scenario)
            assert nxt.markers == scenario.markers
            scenario = nxt

    def test_collided_state_is_returned_unchanged(self) -> None:
        collided = create_initial_scenario(0)
        assert advance(collided) is collided
        assert advance(advance(collided)).step_index == 0

    def test_distance_one_agents_swap_on_second_tick(self) -> None:
        first = advance(create_initial_scenario(1))
        assert (first.agent_1.absolute_position, first.agent_2.absolute_position) == (1, 2)
        assert not first.collided

        second = advance(first)
        assert second.step_index == 2
        assert second.collided
        assert second.collision_position == Fraction(3, 2)
        assert (second.agent_1.absolute_position, second.agent_2.absolute_position) == (2, 1)
        assert second.agent_1.phase == Phase.CHASING
        assert second.agent_1.chase_direction == ChaseDirection.FORWARD
        assert second.agent_2.phase == Phase.SEARCHING
        assert second.agent_2.search_direction == Direction.BACKWARD
