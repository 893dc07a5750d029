"""Tests for the per-tick decision rule and agent state invariants."""

from __future__ import annotations

import pytest

from parachute_trains.domain.agent import (
    AgentMemory,
    AgentState,
    ChaseDirection,
    Direction,
    Phase,
    decide,
)


def _sweep(ticks: int) -> list[AgentState]:
    state = AgentState.at_start(0)
    states = []
    for _ in range(ticks):
        decision = decide(state, at_marker=False)
        state = state.moved(decision.displacement, decision.memory)
        states.append(state)
    return states


class TestSearchSweep:
    def test_relative_positions_follow_expanding_sweep(self) -> None:
        rel = [s.relative_position for s in _sweep(15)]
        assert rel == [1, 0, -1, 0, 1, 2, 1, 0, -1, -2, -1, 0, 1, 2, 3]

    def test_radius_grows_at_negative_edge(self) -> None:
        radii = [s.search_radius for s in _sweep(15)]
        assert radii == [1, 1, 1, 2, 2, 2, 2, 2, 2, 2, 3, 3, 3, 3, 3]

    def test_direction_flips_at_edges(self) -> None:
        directions = [s.search_direction for s in _sweep(5)]
        assert directions == [
            Direction.FORWARD,
            Direction.BACKWARD,
            Direction.BACKWARD,
            Direction.FORWARD,
            Direction.FORWARD,
        ]

    def test_every_move_is_one_cell(self) -> None:
        states = [AgentState.at_start(0), *_sweep(40)]
        for before, after in zip(states, states[1:], strict=False):
            assert abs(after.relative_position - before.relative_position) == 1

    def test_home_marker_is_ignored(self) -> None:
        decision = decide(AgentState.at_start(0), at_marker=True)
        assert decision.displacement == 1
        assert decision.memory.phase == Phase.SEARCHING
        assert not decision.memory.found_other_marker


class TestMarkerSwitch:
    def test_positive_offset_starts_forward_chase(self) -> None:
        memory = AgentMemory(search_radius=3, search_direction=Direction.FORWARD)
        decision = decide(AgentState(absolute_position=5, relative_position=3, memory=memory), True)
        assert decision.displacement == 1
        assert decision.memory == AgentMemory(
            phase=Phase.CHASING,
            search_radius=3,
            search_direction=Direction.FORWARD,
            found_other_marker=True,
            chase_direction=ChaseDirection.FORWARD,
        )

    def test_negative_offset_starts_backward_chase(self) -> None:
        memory = AgentMemory(search_radius=2, search_direction=Direction.BACKWARD)
        decision = decide(AgentState(absolute_position=0, relative_position=-2, memory=memory), True)
        assert decision.displacement == -1
        assert decision.memory.chase_direction == ChaseDirection.BACKWARD
        assert decision.memory.phase == Phase.CHASING

    def test_chasing_ignores_further_markers(self) -> None:
        memory = AgentMemory(
            phase=Phase.CHASING,
            search_radius=4,
            search_direction=Direction.FORWARD,
            found_other_marker=True,
            chase_direction=ChaseDirection.BACKWARD,
        )
        state = AgentState(absolute_position=9, relative_position=-6, memory=memory)
        for at_marker in (True, False):
            decision = decide(state, at_marker)
            assert decision.displacement == -1
            assert decision.memory == memory

    def test_absolute_position_does_not_affect_decision(self) -> None:
        memory = AgentMemory(search_radius=2, search_direction=Direction.FORWARD)
        near = AgentState(absolute_position=2, relative_position=2, memory=memory)
        far = AgentState(absolute_position=-1000, relative_position=2, memory=memory)
        for at_marker in (True, False):
            assert decide(near, at_marker) == decide(far, at_marker)


class TestInvariants:
    def test_radius_below_one_rejected(self) -> None:
        with pytest.raises(ValueError, match="search_radius must be >= 1"):
            AgentMemory(search_radius=0)

    def test_chasing_without_heading_rejected(self) -> None:
        with pytest.raises(ValueError, match="must agree"):
            AgentMemory(phase=Phase.CHASING, found_other_marker=True)

    def test_found_marker_while_searching_rejected(self) -> None:
        with pytest.raises(ValueError, match="must agree"):
            AgentMemory(found_other_marker=True, chase_direction=ChaseDirection.FORWARD)

    def test_heading_without_chase_rejected(self) -> None:
        with pytest.raises(ValueError, match="must agree"):
            AgentMemory(chase_direction=ChaseDirection.FORWARD)

    def test_toward_uses_sign(self) -> None:
        assert ChaseDirection.toward(7) == ChaseDirection.FORWARD
        assert ChaseDirection.toward(-1) == ChaseDirection.BACKWARD
        assert ChaseDirection.toward(0) == ChaseDirection.NONE

    def test_fresh_agent_defaults(self) -> None:
        agent = AgentState.at_start(4)
        assert agent.absolute_position == 4
        assert agent.relative_position == 0
        assert agent.phase == Phase.SEARCHING
        assert agent.search_radius == 1
        assert agent.search_direction == Direction.FORWARD
        assert not agent.found_other_marker
        assert agent.chase_direction == ChaseDirection.NONE
