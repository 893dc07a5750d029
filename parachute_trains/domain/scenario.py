"""Immutable scenario snapshots and the initial-state constructor."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from parachute_trains.domain.agent import AgentState, Phase
from parachute_trains.domain.markers import MarkerLayout


@dataclass(frozen=True)
class ScenarioState:
    """Full state of both agents and both markers at one tick."""

    agent_1: AgentState
    agent_2: AgentState
    markers: MarkerLayout
    step_index: int = 0
    collided: bool = False
    collision_position: Fraction | None = None

    def __post_init__(self) -> None:
        if self.step_index < 0:
            raise ValueError("step_index must be >= 0")
        if self.collided != (self.collision_position is not None):
            raise ValueError("collision_position must be set exactly when collided")

    @property
    def agents(self) -> tuple[AgentState, AgentState]:
        return (self.agent_1, self.agent_2)

    @property
    def initial_distance(self) -> int:
        return self.markers.home_2 - self.markers.home_1

    @property
    def both_searching(self) -> bool:
        return self.agent_1.phase == Phase.SEARCHING and self.agent_2.phase == Phase.SEARCHING


def create_initial_scenario(initial_distance: int) -> ScenarioState:
    """Build the tick-0 snapshot with agent 2 *initial_distance* ahead of agent 1.

    A distance of zero puts both agents on the same marker, which is treated as
    an immediate collision at the shared start.
    """
    if initial_distance < 0:
        raise ValueError("initial_distance must be >= 0")
    markers = MarkerLayout.from_distance(initial_distance)
    degenerate = initial_distance == 0
    return ScenarioState(
        agent_1=AgentState.at_start(markers.home_1),
        agent_2=AgentState.at_start(markers.home_2),
        markers=markers,
        step_index=0,
        collided=degenerate,
        collision_position=Fraction(markers.home_1) if degenerate else None,
    )
