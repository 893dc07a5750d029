"""Domain layer: agent strategy, marker layout and scenario snapshots."""

from parachute_trains.domain.agent import (
    AgentDecision,
    AgentMemory,
    AgentState,
    ChaseDirection,
    Direction,
    Phase,
    decide,
)
from parachute_trains.domain.markers import MarkerLayout
from parachute_trains.domain.scenario import ScenarioState, create_initial_scenario

__all__ = [
    "AgentDecision",
    "AgentMemory",
    "AgentState",
    "ChaseDirection",
    "Direction",
    "MarkerLayout",
    "Phase",
    "ScenarioState",
    "create_initial_scenario",
    "decide",
]
