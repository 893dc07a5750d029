"""Two identical trains on an infinite line that must meet using one bit of sensing."""

from parachute_trains.domain import (
    AgentState,
    ChaseDirection,
    Direction,
    MarkerLayout,
    Phase,
    ScenarioState,
    create_initial_scenario,
    decide,
)
from parachute_trains.playback import PlaybackCursor, viewport
from parachute_trains.simulation import (
    advance,
    collision_step_bound,
    run_until_collision,
    summarize_run,
)

__all__ = [
    "AgentState",
    "ChaseDirection",
    "Direction",
    "MarkerLayout",
    "Phase",
    "PlaybackCursor",
    "ScenarioState",
    "advance",
    "collision_step_bound",
    "create_initial_scenario",
    "decide",
    "run_until_collision",
    "summarize_run",
    "viewport",
]
