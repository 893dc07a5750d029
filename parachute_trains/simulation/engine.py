"""Run driver: repeated ticks from a fresh scenario to collision or step bound."""

from __future__ import annotations

import logging

from parachute_trains.config.constants import DEFAULT_MAX_STEPS
from parachute_trains.config.types import RunResult
from parachute_trains.domain.agent import Phase
from parachute_trains.domain.scenario import ScenarioState, create_initial_scenario
from parachute_trains.simulation.step import advance

logger = logging.getLogger(__name__)


def collision_step_bound(initial_distance: int) -> int:
    """Return the tick at which agents starting *initial_distance* apart collide.

    Agent 1 reaches its partner's marker at the end of the forward leg of sweep
    radius ``d`` after ``2d^2 - d`` ticks, then both close at two cells per tick.
    """
    if initial_distance < 0:
        raise ValueError("initial_distance must be >= 0")
    d = initial_distance
    if d == 0:
        return 0
    return 2 * d * d - d + (d + 1) // 2


def run_until_collision(
    initial_distance: int, max_steps: int = DEFAULT_MAX_STEPS
) -> list[ScenarioState]:
    """Simulate from the initial scenario and return every snapshot in order.

    The history starts with the tick-0 snapshot and ends with the first
    collided snapshot, or with the snapshot at ``max_steps`` if the bound is
    hit first. Hitting the bound is not an error.
    """
    if max_steps < 0:
        raise ValueError("max_steps must be >= 0")

    state = create_initial_scenario(initial_distance)
    history = [state]
    while not state.collided and state.step_index < max_steps:
        state = advance(state)
        history.append(state)

    if state.collided:
        logger.debug(
            "distance=%d collided at step %d position %s",
            initial_distance,
            state.step_index,
            state.collision_position,
        )
    else:
        logger.warning(
            "distance=%d reached max_steps=%d without collision", initial_distance, max_steps
        )
    return history


def _switch_step(history: list[ScenarioState], agent_index: int) -> int | None:
    """Return the first step at which the given agent is chasing."""
    for snapshot in history:
        if snapshot.agents[agent_index].phase == Phase.CHASING:
            return snapshot.step_index
    return None


def summarize_run(history: list[ScenarioState]) -> RunResult:
    """Condense a run history into a :class:`RunResult`."""
    if not history:
        raise ValueError("history must not be empty")
    first, last = history[0], history[-1]
    return RunResult(
        initial_distance=first.initial_distance,
        collided=last.collided,
        collision_step=last.step_index if last.collided else None,
        collision_position=last.collision_position,
        total_steps=last.step_index,
        switch_step_1=_switch_step(history, 0),
        switch_step_2=_switch_step(history, 1),
        final_search_radius_1=last.agent_1.search_radius,
        final_search_radius_2=last.agent_2.search_radius,
    )
