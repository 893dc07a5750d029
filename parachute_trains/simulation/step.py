"""Single-tick advance of a scenario and the collision predicate."""

from __future__ import annotations

from fractions import Fraction

from parachute_trains.domain.agent import decide
from parachute_trains.domain.scenario import ScenarioState


def detect_collision(
    before_1: int, before_2: int, after_1: int, after_2: int
) -> Fraction | None:
    """Return where the agents met during a tick, or ``None``.

    Agents collide when they end the tick on the same cell, or when their
    strict pre-tick order closed or inverted. A crossing without a shared
    cell is placed at the midpoint of the pre-tick positions.
    """
    if after_1 == after_2:
        return Fraction(after_1)
    crossed = (before_1 < before_2 and after_1 >= after_2) or (
        before_1 > before_2 and after_1 <= after_2
    )
    if crossed:
        return Fraction(before_1 + before_2, 2)
    return None


def advance(scenario: ScenarioState) -> ScenarioState:
    """Advance *scenario* by one tick; collided scenarios are returned unchanged."""
    if scenario.collided:
        return scenario

    markers = scenario.markers
    agent_1, agent_2 = scenario.agent_1, scenario.agent_2

    # Sensing uses the pre-move positions
    decision_1 = decide(agent_1, markers.is_marker(agent_1.absolute_position))
    decision_2 = decide(agent_2, markers.is_marker(agent_2.absolute_position))

    next_1 = agent_1.moved(decision_1.displacement, decision_1.memory)
    next_2 = agent_2.moved(decision_2.displacement, decision_2.memory)

    collision_position = detect_collision(
        agent_1.absolute_position,
        agent_2.absolute_position,
        next_1.absolute_position,
        next_2.absolute_position,
    )
    return ScenarioState(
        agent_1=next_1,
        agent_2=next_2,
        markers=markers,
        step_index=scenario.step_index + 1,
        collided=collision_position is not None,
        collision_position=collision_position,
    )
