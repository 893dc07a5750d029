"""Agent state and the per-tick decision rule shared by both trains.

Each train only knows its displacement from its own start and whether it is
standing on *a* marker. It cannot tell its own marker from its partner's, but
it started on its own marker at relative position 0, so any marker seen at a
nonzero relative position must belong to the partner.

The search sweep expands around the start in the order
``0 -> +1 -> 0 -> -1 -> 0 -> +2 -> ... -> -2 -> 0 -> +3 -> ...``; the first
non-home marker switches the train into a fixed-direction chase.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from parachute_trains.config.constants import INITIAL_SEARCH_RADIUS


class Phase(Enum):
    """Behavioural mode of one agent."""

    SEARCHING = "searching"
    CHASING = "chasing"


class Direction(IntEnum):
    """Sweep direction; the value is the step sign."""

    FORWARD = 1
    BACKWARD = -1


class ChaseDirection(IntEnum):
    """Chase heading, ``NONE`` until the partner's marker is found."""

    NONE = 0
    FORWARD = 1
    BACKWARD = -1

    @classmethod
    def toward(cls, relative_position: int) -> ChaseDirection:
        """Heading that continues away from the start through *relative_position*."""
        if relative_position > 0:
            return cls.FORWARD
        if relative_position < 0:
            return cls.BACKWARD
        return cls.NONE


@dataclass(frozen=True)
class AgentMemory:
    """Strategy-owned fields of an agent, excluding positions."""

    phase: Phase = Phase.SEARCHING
    search_radius: int = INITIAL_SEARCH_RADIUS
    search_direction: Direction = Direction.FORWARD
    found_other_marker: bool = False
    chase_direction: ChaseDirection = ChaseDirection.NONE

    def __post_init__(self) -> None:
        if self.search_radius < 1:
            raise ValueError("search_radius must be >= 1")
        chasing = self.phase == Phase.CHASING
        has_heading = self.chase_direction != ChaseDirection.NONE
        if not (chasing == has_heading == self.found_other_marker):
            raise ValueError(
                "phase, found_other_marker and chase_direction must agree: "
                "chasing requires a found marker and a heading"
            )


@dataclass(frozen=True)
class AgentState:
    """Immutable snapshot of one agent at one tick.

    ``absolute_position`` exists for collision geometry and display only; the
    decision rule never reads it.
    """

    absolute_position: int
    relative_position: int
    memory: AgentMemory = field(default_factory=AgentMemory)

    @classmethod
    def at_start(cls, absolute_position: int) -> AgentState:
        """Fresh searching agent standing on its home marker."""
        return cls(absolute_position=absolute_position, relative_position=0)

    @property
    def phase(self) -> Phase:
        return self.memory.phase

    @property
    def search_radius(self) -> int:
        return self.memory.search_radius

    @property
    def search_direction(self) -> Direction:
        return self.memory.search_direction

    @property
    def found_other_marker(self) -> bool:
        return self.memory.found_other_marker

    @property
    def chase_direction(self) -> ChaseDirection:
        return self.memory.chase_direction

    def moved(self, displacement: int, memory: AgentMemory) -> AgentState:
        """Return the next state after moving by *displacement* with new *memory*."""
        return AgentState(
            absolute_position=self.absolute_position + displacement,
            relative_position=self.relative_position + displacement,
            memory=memory,
        )


@dataclass(frozen=True)
class AgentDecision:
    """Movement for this tick plus the complete memory for the next one."""

    displacement: int
    memory: AgentMemory


def decide(state: AgentState, at_marker: bool) -> AgentDecision:
    """Apply the rendezvous rule to one agent for one tick.

    Rules are tried in priority order: partner-marker detection, chasing,
    then the expanding search sweep. Every field of the returned memory is set
    explicitly by the rule that fires.
    """
    rel = state.relative_position
    mem = state.memory

    if at_marker and rel != 0 and not mem.found_other_marker:
        heading = ChaseDirection.toward(rel)
        return AgentDecision(
            displacement=int(heading),
            memory=AgentMemory(
                phase=Phase.CHASING,
                search_radius=mem.search_radius,
                search_direction=mem.search_direction,
                found_other_marker=True,
                chase_direction=heading,
            ),
        )

    if mem.phase == Phase.CHASING:
        return AgentDecision(
            displacement=int(mem.chase_direction),
            memory=AgentMemory(
                phase=Phase.CHASING,
                search_radius=mem.search_radius,
                search_direction=mem.search_direction,
                found_other_marker=True,
                chase_direction=mem.chase_direction,
            ),
        )

    radius = mem.search_radius
    if mem.search_direction == Direction.FORWARD:
        if rel < radius:
            next_radius, next_direction = radius, Direction.FORWARD
        else:
            # Turn at the positive edge of the sweep
            next_radius, next_direction = radius, Direction.BACKWARD
    elif rel > -radius:
        next_radius, next_direction = radius, Direction.BACKWARD
    else:
        # Turn at the negative edge and widen the sweep
        next_radius, next_direction = radius + 1, Direction.FORWARD

    return AgentDecision(
        displacement=int(next_direction),
        memory=AgentMemory(
            phase=Phase.SEARCHING,
            search_radius=next_radius,
            search_direction=next_direction,
            found_other_marker=False,
            chase_direction=ChaseDirection.NONE,
        ),
    )
