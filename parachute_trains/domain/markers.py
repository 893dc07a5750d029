"""Fixed home markers, one per agent."""

from __future__ import annotations

from dataclasses import dataclass

from parachute_trains.config.constants import HOME_MARKER_POSITION


@dataclass(frozen=True)
class MarkerLayout:
    """Positions of the two indistinguishable markers on the line."""

    home_1: int
    home_2: int

    @classmethod
    def from_distance(cls, initial_distance: int) -> MarkerLayout:
        """Place agent 1's marker at the origin and agent 2's *initial_distance* away."""
        return cls(
            home_1=HOME_MARKER_POSITION,
            home_2=HOME_MARKER_POSITION + initial_distance,
        )

    @property
    def positions(self) -> tuple[int, int]:
        return (self.home_1, self.home_2)

    def is_marker(self, position: int) -> bool:
        """Return the one bit an agent can sense: is *position* on any marker."""
        return position == self.home_1 or position == self.home_2
