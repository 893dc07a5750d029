"""Replay cursor over a precomputed run history.

Front ends own a :class:`PlaybackCursor` and move it on their own schedule;
nothing here depends on wall-clock time.
"""

from __future__ import annotations

from collections.abc import Sequence

from parachute_trains.domain.scenario import ScenarioState


class PlaybackCursor:
    """Index into an immutable history, clamped to its bounds."""

    def __init__(self, history: Sequence[ScenarioState]) -> None:
        if not history:
            raise ValueError("history must not be empty")
        self._history = tuple(history)
        self._index = 0

    def __len__(self) -> int:
        return len(self._history)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> ScenarioState:
        return self._history[self._index]

    @property
    def at_start(self) -> bool:
        return self._index == 0

    @property
    def at_end(self) -> bool:
        return self._index == len(self._history) - 1

    def seek(self, index: int) -> ScenarioState:
        """Move to *index*, clamped to ``[0, len - 1]``."""
        self._index = max(0, min(index, len(self._history) - 1))
        return self.current

    def step_forward(self) -> ScenarioState:
        return self.seek(self._index + 1)

    def step_back(self) -> ScenarioState:
        return self.seek(self._index - 1)

    def reset(self) -> ScenarioState:
        return self.seek(0)


def viewport(
    snapshot: ScenarioState, margin: int = 5, min_width: int = 20
) -> tuple[float, int]:
    """Return ``(center, width)`` of a window showing both agents and markers."""
    positions = [
        snapshot.agent_1.absolute_position,
        snapshot.agent_2.absolute_position,
        *snapshot.markers.positions,
    ]
    low, high = min(positions), max(positions)
    return (low + high) / 2, max(high - low + 2 * margin, min_width)
