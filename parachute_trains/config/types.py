"""Configuration dataclasses and result containers for rendezvous runs.

All frozen dataclasses that parameterise single runs and distance sweeps live
here, together with the per-run summary record.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from pathlib import Path

from parachute_trains.config.constants import DEFAULT_MAX_STEPS, MAX_SWEEP_WORK_UNITS

__all__ = [
    "MAX_SWEEP_WORK_UNITS",
    "RunConfig",
    "RunResult",
    "SweepConfig",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunResult:
    """Summary of one run from a single initial distance."""

    initial_distance: int
    collided: bool
    collision_step: int | None
    collision_position: Fraction | None
    total_steps: int
    switch_step_1: int | None
    switch_step_2: int | None
    final_search_radius_1: int
    final_search_radius_2: int

    def to_row(self) -> dict[str, int | float | bool | None]:
        """Return a flat row suitable for Arrow tables and JSON output."""
        return {
            "initial_distance": self.initial_distance,
            "collided": self.collided,
            "collision_step": self.collision_step,
            "collision_position": (
                None if self.collision_position is None else float(self.collision_position)
            ),
            "total_steps": self.total_steps,
            "switch_step_1": self.switch_step_1,
            "switch_step_2": self.switch_step_2,
            "final_search_radius_1": self.final_search_radius_1,
            "final_search_radius_2": self.final_search_radius_2,
        }


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunConfig:
    """Parameters for a single run."""

    initial_distance: int
    max_steps: int = DEFAULT_MAX_STEPS

    def __post_init__(self) -> None:
        if self.initial_distance < 0:
            raise ValueError("initial_distance must be >= 0")
        if self.max_steps < 0:
            raise ValueError("max_steps must be >= 0")


@dataclass(frozen=True)
class SweepConfig:
    """Parameters for running many initial distances in one batch."""

    distances: tuple[int, ...]
    max_steps: int = DEFAULT_MAX_STEPS
    out_dir: Path = Path("data")
    write_traces: bool = False

    def __post_init__(self) -> None:
        if not self.distances:
            raise ValueError("distances must not be empty")
        if any(d < 0 for d in self.distances):
            raise ValueError("distances must be >= 0")
        if len(set(self.distances)) != len(self.distances):
            raise ValueError("distances must be distinct")
        if self.max_steps < 0:
            raise ValueError("max_steps must be >= 0")
        if len(self.distances) * self.max_steps > MAX_SWEEP_WORK_UNITS:
            raise ValueError("sweep workload exceeds safety threshold; reduce distances/max_steps")

    @classmethod
    def from_range(
        cls,
        min_distance: int,
        max_distance: int,
        max_steps: int = DEFAULT_MAX_STEPS,
        out_dir: Path = Path("data"),
        write_traces: bool = False,
    ) -> SweepConfig:
        """Build a sweep over every distance in ``[min_distance, max_distance]``."""
        if max_distance < min_distance:
            raise ValueError("max_distance must be >= min_distance")
        return cls(
            distances=tuple(range(min_distance, max_distance + 1)),
            max_steps=max_steps,
            out_dir=Path(out_dir),
            write_traces=write_traces,
        )
