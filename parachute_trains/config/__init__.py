"""Configuration layer: constants and typed config dataclasses."""

from parachute_trains.config.constants import (
    DEFAULT_MAX_STEPS,
    HOME_MARKER_POSITION,
    INITIAL_SEARCH_RADIUS,
    MAX_SWEEP_WORK_UNITS,
    MAX_UI_DISTANCE,
    MIN_UI_DISTANCE,
    NUM_AGENTS,
    TRACE_FLUSH_THRESHOLD,
)
from parachute_trains.config.types import RunConfig, RunResult, SweepConfig

__all__ = [
    "DEFAULT_MAX_STEPS",
    "HOME_MARKER_POSITION",
    "INITIAL_SEARCH_RADIUS",
    "MAX_SWEEP_WORK_UNITS",
    "MAX_UI_DISTANCE",
    "MIN_UI_DISTANCE",
    "NUM_AGENTS",
    "RunConfig",
    "RunResult",
    "SweepConfig",
    "TRACE_FLUSH_THRESHOLD",
]
