"""Simulation engine: tick advance, run driver and Parquet persistence."""

from parachute_trains.simulation.engine import (
    collision_step_bound,
    run_until_collision,
    summarize_run,
)
from parachute_trains.simulation.persistence import (
    flush_trace_columns,
    history_to_table,
    read_trace,
    write_trace,
)
from parachute_trains.simulation.step import advance, detect_collision

__all__ = [
    "advance",
    "collision_step_bound",
    "detect_collision",
    "flush_trace_columns",
    "history_to_table",
    "read_trace",
    "run_until_collision",
    "summarize_run",
    "write_trace",
]
