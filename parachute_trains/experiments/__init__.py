"""Experiment orchestration: multi-distance sweeps."""

from parachute_trains.experiments.sweep import run_distance_sweep, summarize_sweep

__all__ = ["run_distance_sweep", "summarize_sweep"]
