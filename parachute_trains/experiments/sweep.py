"""Distance sweep orchestration with Parquet and JSON outputs."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import numpy as np
import pyarrow as pa
import pyarrow.parquet as pq

from parachute_trains.config.types import RunResult, SweepConfig
from parachute_trains.io.paths import logs_dir, sweep_runs_path, sweep_summary_path, trace_path
from parachute_trains.io.schemas import SWEEP_RUNS_SCHEMA, SWEEP_SCHEMA_VERSION
from parachute_trains.simulation.engine import run_until_collision, summarize_run
from parachute_trains.simulation.persistence import write_trace

logger = logging.getLogger(__name__)


def summarize_sweep(results: list[RunResult], max_steps: int) -> dict[str, object]:
    """Aggregate per-distance results into a JSON-serialisable summary."""
    collision_steps = np.array(
        [r.collision_step for r in results if r.collision_step is not None], dtype=np.int64
    )
    if collision_steps.size:
        step_stats: dict[str, float | int | None] = {
            "min": int(collision_steps.min()),
            "median": float(np.median(collision_steps)),
            "max": int(collision_steps.max()),
            "mean": float(collision_steps.mean()),
        }
    else:
        step_stats = {"min": None, "median": None, "max": None, "mean": None}
    return {
        "schema_version": SWEEP_SCHEMA_VERSION,
        "max_steps": max_steps,
        "n_runs": len(results),
        "n_collided": int(collision_steps.size),
        "collision_step": step_stats,
        "not_collided": [r.initial_distance for r in results if not r.collided],
    }


def run_distance_sweep(config: SweepConfig) -> list[RunResult]:
    """Run every configured distance and persist run rows and a summary."""
    out_dir = Path(config.out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    results: list[RunResult] = []
    for distance in config.distances:
        history = run_until_collision(distance, max_steps=config.max_steps)
        result = summarize_run(history)
        results.append(result)
        if config.write_traces:
            write_trace(history, trace_path(out_dir, distance))
        logger.info(
            "distance=%d collided=%s steps=%d", distance, result.collided, result.total_steps
        )

    rows = [{"schema_version": SWEEP_SCHEMA_VERSION, **r.to_row()} for r in results]
    pq.write_table(pa.Table.from_pylist(rows, schema=SWEEP_RUNS_SCHEMA), sweep_runs_path(out_dir))
    summary = summarize_sweep(results, max_steps=config.max_steps)
    sweep_summary_path(out_dir).write_text(json.dumps(summary, ensure_ascii=False, indent=2))
    return results
