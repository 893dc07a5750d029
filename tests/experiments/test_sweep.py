"""Tests for multi-distance sweeps."""

from __future__ import annotations

import json
from pathlib import Path

import pyarrow.parquet as pq

from parachute_trains.config.types import SweepConfig
from parachute_trains.experiments.sweep import run_distance_sweep, summarize_sweep
from parachute_trains.io.schemas import SWEEP_RUNS_SCHEMA
from parachute_trains.simulation.engine import collision_step_bound


class TestRunDistanceSweep:
    def test_writes_runs_and_summary(self, tmp_path: Path) -> None:
        config = SweepConfig.from_range(1, 5, out_dir=tmp_path)
        results = run_distance_sweep(config)
        assert [r.initial_distance for r in results] == [1, 2, 3, 4, 5]

        table = pq.read_table(tmp_path / "logs" / "sweep_runs.parquet")
        assert set(table.column_names) == {f.name for f in SWEEP_RUNS_SCHEMA}
        assert table.column("collision_step").to_pylist() == [
            collision_step_bound(d) for d in range(1, 6)
        ]

        summary = json.loads((tmp_path / "logs" / "sweep_summary.json").read_text())
        assert summary["n_runs"] == 5
        assert summary["n_collided"] == 5
        assert summary["not_collided"] == []
        assert summary["collision_step"]["min"] == 2
        assert summary["collision_step"]["max"] == collision_step_bound(5)

    def test_traces_only_when_requested(self, tmp_path: Path) -> None:
        run_distance_sweep(SweepConfig(distances=(2, 3), out_dir=tmp_path / "off"))
        assert not (tmp_path / "off" / "traces").exists()

        run_distance_sweep(
            SweepConfig(distances=(2, 3), out_dir=tmp_path / "on", write_traces=True)
        )
        assert (tmp_path / "on" / "traces" / "trace_d2.parquet").exists()
        assert (tmp_path / "on" / "traces" / "trace_d3.parquet").exists()

    def test_truncated_runs_are_reported(self, tmp_path: Path) -> None:
        results = run_distance_sweep(SweepConfig(distances=(3, 40), max_steps=100, out_dir=tmp_path))
        assert [r.collided for r in results] == [True, False]
        table = pq.read_table(tmp_path / "logs" / "sweep_runs.parquet")
        assert table.column("collision_step").to_pylist() == [17, None]


def test_summarize_sweep_without_collisions(tmp_path: Path) -> None:
    results = run_distance_sweep(SweepConfig(distances=(30,), max_steps=10, out_dir=tmp_path))
    summary = summarize_sweep(results, max_steps=10)
    assert summary["n_collided"] == 0
    assert summary["not_collided"] == [30]
    assert summary["collision_step"] == {"min": None, "median": None, "max": None, "mean": None}
