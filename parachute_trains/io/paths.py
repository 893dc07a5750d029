"""Path construction helpers for rendezvous output directories."""

from __future__ import annotations

from pathlib import Path


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve *path* and ensure it stays within the trusted *base_dir*.

    Raises :exc:`ValueError` if the resolved path escapes the base directory.
    """
    candidate = path if path.is_absolute() else base_dir / path
    resolved = candidate.resolve()
    base_resolved = base_dir.resolve()
    if resolved != base_resolved and base_resolved not in resolved.parents:
        raise ValueError(f"Path escapes base_dir: {path}")
    return resolved


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def traces_dir(out_dir: Path) -> Path:
    """Return path to the per-distance traces subdirectory."""
    return out_dir / "traces"


def sweep_runs_path(out_dir: Path) -> Path:
    """Return path to the sweep runs Parquet file."""
    return logs_dir(out_dir) / "sweep_runs.parquet"


def sweep_summary_path(out_dir: Path) -> Path:
    """Return path to the sweep summary JSON file."""
    return logs_dir(out_dir) / "sweep_summary.json"


def trace_path(out_dir: Path, initial_distance: int) -> Path:
    """Return path to the trace Parquet file for one initial distance."""
    return traces_dir(out_dir) / f"trace_d{initial_distance}.parquet"
