"""CLI entrypoint for single runs and distance sweeps.

This module owns CLI argument parsing and mode dispatch. Domain logic lives in:

- ``parachute_trains.simulation.engine``  – ``run_until_collision`` driver
- ``parachute_trains.simulation.persistence`` – Parquet traces
- ``parachute_trains.experiments.sweep`` – multi-distance sweeps
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from parachute_trains.config.constants import DEFAULT_MAX_STEPS
from parachute_trains.config.types import RunConfig, SweepConfig
from parachute_trains.experiments.sweep import run_distance_sweep, summarize_sweep
from parachute_trains.simulation.engine import (
    collision_step_bound,
    run_until_collision,
    summarize_run,
)
from parachute_trains.simulation.persistence import write_trace

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

# ---------------------------------------------------------------------------
# Config-file coercion helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_str(
    cli_val: str | Path | None, key: str, file_cfg: dict[str, object]
) -> str | None:
    raw = _get_val(cli_val, key, file_cfg, None)
    return None if raw is None else _coerce_str(raw, key)


def _load_config_file(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    """Load JSON defaults for the CLI, reporting problems through *parser*."""
    if path is None:
        return {}
    try:
        file_cfg = json.loads(Path(path).read_text())
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    if not isinstance(file_cfg, dict):
        parser.error(f"Config file must contain a JSON object: {path}")
    return file_cfg


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Simulate two identical trains meeting on an infinite line"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    run_parser = sub.add_parser("run", help="Simulate one initial distance")
    run_parser.add_argument("--distance", type=int, default=None)
    run_parser.add_argument("--max-steps", type=int, default=None)
    run_parser.add_argument(
        "--trace-out", type=Path, default=None, help="Write the full trace to this Parquet file"
    )

    sweep_parser = sub.add_parser("sweep", help="Simulate a range of initial distances")
    sweep_parser.add_argument("--min-distance", type=int, default=None)
    sweep_parser.add_argument("--max-distance", type=int, default=None)
    sweep_parser.add_argument("--max-steps", type=int, default=None)
    sweep_parser.add_argument(
        "--fit-max-steps",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Raise max-steps to the collision step of the largest distance",
    )
    sweep_parser.add_argument(
        "--write-traces", action=argparse.BooleanOptionalAction, default=None
    )
    sweep_parser.add_argument("--out-dir", type=Path, default=None)
    return parser


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _handle_run(args: argparse.Namespace, file_cfg: dict[str, object]) -> dict[str, object]:
    config = RunConfig(
        initial_distance=_get_int(args.distance, "distance", file_cfg, 10),
        max_steps=_get_int(args.max_steps, "max_steps", file_cfg, DEFAULT_MAX_STEPS),
    )
    history = run_until_collision(config.initial_distance, max_steps=config.max_steps)
    summary: dict[str, object] = {"mode": "run", **summarize_run(history).to_row()}
    trace_out = _get_optional_str(args.trace_out, "trace_out", file_cfg)
    if trace_out is not None:
        summary["trace"] = str(write_trace(history, Path(trace_out)))
    return summary


def _handle_sweep(args: argparse.Namespace, file_cfg: dict[str, object]) -> dict[str, object]:
    min_distance = _get_int(args.min_distance, "min_distance", file_cfg, 1)
    max_distance = _get_int(args.max_distance, "max_distance", file_cfg, 50)
    max_steps = _get_int(args.max_steps, "max_steps", file_cfg, DEFAULT_MAX_STEPS)
    if _get_bool(args.fit_max_steps, "fit_max_steps", file_cfg, False):
        max_steps = max(max_steps, collision_step_bound(max(max_distance, 0)))
    config = SweepConfig.from_range(
        min_distance=min_distance,
        max_distance=max_distance,
        max_steps=max_steps,
        out_dir=Path(_get_optional_str(args.out_dir, "out_dir", file_cfg) or "data"),
        write_traces=_get_bool(args.write_traces, "write_traces", file_cfg, False),
    )
    results = run_distance_sweep(config)
    return {
        "mode": "sweep",
        "out_dir": str(config.out_dir),
        **summarize_sweep(results, max_steps=config.max_steps),
    }


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint.

    Supports ``--config path/to/config.json``. CLI arguments override
    config-file values; config-file values override built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    file_cfg = _load_config_file(parser, args.config)
    try:
        if args.command == "run":
            summary = _handle_run(args, file_cfg)
        else:
            summary = _handle_sweep(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
