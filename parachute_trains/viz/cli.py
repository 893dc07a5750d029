"""CLI for rendering figures from trace and sweep outputs."""

from __future__ import annotations

import argparse
from pathlib import Path

from parachute_trains.io.paths import resolve_within_base
from parachute_trains.simulation.persistence import read_trace
from parachute_trains.viz.render import load_sweep_rows, render_sweep, render_trajectory


def _build_trajectory_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("trajectory", help="Space-time diagram of one run")
    p.add_argument("--trace", type=Path, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--title", type=str, default=None)
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _build_sweep_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("sweep", help="Collision step against initial distance")
    p.add_argument("--sweep-runs", type=Path, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _handle_trajectory(args: argparse.Namespace) -> None:
    trace = resolve_within_base(args.trace, args.base_dir)
    output = resolve_within_base(args.output, args.base_dir)
    render_trajectory(read_trace(trace), output, title=args.title)


def _handle_sweep(args: argparse.Namespace) -> None:
    sweep_runs = resolve_within_base(args.sweep_runs, args.base_dir)
    output = resolve_within_base(args.output, args.base_dir)
    render_sweep(load_sweep_rows(sweep_runs), output)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Render rendezvous figures")
    sub = parser.add_subparsers(dest="command")
    _build_trajectory_parser(sub)
    _build_sweep_parser(sub)
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        raise SystemExit(2)
    try:
        if args.command == "trajectory":
            _handle_trajectory(args)
        else:
            _handle_sweep(args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
