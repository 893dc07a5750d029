"""Visualization layer: static figures and CLI."""

from parachute_trains.viz.cli import main
from parachute_trains.viz.render import load_sweep_rows, render_sweep, render_trajectory

__all__ = ["load_sweep_rows", "main", "render_sweep", "render_trajectory"]
