"""Matplotlib-based static figures for rendezvous runs and sweeps."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pyarrow.parquet as pq

from parachute_trains.domain.scenario import ScenarioState
from parachute_trains.simulation.engine import collision_step_bound, summarize_run

AGENT_COLORS: tuple[str, str] = ("#1f77b4", "#d62728")
MARKER_COLOR = "#7f7f7f"
COLLISION_COLOR = "#ff9900"


def render_trajectory(
    history: list[ScenarioState],
    output: Path,
    *,
    title: str | None = None,
) -> Path:
    """Draw a space-time diagram of one run and save it to *output*.

    Steps run down the y axis; each agent's absolute position is a line, home
    markers are vertical guides, and the phase switch and collision are marked.
    """
    if not history:
        raise ValueError("history must not be empty")
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)

    steps = np.array([s.step_index for s in history])
    positions = np.array(
        [[s.agent_1.absolute_position, s.agent_2.absolute_position] for s in history]
    )

    result = summarize_run(history)
    switch_steps = (result.switch_step_1, result.switch_step_2)

    fig, ax = plt.subplots(figsize=(7, 6))
    try:
        for marker_position in history[0].markers.positions:
            ax.axvline(marker_position, color=MARKER_COLOR, linestyle="--", linewidth=1)
        for agent_index, color in enumerate(AGENT_COLORS):
            ax.plot(
                positions[:, agent_index],
                steps,
                color=color,
                linewidth=1.2,
                label=f"train {agent_index + 1}",
            )
            switch = switch_steps[agent_index]
            if switch is not None:
                ax.scatter(
                    [positions[switch, agent_index]],
                    [steps[switch]],
                    color=color,
                    marker="^",
                    zorder=3,
                    label=f"train {agent_index + 1} starts chasing",
                )
        last = history[-1]
        if last.collision_position is not None:
            ax.scatter(
                [float(last.collision_position)],
                [last.step_index],
                color=COLLISION_COLOR,
                marker="*",
                s=160,
                zorder=4,
                label="collision",
            )
        ax.invert_yaxis()
        ax.set_xlabel("position")
        ax.set_ylabel("step")
        ax.set_title(title or f"Initial distance {last.initial_distance}")
        ax.legend(loc="best", fontsize=8)
        fig.tight_layout()
        fig.savefig(output, dpi=150)
    finally:
        plt.close(fig)
    return output


def load_sweep_rows(sweep_runs: Path) -> list[dict[str, object]]:
    """Load sweep run rows from Parquet as a list of dicts."""
    return pq.read_table(sweep_runs).to_pylist()


def render_sweep(rows: list[dict[str, object]], output: Path) -> Path:
    """Plot collision step against initial distance with the closed-form curve."""
    collided = [r for r in rows if r.get("collision_step") is not None]
    if not collided:
        raise ValueError("rows must contain at least one collided run")
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)

    distances = np.array([int(r["initial_distance"]) for r in collided])  # type: ignore[call-overload]
    observed = np.array([int(r["collision_step"]) for r in collided])  # type: ignore[call-overload]
    order = np.argsort(distances)
    distances, observed = distances[order], observed[order]
    expected = np.array([collision_step_bound(int(d)) for d in distances])

    fig, ax = plt.subplots(figsize=(7, 4))
    try:
        ax.plot(distances, expected, color=MARKER_COLOR, linestyle="--", label="closed form")
        ax.scatter(distances, observed, color=AGENT_COLORS[0], s=12, zorder=3, label="observed")
        ax.set_xlabel("initial distance")
        ax.set_ylabel("collision step")
        ax.legend(loc="upper left", fontsize=8)
        fig.tight_layout()
        fig.savefig(output, dpi=150)
    finally:
        plt.close(fig)
    return output
