"""Parquet persistence for run histories."""

from __future__ import annotations

from fractions import Fraction
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from parachute_trains.config.constants import TRACE_FLUSH_THRESHOLD
from parachute_trains.domain.agent import AgentMemory, AgentState, ChaseDirection, Direction, Phase
from parachute_trains.domain.markers import MarkerLayout
from parachute_trains.domain.scenario import ScenarioState
from parachute_trains.io.schemas import TRACE_SCHEMA


def _empty_trace_columns() -> dict[str, list[int | str | bool | float | None]]:
    return {name: [] for name in TRACE_SCHEMA.names}


def _append_snapshot(
    columns: dict[str, list[int | str | bool | float | None]], snapshot: ScenarioState
) -> None:
    collision_position = (
        None if snapshot.collision_position is None else float(snapshot.collision_position)
    )
    for agent_id, agent in enumerate(snapshot.agents, start=1):
        columns["initial_distance"].append(snapshot.initial_distance)
        columns["step"].append(snapshot.step_index)
        columns["agent_id"].append(agent_id)
        columns["absolute_position"].append(agent.absolute_position)
        columns["relative_position"].append(agent.relative_position)
        columns["phase"].append(agent.phase.value)
        columns["search_radius"].append(agent.search_radius)
        columns["search_direction"].append(int(agent.search_direction))
        columns["found_other_marker"].append(agent.found_other_marker)
        columns["chase_direction"].append(int(agent.chase_direction))
        columns["at_marker"].append(snapshot.markers.is_marker(agent.absolute_position))
        columns["collided"].append(snapshot.collided)
        columns["collision_position"].append(collision_position)


def history_to_table(history: list[ScenarioState]) -> pa.Table:
    """Flatten a run history into a trace table with two rows per snapshot."""
    columns = _empty_trace_columns()
    for snapshot in history:
        _append_snapshot(columns, snapshot)
    return pa.Table.from_pydict(columns, schema=TRACE_SCHEMA)


def flush_trace_columns(
    trace_columns: dict[str, list[int | str | bool | float | None]],
    trace_file: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated trace rows to Parquet and clear in-memory buffers."""
    if not trace_columns["step"]:
        return writer
    table = pa.Table.from_pydict(trace_columns, schema=TRACE_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(trace_file, TRACE_SCHEMA)
    writer.write_table(table)
    for values in trace_columns.values():
        values.clear()
    return writer


def write_trace(history: list[ScenarioState], trace_file: Path) -> Path:
    """Stream *history* to a Parquet trace file and return its path."""
    if not history:
        raise ValueError("history must not be empty")
    trace_file = Path(trace_file)
    trace_file.parent.mkdir(parents=True, exist_ok=True)
    columns = _empty_trace_columns()
    writer: pq.ParquetWriter | None = None
    try:
        for snapshot in history:
            _append_snapshot(columns, snapshot)
            if len(columns["step"]) >= TRACE_FLUSH_THRESHOLD:
                writer = flush_trace_columns(columns, trace_file, writer)
        writer = flush_trace_columns(columns, trace_file, writer)
    finally:
        if writer is not None:
            writer.close()
    return trace_file


def _agent_from_row(row: dict[str, object]) -> AgentState:
    return AgentState(
        absolute_position=int(row["absolute_position"]),  # type: ignore[call-overload]
        relative_position=int(row["relative_position"]),  # type: ignore[call-overload]
        memory=AgentMemory(
            phase=Phase(row["phase"]),
            search_radius=int(row["search_radius"]),  # type: ignore[call-overload]
            search_direction=Direction(row["search_direction"]),
            found_other_marker=bool(row["found_other_marker"]),
            chase_direction=ChaseDirection(row["chase_direction"]),
        ),
    )


def read_trace(trace_file: Path) -> list[ScenarioState]:
    """Rebuild the snapshot history stored in a trace file."""
    rows = pq.read_table(trace_file).to_pylist()
    by_step: dict[int, dict[int, dict[str, object]]] = {}
    for row in rows:
        by_step.setdefault(int(row["step"]), {})[int(row["agent_id"])] = row

    history: list[ScenarioState] = []
    for step in sorted(by_step):
        agents = by_step[step]
        if set(agents) != {1, 2}:
            raise ValueError(f"trace step {step} must contain agents 1 and 2")
        first = agents[1]
        raw_position = first["collision_position"]
        history.append(
            ScenarioState(
                agent_1=_agent_from_row(agents[1]),
                agent_2=_agent_from_row(agents[2]),
                markers=MarkerLayout.from_distance(int(first["initial_distance"])),  # type: ignore[call-overload]
                step_index=step,
                collided=bool(first["collided"]),
                collision_position=None if raw_position is None else Fraction(raw_position),  # type: ignore[arg-type]
            )
        )
    return history
