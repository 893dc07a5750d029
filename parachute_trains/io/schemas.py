"""Parquet schema definitions for rendezvous artifacts.

Arrow schemas used for persisting per-tick traces and sweep summaries are
centralised here so that writers and readers share the same column contracts.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

TRACE_SCHEMA_VERSION = 1
SWEEP_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Trace schema: one row per agent per snapshot
# ---------------------------------------------------------------------------

TRACE_SCHEMA = pa.schema(
    [
        ("initial_distance", pa.int64()),
        ("step", pa.int64()),
        ("agent_id", pa.int64()),
        ("absolute_position", pa.int64()),
        ("relative_position", pa.int64()),
        ("phase", pa.string()),
        ("search_radius", pa.int64()),
        ("search_direction", pa.int64()),
        ("found_other_marker", pa.bool_()),
        ("chase_direction", pa.int64()),
        ("at_marker", pa.bool_()),
        ("collided", pa.bool_()),
        ("collision_position", pa.float64()),
    ]
)

# ---------------------------------------------------------------------------
# Sweep schema: one row per initial distance
# ---------------------------------------------------------------------------

SWEEP_RUNS_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("initial_distance", pa.int64()),
        ("collided", pa.bool_()),
        ("collision_step", pa.int64()),
        ("collision_position", pa.float64()),
        ("total_steps", pa.int64()),
        ("switch_step_1", pa.int64()),
        ("switch_step_2", pa.int64()),
        ("final_search_radius_1", pa.int64()),
        ("final_search_radius_2", pa.int64()),
    ]
)
