"""Centralized domain constants for rendezvous simulations.

All magic numbers shared across modules are defined here. Consuming modules
should import from this module rather than defining their own inline literals.
"""

from __future__ import annotations

DEFAULT_MAX_STEPS = 10_000
"""Default safety bound on ticks per run."""

INITIAL_SEARCH_RADIUS = 1
"""Half-width of the first search sweep."""

HOME_MARKER_POSITION = 0
"""Absolute position of agent 1's start marker."""

MIN_UI_DISTANCE = 1
"""Smallest initial distance offered by interactive front ends."""

MAX_UI_DISTANCE = 100
"""Largest initial distance offered by interactive front ends."""

MAX_SWEEP_WORK_UNITS = 500_000_000
"""Safety cap on total ticks (distances x max_steps) across one sweep."""

TRACE_FLUSH_THRESHOLD = 8_192
"""Flush trace rows to Parquet once this in-memory row count is reached."""

NUM_AGENTS = 2
"""Number of agents per scenario."""
