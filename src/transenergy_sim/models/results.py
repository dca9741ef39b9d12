"""Result types — aggregated reporting contracts handed to the host.

Per-leg and per-session records are frozen dataclasses (hot path); the
run-level aggregates below are Pydantic models so the host can dump them
to JSON with ``model_dump_json``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ChargingLogSummary(BaseModel):
    """Aggregate view over every session in a ``ChargingLog``."""

    session_count: int = 0
    total_energy_charged_joules: float = 0.0
    total_charging_duration_s: float = 0.0

    energy_by_vehicle_joules: dict[str, float] = Field(default_factory=dict)
    """Delivered energy per vehicle id (ids stringified)."""

    energy_by_link_joules: dict[str, float] = Field(default_factory=dict)
    """Delivered energy per link id (ids stringified)."""


class RunSummary(BaseModel):
    """Run-level totals accumulated by ``VehicleEnergySimulation``."""

    legs: int = 0
    total_joules_consumed: float = 0.0
    battery_joules: float = 0.0
    engine_joules: float = 0.0
    insufficient_charge_events: int = 0
    engine_legs: int = 0

    parking_events: int = 0
    total_parking_cost: float = 0.0

    charging: ChargingLogSummary = Field(default_factory=ChargingLogSummary)
