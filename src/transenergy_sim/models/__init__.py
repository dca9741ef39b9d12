"""Result models — simulation output contracts."""

from transenergy_sim.models.results import ChargingLogSummary, RunSummary

__all__ = [
    "ChargingLogSummary",
    "RunSummary",
]
