"""Charging-session logging."""

from transenergy_sim.charging.log import ChargingLog, ChargingLogRow

__all__ = ["ChargingLog", "ChargingLogRow"]
