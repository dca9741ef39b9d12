"""Engine — configuration factories and the host-facing simulation adapter."""

from transenergy_sim.engine.factory import (
    build_consumption_model,
    build_consumption_models,
    build_fleet,
    build_parking_cost_model,
    build_tariff,
    build_vehicle,
)
from transenergy_sim.engine.simulation import VehicleEnergySimulation

__all__ = [
    "build_consumption_model",
    "build_consumption_models",
    "build_vehicle",
    "build_fleet",
    "build_tariff",
    "build_parking_cost_model",
    "VehicleEnergySimulation",
]
