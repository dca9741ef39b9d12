"""Vehicle hierarchy — electric, combustion and hybrid drivetrains."""

from transenergy_sim.vehicles.base import (
    DrivetrainClass,
    DrivetrainMode,
    EnergyResult,
    Vehicle,
)
from transenergy_sim.vehicles.electric import (
    CombustionVehicle,
    ElectricVehicle,
    EngineDrivenVehicle,
)
from transenergy_sim.vehicles.hybrid import HybridElectricVehicle, HybridPolicy
from transenergy_sim.vehicles.hooks import EngineConsumptionHook, EngineConsumptionLog

__all__ = [
    "DrivetrainClass",
    "DrivetrainMode",
    "EnergyResult",
    "Vehicle",
    "ElectricVehicle",
    "EngineDrivenVehicle",
    "CombustionVehicle",
    "HybridElectricVehicle",
    "HybridPolicy",
    "EngineConsumptionHook",
    "EngineConsumptionLog",
]
