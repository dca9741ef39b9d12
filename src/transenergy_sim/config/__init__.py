"""Configuration models — consumption models, vehicle types, parking tariffs."""

from transenergy_sim.config.consumption import (
    ConstantConsumptionConfig,
    ConsumptionModelConfig,
    GradeAwareConsumptionConfig,
    SpeedTableConsumptionConfig,
)
from transenergy_sim.config.vehicle import VehicleTypeConfig
from transenergy_sim.config.parking import (
    FlatTariff,
    FreeTariff,
    ParkingConfig,
    ParkingTariffConfig,
    TariffTier,
    TieredTariff,
    TimeOfDayTariff,
)
from transenergy_sim.config.fleet import FleetConfig, load_fleet_config

__all__ = [
    "ConstantConsumptionConfig",
    "SpeedTableConsumptionConfig",
    "GradeAwareConsumptionConfig",
    "ConsumptionModelConfig",
    "VehicleTypeConfig",
    "FreeTariff",
    "FlatTariff",
    "TimeOfDayTariff",
    "TariffTier",
    "TieredTariff",
    "ParkingTariffConfig",
    "ParkingConfig",
    "FleetConfig",
    "load_fleet_config",
]
