"""Build runtime objects from configuration.

Consumption models are built once per configured name and shared by
reference between every vehicle that names them.
"""

from __future__ import annotations

import logging
from typing import Hashable, Mapping

from transenergy_sim.config.consumption import (
    ConstantConsumptionConfig,
    ConsumptionModelConfig,
    GradeAwareConsumptionConfig,
    SpeedTableConsumptionConfig,
)
from transenergy_sim.config.fleet import FleetConfig
from transenergy_sim.config.parking import (
    FlatTariff,
    FreeTariff,
    ParkingConfig,
    ParkingTariffConfig,
    TieredTariff,
    TimeOfDayTariff,
)
from transenergy_sim.config.vehicle import VehicleTypeConfig
from transenergy_sim.energy.consumption import (
    ConstantRateConsumptionModel,
    EnergyConsumptionModel,
    GradeAwareConsumptionModel,
    SpeedDependentConsumptionModel,
)
from transenergy_sim.parking.cost import (
    DurationTieredParkingCostModel,
    FacilityTariffParkingCostModel,
    FlatRateParkingCostModel,
    FreeParkingCostModel,
    ParkingCostModel,
    TimeOfDayParkingCostModel,
)
from transenergy_sim.vehicles.base import Vehicle
from transenergy_sim.vehicles.electric import CombustionVehicle, ElectricVehicle
from transenergy_sim.vehicles.hooks import EngineConsumptionHook
from transenergy_sim.vehicles.hybrid import HybridElectricVehicle, HybridPolicy

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# Energy consumption models
# ═══════════════════════════════════════════════════════════════════════════

def build_consumption_model(config: ConsumptionModelConfig) -> EnergyConsumptionModel:
    if isinstance(config, ConstantConsumptionConfig):
        return ConstantRateConsumptionModel(config.joules_per_meter)
    if isinstance(config, SpeedTableConsumptionConfig):
        return SpeedDependentConsumptionModel(config.speeds_mps, config.joules_per_meter)
    if isinstance(config, GradeAwareConsumptionConfig):
        return GradeAwareConsumptionModel(
            build_consumption_model(config.base),
            vehicle_mass_kg=config.vehicle_mass_kg,
            regeneration_efficiency=config.regeneration_efficiency,
        )
    raise TypeError(f"unsupported consumption model config: {type(config).__name__}")


def build_consumption_models(fleet: FleetConfig) -> dict[str, EnergyConsumptionModel]:
    return {name: build_consumption_model(cfg) for name, cfg in fleet.consumption_models.items()}


# ═══════════════════════════════════════════════════════════════════════════
# Vehicles
# ═══════════════════════════════════════════════════════════════════════════

def build_vehicle(
    vehicle_id: Hashable,
    vehicle_type: VehicleTypeConfig,
    models: Mapping[str, EnergyConsumptionModel],
    engine_hook: EngineConsumptionHook | None = None,
) -> Vehicle:
    """Construct one vehicle, wiring shared model instances by name."""
    if vehicle_type.drivetrain == "electric":
        return ElectricVehicle(
            models[vehicle_type.electric_model],
            vehicle_type.battery_capacity_joules,
            vehicle_id,
            initial_soc_joules=vehicle_type.initial_soc_joules,
        )
    if vehicle_type.drivetrain == "combustion":
        return CombustionVehicle(
            models[vehicle_type.engine_model],
            vehicle_id,
            engine_hook=engine_hook,
        )
    hybrid_model = (
        models[vehicle_type.hybrid_model] if vehicle_type.hybrid_model is not None else None
    )
    return HybridElectricVehicle(
        models[vehicle_type.electric_model],
        models[vehicle_type.engine_model],
        vehicle_type.battery_capacity_joules,
        vehicle_id,
        hybrid_model=hybrid_model,
        policy=HybridPolicy(vehicle_type.hybrid_policy),
        initial_soc_joules=vehicle_type.initial_soc_joules,
        engine_hook=engine_hook,
    )


def build_fleet(
    fleet: FleetConfig,
    assignments: Mapping[Hashable, str],
    engine_hook: EngineConsumptionHook | None = None,
) -> dict[Hashable, Vehicle]:
    """Build every vehicle in ``assignments`` (vehicle id → type name).

    Raises ``KeyError`` for an unknown vehicle type.
    """
    models = build_consumption_models(fleet)
    vehicles: dict[Hashable, Vehicle] = {}
    for vehicle_id, type_name in assignments.items():
        if type_name not in fleet.vehicle_types:
            raise KeyError(f"vehicle {vehicle_id!r} has unknown type {type_name!r}")
        vehicles[vehicle_id] = build_vehicle(
            vehicle_id, fleet.vehicle_types[type_name], models, engine_hook,
        )
    logger.info(
        "Built fleet of %d vehicles from %d types sharing %d consumption models",
        len(vehicles), len(fleet.vehicle_types), len(models),
    )
    return vehicles


# ═══════════════════════════════════════════════════════════════════════════
# Parking
# ═══════════════════════════════════════════════════════════════════════════

def build_tariff(config: ParkingTariffConfig) -> ParkingCostModel:
    if isinstance(config, FreeTariff):
        return FreeParkingCostModel()
    if isinstance(config, FlatTariff):
        return FlatRateParkingCostModel(
            config.rate_per_hour,
            free_minutes=config.free_minutes,
            max_cost=config.max_cost,
        )
    if isinstance(config, TimeOfDayTariff):
        return TimeOfDayParkingCostModel(config.hourly_rates)
    if isinstance(config, TieredTariff):
        return DurationTieredParkingCostModel(
            [(t.max_hours, t.price) for t in config.tiers],
            overflow_rate_per_hour=config.overflow_rate_per_hour,
        )
    raise TypeError(f"unsupported tariff config: {type(config).__name__}")


def build_parking_cost_model(config: ParkingConfig) -> ParkingCostModel:
    """Facility-keyed model when overrides exist, otherwise the default tariff."""
    default = build_tariff(config.default)
    if not config.facilities:
        return default
    return FacilityTariffParkingCostModel(
        {facility_id: build_tariff(t) for facility_id, t in config.facilities.items()},
        default=default,
    )
