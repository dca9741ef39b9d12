"""Shared test fixtures — hand-calculable models and vehicles."""

from __future__ import annotations

import pytest

from transenergy_sim.charging.log import ChargingLog
from transenergy_sim.energy.consumption import ConstantRateConsumptionModel
from transenergy_sim.energy.traversal import LinkTraversal
from transenergy_sim.vehicles.electric import CombustionVehicle, ElectricVehicle
from transenergy_sim.vehicles.hooks import EngineConsumptionLog
from transenergy_sim.vehicles.hybrid import HybridElectricVehicle, HybridPolicy

CAPACITY_J = 100_000.0


@pytest.fixture
def electric_model() -> ConstantRateConsumptionModel:
    """100 J/m → a 300 m leg costs 30,000 J."""
    return ConstantRateConsumptionModel(joules_per_meter=100.0)


@pytest.fixture
def engine_model() -> ConstantRateConsumptionModel:
    """400 J/m → a 300 m leg costs 120,000 J."""
    return ConstantRateConsumptionModel(joules_per_meter=400.0)


@pytest.fixture
def leg_300m() -> LinkTraversal:
    return LinkTraversal(link_id="l1", length_m=300.0, duration_s=30.0)


@pytest.fixture
def engine_log() -> EngineConsumptionLog:
    return EngineConsumptionLog()


@pytest.fixture
def ev(electric_model) -> ElectricVehicle:
    return ElectricVehicle(electric_model, CAPACITY_J, "ev1")


@pytest.fixture
def ice(engine_model, engine_log) -> CombustionVehicle:
    return CombustionVehicle(engine_model, "ice1", engine_hook=engine_log)


@pytest.fixture
def phev(electric_model, engine_model, engine_log) -> HybridElectricVehicle:
    return HybridElectricVehicle(
        electric_model, engine_model, CAPACITY_J, "phev1",
        policy=HybridPolicy.PER_LEG, engine_hook=engine_log,
    )


@pytest.fixture
def charging_log() -> ChargingLog:
    return ChargingLog()
