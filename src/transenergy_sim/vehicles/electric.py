"""Battery-electric and pure-combustion vehicles."""

from __future__ import annotations

import logging
from typing import Hashable

from transenergy_sim.energy.consumption import EnergyConsumptionModel
from transenergy_sim.energy.traversal import LinkTraversal
from transenergy_sim.vehicles.base import (
    DrivetrainClass,
    DrivetrainMode,
    EnergyResult,
    Vehicle,
)
from transenergy_sim.vehicles.hooks import EngineConsumptionHook

logger = logging.getLogger(__name__)


class ElectricVehicle(Vehicle):
    """Battery-only vehicle; every leg is drawn from SOC.

    If a leg needs more than the remaining charge the battery is emptied,
    SOC is set to exactly 0 and the result carries ``insufficient_charge``.
    """

    drivetrain = DrivetrainClass.ELECTRIC

    def __init__(
        self,
        electric_model: EnergyConsumptionModel,
        usable_battery_capacity_joules: float,
        vehicle_id: Hashable,
        initial_soc_joules: float | None = None,
    ) -> None:
        super().__init__(vehicle_id, usable_battery_capacity_joules, initial_soc_joules)
        self._electric_model = electric_model

    @property
    def electric_model(self) -> EnergyConsumptionModel:
        return self._electric_model

    def apply_energy_consumption(self, traversal: LinkTraversal) -> EnergyResult:
        joules = self._electric_model.get_energy_consumption_joules(traversal)
        drawn, insufficient = self._use_battery(joules)
        if insufficient:
            logger.warning(
                "Vehicle %s ran out of charge on link %s (needed %.1f J, had %.1f J)",
                self.vehicle_id, traversal.link_id, joules, drawn,
            )
        return EnergyResult(
            vehicle_id=self.vehicle_id,
            mode=DrivetrainMode.ELECTRIC,
            joules_consumed=joules,
            battery_joules=drawn,
            engine_joules=0.0,
            soc_after_joules=self.soc_joules,
            insufficient_charge=insufficient,
        )


class EngineDrivenVehicle(Vehicle):
    """Common engine-path plumbing for vehicles that carry a combustion engine."""

    def __init__(
        self,
        engine_model: EnergyConsumptionModel,
        vehicle_id: Hashable,
        usable_battery_capacity_joules: float = 0.0,
        initial_soc_joules: float | None = None,
        engine_hook: EngineConsumptionHook | None = None,
    ) -> None:
        super().__init__(vehicle_id, usable_battery_capacity_joules, initial_soc_joules)
        self._engine_model = engine_model
        self._engine_hook = engine_hook

    @property
    def engine_model(self) -> EnergyConsumptionModel:
        return self._engine_model

    def record_engine_energy_consumption(self, joules: float) -> None:
        """Telemetry hook fired once per leg that used the engine.

        Never touches the battery.  Without a host-supplied hook this
        records nothing.
        """
        if self._engine_hook is not None:
            self._engine_hook(self.vehicle_id, joules)


class CombustionVehicle(EngineDrivenVehicle):
    """Engine-only vehicle drawing from an unbounded fuel tank (no SOC)."""

    drivetrain = DrivetrainClass.COMBUSTION

    def __init__(
        self,
        engine_model: EnergyConsumptionModel,
        vehicle_id: Hashable,
        engine_hook: EngineConsumptionHook | None = None,
    ) -> None:
        super().__init__(engine_model, vehicle_id, engine_hook=engine_hook)

    def apply_energy_consumption(self, traversal: LinkTraversal) -> EnergyResult:
        joules = self._engine_model.get_energy_consumption_joules(traversal)
        self.record_engine_energy_consumption(joules)
        return EnergyResult(
            vehicle_id=self.vehicle_id,
            mode=DrivetrainMode.ENGINE,
            joules_consumed=joules,
            battery_joules=0.0,
            engine_joules=joules,
            soc_after_joules=0.0,
        )
