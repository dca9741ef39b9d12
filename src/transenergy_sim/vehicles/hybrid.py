"""Plug-in hybrid electric vehicle with per-leg drivetrain switching.

Mode policy, evaluated once per leg before any energy is consumed:

  ELECTRIC  if  soc > 0  and  soc ≥ hybrid_model(leg)
  ENGINE    otherwise

How an ENGINE leg is priced depends on ``HybridPolicy``:

  PER_LEG   the whole leg runs on the engine model; SOC is untouched.
  SPLIT     the battery covers the fraction soc / hybrid_model(leg) of the
            link, the engine model prices the remaining distance, and SOC
            ends at exactly 0.

``hybrid_model`` is the consumption model used while in electric mode.
It defaults to the electric model instance; pass a separate blended
model to change that.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Hashable

from transenergy_sim.energy.consumption import EnergyConsumptionModel
from transenergy_sim.energy.traversal import LinkTraversal
from transenergy_sim.vehicles.base import DrivetrainClass, DrivetrainMode, EnergyResult
from transenergy_sim.vehicles.electric import EngineDrivenVehicle
from transenergy_sim.vehicles.hooks import EngineConsumptionHook

logger = logging.getLogger(__name__)


class HybridPolicy(str, Enum):
    PER_LEG = "per_leg"
    SPLIT = "split"


class HybridElectricVehicle(EngineDrivenVehicle):
    """Battery + combustion engine, switching per leg."""

    drivetrain = DrivetrainClass.HYBRID_ELECTRIC

    def __init__(
        self,
        electric_model: EnergyConsumptionModel,
        engine_model: EnergyConsumptionModel,
        usable_battery_capacity_joules: float,
        vehicle_id: Hashable,
        hybrid_model: EnergyConsumptionModel | None = None,
        policy: HybridPolicy = HybridPolicy.PER_LEG,
        initial_soc_joules: float | None = None,
        engine_hook: EngineConsumptionHook | None = None,
    ) -> None:
        super().__init__(
            engine_model,
            vehicle_id,
            usable_battery_capacity_joules=usable_battery_capacity_joules,
            initial_soc_joules=initial_soc_joules,
            engine_hook=engine_hook,
        )
        self._electric_model = electric_model
        self._hybrid_model = hybrid_model if hybrid_model is not None else electric_model
        self._policy = HybridPolicy(policy)
        self._mode = DrivetrainMode.ELECTRIC

    # ── Public API ──────────────────────────────────────────────────────

    @property
    def electric_model(self) -> EnergyConsumptionModel:
        return self._electric_model

    @property
    def hybrid_model(self) -> EnergyConsumptionModel:
        return self._hybrid_model

    @property
    def policy(self) -> HybridPolicy:
        return self._policy

    @property
    def mode(self) -> DrivetrainMode:
        """Mode chosen for the most recent leg (ELECTRIC before the first)."""
        return self._mode

    def select_drivetrain_mode(self, traversal: LinkTraversal) -> DrivetrainMode:
        """Pick the drivetrain for ``traversal`` and remember it as ``mode``."""
        expected = self._hybrid_model.get_energy_consumption_joules(traversal)
        if self.soc_joules > 0 and self.soc_joules >= expected:
            mode = DrivetrainMode.ELECTRIC
        else:
            mode = DrivetrainMode.ENGINE
        if mode is not self._mode:
            logger.debug(
                "Vehicle %s switches %s -> %s on link %s (soc %.1f J, leg needs %.1f J)",
                self.vehicle_id, self._mode.value, mode.value,
                traversal.link_id, self.soc_joules, expected,
            )
        self._mode = mode
        return mode

    def apply_energy_consumption(self, traversal: LinkTraversal) -> EnergyResult:
        mode = self.select_drivetrain_mode(traversal)

        if mode is DrivetrainMode.ELECTRIC:
            joules = self._hybrid_model.get_energy_consumption_joules(traversal)
            drawn, _ = self._use_battery(joules)
            return EnergyResult(
                vehicle_id=self.vehicle_id,
                mode=mode,
                joules_consumed=joules,
                battery_joules=drawn,
                engine_joules=0.0,
                soc_after_joules=self.soc_joules,
            )

        if self._policy is HybridPolicy.SPLIT and self.soc_joules > 0:
            battery_joules, engine_joules = self._split_leg(traversal)
        else:
            battery_joules = 0.0
            engine_joules = self._engine_model.get_energy_consumption_joules(traversal)

        self.record_engine_energy_consumption(engine_joules)
        return EnergyResult(
            vehicle_id=self.vehicle_id,
            mode=mode,
            joules_consumed=battery_joules + engine_joules,
            battery_joules=battery_joules,
            engine_joules=engine_joules,
            soc_after_joules=self.soc_joules,
        )

    # ── Internals ───────────────────────────────────────────────────────

    def _split_leg(self, traversal: LinkTraversal) -> tuple[float, float]:
        """Drain the battery over the start of the link, engine for the rest."""
        electric_needed = self._hybrid_model.get_energy_consumption_joules(traversal)
        battery_fraction = self.soc_joules / electric_needed
        battery_joules, _ = self._use_battery(self.soc_joules)
        remaining_m = (1.0 - battery_fraction) * traversal.length_m
        engine_joules = self._engine_model.get_energy_consumption_for_distance(
            traversal, remaining_m,
        )
        return battery_joules, engine_joules
