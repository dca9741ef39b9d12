"""Simulation adapter — the call contract the host scheduler drives.

Per leg / stop the host calls:
  handle_leg       → vehicle.apply_energy_consumption
  handle_charging  → vehicle.charge + charging_log.record_session
  handle_parking   → parking_cost_model.calc_parking_cost

Vehicle state is owned by whichever host thread runs that agent; only the
run totals kept here are shared, and they are updated under a lock.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import Hashable, Mapping

from transenergy_sim.charging.log import ChargingLog, ChargingLogRow
from transenergy_sim.energy.traversal import LinkTraversal
from transenergy_sim.errors import InvalidChargingRecord
from transenergy_sim.models.results import RunSummary
from transenergy_sim.parking.cost import FreeParkingCostModel, ParkingCostModel
from transenergy_sim.vehicles.base import DrivetrainMode, EnergyResult, Vehicle

logger = logging.getLogger(__name__)


class VehicleEnergySimulation:
    """Binds a fleet, a charging log and a parking cost model for one run.

    Usage::

        sim = VehicleEnergySimulation(vehicles, ChargingLog(), parking_model)
        result = sim.handle_leg("v1", LinkTraversal("l1", 1_000, 60))
        row = sim.handle_charging("v1", "l1", 3_600, 900, power_watts=11_000)
        fee = sim.handle_parking(3_600, 900, "p1", "f1")
        summary = sim.summary()
    """

    def __init__(
        self,
        vehicles: Mapping[Hashable, Vehicle],
        charging_log: ChargingLog | None = None,
        parking_cost_model: ParkingCostModel | None = None,
    ) -> None:
        self._vehicles = dict(vehicles)
        self._charging_log = charging_log if charging_log is not None else ChargingLog()
        self._parking = parking_cost_model if parking_cost_model is not None else FreeParkingCostModel()
        self._lock = threading.Lock()
        self._totals = RunSummary()
        logger.info("Simulation adapter ready for %d vehicles", len(self._vehicles))

    # ── Public API ──────────────────────────────────────────────────────

    @property
    def charging_log(self) -> ChargingLog:
        return self._charging_log

    @property
    def parking_cost_model(self) -> ParkingCostModel:
        return self._parking

    def vehicle(self, vehicle_id: Hashable) -> Vehicle:
        return self._vehicles[vehicle_id]

    def handle_leg(self, vehicle_id: Hashable, traversal: LinkTraversal) -> EnergyResult:
        result = self._vehicles[vehicle_id].apply_energy_consumption(traversal)
        with self._lock:
            t = self._totals
            t.legs += 1
            t.total_joules_consumed += result.joules_consumed
            t.battery_joules += result.battery_joules
            t.engine_joules += result.engine_joules
            if result.insufficient_charge:
                t.insufficient_charge_events += 1
            if result.mode is DrivetrainMode.ENGINE:
                t.engine_legs += 1
        return result

    def handle_charging(
        self,
        vehicle_id: Hashable,
        link_id: Hashable,
        start_time: float,
        duration: float,
        power_watts: float,
    ) -> ChargingLogRow:
        """Charge at ``power_watts`` for ``duration`` seconds and log the session.

        Delivered energy is limited by the room left in the battery.
        """
        if not math.isfinite(power_watts) or power_watts < 0:
            raise InvalidChargingRecord(f"power_watts must be finite and >= 0, got {power_watts!r}")
        if not math.isfinite(duration) or duration < 0:
            raise InvalidChargingRecord(f"duration must be finite and >= 0, got {duration!r}")
        vehicle = self._vehicles[vehicle_id]
        offered = power_watts * duration
        delivered = min(offered, vehicle.required_energy_to_full_joules)
        # log first: a rejected record must leave SOC untouched
        row = self._charging_log.record_session(vehicle_id, link_id, start_time, duration, delivered)
        vehicle.charge(delivered)
        return row

    def handle_parking(
        self,
        arrival_time: float,
        duration: float,
        person_id: Hashable,
        facility_id: Hashable,
    ) -> float:
        cost = self._parking.calc_parking_cost(arrival_time, duration, person_id, facility_id)
        with self._lock:
            self._totals.parking_events += 1
            self._totals.total_parking_cost += cost
        return cost

    def summary(self) -> RunSummary:
        """Snapshot of the run totals including the charging-log aggregate."""
        with self._lock:
            snapshot = self._totals.model_copy()
        snapshot.charging = self._charging_log.summary()
        return snapshot
