"""Vehicle base type, drivetrain enums and the per-leg energy result."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Hashable

from transenergy_sim.energy.traversal import LinkTraversal
from transenergy_sim.errors import InvalidChargingRecord


class DrivetrainClass(str, Enum):
    ELECTRIC = "electric"
    COMBUSTION = "combustion"
    HYBRID_ELECTRIC = "hybrid_electric"


class DrivetrainMode(str, Enum):
    """Propulsion subsystem active for one leg."""

    ELECTRIC = "electric"
    ENGINE = "engine"


# ═══════════════════════════════════════════════════════════════════════════
# Step result
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class EnergyResult:
    """Immutable outcome of one ``apply_energy_consumption`` call."""

    vehicle_id: Hashable
    mode: DrivetrainMode

    joules_consumed: float
    """Energy the active model(s) asked for on this leg."""

    battery_joules: float
    """Energy actually drawn from the battery (≤ SOC before the leg)."""

    engine_joules: float
    """Energy supplied by the combustion engine (unbounded fuel)."""

    soc_after_joules: float

    insufficient_charge: bool = False
    """True when the battery alone could not cover the requested energy."""


# ═══════════════════════════════════════════════════════════════════════════
# Vehicle
# ═══════════════════════════════════════════════════════════════════════════

class Vehicle(ABC):
    """Stateful vehicle-agent: identity, fixed battery capacity, mutable SOC.

    Invariant: ``0 <= soc_joules <= usable_battery_capacity_joules`` after
    every public call.  A vehicle is mutated only by the host thread that
    owns its agent, so no locking happens here.
    """

    drivetrain: ClassVar[DrivetrainClass]

    def __init__(
        self,
        vehicle_id: Hashable,
        usable_battery_capacity_joules: float,
        initial_soc_joules: float | None = None,
    ) -> None:
        if not math.isfinite(usable_battery_capacity_joules) or usable_battery_capacity_joules < 0:
            raise ValueError(
                f"usable_battery_capacity_joules must be >= 0, got {usable_battery_capacity_joules!r}"
            )
        if initial_soc_joules is None:
            initial_soc_joules = usable_battery_capacity_joules
        if not 0 <= initial_soc_joules <= usable_battery_capacity_joules:
            raise ValueError(
                f"initial SOC {initial_soc_joules!r} outside [0, {usable_battery_capacity_joules}]"
            )
        self._vehicle_id = vehicle_id
        self._capacity = float(usable_battery_capacity_joules)
        self._soc = float(initial_soc_joules)

    # ── Public API ──────────────────────────────────────────────────────

    @property
    def vehicle_id(self) -> Hashable:
        return self._vehicle_id

    @property
    def usable_battery_capacity_joules(self) -> float:
        return self._capacity

    @property
    def soc_joules(self) -> float:
        return self._soc

    @property
    def soc_fraction(self) -> float:
        """SOC / capacity (0.0 for vehicles without a battery)."""
        return self._soc / self._capacity if self._capacity > 0 else 0.0

    @property
    def required_energy_to_full_joules(self) -> float:
        return self._capacity - self._soc

    def charge(self, joules: float) -> float:
        """Add energy to the battery, clamped at capacity.

        Returns the energy actually accepted.
        """
        if not math.isfinite(joules) or joules < 0:
            raise InvalidChargingRecord(f"charged energy must be finite and >= 0, got {joules!r}")
        accepted = min(joules, self.required_energy_to_full_joules)
        self._soc = min(self._capacity, self._soc + accepted)
        return accepted

    @abstractmethod
    def apply_energy_consumption(self, traversal: LinkTraversal) -> EnergyResult:
        """Consume the energy for one leg and update SOC."""

    # ── Internals ───────────────────────────────────────────────────────

    def _use_battery(self, joules: float) -> tuple[float, bool]:
        """Draw ``joules`` from the battery without going below zero.

        Returns ``(drawn, insufficient)``.
        """
        if joules > self._soc:
            drawn = self._soc
            self._soc = 0.0
            return drawn, True
        self._soc -= joules
        return joules, False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vehicle_id={self._vehicle_id!r}, "
            f"soc_joules={self._soc}, capacity={self._capacity})"
        )
