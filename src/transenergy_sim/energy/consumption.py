"""Energy consumption models.

A model answers one question: how many joules does a vehicle need to
traverse this link under these conditions?  Models are stateless once
built and are shared by reference across every vehicle of a class, so
nothing in here may mutate ``self`` after ``__init__``.

Variants:
  * constant rate          — J/m independent of speed
  * speed dependent        — J/m interpolated from a calibration table
  * grade aware (wrapper)  — base model + potential energy m·g·Δh
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from transenergy_sim.energy.traversal import LinkTraversal
from transenergy_sim.errors import InvalidTraversalInput

GRAVITY_MPS2 = 9.80665


# ═══════════════════════════════════════════════════════════════════════════
# Capability
# ═══════════════════════════════════════════════════════════════════════════

class EnergyConsumptionModel(ABC):
    """Pure function from traversal conditions to joules consumed."""

    def get_energy_consumption_joules(self, traversal: LinkTraversal) -> float:
        """Energy for the whole link (never negative)."""
        return self.get_energy_consumption_for_distance(traversal, traversal.length_m)

    def get_energy_consumption_for_distance(
        self,
        traversal: LinkTraversal,
        distance_m: float,
    ) -> float:
        """Energy for driving ``distance_m`` of the link at its average speed.

        Used by the split hybrid policy to price the part of a link the
        battery could not cover.
        """
        if not math.isfinite(distance_m) or distance_m < 0:
            raise InvalidTraversalInput(
                f"distance_m must be finite and >= 0, got {distance_m!r}"
            )
        if distance_m == 0:
            return 0.0
        return max(0.0, self._consumption(traversal, distance_m))

    @abstractmethod
    def _consumption(self, traversal: LinkTraversal, distance_m: float) -> float:
        """Raw joules for ``distance_m`` (> 0) of ``traversal``."""


# ═══════════════════════════════════════════════════════════════════════════
# Concrete variants
# ═══════════════════════════════════════════════════════════════════════════

class ConstantRateConsumptionModel(EnergyConsumptionModel):
    """Fixed joules per meter."""

    def __init__(self, joules_per_meter: float) -> None:
        if not math.isfinite(joules_per_meter) or joules_per_meter < 0:
            raise ValueError(f"joules_per_meter must be >= 0, got {joules_per_meter!r}")
        self._joules_per_meter = float(joules_per_meter)

    @property
    def joules_per_meter(self) -> float:
        return self._joules_per_meter

    def _consumption(self, traversal: LinkTraversal, distance_m: float) -> float:
        return self._joules_per_meter * distance_m

    def __repr__(self) -> str:
        return f"{type(self).__name__}(joules_per_meter={self._joules_per_meter})"


class SpeedDependentConsumptionModel(EnergyConsumptionModel):
    """Consumption rate looked up from an average-speed calibration table.

    Rates between table points are linearly interpolated; speeds outside
    the table take the nearest end value.  A stationary leg (zero duration)
    uses the rate at the lowest tabulated speed.

    Parameters
    ----------
    speeds_mps : sequence of float
        Strictly increasing average speeds (m/s).
    joules_per_meter : sequence of float
        Consumption rate at each speed (J/m), all >= 0.
    """

    def __init__(
        self,
        speeds_mps: Sequence[float],
        joules_per_meter: Sequence[float],
    ) -> None:
        speeds = np.array(speeds_mps, dtype=np.float64)
        rates = np.array(joules_per_meter, dtype=np.float64)
        if speeds.ndim != 1 or speeds.size == 0 or speeds.shape != rates.shape:
            raise ValueError("speed and rate tables must be non-empty 1-D arrays of equal length")
        if not (np.all(np.isfinite(speeds)) and np.all(np.isfinite(rates))):
            raise ValueError("calibration tables must be finite")
        if np.any(np.diff(speeds) <= 0):
            raise ValueError("speeds_mps must be strictly increasing")
        if np.any(rates < 0):
            raise ValueError("joules_per_meter must be >= 0")

        # read-only: instances are shared between vehicles
        speeds.setflags(write=False)
        rates.setflags(write=False)
        self._speeds = speeds
        self._rates = rates

    def rate_at(self, speed_mps: float) -> float:
        """Interpolated J/m at ``speed_mps``."""
        return float(np.interp(speed_mps, self._speeds, self._rates))

    def _consumption(self, traversal: LinkTraversal, distance_m: float) -> float:
        return self.rate_at(traversal.average_speed_mps) * distance_m

    def __repr__(self) -> str:
        return f"{type(self).__name__}(points={self._speeds.size})"


class GradeAwareConsumptionModel(EnergyConsumptionModel):
    """Adds the potential-energy term of climbing (or descending) a link.

    Uphill:   E = base + m·g·Δh
    Downhill: E = max(0, base − η_regen · m·g·|Δh|)

    Δh is scaled to the distance actually driven.
    """

    def __init__(
        self,
        base: EnergyConsumptionModel,
        vehicle_mass_kg: float,
        regeneration_efficiency: float = 0.0,
    ) -> None:
        if not math.isfinite(vehicle_mass_kg) or vehicle_mass_kg <= 0:
            raise ValueError(f"vehicle_mass_kg must be > 0, got {vehicle_mass_kg!r}")
        if not 0.0 <= regeneration_efficiency <= 1.0:
            raise ValueError(
                f"regeneration_efficiency must be within [0, 1], got {regeneration_efficiency!r}"
            )
        self._base = base
        self._mass_kg = float(vehicle_mass_kg)
        self._regen = float(regeneration_efficiency)

    @property
    def base(self) -> EnergyConsumptionModel:
        return self._base

    def _consumption(self, traversal: LinkTraversal, distance_m: float) -> float:
        base_joules = self._base.get_energy_consumption_for_distance(traversal, distance_m)
        potential = self._mass_kg * GRAVITY_MPS2 * traversal.grade * distance_m
        if potential >= 0:
            return base_joules + potential
        return max(0.0, base_joules + self._regen * potential)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base={self._base!r}, "
            f"vehicle_mass_kg={self._mass_kg}, regeneration_efficiency={self._regen})"
        )
