"""Parking cost models.

Every model prices one stop from (arrival time, duration, person,
facility) and is pure: the same inputs always give the same cost, and no
instance state changes after construction, so one instance can serve any
number of threads.

Times are seconds since simulation epoch; hour-of-day tariffs treat the
epoch as midnight and wrap every 24 h.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Hashable, Mapping, Sequence

from transenergy_sim.errors import InvalidParkingQuery

SECONDS_PER_HOUR = 3_600.0
HOURS_PER_DAY = 24


# ═══════════════════════════════════════════════════════════════════════════
# Capability
# ═══════════════════════════════════════════════════════════════════════════

class ParkingCostModel(ABC):
    """Prices a parking / charging stop; cost is always >= 0."""

    def calc_parking_cost(
        self,
        arrival_time: float,
        duration: float,
        person_id: Hashable,
        facility_id: Hashable,
    ) -> float:
        for name, value in (("arrival_time", arrival_time), ("duration", duration)):
            if not math.isfinite(value) or value < 0:
                raise InvalidParkingQuery(f"{name} must be finite and >= 0, got {value!r}")
        return max(0.0, self._cost(arrival_time, duration, person_id, facility_id))

    @abstractmethod
    def _cost(
        self,
        arrival_time: float,
        duration: float,
        person_id: Hashable,
        facility_id: Hashable,
    ) -> float:
        """Cost for an already-validated query."""


def _check_rate(name: str, value: float) -> float:
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be finite and >= 0, got {value!r}")
    return float(value)


# ═══════════════════════════════════════════════════════════════════════════
# Concrete variants
# ═══════════════════════════════════════════════════════════════════════════

class FreeParkingCostModel(ParkingCostModel):
    def _cost(self, arrival_time, duration, person_id, facility_id) -> float:
        return 0.0


class FlatRateParkingCostModel(ParkingCostModel):
    """``rate_per_hour`` × billable hours, after a free grace period.

    ``max_cost`` caps the charge for a single stop.
    """

    def __init__(
        self,
        rate_per_hour: float,
        free_minutes: float = 0.0,
        max_cost: float | None = None,
    ) -> None:
        self._rate = _check_rate("rate_per_hour", rate_per_hour)
        self._free_s = _check_rate("free_minutes", free_minutes) * 60.0
        self._max_cost = None if max_cost is None else _check_rate("max_cost", max_cost)

    def _cost(self, arrival_time, duration, person_id, facility_id) -> float:
        billable_s = max(0.0, duration - self._free_s)
        cost = self._rate * billable_s / SECONDS_PER_HOUR
        if self._max_cost is not None:
            cost = min(cost, self._max_cost)
        return cost


class TimeOfDayParkingCostModel(ParkingCostModel):
    """Integrates a 24-slot hourly tariff over the parked interval.

    ``hourly_rates[h]`` is the price per hour charged during hour ``h`` of
    the day.  Stops crossing midnight continue into the next day's rates.
    """

    def __init__(self, hourly_rates: Sequence[float]) -> None:
        if len(hourly_rates) != HOURS_PER_DAY:
            raise ValueError(f"hourly_rates needs {HOURS_PER_DAY} entries, got {len(hourly_rates)}")
        self._rates = tuple(_check_rate("hourly rate", r) for r in hourly_rates)
        self._daily_total = sum(self._rates)

    def _cost(self, arrival_time, duration, person_id, facility_id) -> float:
        end = arrival_time + duration

        # whole days cost the same regardless of where they start
        full_days = math.floor(duration / (SECONDS_PER_HOUR * HOURS_PER_DAY))
        cost = full_days * self._daily_total
        t = arrival_time + full_days * SECONDS_PER_HOUR * HOURS_PER_DAY

        while t < end:
            hour_index = math.floor(t / SECONDS_PER_HOUR)
            slot_end = min(end, (hour_index + 1) * SECONDS_PER_HOUR)
            cost += self._rates[hour_index % HOURS_PER_DAY] * (slot_end - t) / SECONDS_PER_HOUR
            t = slot_end
        return cost


class DurationTieredParkingCostModel(ParkingCostModel):
    """Step pricing by stay length.

    ``tiers`` is a sequence of ``(max_hours, price)`` pairs with strictly
    increasing ``max_hours``; the first tier covering the stay sets the
    price.  Stays longer than the last tier pay its price plus
    ``overflow_rate_per_hour`` for every hour (pro rata) beyond it.
    """

    def __init__(
        self,
        tiers: Sequence[tuple[float, float]],
        overflow_rate_per_hour: float = 0.0,
    ) -> None:
        if not tiers:
            raise ValueError("at least one tier is required")
        bounds = [_check_rate("tier max_hours", h) for h, _ in tiers]
        if any(b2 <= b1 for b1, b2 in zip(bounds, bounds[1:])):
            raise ValueError("tier max_hours must be strictly increasing")
        self._tiers = tuple(
            (bound * SECONDS_PER_HOUR, _check_rate("tier price", price))
            for bound, (_, price) in zip(bounds, tiers)
        )
        self._overflow_rate = _check_rate("overflow_rate_per_hour", overflow_rate_per_hour)

    def _cost(self, arrival_time, duration, person_id, facility_id) -> float:
        for bound_s, price in self._tiers:
            if duration <= bound_s:
                return price
        last_bound_s, last_price = self._tiers[-1]
        return last_price + self._overflow_rate * (duration - last_bound_s) / SECONDS_PER_HOUR


class FacilityTariffParkingCostModel(ParkingCostModel):
    """Dispatches to a per-facility model, falling back to ``default``.

    The facility → model mapping is owned by whoever loaded the fee
    schedule; it is wrapped read-only here and never modified.
    """

    def __init__(
        self,
        tariffs: Mapping[Hashable, ParkingCostModel],
        default: ParkingCostModel | None = None,
    ) -> None:
        self._tariffs = MappingProxyType(dict(tariffs))
        self._default = default if default is not None else FreeParkingCostModel()

    @property
    def tariffs(self) -> Mapping[Hashable, ParkingCostModel]:
        return self._tariffs

    def model_for(self, facility_id: Hashable) -> ParkingCostModel:
        return self._tariffs.get(facility_id, self._default)

    def _cost(self, arrival_time, duration, person_id, facility_id) -> float:
        return self.model_for(facility_id).calc_parking_cost(
            arrival_time, duration, person_id, facility_id,
        )
