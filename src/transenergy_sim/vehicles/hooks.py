"""Engine-consumption telemetry hooks.

Every leg driven (wholly or partly) on a combustion engine reports its
engine energy through ``record_engine_energy_consumption``.  The vehicle
forwards it to an optional host-supplied hook; without one nothing is
recorded.
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from typing import Hashable, Protocol

logger = logging.getLogger(__name__)


class EngineConsumptionHook(Protocol):
    def __call__(self, vehicle_id: Hashable, joules: float) -> None: ...


class EngineConsumptionLog:
    """Thread-safe accumulator usable as an ``EngineConsumptionHook``.

    Keeps per-vehicle engine energy totals and event counts for one run.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._joules: dict[Hashable, float] = defaultdict(float)
        self._events: dict[Hashable, int] = defaultdict(int)

    def __call__(self, vehicle_id: Hashable, joules: float) -> None:
        with self._lock:
            self._joules[vehicle_id] += joules
            self._events[vehicle_id] += 1
        logger.debug("Engine energy %.1f J recorded for vehicle %s", joules, vehicle_id)

    @property
    def total_joules(self) -> float:
        with self._lock:
            return sum(self._joules.values())

    @property
    def event_count(self) -> int:
        with self._lock:
            return sum(self._events.values())

    def joules_for(self, vehicle_id: Hashable) -> float:
        with self._lock:
            return self._joules.get(vehicle_id, 0.0)

    def events_for(self, vehicle_id: Hashable) -> int:
        with self._lock:
            return self._events.get(vehicle_id, 0)
