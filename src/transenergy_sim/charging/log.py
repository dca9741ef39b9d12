"""Link-level charging log.

One ``ChargingLogRow`` per completed charging session, appended to the
run's ``ChargingLog``.  The log is the only object in the core with
concurrent writers (many agents finishing sessions on different worker
threads), so each append happens under a lock.  Rows appear in the order
appends were submitted; that is not necessarily global simulated-time
order.

The log is created per run and closed at teardown, after which it is a
read-only source for reporting (``summary``, ``to_dataframe``).
"""

from __future__ import annotations

import logging
import math
import threading
from collections import defaultdict
from dataclasses import asdict, dataclass
from typing import Hashable, Iterator

import pandas as pd

from transenergy_sim.errors import InvalidChargingRecord
from transenergy_sim.models.results import ChargingLogSummary

logger = logging.getLogger(__name__)

COLUMNS = [
    "vehicle_id",
    "link_id",
    "start_charging_time",
    "charging_duration",
    "energy_charged_joules",
]


@dataclass(frozen=True)
class ChargingLogRow:
    """One charging session at link granularity."""

    vehicle_id: Hashable
    link_id: Hashable
    start_charging_time: float
    """Seconds since simulation epoch."""
    charging_duration: float
    """Seconds."""
    energy_charged_joules: float

    @property
    def end_charging_time(self) -> float:
        return self.start_charging_time + self.charging_duration


def _check_field(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise InvalidChargingRecord(f"{name} must be finite and >= 0, got {value!r}")


class ChargingLog:
    """Append-only, thread-safe collector of ``ChargingLogRow`` for one run.

    Usage::

        log = ChargingLog()
        row = log.record_session("v1", "l42", 3_600, 900, 5_000_000)
        ...
        log.close()
        df = log.to_dataframe()
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rows: list[ChargingLogRow] = []
        self._closed = False

    # ── Writing ─────────────────────────────────────────────────────────

    def record_session(
        self,
        vehicle_id: Hashable,
        link_id: Hashable,
        start_time: float,
        duration: float,
        energy_joules: float,
    ) -> ChargingLogRow:
        """Validate, append and return one session row."""
        _check_field("start_time", start_time)
        _check_field("duration", duration)
        _check_field("energy_joules", energy_joules)

        row = ChargingLogRow(
            vehicle_id=vehicle_id,
            link_id=link_id,
            start_charging_time=start_time,
            charging_duration=duration,
            energy_charged_joules=energy_joules,
        )
        with self._lock:
            if self._closed:
                raise RuntimeError("ChargingLog is closed; the run has been torn down")
            self._rows.append(row)
        logger.debug(
            "Charging session: vehicle %s on link %s, %.1f J over %.0f s",
            vehicle_id, link_id, energy_joules, duration,
        )
        return row

    def close(self) -> None:
        """Mark the end of the run; later appends raise ``RuntimeError``."""
        with self._lock:
            self._closed = True
            count = len(self._rows)
        logger.info("Charging log closed with %d sessions", count)

    @property
    def closed(self) -> bool:
        return self._closed

    # ── Reading (reporting boundary) ────────────────────────────────────

    @property
    def rows(self) -> tuple[ChargingLogRow, ...]:
        """Snapshot of all rows in submission order."""
        with self._lock:
            return tuple(self._rows)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)

    def __iter__(self) -> Iterator[ChargingLogRow]:
        return iter(self.rows)

    @property
    def total_energy_charged_joules(self) -> float:
        return sum(r.energy_charged_joules for r in self.rows)

    def summary(self) -> ChargingLogSummary:
        """Session count, totals and per-vehicle / per-link energy."""
        rows = self.rows
        by_vehicle: dict[str, float] = defaultdict(float)
        by_link: dict[str, float] = defaultdict(float)
        for r in rows:
            by_vehicle[str(r.vehicle_id)] += r.energy_charged_joules
            by_link[str(r.link_id)] += r.energy_charged_joules
        return ChargingLogSummary(
            session_count=len(rows),
            total_energy_charged_joules=sum(r.energy_charged_joules for r in rows),
            total_charging_duration_s=sum(r.charging_duration for r in rows),
            energy_by_vehicle_joules=dict(by_vehicle),
            energy_by_link_joules=dict(by_link),
        )

    def to_dataframe(self) -> pd.DataFrame:
        """One row per session, columns in ``COLUMNS`` order."""
        return pd.DataFrame([asdict(r) for r in self.rows], columns=COLUMNS)
