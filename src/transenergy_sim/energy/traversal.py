"""Link traversal conditions — the per-leg input handed over by the host."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Hashable

from transenergy_sim.errors import InvalidTraversalInput


def _check_non_negative(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise InvalidTraversalInput(f"{name} must be finite and >= 0, got {value!r}")


@dataclass(frozen=True)
class LinkTraversal:
    """One leg of travel over a single network link.

    ``grade`` is rise over run (0.05 = 5 % uphill, negative = downhill).
    ``max_speed_mps`` is the link's free speed when the host knows it;
    none of the bundled models need it.
    """

    link_id: Hashable
    length_m: float
    duration_s: float
    grade: float = 0.0
    max_speed_mps: float | None = None

    def __post_init__(self) -> None:
        _check_non_negative("length_m", self.length_m)
        _check_non_negative("duration_s", self.duration_s)
        if not math.isfinite(self.grade):
            raise InvalidTraversalInput(f"grade must be finite, got {self.grade!r}")
        if self.max_speed_mps is not None:
            _check_non_negative("max_speed_mps", self.max_speed_mps)

    @property
    def average_speed_mps(self) -> float:
        """length / duration; 0.0 for a zero-duration leg."""
        if self.duration_s <= 0:
            return 0.0
        return self.length_m / self.duration_s

    @property
    def elevation_change_m(self) -> float:
        return self.length_m * self.grade
