"""Energy consumption models and their per-leg input."""

from transenergy_sim.energy.traversal import LinkTraversal
from transenergy_sim.energy.consumption import (
    ConstantRateConsumptionModel,
    EnergyConsumptionModel,
    GradeAwareConsumptionModel,
    SpeedDependentConsumptionModel,
)

__all__ = [
    "LinkTraversal",
    "EnergyConsumptionModel",
    "ConstantRateConsumptionModel",
    "SpeedDependentConsumptionModel",
    "GradeAwareConsumptionModel",
]
