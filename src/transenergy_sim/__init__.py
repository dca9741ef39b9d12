"""Vehicle-level energy, charging and parking-cost core for agent-based
transport simulations."""

from transenergy_sim.errors import (
    InvalidChargingRecord,
    InvalidParkingQuery,
    InvalidTraversalInput,
    TransEnergyError,
)

__version__ = "0.3.0"

__all__ = [
    "TransEnergyError",
    "InvalidTraversalInput",
    "InvalidChargingRecord",
    "InvalidParkingQuery",
    "__version__",
]
