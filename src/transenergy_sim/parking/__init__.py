"""Parking cost models."""

from transenergy_sim.parking.cost import (
    DurationTieredParkingCostModel,
    FacilityTariffParkingCostModel,
    FlatRateParkingCostModel,
    FreeParkingCostModel,
    ParkingCostModel,
    TimeOfDayParkingCostModel,
)

__all__ = [
    "ParkingCostModel",
    "FreeParkingCostModel",
    "FlatRateParkingCostModel",
    "TimeOfDayParkingCostModel",
    "DurationTieredParkingCostModel",
    "FacilityTariffParkingCostModel",
]
