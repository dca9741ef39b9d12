"""Top-level fleet configuration — bundles models, vehicle types and tariffs."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from transenergy_sim.config.consumption import (
    ConstantConsumptionConfig,
    ConsumptionModelConfig,
)
from transenergy_sim.config.parking import ParkingConfig
from transenergy_sim.config.vehicle import VehicleTypeConfig


class FleetConfig(BaseModel):
    """Complete input bundle for the vehicle energy / parking core."""

    consumption_models: dict[str, ConsumptionModelConfig] = Field(
        default_factory=lambda: {
            "ev": ConstantConsumptionConfig(joules_per_meter=540.0),
            "ice": ConstantConsumptionConfig(joules_per_meter=2_200.0),
        },
    )
    vehicle_types: dict[str, VehicleTypeConfig] = Field(
        default_factory=lambda: {
            "bev": VehicleTypeConfig(drivetrain="electric", electric_model="ev"),
        },
    )
    parking: ParkingConfig = Field(default_factory=ParkingConfig)

    @model_validator(mode="after")
    def _check_references(self) -> FleetConfig:
        for type_name, vtype in self.vehicle_types.items():
            for model_name in vtype.referenced_models():
                if model_name not in self.consumption_models:
                    raise ValueError(
                        f"vehicle type {type_name!r} references unknown model {model_name!r}"
                    )
        return self


def load_fleet_config(path: str | Path) -> FleetConfig:
    """Read a YAML file into a validated ``FleetConfig``."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return FleetConfig.model_validate(data)
