"""Vehicle type configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

JOULES_PER_KWH = 3.6e6


class VehicleTypeConfig(BaseModel):
    """One vehicle class; every vehicle of the class shares its models.

    Model fields name entries of ``FleetConfig.consumption_models``.
    """

    drivetrain: Literal["electric", "combustion", "hybrid_electric"] = "electric"
    battery_capacity_kwh: float = Field(default=60.0, ge=0, description="Usable battery energy (kWh)")
    initial_soc_pct: float = Field(default=1.0, ge=0, le=1.0, description="SOC at population load")

    electric_model: str | None = Field(default=None, description="Electric-drive model name")
    engine_model: str | None = Field(default=None, description="Combustion-engine model name")
    hybrid_model: str | None = Field(
        default=None,
        description="Hybrid-mode model name; defaults to the electric model",
    )
    hybrid_policy: Literal["per_leg", "split"] = Field(
        default="per_leg",
        description="'per_leg': whole leg on the engine once SOC is short. "
                    "'split': battery covers what it can, engine the rest of the link.",
    )

    @model_validator(mode="after")
    def _check_models(self) -> VehicleTypeConfig:
        needs_electric = self.drivetrain in ("electric", "hybrid_electric")
        needs_engine = self.drivetrain in ("combustion", "hybrid_electric")
        if needs_electric and self.electric_model is None:
            raise ValueError(f"{self.drivetrain} vehicles need an electric_model")
        if needs_engine and self.engine_model is None:
            raise ValueError(f"{self.drivetrain} vehicles need an engine_model")
        return self

    @property
    def battery_capacity_joules(self) -> float:
        if self.drivetrain == "combustion":
            return 0.0
        return self.battery_capacity_kwh * JOULES_PER_KWH

    @property
    def initial_soc_joules(self) -> float:
        return self.battery_capacity_joules * self.initial_soc_pct

    def referenced_models(self) -> list[str]:
        names = (self.electric_model, self.engine_model, self.hybrid_model)
        return [n for n in names if n is not None]
