"""Energy consumption model configuration."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, model_validator


class ConstantConsumptionConfig(BaseModel):
    """Fixed J/m.  Default ≈ 150 Wh/km, a mid-size battery-electric car."""

    kind: Literal["constant"] = "constant"
    joules_per_meter: float = Field(default=540.0, ge=0, description="Consumption rate (J/m)")


class SpeedTableConsumptionConfig(BaseModel):
    """Consumption rate interpolated from an average-speed table."""

    kind: Literal["speed_table"] = "speed_table"
    speeds_mps: list[float] = Field(
        default_factory=lambda: [2.0, 8.0, 14.0, 20.0, 28.0, 36.0],
        min_length=1,
        description="Strictly increasing average speeds (m/s)",
    )
    joules_per_meter: list[float] = Field(
        default_factory=lambda: [720.0, 520.0, 470.0, 500.0, 590.0, 730.0],
        min_length=1,
        description="Consumption rate at each speed (J/m)",
    )

    @model_validator(mode="after")
    def _check_table(self) -> SpeedTableConsumptionConfig:
        if len(self.speeds_mps) != len(self.joules_per_meter):
            raise ValueError("speeds_mps and joules_per_meter must have equal length")
        if any(b <= a for a, b in zip(self.speeds_mps, self.speeds_mps[1:])):
            raise ValueError("speeds_mps must be strictly increasing")
        if any(r < 0 for r in self.joules_per_meter):
            raise ValueError("joules_per_meter must be >= 0")
        return self


class GradeAwareConsumptionConfig(BaseModel):
    """Wraps a flat-road model with the potential-energy term of the grade."""

    kind: Literal["grade_aware"] = "grade_aware"
    base: Annotated[
        Union[ConstantConsumptionConfig, SpeedTableConsumptionConfig],
        Field(discriminator="kind"),
    ] = Field(default_factory=ConstantConsumptionConfig)
    vehicle_mass_kg: float = Field(default=1_800.0, gt=0, description="Loaded vehicle mass (kg)")
    regeneration_efficiency: float = Field(
        default=0.6, ge=0, le=1.0,
        description="Fraction of downhill potential energy recovered (0 for engines)",
    )


ConsumptionModelConfig = Annotated[
    Union[ConstantConsumptionConfig, SpeedTableConsumptionConfig, GradeAwareConsumptionConfig],
    Field(discriminator="kind"),
]
