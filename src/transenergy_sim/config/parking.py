"""Parking tariff configuration — the fee schedule loaded at startup."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, model_validator


class FreeTariff(BaseModel):
    kind: Literal["free"] = "free"


class FlatTariff(BaseModel):
    kind: Literal["flat"] = "flat"
    rate_per_hour: float = Field(default=2.0, ge=0, description="Price per parked hour")
    free_minutes: float = Field(default=0.0, ge=0, description="Grace period before billing starts")
    max_cost: float | None = Field(default=None, ge=0, description="Cap per stop (None = uncapped)")


class TimeOfDayTariff(BaseModel):
    kind: Literal["time_of_day"] = "time_of_day"
    hourly_rates: list[float] = Field(
        default_factory=lambda: [0.0] * 8 + [3.0] * 11 + [1.0] * 5,
        min_length=24,
        max_length=24,
        description="Price per hour for each hour of the day (24 entries)",
    )

    @model_validator(mode="after")
    def _check_rates(self) -> TimeOfDayTariff:
        if any(r < 0 for r in self.hourly_rates):
            raise ValueError("hourly_rates must be >= 0")
        return self


class TariffTier(BaseModel):
    max_hours: float = Field(gt=0, description="Upper bound of the stay covered by this tier")
    price: float = Field(ge=0, description="Price for any stay within the bound")


class TieredTariff(BaseModel):
    kind: Literal["tiered"] = "tiered"
    tiers: list[TariffTier] = Field(
        default_factory=lambda: [
            TariffTier(max_hours=1, price=2.0),
            TariffTier(max_hours=4, price=6.0),
            TariffTier(max_hours=24, price=15.0),
        ],
        min_length=1,
    )
    overflow_rate_per_hour: float = Field(default=0.0, ge=0, description="Price per hour past the last tier")

    @model_validator(mode="after")
    def _check_tiers(self) -> TieredTariff:
        bounds = [t.max_hours for t in self.tiers]
        if any(b <= a for a, b in zip(bounds, bounds[1:])):
            raise ValueError("tier max_hours must be strictly increasing")
        return self


ParkingTariffConfig = Annotated[
    Union[FreeTariff, FlatTariff, TimeOfDayTariff, TieredTariff],
    Field(discriminator="kind"),
]


class ParkingConfig(BaseModel):
    """Default tariff plus per-facility overrides (keyed by facility id)."""

    default: ParkingTariffConfig = Field(default_factory=FreeTariff)
    facilities: dict[str, ParkingTariffConfig] = Field(default_factory=dict)
