"""Tests for vehicles/hybrid.py — drivetrain switching and the engine hook.

Covers:
  - Mode selection: ELECTRIC when SOC covers the leg, ENGINE otherwise
  - SOC = 0 always selects ENGINE
  - PER_LEG policy leaves SOC untouched on engine legs
  - SPLIT policy drains the battery and prices the rest on the engine
  - record_engine_energy_consumption fires once per engine leg, never otherwise
  - hybrid-mode model defaults to the electric instance but is configurable
"""

from __future__ import annotations

import pytest

from transenergy_sim.energy.consumption import ConstantRateConsumptionModel
from transenergy_sim.energy.traversal import LinkTraversal
from transenergy_sim.vehicles.base import DrivetrainClass, DrivetrainMode
from transenergy_sim.vehicles.hooks import EngineConsumptionLog
from transenergy_sim.vehicles.hybrid import HybridElectricVehicle, HybridPolicy

from conftest import CAPACITY_J


def make_phev(electric_model, engine_model, soc, policy=HybridPolicy.PER_LEG, hook=None, **kwargs):
    return HybridElectricVehicle(
        electric_model, engine_model, CAPACITY_J, "phev",
        policy=policy, initial_soc_joules=soc, engine_hook=hook, **kwargs,
    )


class RecordingHook:
    def __init__(self) -> None:
        self.calls: list[tuple[object, float]] = []

    def __call__(self, vehicle_id, joules) -> None:
        self.calls.append((vehicle_id, joules))


# ═══════════════════════════════════════════════════════════════════════════
# Mode selection
# ═══════════════════════════════════════════════════════════════════════════

class TestModeSelection:

    def test_initial_mode_is_electric(self, phev):
        assert phev.mode is DrivetrainMode.ELECTRIC
        assert phev.drivetrain is DrivetrainClass.HYBRID_ELECTRIC

    def test_full_battery_selects_electric(self, phev, leg_300m):
        assert phev.select_drivetrain_mode(leg_300m) is DrivetrainMode.ELECTRIC

    def test_empty_battery_selects_engine(self, electric_model, engine_model, leg_300m):
        phev = make_phev(electric_model, engine_model, soc=0.0)
        assert phev.select_drivetrain_mode(leg_300m) is DrivetrainMode.ENGINE

    def test_empty_battery_selects_engine_for_stationary_leg(self, electric_model, engine_model):
        phev = make_phev(electric_model, engine_model, soc=0.0)
        leg = LinkTraversal("l0", length_m=0, duration_s=10)
        assert phev.select_drivetrain_mode(leg) is DrivetrainMode.ENGINE

    def test_short_battery_selects_engine(self, electric_model, engine_model, leg_300m):
        phev = make_phev(electric_model, engine_model, soc=10_000.0)
        assert phev.select_drivetrain_mode(leg_300m) is DrivetrainMode.ENGINE
        assert phev.mode is DrivetrainMode.ENGINE

    def test_exactly_enough_selects_electric(self, electric_model, engine_model, leg_300m):
        phev = make_phev(electric_model, engine_model, soc=30_000.0)
        assert phev.select_drivetrain_mode(leg_300m) is DrivetrainMode.ELECTRIC

    def test_reevaluated_every_leg(self, electric_model, engine_model, leg_300m):
        phev = make_phev(electric_model, engine_model, soc=0.0)
        assert phev.apply_energy_consumption(leg_300m).mode is DrivetrainMode.ENGINE
        phev.charge(CAPACITY_J)
        assert phev.apply_energy_consumption(leg_300m).mode is DrivetrainMode.ELECTRIC


# ═══════════════════════════════════════════════════════════════════════════
# Consumption
# ═══════════════════════════════════════════════════════════════════════════

class TestConsumption:

    def test_electric_leg_draws_battery(self, phev, leg_300m):
        result = phev.apply_energy_consumption(leg_300m)
        assert result.mode is DrivetrainMode.ELECTRIC
        assert result.battery_joules == 30_000.0
        assert result.engine_joules == 0.0
        assert phev.soc_joules == 70_000.0

    def test_per_leg_engine_leaves_soc(self, electric_model, engine_model, leg_300m):
        phev = make_phev(electric_model, engine_model, soc=10_000.0)
        result = phev.apply_energy_consumption(leg_300m)
        assert result.mode is DrivetrainMode.ENGINE
        assert result.engine_joules == 120_000.0
        assert result.battery_joules == 0.0
        assert result.joules_consumed == 120_000.0
        assert result.insufficient_charge is False
        assert phev.soc_joules == 10_000.0

    def test_split_drains_battery_then_engine(self, electric_model, engine_model, leg_300m):
        """10 kJ covers 100 of 300 m; engine prices the remaining 200 m."""
        phev = make_phev(electric_model, engine_model, soc=10_000.0, policy=HybridPolicy.SPLIT)
        result = phev.apply_energy_consumption(leg_300m)
        assert result.mode is DrivetrainMode.ENGINE
        assert result.battery_joules == 10_000.0
        assert result.engine_joules == pytest.approx(80_000.0)
        assert result.joules_consumed == pytest.approx(90_000.0)
        assert phev.soc_joules == 0.0

    def test_split_with_empty_battery_is_all_engine(self, electric_model, engine_model, leg_300m):
        phev = make_phev(electric_model, engine_model, soc=0.0, policy=HybridPolicy.SPLIT)
        result = phev.apply_energy_consumption(leg_300m)
        assert result.engine_joules == 120_000.0
        assert result.battery_joules == 0.0

    def test_drained_battery_switches_next_leg(self, electric_model, engine_model):
        phev = make_phev(electric_model, engine_model, soc=CAPACITY_J)
        full_drain = LinkTraversal("l1", length_m=1_000, duration_s=60)
        assert phev.apply_energy_consumption(full_drain).mode is DrivetrainMode.ELECTRIC
        assert phev.soc_joules == 0.0
        nxt = LinkTraversal("l2", length_m=10, duration_s=1)
        assert phev.apply_energy_consumption(nxt).mode is DrivetrainMode.ENGINE

    def test_soc_bounds(self, electric_model, engine_model):
        phev = make_phev(electric_model, engine_model, soc=CAPACITY_J, policy=HybridPolicy.SPLIT)
        for i in range(50):
            phev.apply_energy_consumption(LinkTraversal(f"l{i}", length_m=70.0 * i, duration_s=30))
            assert 0.0 <= phev.soc_joules <= CAPACITY_J


# ═══════════════════════════════════════════════════════════════════════════
# Engine hook
# ═══════════════════════════════════════════════════════════════════════════

class TestEngineHook:

    def test_called_once_per_engine_leg_only(self, electric_model, engine_model):
        hook = RecordingHook()
        phev = make_phev(electric_model, engine_model, soc=50_000.0, hook=hook)
        legs = [LinkTraversal(f"l{i}", length_m=200, duration_s=20) for i in range(5)]
        modes = [phev.apply_energy_consumption(leg).mode for leg in legs]

        # 20 kJ per leg: legs 1-2 electric (50 → 30 → 10 kJ), legs 3-5 engine
        assert modes == [DrivetrainMode.ELECTRIC] * 2 + [DrivetrainMode.ENGINE] * 3
        assert len(hook.calls) == 3
        assert all(vid == "phev" and joules == 80_000.0 for vid, joules in hook.calls)

    def test_not_called_on_electric_legs(self, phev, leg_300m, engine_log):
        phev.apply_energy_consumption(leg_300m)
        phev.apply_energy_consumption(leg_300m)
        assert engine_log.event_count == 0

    def test_split_reports_engine_share(self, electric_model, engine_model, leg_300m):
        hook = RecordingHook()
        phev = make_phev(electric_model, engine_model, soc=10_000.0,
                         policy=HybridPolicy.SPLIT, hook=hook)
        phev.apply_energy_consumption(leg_300m)
        assert len(hook.calls) == 1
        assert hook.calls[0][1] == pytest.approx(80_000.0)

    def test_direct_call_does_not_touch_soc(self, phev):
        phev.record_engine_energy_consumption(5_000.0)
        assert phev.soc_joules == CAPACITY_J

    def test_default_hook_is_noop(self, electric_model, engine_model, leg_300m):
        phev = make_phev(electric_model, engine_model, soc=0.0)
        phev.record_engine_energy_consumption(1.0)
        assert phev.apply_energy_consumption(leg_300m).engine_joules == 120_000.0

    def test_engine_log_totals(self, electric_model, engine_model, leg_300m):
        log = EngineConsumptionLog()
        phev = make_phev(electric_model, engine_model, soc=0.0, hook=log)
        phev.apply_energy_consumption(leg_300m)
        phev.apply_energy_consumption(leg_300m)
        assert log.total_joules == 240_000.0
        assert log.event_count == 2
        assert log.joules_for("unknown") == 0.0


# ═══════════════════════════════════════════════════════════════════════════
# Hybrid-mode model wiring
# ═══════════════════════════════════════════════════════════════════════════

class TestHybridModel:

    def test_defaults_to_electric_instance(self, phev, electric_model):
        assert phev.hybrid_model is electric_model

    def test_separate_blended_model(self, electric_model, engine_model, leg_300m):
        blended = ConstantRateConsumptionModel(50.0)
        phev = make_phev(electric_model, engine_model, soc=CAPACITY_J, hybrid_model=blended)
        result = phev.apply_energy_consumption(leg_300m)
        assert phev.hybrid_model is blended
        assert result.battery_joules == 15_000.0
        assert phev.soc_joules == 85_000.0

    def test_policy_accepts_string(self, electric_model, engine_model):
        phev = make_phev(electric_model, engine_model, soc=0.0, policy="split")
        assert phev.policy is HybridPolicy.SPLIT
