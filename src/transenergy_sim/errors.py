"""Exception taxonomy.

All conditions are raised at the offending call and never retried here;
recovery is the host scheduler's decision.  Running out of charge is *not*
an exception: it comes back as ``EnergyResult.insufficient_charge``.
"""

from __future__ import annotations


class TransEnergyError(Exception):
    """Base class for every error raised by this package."""


class InvalidTraversalInput(TransEnergyError, ValueError):
    """Leg data with a negative or non-finite distance / duration."""


class InvalidChargingRecord(TransEnergyError, ValueError):
    """Charging session with a negative or non-finite time, duration or energy."""


class InvalidParkingQuery(TransEnergyError, ValueError):
    """Parking query with a negative or non-finite arrival time or duration."""
