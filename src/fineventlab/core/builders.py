"""
Convenience constructors for scenario events.

The builders attach the conventional calendar condition so callers only spell
out the extra gates they care about. They are pure: every call returns a new
object and nothing is registered anywhere.
"""

from __future__ import annotations

from collections.abc import Iterable

from .conditions import Condition, DateInRange, DateIs
from .errors import ConfigError
from .events import Scenario, ScenarioEvent
from .kinds import K
from .local_date import LocalDate


def make_scenario(name: str, events: Iterable[ScenarioEvent]) -> Scenario:
    return Scenario(name=name, events=list(events))


def make_one_off(
    type: str,
    name: str,
    amount: float,
    date: LocalDate,
    unlocked_by: Iterable[Condition] | None = None,
    metadata: dict[str, str] | None = None,
) -> ScenarioEvent:
    """
    One-time event in the month of ``date``.

    Caller conditions come first, followed by a ``date-is`` condition.
    """
    conditions = list(unlocked_by or []) + [DateIs(date)]
    return ScenarioEvent(
        name=name,
        type=type,
        amount=amount,
        recurrence=K.R_ONCE,
        unlocked_by=tuple(conditions),
        metadata=metadata,
    )


def make_recurring(
    type: str,
    name: str,
    amount: float,
    start_date: LocalDate,
    end_date: LocalDate | None,
    frequency: str = K.R_MONTHLY,
    unlocked_by: Iterable[Condition] | None = None,
    metadata: dict[str, str] | None = None,
) -> ScenarioEvent:
    """
    Monthly or yearly event bounded by ``[start_date, end_date]``.

    ``end_date=None`` keeps the event going for the rest of the simulation.
    For ``frequency='yearly'`` the month of ``start_date`` is the month the
    event fires in every year.

    Raises:
        ConfigError: If ``frequency`` is not 'monthly' or 'yearly'
    """
    if frequency not in (K.R_MONTHLY, K.R_YEARLY):
        raise ConfigError(
            f"Recurring events must be '{K.R_MONTHLY}' or '{K.R_YEARLY}', got '{frequency}'"
        )
    conditions = list(unlocked_by or []) + [DateInRange(start_date, end_date)]
    return ScenarioEvent(
        name=name,
        type=type,
        amount=amount,
        recurrence=frequency,
        unlocked_by=tuple(conditions),
        metadata=metadata,
    )


def make_event(
    type: str,
    name: str,
    amount: float,
    unlocked_by: Iterable[Condition],
    metadata: dict[str, str] | None = None,
) -> ScenarioEvent:
    """One-time event gated only by the given conditions."""
    return ScenarioEvent(
        name=name,
        type=type,
        amount=amount,
        recurrence=K.R_ONCE,
        unlocked_by=tuple(unlocked_by),
        metadata=metadata,
    )
