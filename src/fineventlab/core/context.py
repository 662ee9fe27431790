"""
Context classes for FinEventLab simulation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .events import ScenarioEvent
    from .local_date import LocalDate


@dataclass
class FiredEventInfo:
    """
    Firing history of one event name.

    Created the first time an event with that name fires and updated on every
    later firing. Entries are never removed during a run.
    """

    first_fired_month: str
    last_fired_month: str
    total_fire_count: int = 1

    def record(self, month_key: str) -> None:
        self.last_fired_month = month_key
        self.total_fire_count += 1

    @property
    def last_fired_year(self) -> int:
        return int(self.last_fired_month.split("-")[0])


@dataclass
class CashflowEntry:
    """Net signed amount and fired events (in firing order) for one month."""

    amount: float = 0.0
    events: list[ScenarioEvent] = field(default_factory=list)


@dataclass
class EvaluationState:
    """
    Mutable accumulator owned by a single scenario run.

    Attributes:
        cashflow: Month key -> CashflowEntry
        balance: Month key -> balance at the end of that month
        current_balance: Running balance
        fired_events: Event name -> FiredEventInfo
    """

    current_balance: float = 0.0
    cashflow: dict[str, CashflowEntry] = field(default_factory=dict)
    balance: dict[str, float] = field(default_factory=dict)
    fired_events: dict[str, FiredEventInfo] = field(default_factory=dict)


@dataclass
class MonthEvaluationContext:
    """
    Context object passed to condition and recurrence strategies.

    Attributes:
        month: First day of the month being evaluated
        month_key: ``yyyy-MM`` key of that month
        current_balance: Balance as seen by balance conditions; refreshed
            after the unconditioned pass and after each balance-gated firing
        fired_events: Shared firing history (live view of the run state)
        monthly_events: Events fired so far this month, in firing order
    """

    month: LocalDate
    month_key: str
    current_balance: float
    fired_events: dict[str, FiredEventInfo]
    monthly_events: list[ScenarioEvent] = field(default_factory=list)
