"""
Event and scenario records evaluated by the simulation engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .conditions import Condition, DateInRange, condition_from_dict
from .kinds import K


@dataclass(frozen=True)
class ScenarioEvent:
    """
    A single income or expense item of a scenario.

    The ``name`` is the event's identity: firing history and the
    ``event-happened`` / ``income-is-above`` conditions all look events up by
    name, so two events sharing a name share one history.

    Attributes:
        name: Identity key and display label
        type: 'income' or 'expense'
        amount: Non-negative magnitude; the sign comes from ``type``
        recurrence: 'once', 'monthly' or 'yearly'
        unlocked_by: Conditions that must all hold for the event to fire
        metadata: Free-form string annotations, ignored by the engine
    """

    name: str
    type: str
    amount: float
    recurrence: str = K.R_ONCE
    unlocked_by: tuple[Condition, ...] = ()
    metadata: dict[str, str] | None = field(default=None, compare=False, hash=False)

    def __post_init__(self):
        # Accept any iterable of conditions but store an immutable tuple
        if not isinstance(self.unlocked_by, tuple):
            object.__setattr__(self, "unlocked_by", tuple(self.unlocked_by))

    @property
    def is_income(self) -> bool:
        return self.type == K.E_INCOME

    @property
    def signed_amount(self) -> float:
        """+amount for income, -amount for expense."""
        return self.amount if self.is_income else -self.amount

    @property
    def is_balance_gated(self) -> bool:
        """True if any condition is balance-tagged (evaluated in the second pass)."""
        return any(c.is_balance for c in self.unlocked_by)

    @property
    def date_range(self) -> DateInRange | None:
        """First ``date-in-range`` condition, if any."""
        for condition in self.unlocked_by:
            if isinstance(condition, DateInRange):
                return condition
        return None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "amount": self.amount,
            "recurrence": {"type": self.recurrence},
            "unlockedBy": [c.to_dict() for c in self.unlocked_by],
        }
        if self.metadata:
            data["metadata"] = dict(self.metadata)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScenarioEvent:
        """Rebuild an event from its wire shape (no schema validation)."""
        recurrence = data.get("recurrence", K.R_ONCE)
        if isinstance(recurrence, dict):
            recurrence = recurrence.get("type", K.R_ONCE)
        return cls(
            name=str(data["name"]),
            type=str(data["type"]),
            amount=float(data["amount"]),
            recurrence=str(recurrence),
            unlocked_by=tuple(
                condition_from_dict(c) for c in data.get("unlockedBy", [])
            ),
            metadata=data.get("metadata"),
        )


@dataclass
class Scenario:
    """
    A named, ordered collection of events.

    Declaration order matters: within each evaluation pass events are
    considered in the order they appear here.

    Attributes:
        name: Human-readable scenario name
        events: Events in declaration order
    """

    name: str
    events: list[ScenarioEvent] = field(default_factory=list)

    def run(self, start, end, initial_balance: float = 0.0):
        """
        Simulate this scenario month by month.

        Convenience wrapper around :func:`fineventlab.core.scenario.run_scenario`.

        Args:
            start: First month to evaluate (any day inside it)
            end: Last month to evaluate, inclusive
            initial_balance: Balance before the first month

        Returns:
            ScenarioResult with per-month cashflow and balance
        """
        from .scenario import run_scenario

        return run_scenario(
            scenario=self, start_date=start, end_date=end, initial_balance=initial_balance
        )

    def names(self) -> list[str]:
        """Event names in declaration order (duplicates kept)."""
        return [event.name for event in self.events]

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "events": [e.to_dict() for e in self.events]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Scenario:
        """
        Create a Scenario from its wire shape.

        Args:
            data: Mapping with 'name' and an optional 'events' list

        Returns:
            Scenario instance
        """
        return cls(
            name=str(data.get("name", "Unnamed Scenario")),
            events=[ScenarioEvent.from_dict(e) for e in data.get("events") or []],
        )


def _month_label(value) -> str:
    return f"{value.y}-{value.m:02d}"


def describe_event(event: ScenarioEvent) -> dict[str, Any]:
    """
    Flatten an event into a compact, human-oriented mapping.

    Dates are reduced to ``YYYY-MM`` and thresholds are exposed as
    ``threshold``. Used for overviews and CLI listings.

    Example:
        >>> describe_event(make_one_off("expense", "Car", 10000, ld(2025, 6, 1)))
        {'name': 'Car', 'type': 'expense', 'amount': 10000, 'recurrence': 'once',
         'conditions': [{'tag': 'cashflow', 'type': 'date-is', 'date': '2025-06'}]}
    """
    conditions = []
    for condition in event.unlocked_by:
        item: dict[str, Any] = {"tag": condition.tag, "type": condition.type}
        if condition.type == K.C_DATE_IS:
            item["date"] = _month_label(condition.date)
        elif condition.type == K.C_DATE_IN_RANGE:
            item["start"] = _month_label(condition.start)
            item["end"] = (
                _month_label(condition.end) if condition.end is not None else None
            )
        elif condition.type == K.C_NETWORTH_IS_ABOVE:
            item["threshold"] = condition.amount
        elif condition.type == K.C_EVENT_HAPPENED:
            item["eventName"] = condition.event_name
        elif condition.type == K.C_INCOME_IS_ABOVE:
            item["eventName"] = condition.event_name
            item["threshold"] = condition.amount
        conditions.append(item)

    return {
        "name": event.name,
        "type": event.type,
        "amount": event.amount,
        "recurrence": event.recurrence,
        "conditions": conditions,
    }
