"""
Strategy interface protocols for FinEventLab.
Defines the contracts that all strategies must satisfy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .context import MonthEvaluationContext

if TYPE_CHECKING:
    # Only imported for type checking to avoid runtime cycles
    from .conditions import Condition
    from .events import ScenarioEvent


@runtime_checkable
class IConditionStrategy(Protocol):
    """
    Contract for CONDITION evaluators (one per condition type).
    Responsibilities: decide whether a condition holds in the current month.
    Must be pure: no mutation of the context or the condition.
    """

    def evaluate(self, condition: Condition, ctx: MonthEvaluationContext) -> bool:
        ...


@runtime_checkable
class IRecurrenceStrategy(Protocol):
    """
    Contract for RECURRENCE gates (one per recurrence kind).
    Responsibilities: decide whether an event may be considered this month,
    based on its firing history. Conditions are checked separately.
    """

    def can_fire(self, event: ScenarioEvent, ctx: MonthEvaluationContext) -> bool:
        ...


__all__ = ["IConditionStrategy", "IRecurrenceStrategy"]
