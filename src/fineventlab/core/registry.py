"""
Strategy registries and dispatch for FinEventLab.

Condition and recurrence behaviour is looked up by kind string. The
registries are plain dictionaries filled by
:func:`fineventlab.strategies.registry.register_defaults` on import of
``fineventlab.strategies``. Dispatch never falls through: a kind without a
strategy is a ``ConfigError``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from .errors import ConfigError
from .interfaces import IConditionStrategy, IRecurrenceStrategy
from .kinds import K

if TYPE_CHECKING:
    from .conditions import Condition
    from .context import MonthEvaluationContext
    from .events import ScenarioEvent


# Global strategy registries
ConditionRegistry: dict[str, IConditionStrategy] = {}
RecurrenceRegistry: dict[str, IRecurrenceStrategy] = {}


def wire_strategies(events: Iterable[ScenarioEvent]) -> None:
    """
    Check that every kind used by ``events`` has a registered strategy.

    Called once before a run so the month loop can dispatch without checks.

    Args:
        events: Events about to be evaluated

    Raises:
        ConfigError: If an event type, recurrence kind or condition type is unknown
    """
    for event in events:
        if event.type not in K.all_event_types():
            raise ConfigError(f"Unknown event type '{event.type}' on '{event.name}'")
        if event.recurrence not in RecurrenceRegistry:
            raise ConfigError(
                f"Unknown recurrence strategy: {event.recurrence} (event '{event.name}')"
            )
        for condition in event.unlocked_by:
            if condition.type not in ConditionRegistry:
                raise ConfigError(
                    f"Unknown condition strategy: {condition.type} (event '{event.name}')"
                )


def evaluate_condition(condition: Condition, ctx: MonthEvaluationContext) -> bool:
    """
    Evaluate one condition against the month context.

    Raises:
        ConfigError: If no evaluator is registered for the condition type
    """
    strategy = ConditionRegistry.get(condition.type)
    if strategy is None:
        raise ConfigError(f"Unknown condition strategy: {condition.type}")
    return strategy.evaluate(condition, ctx)


def can_fire_this_month(event: ScenarioEvent, ctx: MonthEvaluationContext) -> bool:
    """
    Recurrence gate: may ``event`` be considered in ``ctx.month`` at all?

    Raises:
        ConfigError: If no gate is registered for the recurrence kind
    """
    strategy = RecurrenceRegistry.get(event.recurrence)
    if strategy is None:
        raise ConfigError(f"Unknown recurrence strategy: {event.recurrence}")
    return strategy.can_fire(event, ctx)


def should_event_fire(event: ScenarioEvent, ctx: MonthEvaluationContext) -> bool:
    """Recurrence gate AND every condition (short-circuits on the first False)."""
    if not can_fire_this_month(event, ctx):
        return False
    return all(evaluate_condition(c, ctx) for c in event.unlocked_by)
