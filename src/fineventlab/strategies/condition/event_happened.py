"""
Firing-history condition.
"""

from __future__ import annotations

from fineventlab.core.conditions import EventHappened
from fineventlab.core.context import MonthEvaluationContext
from fineventlab.core.interfaces import IConditionStrategy


class ConditionEventHappened(IConditionStrategy):
    """Holds once any event named ``event_name`` has fired (type: 'event-happened')."""

    def evaluate(self, condition: EventHappened, ctx: MonthEvaluationContext) -> bool:
        return condition.event_name in ctx.fired_events
