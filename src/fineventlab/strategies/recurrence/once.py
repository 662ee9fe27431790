"""
One-shot recurrence gate.
"""

from __future__ import annotations

from fineventlab.core.context import MonthEvaluationContext
from fineventlab.core.events import ScenarioEvent
from fineventlab.core.interfaces import IRecurrenceStrategy


class RecurrenceOnce(IRecurrenceStrategy):
    """
    Fire at most once per run (kind: 'once').

    Eligible until any event with the same name has fired.
    """

    def can_fire(self, event: ScenarioEvent, ctx: MonthEvaluationContext) -> bool:
        return event.name not in ctx.fired_events
