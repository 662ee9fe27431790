"""
Monthly recurrence gate.
"""

from __future__ import annotations

from fineventlab.core.context import MonthEvaluationContext
from fineventlab.core.events import ScenarioEvent
from fineventlab.core.interfaces import IRecurrenceStrategy


class RecurrenceMonthly(IRecurrenceStrategy):
    """
    Fire every month the conditions allow (kind: 'monthly').

    The gate itself never blocks; the active window comes from the event's
    ``date-in-range`` condition.
    """

    def can_fire(self, event: ScenarioEvent, ctx: MonthEvaluationContext) -> bool:
        return True
