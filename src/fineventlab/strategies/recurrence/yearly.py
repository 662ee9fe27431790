"""
Yearly recurrence gate anchored on the event's date range.
"""

from __future__ import annotations

from fineventlab.core.context import MonthEvaluationContext
from fineventlab.core.events import ScenarioEvent
from fineventlab.core.interfaces import IRecurrenceStrategy


class RecurrenceYearly(IRecurrenceStrategy):
    """
    Fire once a year in the anniversary month (kind: 'yearly').

    The anniversary month is the start month of the event's first
    ``date-in-range`` condition. The gate opens only in that month, and only
    if the event has not already fired in the current calendar year.

    Note:
        A yearly event without a ``date-in-range`` condition has no anniversary
        and stays closed for the whole run. Use
        :func:`fineventlab.core.validation.lint_scenario` to catch it up front.
    """

    def can_fire(self, event: ScenarioEvent, ctx: MonthEvaluationContext) -> bool:
        date_range = event.date_range
        if date_range is None:
            return False

        anchor_month = date_range.start.m
        if ctx.month.m != anchor_month:
            return False

        fired = ctx.fired_events.get(event.name)
        if fired is None:
            return True
        return fired.last_fired_year != ctx.month.y
