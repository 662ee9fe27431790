"""
Calendar range condition.
"""

from __future__ import annotations

from fineventlab.core.conditions import DateInRange
from fineventlab.core.context import MonthEvaluationContext
from fineventlab.core.interfaces import IConditionStrategy
from fineventlab.core.local_date import (
    FAR_FUTURE,
    is_within_interval,
    start_of_month,
)


class ConditionDateInRange(IConditionStrategy):
    """
    Calendar range condition (type: 'date-in-range').

    Both bounds are snapped to the first of their month, so any day inside the
    start or end month makes that whole month part of the range. An open end
    is treated as a far-future bound.
    """

    def evaluate(self, condition: DateInRange, ctx: MonthEvaluationContext) -> bool:
        start = start_of_month(condition.start)
        end = start_of_month(condition.end) if condition.end is not None else FAR_FUTURE
        return is_within_interval(start_of_month(ctx.month), start, end)
