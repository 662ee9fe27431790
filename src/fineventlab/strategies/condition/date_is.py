"""
Single-month calendar condition.
"""

from __future__ import annotations

from fineventlab.core.conditions import DateIs
from fineventlab.core.context import MonthEvaluationContext
from fineventlab.core.interfaces import IConditionStrategy
from fineventlab.core.local_date import is_same_month


class ConditionDateIs(IConditionStrategy):
    """
    Calendar condition (type: 'date-is').

    Holds when the evaluated month is the month of ``condition.date``; the day
    component is ignored.
    """

    def evaluate(self, condition: DateIs, ctx: MonthEvaluationContext) -> bool:
        return is_same_month(ctx.month, condition.date)
