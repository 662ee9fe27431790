"""
Same-month income threshold condition.
"""

from __future__ import annotations

from fineventlab.core.conditions import IncomeIsAbove
from fineventlab.core.context import MonthEvaluationContext
from fineventlab.core.interfaces import IConditionStrategy


class ConditionIncomeIsAbove(IConditionStrategy):
    """
    Same-month income threshold (type: 'income-is-above').

    Only events that already fired in the current month are visible. The first
    income with a matching name decides the outcome; earlier months are never
    consulted.
    """

    def evaluate(self, condition: IncomeIsAbove, ctx: MonthEvaluationContext) -> bool:
        for event in ctx.monthly_events:
            if event.name == condition.event_name and event.is_income:
                return event.amount >= condition.amount
        return False
