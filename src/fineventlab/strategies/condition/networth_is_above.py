"""
Balance threshold condition.
"""

from __future__ import annotations

from fineventlab.core.conditions import NetworthIsAbove
from fineventlab.core.context import MonthEvaluationContext
from fineventlab.core.interfaces import IConditionStrategy


class ConditionNetworthIsAbove(IConditionStrategy):
    """
    Balance threshold (type: 'networth-is-above').

    Compares the context balance, which already includes this month's
    unconditioned flows and any balance-gated event fired before this one.
    The comparison is strict and ``event_ref`` plays no part in it.
    """

    def evaluate(self, condition: NetworthIsAbove, ctx: MonthEvaluationContext) -> bool:
        return ctx.current_balance > condition.amount
