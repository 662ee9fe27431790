"""
Condition evaluation strategies, one per condition type.
"""

from .date_in_range import ConditionDateInRange
from .date_is import ConditionDateIs
from .event_happened import ConditionEventHappened
from .income_is_above import ConditionIncomeIsAbove
from .networth_is_above import ConditionNetworthIsAbove

__all__ = [
    "ConditionDateIs",
    "ConditionDateInRange",
    "ConditionNetworthIsAbove",
    "ConditionEventHappened",
    "ConditionIncomeIsAbove",
]
