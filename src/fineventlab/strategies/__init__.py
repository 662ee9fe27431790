"""
Strategy implementations for FinEventLab.

Strategies implement the behaviour behind each kind discriminator:

- Condition strategies decide whether a gating condition holds in a month
- Recurrence strategies decide whether an event may be considered in a month

Registry System:
Importing this package registers every default strategy in the global
registries of :mod:`fineventlab.core.registry`.
"""

from .condition import (
    ConditionDateInRange,
    ConditionDateIs,
    ConditionEventHappened,
    ConditionIncomeIsAbove,
    ConditionNetworthIsAbove,
)
from .recurrence import RecurrenceMonthly, RecurrenceOnce, RecurrenceYearly
from .registry import register_defaults

# Register all default strategies when module is imported
register_defaults()

__all__ = [
    # Condition strategies
    "ConditionDateIs",
    "ConditionDateInRange",
    "ConditionNetworthIsAbove",
    "ConditionEventHappened",
    "ConditionIncomeIsAbove",
    # Recurrence strategies
    "RecurrenceOnce",
    "RecurrenceMonthly",
    "RecurrenceYearly",
    # Registration
    "register_defaults",
]
