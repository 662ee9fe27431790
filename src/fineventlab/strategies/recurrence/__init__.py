"""
Recurrence gates, one per recurrence kind.
"""

from .monthly import RecurrenceMonthly
from .once import RecurrenceOnce
from .yearly import RecurrenceYearly

__all__ = ["RecurrenceOnce", "RecurrenceMonthly", "RecurrenceYearly"]
