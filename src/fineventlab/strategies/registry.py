"""
Strategy registry setup for FinEventLab.
"""

from fineventlab.core.kinds import K
from fineventlab.core.registry import ConditionRegistry, RecurrenceRegistry

from .condition.date_in_range import ConditionDateInRange
from .condition.date_is import ConditionDateIs
from .condition.event_happened import ConditionEventHappened
from .condition.income_is_above import ConditionIncomeIsAbove
from .condition.networth_is_above import ConditionNetworthIsAbove
from .recurrence.monthly import RecurrenceMonthly
from .recurrence.once import RecurrenceOnce
from .recurrence.yearly import RecurrenceYearly


def register_defaults():
    """
    Register all default strategy implementations in the global registries.

    Registered Strategies:
        Conditions:
            - 'date-is': Month equals a given date's month
            - 'date-in-range': Month inside an inclusive (possibly open) range
            - 'networth-is-above': Running balance strictly above a threshold
            - 'event-happened': Named event has fired at least once
            - 'income-is-above': Named income fired this month at or above a threshold

        Recurrences:
            - 'once': At most one firing per run
            - 'monthly': No restriction beyond conditions
            - 'yearly': Anniversary month, once per calendar year

    Note:
        This function is automatically called when the module is imported.
        Additional strategies can be registered by writing to the registry
        dictionaries directly.
    """
    ConditionRegistry[K.C_DATE_IS] = ConditionDateIs()
    ConditionRegistry[K.C_DATE_IN_RANGE] = ConditionDateInRange()
    ConditionRegistry[K.C_NETWORTH_IS_ABOVE] = ConditionNetworthIsAbove()
    ConditionRegistry[K.C_EVENT_HAPPENED] = ConditionEventHappened()
    ConditionRegistry[K.C_INCOME_IS_ABOVE] = ConditionIncomeIsAbove()

    RecurrenceRegistry[K.R_ONCE] = RecurrenceOnce()
    RecurrenceRegistry[K.R_MONTHLY] = RecurrenceMonthly()
    RecurrenceRegistry[K.R_YEARLY] = RecurrenceYearly()
