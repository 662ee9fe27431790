"""
FinEventLab Kind Constants (discriminators for events and conditions).
"""


class K:
    # === Condition tags ===
    TAG_CASHFLOW = "cashflow"  # Cheap, context-free (calendar) gates
    TAG_BALANCE = "balance"  # Depend on balance / firing order within a month

    # === Cashflow conditions ===
    C_DATE_IS = "date-is"
    C_DATE_IN_RANGE = "date-in-range"

    # === Balance conditions ===
    C_NETWORTH_IS_ABOVE = "networth-is-above"
    C_EVENT_HAPPENED = "event-happened"
    C_INCOME_IS_ABOVE = "income-is-above"

    # === Recurrence ===
    R_ONCE = "once"
    R_MONTHLY = "monthly"
    R_YEARLY = "yearly"

    # === Event direction ===
    E_INCOME = "income"
    E_EXPENSE = "expense"

    @classmethod
    def cashflow_conditions(cls) -> list[str]:
        return [cls.C_DATE_IS, cls.C_DATE_IN_RANGE]

    @classmethod
    def balance_conditions(cls) -> list[str]:
        return [cls.C_NETWORTH_IS_ABOVE, cls.C_EVENT_HAPPENED, cls.C_INCOME_IS_ABOVE]

    @classmethod
    def all_conditions(cls) -> list[str]:
        """Enumerate all known condition types (for validation and docs)."""
        return cls.cashflow_conditions() + cls.balance_conditions()

    @classmethod
    def all_recurrences(cls) -> list[str]:
        return [cls.R_ONCE, cls.R_MONTHLY, cls.R_YEARLY]

    @classmethod
    def all_event_types(cls) -> list[str]:
        return [cls.E_INCOME, cls.E_EXPENSE]
