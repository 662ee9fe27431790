"""
Tests for the recurrence gates.
"""

from fineventlab.core.builders import make_one_off, make_recurring
from fineventlab.core.conditions import DateIs
from fineventlab.core.context import FiredEventInfo, MonthEvaluationContext
from fineventlab.core.events import ScenarioEvent
from fineventlab.core.kinds import K
from fineventlab.core.local_date import LocalDate, ld, to_month_key
from fineventlab.strategies.recurrence import (
    RecurrenceMonthly,
    RecurrenceOnce,
    RecurrenceYearly,
)


def _ctx(month: LocalDate, fired=None) -> MonthEvaluationContext:
    return MonthEvaluationContext(
        month=month,
        month_key=to_month_key(month),
        current_balance=0.0,
        fired_events=fired or {},
    )


class TestOnce:
    def test_open_until_first_firing(self):
        event = make_one_off(K.E_EXPENSE, "Car", 100, ld(2025, 6))
        gate = RecurrenceOnce()

        assert gate.can_fire(event, _ctx(ld(2025, 6)))
        fired = {"Car": FiredEventInfo("2025-06", "2025-06")}
        assert not gate.can_fire(event, _ctx(ld(2025, 7), fired))

    def test_shared_name_closes_gate(self):
        event = make_one_off(K.E_EXPENSE, "Bonus", 100, ld(2025, 6))
        fired = {"Bonus": FiredEventInfo("2025-01", "2025-01")}

        assert not RecurrenceOnce().can_fire(event, _ctx(ld(2025, 6), fired))


class TestMonthly:
    def test_always_open(self):
        event = make_recurring(K.E_INCOME, "Salary", 1, ld(2025, 1), None)
        fired = {"Salary": FiredEventInfo("2025-01", "2025-05", 5)}

        assert RecurrenceMonthly().can_fire(event, _ctx(ld(2025, 6), fired))


class TestYearly:
    def _event(self):
        return make_recurring(
            K.E_EXPENSE, "Tax", 3000, ld(2027, 5, 1), None, frequency=K.R_YEARLY
        )

    def test_anniversary_month_only(self):
        gate = RecurrenceYearly()
        event = self._event()

        assert gate.can_fire(event, _ctx(ld(2027, 5)))
        assert not gate.can_fire(event, _ctx(ld(2027, 6)))

    def test_once_per_calendar_year(self):
        gate = RecurrenceYearly()
        event = self._event()
        fired = {"Tax": FiredEventInfo("2027-05", "2027-05")}

        assert not gate.can_fire(event, _ctx(ld(2027, 5), fired))
        assert gate.can_fire(event, _ctx(ld(2028, 5), fired))

    def test_anchor_ignores_range_bounds(self):
        """The gate only looks at the month; the range condition bounds the years."""
        assert RecurrenceYearly().can_fire(self._event(), _ctx(ld(2020, 5)))

    def test_closed_without_date_range(self):
        event = ScenarioEvent(
            "Inert",
            K.E_EXPENSE,
            10,
            recurrence=K.R_YEARLY,
            unlocked_by=(DateIs(ld(2025, 5)),),
        )
        for m in range(1, 13):
            assert not RecurrenceYearly().can_fire(event, _ctx(ld(2025, m)))
