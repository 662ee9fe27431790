"""
Tests for pre-flight scenario linting.
"""

from pathlib import Path

import pytest
from fineventlab.core.builders import make_event, make_one_off, make_recurring, make_scenario
from fineventlab.core.conditions import (
    DateIs,
    EventHappened,
    IncomeIsAbove,
    NetworthIsAbove,
)
from fineventlab.core.events import ScenarioEvent
from fineventlab.core.exceptions import ScenarioValidationError
from fineventlab.core.kinds import K
from fineventlab.core.loader import load_scenario
from fineventlab.core.local_date import ld
from fineventlab.core.validation import LintReport, lint_scenario

LINT_PROBLEMS = Path(__file__).resolve().parents[1] / "data" / "scenarios" / "lint_problems.yaml"


class TestCleanScenario:
    def test_no_findings(self):
        scenario = make_scenario(
            "clean",
            [
                make_recurring(K.E_INCOME, "Salary", 2000, ld(2025, 1), None),
                make_one_off(K.E_EXPENSE, "Buy Car", 10000, ld(2026, 1, 15)),
                make_recurring(
                    K.E_EXPENSE,
                    "Car Insurance",
                    120,
                    ld(2026, 1),
                    None,
                    unlocked_by=[EventHappened("Buy Car")],
                ),
            ],
        )
        report = lint_scenario(scenario)

        assert report.is_valid()
        assert not report.has_warnings()
        assert report.get_exit_code() == 0
        assert str(report).startswith("✅")


class TestErrors:
    def test_yearly_without_range(self):
        event = ScenarioEvent(
            "Tax", K.E_EXPENSE, 300, K.R_YEARLY, (DateIs(ld(2025, 5)),)
        )
        report = lint_scenario(make_scenario("s", [event]))

        assert report.codes() == ["yearly-without-range"]
        assert report.get_exit_code() == 1

    def test_negative_amount(self):
        report = lint_scenario(
            make_scenario("s", [make_one_off(K.E_INCOME, "Refund", -50, ld(2025, 2))])
        )
        assert report.codes() == ["negative-amount"]

    def test_raise_for_errors(self):
        event = ScenarioEvent(
            "Tax", K.E_EXPENSE, 300, K.R_YEARLY, (DateIs(ld(2025, 5)),)
        )
        report = lint_scenario(make_scenario("Taxes", [event]))

        with pytest.raises(ScenarioValidationError, match=r"\[Scenario Taxes\]") as exc:
            report.raise_for_errors()
        assert exc.value.problem_names == ["Tax"]
        assert exc.value.report is report

    def test_raise_for_errors_is_noop_when_valid(self):
        LintReport(scenario_name="ok").raise_for_errors()


class TestWarnings:
    def test_duplicate_names_reported_once(self):
        report = lint_scenario(
            make_scenario(
                "s",
                [
                    make_recurring(K.E_INCOME, "Salary", 1, ld(2025, 1), ld(2025, 5)),
                    make_recurring(K.E_INCOME, "Salary", 2, ld(2025, 6), None),
                    make_recurring(K.E_INCOME, "Salary", 3, ld(2027, 1), None),
                ],
            )
        )
        assert report.codes() == ["duplicate-name"]
        assert "3 events" in report.warnings[0].message
        assert report.get_exit_code() == 2

    def test_unknown_references(self):
        report = lint_scenario(
            make_scenario(
                "s",
                [
                    make_one_off(
                        K.E_EXPENSE,
                        "Trip",
                        100,
                        ld(2025, 1),
                        [EventHappened("Ghost"), NetworthIsAbove("Phantom", 10)],
                    )
                ],
            )
        )
        assert report.codes() == ["unknown-reference", "unknown-reference"]

    def test_empty_networth_reference_is_allowed(self):
        report = lint_scenario(
            make_scenario(
                "s",
                [make_one_off(K.E_EXPENSE, "Trip", 1, ld(2025, 1), [NetworthIsAbove("", 10)])],
            )
        )
        assert report.codes() == []

    def test_empty_income_reference_is_allowed(self):
        report = lint_scenario(
            make_scenario(
                "s",
                [make_one_off(K.E_EXPENSE, "Trip", 1, ld(2025, 1), [IncomeIsAbove("", 10)])],
            )
        )
        assert report.codes() == []

    def test_income_reference_to_expense(self):
        report = lint_scenario(
            make_scenario(
                "s",
                [
                    make_recurring(K.E_EXPENSE, "Rent", 900, ld(2025, 1), None),
                    make_one_off(
                        K.E_EXPENSE,
                        "Trip",
                        100,
                        ld(2025, 7),
                        [IncomeIsAbove("Rent", 500)],
                    ),
                ],
            )
        )
        assert report.codes() == ["income-reference-not-income"]

    def test_forward_reference_between_balance_gated_events(self):
        report = lint_scenario(
            make_scenario(
                "s",
                [
                    make_recurring(
                        K.E_EXPENSE,
                        "Follow-up",
                        50,
                        ld(2025, 1),
                        None,
                        unlocked_by=[EventHappened("Trigger")],
                    ),
                    make_one_off(
                        K.E_EXPENSE,
                        "Trigger",
                        100,
                        ld(2025, 1),
                        [NetworthIsAbove("", -1)],
                    ),
                ],
            )
        )
        assert report.codes() == ["forward-reference"]
        assert report.warnings[0].event_name == "Follow-up"

    def test_backward_reference_is_fine(self):
        report = lint_scenario(
            make_scenario(
                "s",
                [
                    make_one_off(
                        K.E_EXPENSE, "Trigger", 100, ld(2025, 1), [NetworthIsAbove("", -1)]
                    ),
                    make_recurring(
                        K.E_EXPENSE,
                        "Follow-up",
                        50,
                        ld(2025, 1),
                        None,
                        unlocked_by=[EventHappened("Trigger")],
                    ),
                ],
            )
        )
        assert report.codes() == []

    def test_once_without_date(self):
        report = lint_scenario(
            make_scenario(
                "s",
                [
                    make_recurring(K.E_INCOME, "Salary", 2000, ld(2025, 1), None),
                    make_event(K.E_EXPENSE, "Trip", 4000, [NetworthIsAbove("Salary", 6000)]),
                ],
            )
        )
        assert report.codes() == ["once-without-date"]
        assert report.is_valid()


def test_lint_from_file():
    doc = load_scenario(LINT_PROBLEMS)
    report = lint_scenario(doc.scenario)

    assert [i.code for i in report.errors] == ["yearly-without-range", "negative-amount"]
    assert [i.code for i in report.warnings] == ["once-without-date", "unknown-reference"]

    data = report.to_dict()
    assert data["scenario"] == "Problems"
    assert data["exit_code"] == 1
    assert data["errors"][0] == {
        "event": "Inert Tax",
        "code": "yearly-without-range",
        "message": "yearly event has no date-in-range condition and will never fire",
    }
    assert str(report).splitlines()[0] == "❌ Lint failed"
