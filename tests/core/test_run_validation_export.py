"""
Tests for ledger validation and run exports.
"""

import csv
import json

import pytest
from fineventlab import ld, make_one_off, make_recurring, make_scenario, run_scenario
from fineventlab.core.context import CashflowEntry
from fineventlab.core.events import ScenarioEvent
from fineventlab.core.exceptions import ScenarioValidationError
from fineventlab.core.kinds import K
from fineventlab.core.results import ScenarioResult
from fineventlab.core.scenario import export_ledger_csv, export_run_json, validate_run


@pytest.fixture
def result():
    scenario = make_scenario(
        "Ledger",
        [
            make_recurring(K.E_INCOME, "Salary", 2000, ld(2025, 1), None),
            make_one_off(K.E_EXPENSE, "Laptop", 1500.5, ld(2025, 2, 10)),
        ],
    )
    return run_scenario(scenario, ld(2025, 1), ld(2025, 3), 100)


def _broken_result() -> ScenarioResult:
    gift = ScenarioEvent("Gift", K.E_INCOME, 100)
    return ScenarioResult(
        cashflow={"2025-01": CashflowEntry(amount=100, events=[gift])},
        balance={"2025-01": 150},
        initial_balance=0,
        scenario_name="Broken",
    )


class TestValidateRun:
    def test_valid_run_passes(self, result):
        validate_run(result)

    def test_balance_mismatch_raises(self):
        with pytest.raises(ScenarioValidationError, match=r"\[Scenario Broken\]") as exc:
            validate_run(_broken_result())
        assert exc.value.problem_names == ["2025-01"]

    def test_cashflow_mismatch_raises(self):
        gift = ScenarioEvent("Gift", K.E_INCOME, 100)
        bad = ScenarioResult(
            cashflow={"2025-01": CashflowEntry(amount=90, events=[gift])},
            balance={"2025-01": 90},
            scenario_name="Mismatch",
        )
        with pytest.raises(ScenarioValidationError, match="cashflow 90"):
            validate_run(bad)

    def test_warn_mode(self):
        with pytest.warns(UserWarning, match="Ledger validation failed"):
            validate_run(_broken_result(), mode="warn")

    def test_tolerance(self):
        gift = ScenarioEvent("Gift", K.E_INCOME, 100)
        near = ScenarioResult(
            cashflow={"2025-01": CashflowEntry(amount=100, events=[gift])},
            balance={"2025-01": 100.0000001},
        )
        validate_run(near, tol=1e-6)


class TestExports:
    def test_export_run_json(self, result, tmp_path):
        path = tmp_path / "run.json"
        export_run_json(str(path), result)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["scenario"] == "Ledger"
        assert data["balance"] == {"2025-01": 2100, "2025-02": 2599.5, "2025-03": 4599.5}
        assert data["summary"]["final_balance"] == 4599.5
        assert data["summary"]["lowest_balance_month"] is None

    def test_export_ledger_csv(self, result, tmp_path):
        path = tmp_path / "ledger.csv"
        export_ledger_csv(str(path), result)

        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))

        assert [r["event"] for r in rows] == ["Salary", "Salary", "Laptop", "Salary"]
        assert rows[2] == {
            "month": "2025-02",
            "event": "Laptop",
            "type": "expense",
            "recurrence": "once",
            "amount": "-1500.5",
            "balance": "2599.5",
        }
