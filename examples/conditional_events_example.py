#!/usr/bin/env python3
"""
Conditional Events Example

Loads a household plan from YAML in which investments, the house purchase and
its follow-up costs are gated on the salary and on earlier purchases. Lints
the document, runs it and lists what fired in the key months.
"""

from pathlib import Path

from fineventlab import kpi, lint_scenario, load_scenario, run_scenario

SCENARIO = Path(__file__).resolve().parent / "scenarios" / "household.yaml"


def main():
    """Run a scenario with balance-gated events."""
    print("=== FinEventLab Conditional Events Example ===\n")

    doc = load_scenario(SCENARIO)
    report = lint_scenario(doc.scenario)
    print(report)

    cfg = doc.config
    result = run_scenario(doc.scenario, cfg.start, cfg.end, cfg.initial_balance)

    for month_key in ("2025-06", "2026-01", "2027-05"):
        names = ", ".join(e.name for e in result.cashflow[month_key].events)
        print(f"\n{month_key}: {result.balance[month_key]:,.2f} €")
        print(f"  fired: {names}")

    print("\nYear-end balances:")
    for year, balance in kpi.year_end_balances(result).items():
        print(f"  {year}: {balance:,.2f} €")


if __name__ == "__main__":
    main()
