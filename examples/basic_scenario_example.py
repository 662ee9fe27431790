#!/usr/bin/env python3
"""
Basic Scenario Example

Builds a two-year plan with a salary, living costs, a car purchase and a
yearly bonus, then prints the monthly and yearly views and a few KPIs.
"""

import pandas as pd
from fineventlab import (
    kpi,
    ld,
    make_one_off,
    make_recurring,
    make_scenario,
    validate_run,
)
from fineventlab.core.kinds import K

pd.options.display.float_format = "{:,.2f} €".format


def main():
    """Run a plain calendar-driven scenario."""
    print("=== FinEventLab Basic Scenario Example ===\n")

    scenario = make_scenario(
        "Realistic two-year plan",
        [
            make_recurring(K.E_INCOME, "Salary", 2000, ld(2025, 1, 1), None),
            make_recurring(K.E_EXPENSE, "Cost of Life", 1400, ld(2025, 1, 1), None),
            make_one_off(K.E_EXPENSE, "New Car", 10000, ld(2025, 6, 1)),
            make_recurring(
                K.E_INCOME,
                "Christmas Bonus",
                2200,
                ld(2025, 12, 1),
                None,
                frequency=K.R_YEARLY,
            ),
        ],
    )

    result = scenario.run(start=ld(2025, 1), end=ld(2026, 12), initial_balance=10000)
    validate_run(result)

    print("Monthly view:")
    print(result.monthly())
    print("\nYearly view:")
    print(result.yearly())

    month, value = kpi.lowest_balance(result)
    print(f"\nLowest balance: {value:,.2f} € ({month})")
    print(f"Net change: {kpi.net_change(result):,.2f} € ({kpi.net_change_pct(result):.1f}%)")
    print(f"Max drawdown: {kpi.max_drawdown(result):,.2f} €")


if __name__ == "__main__":
    main()
