"""
Compact scenario overview for reporting tools.
"""

from __future__ import annotations

from typing import Any

from .events import Scenario, describe_event
from .local_date import LocalDate, ld, to_month_key
from .scenario import run_scenario

MIN_OVERVIEW_YEARS = 1
MAX_OVERVIEW_YEARS = 30


def scenario_overview(
    scenario: Scenario,
    initial_balance: float = 0.0,
    years: int | None = 10,
    run_simulation: bool = True,
    today: LocalDate | None = None,
) -> dict[str, Any]:
    """
    Describe a scenario's events and, optionally, its simulated trajectory.

    The simulation starts in the month of ``today`` and runs ``years`` years
    (clamped to 1..30). Scenarios without events are never simulated.

    Returns:
        Mapping with the scenario name, initial balance, event descriptions
        and, when simulated, a ``simulation`` block with the final balance
        and year-end balances
    """
    events = [describe_event(e) for e in scenario.events]
    overview: dict[str, Any] = {
        "scenarioName": scenario.name,
        "initialBalance": initial_balance,
        "eventsCount": len(events),
        "events": events,
    }

    if not run_simulation or not events:
        return overview

    years = min(max(years if years is not None else 10, MIN_OVERVIEW_YEARS), MAX_OVERVIEW_YEARS)
    today = today or LocalDate.today()
    start = ld(today.y, today.m)
    end = ld(today.y + years, today.m)

    result = run_scenario(scenario, start, end, initial_balance)

    balance_by_year = [
        {"year": year, "balance": result.balance[f"{year}-12"]}
        for year in range(start.y, end.y + 1)
        if f"{year}-12" in result.balance
    ]

    overview["simulation"] = {
        "years": years,
        "startDate": to_month_key(start),
        "endDate": to_month_key(end),
        "finalBalance": result.final_balance,
        "balanceByYear": balance_by_year,
    }
    return overview
