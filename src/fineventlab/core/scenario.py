"""
Scenario engine: month-by-month evaluation of scenario events.

Each month is evaluated in two passes. Events without balance-tagged
conditions go first, in declaration order; events with at least one
balance-tagged condition go second and see the balance and firings produced
by the first pass. There is no fixed-point iteration: a balance-gated event
only sees other balance-gated events that fired earlier in the same pass.
"""

from __future__ import annotations

import csv
import json
import logging
import warnings
from collections.abc import Sequence
from datetime import date
from typing import Any

from .context import (
    CashflowEntry,
    EvaluationState,
    FiredEventInfo,
    MonthEvaluationContext,
)
from .events import Scenario, ScenarioEvent
from .exceptions import ScenarioValidationError
from .local_date import (
    LocalDate,
    add_months,
    is_after,
    start_of_month,
    to_month_key,
)
from .registry import should_event_fire, wire_strategies
from .results import ScenarioResult

logger = logging.getLogger(__name__)


def _coerce_local_date(value: LocalDate | date | str) -> LocalDate:
    if isinstance(value, LocalDate):
        return value
    if isinstance(value, date):
        return LocalDate.from_date(value)
    if isinstance(value, str):
        return LocalDate.parse(value)
    raise TypeError(f"Expected LocalDate, date or 'YYYY-MM[-DD]' string, got {value!r}")


def partition_events(
    events: Sequence[ScenarioEvent],
) -> tuple[list[ScenarioEvent], list[ScenarioEvent]]:
    """
    Split events into the two evaluation passes, keeping declaration order.

    Returns:
        (unconditioned, balance_gated): events without any balance-tagged
        condition, and events with at least one
    """
    unconditioned = [e for e in events if not e.is_balance_gated]
    balance_gated = [e for e in events if e.is_balance_gated]
    return unconditioned, balance_gated


def _fire(
    event: ScenarioEvent, state: EvaluationState, ctx: MonthEvaluationContext
) -> None:
    """Apply one firing to the run state and to the month context."""
    impact = event.signed_amount
    entry = state.cashflow[ctx.month_key]
    entry.amount += impact
    entry.events.append(event)
    state.current_balance += impact

    info = state.fired_events.get(event.name)
    if info is None:
        state.fired_events[event.name] = FiredEventInfo(
            first_fired_month=ctx.month_key, last_fired_month=ctx.month_key
        )
    else:
        info.record(ctx.month_key)

    ctx.monthly_events.append(event)
    logger.debug("%s: fired '%s' (%+.2f)", ctx.month_key, event.name, impact)


def evaluate_month(
    month: LocalDate,
    unconditioned: Sequence[ScenarioEvent],
    balance_gated: Sequence[ScenarioEvent],
    state: EvaluationState,
) -> None:
    """
    Evaluate one month and record its cashflow and closing balance.

    Args:
        month: First day of the month to evaluate
        unconditioned: First-pass events (no balance-tagged condition)
        balance_gated: Second-pass events
        state: Run accumulator, mutated in place
    """
    month_key = to_month_key(month)
    state.cashflow[month_key] = CashflowEntry()

    ctx = MonthEvaluationContext(
        month=month,
        month_key=month_key,
        current_balance=state.current_balance,
        fired_events=state.fired_events,
    )

    # First pass: calendar-only events
    for event in unconditioned:
        if should_event_fire(event, ctx):
            _fire(event, state, ctx)

    # Second pass sees the balance after the first pass
    ctx.current_balance = state.current_balance

    for event in balance_gated:
        if should_event_fire(event, ctx):
            _fire(event, state, ctx)
            ctx.current_balance = state.current_balance

    state.balance[month_key] = state.current_balance
    logger.debug("%s: closed at %.2f", month_key, state.current_balance)


def evaluate_scenario(
    scenario: Scenario,
    start_date: LocalDate | date | str,
    end_date: LocalDate | date | str,
    initial_balance: float = 0.0,
) -> EvaluationState:
    """
    Evaluate every month from ``start_date`` to ``end_date`` (inclusive).

    Args:
        scenario: Scenario whose events are evaluated
        start_date: Any day in the first month
        end_date: Any day in the last month
        initial_balance: Balance before the first month

    Returns:
        The final EvaluationState (cashflow, balance and firing history)

    Raises:
        ConfigError: If an event uses a kind with no registered strategy
    """
    wire_strategies(scenario.events)
    unconditioned, balance_gated = partition_events(scenario.events)

    state = EvaluationState(current_balance=initial_balance)

    current_month = start_of_month(_coerce_local_date(start_date))
    final_month = start_of_month(_coerce_local_date(end_date))

    while not is_after(current_month, final_month):
        evaluate_month(current_month, unconditioned, balance_gated, state)
        current_month = add_months(current_month, 1)

    return state


def run_scenario(
    scenario: Scenario,
    start_date: LocalDate | date | str,
    end_date: LocalDate | date | str,
    initial_balance: float = 0.0,
) -> ScenarioResult:
    """
    Run the complete scenario simulation.

    The run is deterministic: identical inputs (including event order) give
    identical outputs, and no state survives between calls.

    Args:
        scenario: Scenario to simulate
        start_date: Any day in the first month
        end_date: Any day in the last month (inclusive)
        initial_balance: Balance before the first month

    Returns:
        ScenarioResult with ``cashflow`` and ``balance`` keyed by ``yyyy-MM``

    Example:
        >>> result = run_scenario(scenario, ld(2025, 1, 1), ld(2025, 12, 1), 0.0)
        >>> result.balance["2025-12"]
    """
    state = evaluate_scenario(scenario, start_date, end_date, initial_balance)
    result = ScenarioResult(
        cashflow=state.cashflow,
        balance=state.balance,
        fired_events=state.fired_events,
        initial_balance=initial_balance,
        scenario_name=scenario.name,
    )
    logger.info(
        "Scenario '%s': %d months evaluated, final balance %.2f",
        scenario.name,
        len(state.balance),
        result.final_balance,
    )
    return result


def validate_run(result: ScenarioResult, mode: str = "raise", tol: float = 1e-6) -> None:
    """
    Validate a run against its ledger invariants.

    Checks:
        - Each month's cashflow amount equals the sum of its events' signed amounts
        - Each month's balance equals the previous balance plus its cashflow
          (the first month starts from the initial balance)

    Args:
        result: Result returned by run_scenario()
        mode: 'raise' to raise ScenarioValidationError, 'warn' to warn instead
        tol: Numerical tolerance for floating-point comparisons

    Raises:
        ScenarioValidationError: If validation fails and mode='raise'
    """
    fails: list[str] = []
    bad_months: list[str] = []

    previous = result.initial_balance
    for month_key, balance in result.balance.items():
        entry = result.cashflow.get(month_key, CashflowEntry())
        events_total = sum(e.signed_amount for e in entry.events)
        if abs(events_total - entry.amount) > tol:
            fails.append(f"{month_key}: cashflow {entry.amount} != events {events_total}")
            bad_months.append(month_key)
        if abs(previous + entry.amount - balance) > tol:
            fails.append(
                f"{month_key}: balance {balance} != {previous} + {entry.amount}"
            )
            bad_months.append(month_key)
        previous = balance

    if not fails:
        return

    message = "Ledger validation failed: " + "; ".join(fails[:5])
    if mode == "raise":
        raise ScenarioValidationError(
            result.scenario_name,
            message,
            report=fails,
            problem_names=sorted(set(bad_months)),
        )
    warnings.warn(message, stacklevel=2)


def export_run_json(path: str, result: ScenarioResult, precision: int = 2) -> None:
    """
    Export a run to JSON.

    Args:
        path: Output file path for the JSON file
        result: Result returned by run_scenario()
        precision: Number of decimal places for the summary figures
    """
    data: dict[str, Any] = result.to_dict()
    summary = result.summary()
    data["summary"] = {
        key: round(value, precision) if isinstance(value, float) else value
        for key, value in summary["kpis"].items()
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def export_ledger_csv(path: str, result: ScenarioResult) -> None:
    """
    Export a run to a flat ledger CSV, one row per firing.

    Args:
        path: Output file path for the CSV file
        result: Result returned by run_scenario()
    """
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(
            f, fieldnames=["month", "event", "type", "recurrence", "amount", "balance"]
        )
        writer.writeheader()
        for month_key, entry in result.cashflow.items():
            for event in entry.events:
                writer.writerow(
                    {
                        "month": month_key,
                        "event": event.name,
                        "type": event.type,
                        "recurrence": event.recurrence,
                        "amount": event.signed_amount,
                        "balance": result.balance.get(month_key),
                    }
                )
