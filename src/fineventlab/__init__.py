"""
FinEventLab - Event-driven cashflow scenarios

FinEventLab projects a single running balance month by month from a list of
income and expense events. Each event fires according to its recurrence
(once, monthly, yearly) and only when every one of its gating conditions
holds. Conditions are either calendar based (a date, a date range) or look
at the running balance and at what already fired.

Architecture Overview:
- **LocalDate**: Timezone-free month arithmetic
- **Conditions**: Tagged variants evaluated by registered strategies
- **Recurrence gates**: Registered strategies keyed by recurrence kind
- **Two-pass evaluator**: Calendar-only events first, balance-gated events second
- **ScenarioResult**: Cashflow and balance maps plus pandas views

Quick Start:
    ```python
    from fineventlab import ld, make_one_off, make_recurring, make_scenario

    scenario = make_scenario(
        "Car purchase",
        [
            make_recurring("income", "Salary", 2000, ld(2025, 1), None),
            make_recurring("expense", "Cost of Life", 1400, ld(2025, 1), None),
            make_one_off("expense", "New Car", 10000, ld(2025, 6, 15)),
        ],
    )
    result = scenario.run(start=ld(2025, 1), end=ld(2026, 12), initial_balance=10000)
    result.balance["2025-06"]  # 3600.0
    ```

Extending the System:
    To add a new condition or recurrence kind:
    1. Add the kind string to ``fineventlab.core.kinds.K``
    2. Implement the strategy protocol from ``fineventlab.core.interfaces``
    3. Register it in ``ConditionRegistry`` or ``RecurrenceRegistry``
"""

# Version information
__version__ = "0.1.0"
__author__ = "FinEventLab Team"
__description__ = "Event-driven cashflow scenarios"

# Registers the default condition and recurrence strategies
import fineventlab.strategies

from .core import (
    FAR_FUTURE,
    CashflowEntry,
    Condition,
    ConditionRegistry,
    ConfigError,
    DateInRange,
    DateIs,
    EventHappened,
    FiredEventInfo,
    IConditionStrategy,
    IncomeIsAbove,
    IRecurrenceStrategy,
    K,
    LintReport,
    LocalDate,
    NetworthIsAbove,
    RecurrenceRegistry,
    Scenario,
    ScenarioConfig,
    ScenarioEvent,
    ScenarioLoadError,
    ScenarioResult,
    ScenarioValidationError,
    aggregate_totals,
    describe_event,
    export_ledger_csv,
    export_run_json,
    kinds,
    ld,
    lint_scenario,
    load_scenario,
    make_event,
    make_one_off,
    make_recurring,
    make_scenario,
    run_scenario,
    scenario_overview,
    scenario_to_dict,
    validate_run,
    wire_strategies,
)

# Import KPI utilities
from .kpi import (
    avg_monthly_change,
    final_balance,
    liquidity_runway,
    lowest_balance,
    max_drawdown,
    months_below,
    net_change,
    net_change_pct,
    savings_rate,
    year_end_balances,
)

# Define what gets imported with "from fineventlab import *"
__all__ = [
    # Dates
    "LocalDate",
    "FAR_FUTURE",
    "ld",
    # Model
    "Condition",
    "DateIs",
    "DateInRange",
    "NetworthIsAbove",
    "EventHappened",
    "IncomeIsAbove",
    "ScenarioEvent",
    "Scenario",
    "K",
    "kinds",
    # Builders
    "make_scenario",
    "make_one_off",
    "make_recurring",
    "make_event",
    # Engine and results
    "run_scenario",
    "ScenarioResult",
    "CashflowEntry",
    "FiredEventInfo",
    "aggregate_totals",
    "validate_run",
    "export_run_json",
    "export_ledger_csv",
    # Loading and checks
    "ScenarioConfig",
    "load_scenario",
    "scenario_to_dict",
    "lint_scenario",
    "LintReport",
    "describe_event",
    "scenario_overview",
    # Errors
    "ConfigError",
    "ScenarioLoadError",
    "ScenarioValidationError",
    # KPI utilities
    "final_balance",
    "net_change",
    "net_change_pct",
    "avg_monthly_change",
    "lowest_balance",
    "year_end_balances",
    "months_below",
    "max_drawdown",
    "liquidity_runway",
    "savings_rate",
    # Strategy interfaces and registries
    "IConditionStrategy",
    "IRecurrenceStrategy",
    "ConditionRegistry",
    "RecurrenceRegistry",
    "wire_strategies",
]
