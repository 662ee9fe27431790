"""
Core module for FinEventLab.

This module contains the building blocks of the scenario engine: dates,
conditions, events, registries, the month-by-month evaluator and its results.
"""

from . import kinds
from .builders import make_event, make_one_off, make_recurring, make_scenario
from .conditions import (
    CONDITION_TYPES,
    Condition,
    DateInRange,
    DateIs,
    EventHappened,
    IncomeIsAbove,
    NetworthIsAbove,
    condition_from_dict,
)
from .context import (
    CashflowEntry,
    EvaluationState,
    FiredEventInfo,
    MonthEvaluationContext,
)
from .errors import ConfigError
from .events import Scenario, ScenarioEvent, describe_event
from .exceptions import ScenarioValidationError
from .interfaces import IConditionStrategy, IRecurrenceStrategy
from .kinds import K
from .loader import (
    ScenarioConfig,
    ScenarioDocument,
    ScenarioLoadError,
    load_scenario,
    scenario_to_dict,
)
from .local_date import (
    FAR_FUTURE,
    LocalDate,
    add_months,
    from_month_key,
    is_after,
    is_same_month,
    is_within_interval,
    ld,
    month_keys,
    months_between,
    start_of_month,
    to_month_key,
)
from .overview import scenario_overview
from .registry import (
    ConditionRegistry,
    RecurrenceRegistry,
    can_fire_this_month,
    evaluate_condition,
    should_event_fire,
    wire_strategies,
)
from .results import ScenarioResult, aggregate_totals
from .scenario import (
    evaluate_month,
    evaluate_scenario,
    export_ledger_csv,
    export_run_json,
    partition_events,
    run_scenario,
    validate_run,
)
from .validation import LintIssue, LintReport, lint_scenario

__all__ = [
    # Errors
    "ConfigError",
    "ScenarioValidationError",
    "ScenarioLoadError",
    # Kinds
    "K",
    "kinds",
    # Dates
    "LocalDate",
    "FAR_FUTURE",
    "ld",
    "start_of_month",
    "is_after",
    "add_months",
    "to_month_key",
    "from_month_key",
    "is_within_interval",
    "is_same_month",
    "months_between",
    "month_keys",
    # Conditions and events
    "Condition",
    "DateIs",
    "DateInRange",
    "NetworthIsAbove",
    "EventHappened",
    "IncomeIsAbove",
    "CONDITION_TYPES",
    "condition_from_dict",
    "ScenarioEvent",
    "Scenario",
    "describe_event",
    # Builders
    "make_scenario",
    "make_one_off",
    "make_recurring",
    "make_event",
    # Context
    "FiredEventInfo",
    "CashflowEntry",
    "EvaluationState",
    "MonthEvaluationContext",
    # Interfaces
    "IConditionStrategy",
    "IRecurrenceStrategy",
    # Registries
    "ConditionRegistry",
    "RecurrenceRegistry",
    "wire_strategies",
    "evaluate_condition",
    "can_fire_this_month",
    "should_event_fire",
    # Engine
    "partition_events",
    "evaluate_month",
    "evaluate_scenario",
    "run_scenario",
    "validate_run",
    "export_run_json",
    "export_ledger_csv",
    # Results
    "ScenarioResult",
    "aggregate_totals",
    # Loading and checks
    "ScenarioConfig",
    "ScenarioDocument",
    "load_scenario",
    "scenario_to_dict",
    "LintIssue",
    "LintReport",
    "lint_scenario",
    "scenario_overview",
]
