"""
Pre-flight checks for scenarios.

The engine accepts any well-typed scenario and silently skips events that can
never fire. ``lint_scenario`` reports those situations up front, together with
constructs that are legal but rarely intended.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from .conditions import EventHappened, IncomeIsAbove, NetworthIsAbove
from .events import Scenario
from .exceptions import ScenarioValidationError
from .kinds import K


@dataclass
class LintIssue:
    """A single finding, attached to the event it concerns."""

    event_name: str
    code: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"event": self.event_name, "code": self.code, "message": self.message}

    def __str__(self) -> str:
        return f"{self.event_name}: {self.message} [{self.code}]"


@dataclass
class LintReport:
    """
    Structured lint report for a scenario.

    Errors are events that cannot behave as written (the engine will never
    fire them, or they carry a negative amount). Warnings are legal
    constructs that are likely mistakes.
    """

    scenario_name: str = ""
    errors: list[LintIssue] = field(default_factory=list)
    warnings: list[LintIssue] = field(default_factory=list)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def is_valid(self) -> bool:
        """Check if lint passed (no errors, warnings are OK)."""
        return not self.has_errors()

    def get_exit_code(self) -> int:
        """
        Get appropriate CLI exit code.

        Returns:
            0: Valid (no errors)
            1: Errors present
            2: Warnings only
        """
        if self.has_errors():
            return 1
        elif self.has_warnings():
            return 2
        else:
            return 0

    def codes(self) -> list[str]:
        return [issue.code for issue in self.errors + self.warnings]

    def raise_for_errors(self) -> None:
        """
        Raises:
            ScenarioValidationError: If the report holds any error
        """
        if not self.has_errors():
            return
        names = list(dict.fromkeys(issue.event_name for issue in self.errors))
        raise ScenarioValidationError(
            self.scenario_name,
            f"{len(self.errors)} lint error(s)",
            report=self,
            problem_names=names,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "scenario": self.scenario_name,
            "errors": [issue.to_dict() for issue in self.errors],
            "warnings": [issue.to_dict() for issue in self.warnings],
            "has_errors": self.has_errors(),
            "has_warnings": self.has_warnings(),
            "is_valid": self.is_valid(),
            "exit_code": self.get_exit_code(),
        }

    def __str__(self) -> str:
        lines = []

        if self.is_valid():
            lines.append("✅ Lint passed")
        else:
            lines.append("❌ Lint failed")

        for issue in self.errors:
            lines.append(f"Error: {issue}")
        for issue in self.warnings:
            lines.append(f"Warning: {issue}")

        return "\n".join(lines)


def lint_scenario(scenario: Scenario) -> LintReport:
    """
    Inspect a scenario for inert, invalid or suspicious events.

    Errors:
        yearly-without-range: yearly event with no ``date-in-range`` condition
        negative-amount: amount below zero (the sign comes from the type)

    Warnings:
        duplicate-name: several events share a name, hence a firing history
        unknown-reference: a condition names an event not in the scenario
        income-reference-not-income: ``income-is-above`` names no income event
        forward-reference: balance-gated event depends on a balance-gated
            event declared after it, so same-month firings are not visible
        once-without-date: one-time event with no calendar condition

    Args:
        scenario: Scenario to inspect

    Returns:
        LintReport with the findings in declaration order
    """
    report = LintReport(scenario_name=scenario.name)
    events = scenario.events

    names = set(scenario.names())
    income_names = {e.name for e in events if e.type == K.E_INCOME}
    counts = Counter(scenario.names())

    # Position of each name among the balance-gated events (last declaration wins)
    gated_position = {
        e.name: idx for idx, e in enumerate(e for e in events if e.is_balance_gated)
    }

    reported_duplicates: set[str] = set()
    gated_index = -1

    for event in events:
        if event.is_balance_gated:
            gated_index += 1

        if event.recurrence == K.R_YEARLY and event.date_range is None:
            report.errors.append(
                LintIssue(
                    event.name,
                    "yearly-without-range",
                    "yearly event has no date-in-range condition and will never fire",
                )
            )

        if event.amount < 0:
            report.errors.append(
                LintIssue(
                    event.name,
                    "negative-amount",
                    f"amount {event.amount} is negative; use the event type for the sign",
                )
            )

        if counts[event.name] > 1 and event.name not in reported_duplicates:
            reported_duplicates.add(event.name)
            report.warnings.append(
                LintIssue(
                    event.name,
                    "duplicate-name",
                    f"{counts[event.name]} events share this name and its firing history",
                )
            )

        if event.recurrence == K.R_ONCE and not any(
            c.type in K.cashflow_conditions() for c in event.unlocked_by
        ):
            report.warnings.append(
                LintIssue(
                    event.name,
                    "once-without-date",
                    "one-time event has no date condition",
                )
            )

        for condition in event.unlocked_by:
            if isinstance(condition, (EventHappened, IncomeIsAbove)):
                ref = condition.event_name
            elif isinstance(condition, NetworthIsAbove):
                ref = condition.event_ref
            else:
                continue

            if ref and ref not in names:
                report.warnings.append(
                    LintIssue(
                        event.name,
                        "unknown-reference",
                        f"{condition.type} references unknown event '{ref}'",
                    )
                )
                continue

            if (
                ref
                and isinstance(condition, IncomeIsAbove)
                and ref not in income_names
            ):
                report.warnings.append(
                    LintIssue(
                        event.name,
                        "income-reference-not-income",
                        f"income-is-above references '{ref}', which is never an income",
                    )
                )

            if (
                not isinstance(condition, NetworthIsAbove)
                and gated_position.get(ref, -1) > gated_index
            ):
                report.warnings.append(
                    LintIssue(
                        event.name,
                        "forward-reference",
                        f"'{ref}' is evaluated later in the same pass; "
                        "same-month firings are not visible",
                    )
                )

    return report
