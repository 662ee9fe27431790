"""
Custom exceptions for FinEventLab.

This module provides specialized exception classes for reporting problems
found in a scenario or in the results of a run.
"""

from __future__ import annotations


class ScenarioValidationError(Exception):
    """
    Raised when a scenario or run fails validation.

    Attributes:
        scenario_name: Name of the scenario that failed validation
        report: The lint report or list of failures (if available)
        problem_names: Event names or month keys that caused issues
    """

    def __init__(
        self,
        scenario_name: str,
        message: str,
        report=None,
        problem_names: list[str] | None = None,
    ):
        self.scenario_name = scenario_name
        self.report = report
        self.problem_names = problem_names or []
        super().__init__(self._fmt(message))

    def _fmt(self, msg: str) -> str:
        """Format the error message with additional context."""
        suffix = ""
        if self.problem_names:
            preview = ", ".join(self.problem_names[:10])
            more = (
                f" (+{len(self.problem_names)-10} more)"
                if len(self.problem_names) > 10
                else ""
            )
            suffix = f" | problems: [{preview}]{more}"
        return f"[Scenario {self.scenario_name}] {msg}{suffix}"
