"""
Error classes for FinEventLab.

This module defines the exception raised when a scenario is wired with
something the engine has no behaviour for.
"""


class ConfigError(Exception):
    """
    Configuration error during scenario setup.

    Raised before any month is evaluated, when the scenario references a kind
    the registries do not know about. The evaluation loop itself never raises
    for well-typed events: an event whose conditions can never hold simply
    never fires.

    **Common Causes:**
    - A condition type with no registered evaluator
    - A recurrence kind with no registered gate
    - An event type other than 'income' / 'expense'

    **Example Usage:**
        ```python
        from fineventlab.core.errors import ConfigError
        from fineventlab.core.registry import wire_strategies

        try:
            wire_strategies(scenario.events)
        except ConfigError as e:
            print(f"Configuration error: {e}")
        ```
    """

    pass
