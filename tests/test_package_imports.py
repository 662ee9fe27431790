"""
Smoke tests to verify basic imports and functionality.
"""


def test_import_fineventlab():
    """Test that we can import the main package."""
    import fineventlab

    assert hasattr(fineventlab, "__version__")
    assert fineventlab.__version__ == "0.1.0"


def test_import_core_components():
    """Test that core components can be imported."""
    from fineventlab import (
        ConfigError,
        LocalDate,
        Scenario,
        ScenarioEvent,
        ScenarioResult,
        lint_scenario,
        load_scenario,
        run_scenario,
    )

    assert Scenario is not None
    assert ScenarioEvent is not None
    assert ScenarioResult is not None
    assert LocalDate is not None
    assert issubclass(ConfigError, Exception)
    assert callable(run_scenario)
    assert callable(load_scenario)
    assert callable(lint_scenario)


def test_importing_core_registers_strategies():
    """Importing any submodule goes through the package and wires defaults."""
    from fineventlab.core.registry import ConditionRegistry, RecurrenceRegistry

    assert ConditionRegistry
    assert RecurrenceRegistry


def test_public_names_resolve():
    import fineventlab

    for name in fineventlab.__all__:
        assert hasattr(fineventlab, name), name
