"""
Command-line interface for FinEventLab.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from fineventlab import __version__
from fineventlab.core.errors import ConfigError
from fineventlab.core.loader import ScenarioLoadError, load_scenario
from fineventlab.core.local_date import LocalDate, add_months, start_of_month
from fineventlab.core.scenario import export_ledger_csv, export_run_json, run_scenario
from fineventlab.core.validation import lint_scenario

_CLI_ERRORS = (ScenarioLoadError, ConfigError, OSError, ValueError)


def cmd_example(_) -> int:
    """Print a minimal working scenario JSON."""
    example = {
        "name": "CLI Demo",
        "initial_balance": 10000.0,
        "start": "2025-01",
        "end": "2026-12",
        "events": [
            {
                "kind": "recurring",
                "name": "Salary",
                "type": "income",
                "amount": 2000.0,
                "start": "2025-01",
            },
            {
                "kind": "recurring",
                "name": "Cost of Life",
                "type": "expense",
                "amount": 1400.0,
                "start": "2025-01",
            },
            {
                "kind": "one-off",
                "name": "New Car",
                "type": "expense",
                "amount": 10000.0,
                "date": "2025-06-15",
            },
            {
                "kind": "recurring",
                "name": "Car Insurance",
                "type": "expense",
                "amount": 600.0,
                "start": "2025-06",
                "frequency": "yearly",
            },
            {
                "name": "Holiday",
                "type": "expense",
                "amount": 3000.0,
                "recurrence": {"type": "once"},
                "unlockedBy": [
                    {
                        "tag": "balance",
                        "type": "networth-is-above",
                        "value": {"eventRef": "Salary", "amount": 12000.0},
                    }
                ],
            },
        ],
    }
    json.dump(example, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def _positive_int(value: str) -> int:
    years = int(value)
    if years < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return years


def _resolve_window(args, config) -> tuple[LocalDate, LocalDate]:
    if args.start:
        start = LocalDate.parse(args.start)
    elif config.start is not None:
        start = config.start
    else:
        start = LocalDate.today()
    start = start_of_month(start)

    if args.end:
        end = LocalDate.parse(args.end)
    elif args.years is None and config.end is not None:
        end = config.end
    else:
        years = args.years if args.years is not None else 10
        end = add_months(start, years * 12 - 1)
    return start, end


def cmd_run(args) -> int:
    """Run a scenario file and print (or export) the results."""
    try:
        doc = load_scenario(args.input)
        start, end = _resolve_window(args, doc.config)
        initial_balance = (
            args.initial_balance
            if args.initial_balance is not None
            else doc.config.initial_balance
        )

        result = run_scenario(doc.scenario, start, end, initial_balance)

        print(f"Scenario '{doc.scenario.name}': {len(result.balance)} months")
        frame = result.to_freq(args.freq)
        print(frame.to_string(float_format=lambda v: f"{v:,.2f}"))
        print(f"Final balance: {result.final_balance:,.2f}")

        if args.output:
            export_run_json(args.output, result)
            print(f"Results saved to {args.output}")
        if args.ledger:
            export_ledger_csv(args.ledger, result)
            print(f"Ledger saved to {args.ledger}")
        return 0

    except _CLI_ERRORS as e:
        print(f"Error running scenario: {e}", file=sys.stderr)
        return 1


def cmd_lint(args) -> int:
    """Lint a scenario file."""
    try:
        doc = load_scenario(args.input)
    except _CLI_ERRORS as e:
        if args.format == "json":
            error_report = {
                "has_errors": True,
                "has_warnings": False,
                "is_valid": False,
                "exit_code": 1,
                "error": str(e),
            }
            json.dump(error_report, sys.stdout, indent=2)
            sys.stdout.write("\n")
        else:
            print(f"❌ Lint failed: {e}")
        return 1

    report = lint_scenario(doc.scenario)
    if args.format == "json":
        json.dump(report.to_dict(), sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        print(str(report))
    return report.get_exit_code()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="finevent", description="FinEventLab - Event-driven cashflow scenarios"
    )

    # Version argument
    parser.add_argument(
        "--version", action="version", version=f"FinEventLab {__version__}"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(
        dest="cmd", required=True, help="Available commands"
    )

    # Example command
    example_parser = subparsers.add_parser(
        "example", help="Print a minimal working scenario JSON"
    )
    example_parser.set_defaults(func=cmd_example)

    # Run command
    run_parser = subparsers.add_parser(
        "run", help="Run a scenario file and print the balance table"
    )
    run_parser.add_argument(
        "-i", "--input", required=True, help="Input scenario file (YAML or JSON)"
    )
    run_parser.add_argument("-o", "--output", help="Output results JSON file")
    run_parser.add_argument("--start", help="First month (YYYY-MM[-DD])")
    run_parser.add_argument("--end", help="Last month, inclusive (YYYY-MM[-DD])")
    run_parser.add_argument(
        "--years",
        type=_positive_int,
        help="Simulate this many years when --end is not given",
    )
    run_parser.add_argument(
        "--initial-balance", type=float, help="Override the document's initial balance"
    )
    run_parser.add_argument(
        "--freq", choices=["M", "Q", "Y"], default="M", help="Table frequency"
    )
    run_parser.add_argument("--ledger", help="Write one CSV row per firing")
    run_parser.set_defaults(func=cmd_run)

    # Lint command
    lint_parser = subparsers.add_parser("lint", help="Lint a scenario file")
    lint_parser.add_argument(
        "-i", "--input", required=True, help="Input scenario file (YAML or JSON)"
    )
    lint_parser.add_argument(
        "--format", choices=["human", "json"], default="human", help="Output format"
    )
    lint_parser.set_defaults(func=cmd_lint)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
