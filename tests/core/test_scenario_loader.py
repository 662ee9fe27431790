from __future__ import annotations

import json
from pathlib import Path

import pytest
from fineventlab.core.conditions import DateInRange, DateIs, EventHappened
from fineventlab.core.events import Scenario
from fineventlab.core.kinds import K
from fineventlab.core.loader import (
    ScenarioConfig,
    ScenarioLoadError,
    load_scenario,
    scenario_to_dict,
)
from fineventlab.core.local_date import ld
from fineventlab.core.scenario import run_scenario

SCENARIO_DIR = Path(__file__).resolve().parents[1] / "data" / "scenarios"
CAR_PURCHASE = SCENARIO_DIR / "car_purchase.yaml"


def test_load_yaml_with_shorthands() -> None:
    doc = load_scenario(CAR_PURCHASE)

    assert doc.source == str(CAR_PURCHASE)
    assert doc.scenario.name == "Car purchase and insurance"
    assert doc.config == ScenarioConfig(
        start=ld(2025, 12), end=ld(2026, 3), initial_balance=0.0
    )

    salary, car, insurance, maintenance = doc.scenario.events
    assert salary.recurrence == K.R_MONTHLY
    assert salary.unlocked_by == (DateInRange(ld(2025, 1, 1), None),)
    assert car.unlocked_by == (DateIs(ld(2026, 1, 15)),)
    assert insurance.unlocked_by == (
        EventHappened("Buy Car"),
        DateInRange(ld(2026, 1), None),
    )
    assert maintenance.recurrence == K.R_YEARLY
    assert maintenance.metadata == {"category": "car"}


def test_loaded_scenario_runs() -> None:
    doc = load_scenario(CAR_PURCHASE)
    result = run_scenario(
        doc.scenario, doc.config.start, doc.config.end, doc.config.initial_balance
    )

    assert result.balance["2025-12"] == 2000
    assert result.balance["2026-01"] == 2000 - 8720
    assert result.balance["2026-02"] == 2000 - 8720 + 2000 - 120


def test_load_json_wire_shape(tmp_path: Path) -> None:
    payload = {
        "name": "Wire",
        "initial_balance": 250,
        "events": [
            {
                "name": "Gift",
                "type": "income",
                "amount": 100,
                "recurrence": {"type": "once"},
                "unlockedBy": [
                    {
                        "tag": "cashflow",
                        "type": "date-is",
                        "value": {"y": 2025, "m": 2, "d": 1},
                    }
                ],
            }
        ],
    }
    path = tmp_path / "wire.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    doc = load_scenario(path)

    assert doc.config.initial_balance == 250.0
    assert doc.config.start is None
    assert doc.scenario.events[0].unlocked_by == (DateIs(ld(2025, 2, 1)),)


def test_load_from_mapping_does_not_mutate_input() -> None:
    payload = {
        "name": "Mapping",
        "events": [
            {
                "kind": "recurring",
                "name": "Rent",
                "type": "expense",
                "amount": 900,
                "start": "2025-01",
                "end": {"y": 2025, "m": 6},
            }
        ],
    }
    snapshot = json.dumps(payload, sort_keys=True)

    doc = load_scenario(payload)

    assert doc.source == "<mapping>"
    assert doc.scenario.events[0].unlocked_by == (DateInRange(ld(2025, 1), ld(2025, 6)),)
    assert json.dumps(payload, sort_keys=True) == snapshot


def test_round_trip_through_scenario_to_dict() -> None:
    doc = load_scenario(CAR_PURCHASE)
    data = scenario_to_dict(doc.scenario, doc.config)

    again = load_scenario(data)

    assert again.scenario == doc.scenario
    assert again.config == doc.config


def test_scenario_to_dict_without_config() -> None:
    data = scenario_to_dict(Scenario(name="Empty"))
    assert data == {"name": "Empty", "events": []}


@pytest.mark.parametrize(
    ("payload", "match"),
    [
        ({"events": [{"type": "income", "amount": 1}]}, r"events\[0\]: 'name' is required"),
        (
            {"events": [{"name": "x", "type": "gift", "amount": 1}]},
            r"events\[0\]\.type",
        ),
        (
            {"events": [{"name": "x", "type": "income", "amount": "lots"}]},
            r"events\[0\]\.amount",
        ),
        (
            {"events": [{"name": "x", "type": "income", "amount": 1, "recurrence": "weekly"}]},
            r"events\[0\]\.recurrence",
        ),
        (
            {"events": [{"name": "x", "type": "income", "amount": 1, "kind": "one-off"}]},
            r"'date' is required",
        ),
        (
            {
                "events": [
                    {
                        "name": "x",
                        "type": "income",
                        "amount": 1,
                        "kind": "recurring",
                        "start": "2025-01",
                        "frequency": "once",
                    }
                ]
            },
            r"events\[0\]\.frequency",
        ),
        (
            {"events": [{"name": "x", "type": "income", "amount": 1, "kind": "event"}]},
            r"'unlockedBy' is required",
        ),
        (
            {
                "events": [
                    {
                        "name": "x",
                        "type": "income",
                        "amount": 1,
                        "unlockedBy": [{"tag": "balance", "type": "moon-is-full"}],
                    }
                ]
            },
            r"unlockedBy\[0\]: Unknown condition type",
        ),
        (
            {
                "events": [
                    {
                        "name": "x",
                        "type": "income",
                        "amount": 1,
                        "unlockedBy": [{"tag": "balance", "type": "event-happened", "value": {}}],
                    }
                ]
            },
            r"unlockedBy\[0\]: malformed condition value",
        ),
        ({"start": "someday"}, r"<mapping>::start"),
        ({"events": {"name": "x"}}, r"<mapping>::events: expected a list"),
    ],
)
def test_invalid_documents(payload, match) -> None:
    with pytest.raises(ScenarioLoadError, match=match):
        load_scenario(payload)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_scenario(tmp_path / "missing.yaml")


def test_unsupported_format(tmp_path: Path) -> None:
    path = tmp_path / "scenario.toml"
    path.write_text("name = 'x'", encoding="utf-8")

    with pytest.raises(ScenarioLoadError, match="Unsupported scenario format"):
        load_scenario(path)


def test_root_must_be_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ScenarioLoadError, match="root must be a mapping"):
        load_scenario(path)


def test_unparseable_yaml(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("name: [unclosed\n", encoding="utf-8")

    with pytest.raises(ScenarioLoadError, match="could not parse"):
        load_scenario(path)
