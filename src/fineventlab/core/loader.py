"""Utilities for loading scenarios from YAML/JSON sources."""

from __future__ import annotations

import json
from copy import deepcopy
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from .builders import make_event, make_one_off, make_recurring
from .conditions import Condition, condition_from_dict
from .errors import ConfigError
from .events import Scenario, ScenarioEvent
from .kinds import K
from .local_date import LocalDate

__all__ = [
    "ScenarioLoadError",
    "ScenarioConfig",
    "ScenarioDocument",
    "load_scenario",
    "scenario_to_dict",
]

_SHORTHAND_KINDS = {"one-off", "recurring", "event"}


class ScenarioLoadError(ValueError):
    """Raised when a scenario document cannot be parsed or validated."""


@dataclass(slots=True)
class ScenarioConfig:
    """
    Run defaults carried by a scenario document.

    ``start`` and ``end`` are optional; callers (such as the CLI) fill in
    their own defaults when a document leaves them out.
    """

    start: LocalDate | None = None
    end: LocalDate | None = None
    initial_balance: float = 0.0


@dataclass(slots=True)
class ScenarioDocument:
    """A parsed scenario together with its run defaults."""

    scenario: Scenario
    config: ScenarioConfig = field(default_factory=ScenarioConfig)
    source: str = "<memory>"


def load_scenario(
    source: str | Path | dict[str, Any], *, format: str | None = None
) -> ScenarioDocument:
    """
    Parse a scenario from YAML/JSON/dict.

    Events are given either in the wire shape
    (``name``/``type``/``amount``/``recurrence``/``unlockedBy``) or through a
    builder shorthand selected by ``kind``:

    - ``kind: one-off`` with ``date``
    - ``kind: recurring`` with ``start``, optional ``end`` and ``frequency``
    - ``kind: event`` (conditions only)

    Shorthand events may still list extra ``unlockedBy`` conditions.

    Raises:
        FileNotFoundError: If ``source`` is a path that does not exist
        ScenarioLoadError: If the document is malformed
    """

    mapping, label = _read_source(source, format=format)

    name = mapping.get("name", "Unnamed Scenario")
    if not isinstance(name, str) or not name.strip():
        raise ScenarioLoadError(f"{label}::name: expected non-empty string")

    config = ScenarioConfig(
        start=_coerce_local_date(mapping.get("start"), f"{label}::start"),
        end=_coerce_local_date(mapping.get("end"), f"{label}::end"),
        initial_balance=_coerce_amount(
            mapping.get("initial_balance", 0.0), f"{label}::initial_balance"
        ),
    )
    events = _normalize_events(mapping.get("events"), label)
    return ScenarioDocument(
        scenario=Scenario(name=name, events=events), config=config, source=label
    )


def scenario_to_dict(
    scenario: Scenario, config: ScenarioConfig | None = None
) -> dict[str, Any]:
    """
    Serialize a scenario (and optional run defaults) to a loadable mapping.

    The output uses the wire shape for events, so
    ``load_scenario(scenario_to_dict(s)).scenario`` equals ``s``.
    """
    data: dict[str, Any] = {"name": scenario.name}
    if config is not None:
        data["initial_balance"] = config.initial_balance
        if config.start is not None:
            data["start"] = str(config.start)
        if config.end is not None:
            data["end"] = str(config.end)
    data["events"] = [event.to_dict() for event in scenario.events]
    return data


def _read_source(
    source: str | Path | dict[str, Any], *, format: str | None
) -> tuple[dict[str, Any], str]:
    if isinstance(source, dict):
        return deepcopy(source), "<mapping>"

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(path)

    fmt = (format or path.suffix.lstrip(".")).lower()
    text = path.read_text(encoding="utf-8")
    try:
        if fmt in {"yaml", "yml", ""}:
            data = yaml.safe_load(text)
        elif fmt == "json":
            data = json.loads(text)
        else:
            raise ScenarioLoadError(f"Unsupported scenario format '{fmt}' for {path}")
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ScenarioLoadError(f"{path}: could not parse {fmt or 'yaml'}: {exc}") from exc

    if not isinstance(data, dict):
        raise ScenarioLoadError(f"Scenario root must be a mapping (source={path})")
    return data, str(path)


def _normalize_events(raw: Any, label: str) -> list[ScenarioEvent]:
    entries = _ensure_list(raw, f"{label}::events", allow_none=True)
    if entries is None:
        return []

    events: list[ScenarioEvent] = []
    for idx, entry in enumerate(entries):
        ctx = f"{label}::events[{idx}]"
        data = _ensure_dict(entry, ctx)
        events.append(_normalize_event(data, ctx))
    return events


def _normalize_event(data: dict[str, Any], ctx: str) -> ScenarioEvent:
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ScenarioLoadError(f"{ctx}: 'name' is required")
    event_type = data.get("type")
    if event_type not in K.all_event_types():
        raise ScenarioLoadError(
            f"{ctx}.type: expected one of {K.all_event_types()}, got {event_type!r}"
        )
    amount = _coerce_amount(data.get("amount"), f"{ctx}.amount")
    conditions = _normalize_conditions(data.get("unlockedBy"), f"{ctx}.unlockedBy")
    metadata = _coerce_metadata(data.get("metadata"), f"{ctx}.metadata")

    kind = data.get("kind")
    if kind is None:
        recurrence = data.get("recurrence", K.R_ONCE)
        if isinstance(recurrence, dict):
            recurrence = recurrence.get("type")
        if recurrence not in K.all_recurrences():
            raise ScenarioLoadError(
                f"{ctx}.recurrence: expected one of {K.all_recurrences()}, "
                f"got {recurrence!r}"
            )
        return ScenarioEvent(
            name=name,
            type=event_type,
            amount=amount,
            recurrence=recurrence,
            unlocked_by=tuple(conditions),
            metadata=metadata,
        )

    if kind not in _SHORTHAND_KINDS:
        raise ScenarioLoadError(
            f"{ctx}.kind: expected one of {sorted(_SHORTHAND_KINDS)}, got {kind!r}"
        )

    if kind == "one-off":
        when = _coerce_local_date(data.get("date"), f"{ctx}.date")
        if when is None:
            raise ScenarioLoadError(f"{ctx}: 'date' is required for one-off events")
        return make_one_off(event_type, name, amount, when, conditions, metadata)

    if kind == "recurring":
        start = _coerce_local_date(data.get("start"), f"{ctx}.start")
        if start is None:
            raise ScenarioLoadError(f"{ctx}: 'start' is required for recurring events")
        end = _coerce_local_date(data.get("end"), f"{ctx}.end")
        frequency = data.get("frequency", K.R_MONTHLY)
        try:
            return make_recurring(
                event_type, name, amount, start, end, frequency, conditions, metadata
            )
        except ConfigError as exc:
            raise ScenarioLoadError(f"{ctx}.frequency: {exc}") from exc

    if not conditions:
        raise ScenarioLoadError(f"{ctx}: 'unlockedBy' is required for kind 'event'")
    return make_event(event_type, name, amount, conditions, metadata)


def _normalize_conditions(raw: Any, ctx: str) -> list[Condition]:
    entries = _ensure_list(raw, ctx, allow_none=True)
    if entries is None:
        return []

    conditions: list[Condition] = []
    for idx, entry in enumerate(entries):
        item_ctx = f"{ctx}[{idx}]"
        data = _ensure_dict(entry, item_ctx)
        value = data.get("value")
        if isinstance(value, dict):
            # Date payloads may be written as ISO strings
            for key in ("start", "end"):
                if isinstance(value.get(key), (str, date)):
                    value[key] = _coerce_local_date(
                        value[key], f"{item_ctx}.value.{key}"
                    ).to_dict()
        elif isinstance(value, (str, date)):
            data["value"] = _coerce_local_date(value, f"{item_ctx}.value").to_dict()
        try:
            conditions.append(condition_from_dict(data))
        except ConfigError as exc:
            raise ScenarioLoadError(f"{item_ctx}: {exc}") from exc
        except (KeyError, TypeError, ValueError) as exc:
            raise ScenarioLoadError(f"{item_ctx}: malformed condition value ({exc})") from exc
    return conditions


def _coerce_local_date(value: Any, ctx: str) -> LocalDate | None:
    if value is None:
        return None
    if isinstance(value, LocalDate):
        return value
    if isinstance(value, date):
        return LocalDate.from_date(value)
    if isinstance(value, str):
        try:
            return LocalDate.parse(value)
        except ValueError as exc:
            raise ScenarioLoadError(f"{ctx}: {exc}") from exc
    if isinstance(value, dict):
        try:
            return LocalDate.from_dict(value)
        except (KeyError, TypeError, ValueError) as exc:
            raise ScenarioLoadError(f"{ctx}: expected {{y, m, d}} mapping") from exc
    raise ScenarioLoadError(f"{ctx}: expected ISO date string or {{y, m, d}} mapping")


def _coerce_amount(value: Any, ctx: str) -> float:
    if isinstance(value, bool):  # Avoid bool being treated as int
        raise ScenarioLoadError(f"{ctx}: expected a number")
    if isinstance(value, (int, float)):
        return float(value)
    raise ScenarioLoadError(f"{ctx}: expected a number")


def _coerce_metadata(value: Any, ctx: str) -> dict[str, str] | None:
    if value is None:
        return None
    data = _ensure_dict(value, ctx)
    return {str(k): str(v) for k, v in data.items()}


def _ensure_dict(value: Any, ctx: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ScenarioLoadError(f"{ctx}: expected a mapping")
    return deepcopy(value)


def _ensure_list(value: Any, ctx: str, *, allow_none: bool = False) -> list[Any] | None:
    if value is None:
        if allow_none:
            return None
        raise ScenarioLoadError(f"{ctx}: expected a list")
    if not isinstance(value, list):
        raise ScenarioLoadError(f"{ctx}: expected a list")
    return list(value)
