"""
Condition types that gate scenario events.

Conditions form a two-level tagged union: the ``tag`` separates calendar
conditions (``cashflow``) from conditions that look at the running balance or
at what already fired (``balance``), and ``type`` selects the variant. Each
variant is a frozen dataclass; behaviour lives in the condition strategies
registered under the same ``type`` string.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from .errors import ConfigError
from .kinds import K
from .local_date import LocalDate


class Condition(ABC):
    """
    Abstract base for every condition variant.

    Subclasses declare ``tag`` and ``type`` as class attributes and provide
    ``value_dict()`` for the payload of the wire shape
    ``{"tag": ..., "type": ..., "value": {...}}``.
    """

    tag: ClassVar[str]
    type: ClassVar[str]

    @property
    def is_balance(self) -> bool:
        return self.tag == K.TAG_BALANCE

    @abstractmethod
    def value_dict(self) -> dict[str, Any]:
        """Return the ``value`` payload of the wire shape."""

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self.tag, "type": self.type, "value": self.value_dict()}


# --- Cashflow conditions -------------------------------------------------------


@dataclass(frozen=True)
class DateIs(Condition):
    """Holds in the month that contains ``date``."""

    tag: ClassVar[str] = K.TAG_CASHFLOW
    type: ClassVar[str] = K.C_DATE_IS

    date: LocalDate

    def value_dict(self) -> dict[str, Any]:
        return self.date.to_dict()


@dataclass(frozen=True)
class DateInRange(Condition):
    """
    Holds for every month in ``[start, end]`` (inclusive, month resolution).

    ``end=None`` leaves the range open towards the future. For yearly events
    the month of ``start`` is also the anniversary month.
    """

    tag: ClassVar[str] = K.TAG_CASHFLOW
    type: ClassVar[str] = K.C_DATE_IN_RANGE

    start: LocalDate
    end: LocalDate | None = None

    def value_dict(self) -> dict[str, Any]:
        return {
            "start": self.start.to_dict(),
            "end": self.end.to_dict() if self.end is not None else None,
        }


# --- Balance conditions --------------------------------------------------------


@dataclass(frozen=True)
class NetworthIsAbove(Condition):
    """
    Holds when the running balance is strictly above ``amount``.

    ``event_ref`` names the event the threshold was written against; it is
    informational only and does not restrict which flows count.
    """

    tag: ClassVar[str] = K.TAG_BALANCE
    type: ClassVar[str] = K.C_NETWORTH_IS_ABOVE

    event_ref: str
    amount: float

    def value_dict(self) -> dict[str, Any]:
        return {"eventRef": self.event_ref, "amount": self.amount}


@dataclass(frozen=True)
class EventHappened(Condition):
    """Holds once an event called ``event_name`` has fired at least once."""

    tag: ClassVar[str] = K.TAG_BALANCE
    type: ClassVar[str] = K.C_EVENT_HAPPENED

    event_name: str

    def value_dict(self) -> dict[str, Any]:
        return {"eventName": self.event_name}


@dataclass(frozen=True)
class IncomeIsAbove(Condition):
    """
    Holds when an income called ``event_name`` already fired this month with
    an amount of at least ``amount``.
    """

    tag: ClassVar[str] = K.TAG_BALANCE
    type: ClassVar[str] = K.C_INCOME_IS_ABOVE

    event_name: str
    amount: float

    def value_dict(self) -> dict[str, Any]:
        return {"eventName": self.event_name, "amount": self.amount}


CONDITION_TYPES: dict[str, type[Condition]] = {
    cls.type: cls
    for cls in (DateIs, DateInRange, NetworthIsAbove, EventHappened, IncomeIsAbove)
}


def condition_from_dict(data: dict[str, Any]) -> Condition:
    """
    Rebuild a condition from its wire shape.

    Raises:
        ConfigError: If the type is unknown or the tag does not match it
        KeyError: If a required payload field is missing
    """
    kind = data.get("type")
    cls = CONDITION_TYPES.get(kind)
    if cls is None:
        raise ConfigError(f"Unknown condition type: {kind}")
    tag = data.get("tag", cls.tag)
    if tag != cls.tag:
        raise ConfigError(f"Condition '{kind}' must be tagged '{cls.tag}', got '{tag}'")

    value = data.get("value") or {}
    if cls is DateIs:
        return DateIs(LocalDate.from_dict(value))
    if cls is DateInRange:
        end = value.get("end")
        return DateInRange(
            start=LocalDate.from_dict(value["start"]),
            end=LocalDate.from_dict(end) if end is not None else None,
        )
    if cls is NetworthIsAbove:
        return NetworthIsAbove(
            event_ref=str(value.get("eventRef", "")), amount=float(value["amount"])
        )
    if cls is EventHappened:
        return EventHappened(event_name=str(value["eventName"]))
    if cls is IncomeIsAbove:
        return IncomeIsAbove(
            event_name=str(value["eventName"]), amount=float(value["amount"])
        )
    raise ConfigError(f"No decoder for condition type: {kind}")
