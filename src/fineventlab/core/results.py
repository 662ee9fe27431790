"""
Results and output structures for FinEventLab.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from .context import CashflowEntry, FiredEventInfo

# Column roles used when aggregating to coarser frequencies
FRAME_COLUMNS = ["inflows", "outflows", "net_cashflow", "balance", "event_count"]
FLOW_COLUMNS = ["inflows", "outflows", "net_cashflow", "event_count"]


@dataclass
class ScenarioResult:
    """
    Outcome of one scenario run.

    ``cashflow`` and ``balance`` are the primary outputs, keyed by ``yyyy-MM``
    in chronological order. The remaining fields describe the run and back the
    pandas views.

    Attributes:
        cashflow: Month key -> net amount and fired events
        balance: Month key -> balance at month end
        fired_events: Event name -> firing history at the end of the run
        initial_balance: Balance before the first month
        scenario_name: Name of the simulated scenario
    """

    cashflow: dict[str, CashflowEntry]
    balance: dict[str, float]
    fired_events: dict[str, FiredEventInfo] = field(default_factory=dict)
    initial_balance: float = 0.0
    scenario_name: str = ""

    @property
    def months(self) -> list[str]:
        return list(self.balance.keys())

    @property
    def final_balance(self) -> float:
        """Balance after the last month, or the initial balance for an empty run."""
        if not self.balance:
            return self.initial_balance
        return self.balance[self.months[-1]]

    # --- pandas views ------------------------------------------------------------

    def to_frame(self) -> pd.DataFrame:
        """
        Monthly totals as a DataFrame on a monthly ``PeriodIndex``.

        Columns:
            inflows: Sum of income fired in the month
            outflows: Sum of expenses fired in the month (positive number)
            net_cashflow: inflows - outflows
            balance: Balance at month end
            event_count: Number of firings in the month
        """
        rows = []
        for month_key in self.months:
            entry = self.cashflow.get(month_key) or CashflowEntry()
            inflows = sum(e.amount for e in entry.events if e.is_income)
            outflows = sum(e.amount for e in entry.events if not e.is_income)
            rows.append(
                {
                    "inflows": float(inflows),
                    "outflows": float(outflows),
                    "net_cashflow": float(entry.amount),
                    "balance": float(self.balance[month_key]),
                    "event_count": len(entry.events),
                }
            )
        index = pd.PeriodIndex(self.months, freq="M", name="month")
        return pd.DataFrame(rows, index=index, columns=FRAME_COLUMNS)

    def to_freq(self, freq: str = "Q") -> pd.DataFrame:
        """
        Aggregate to specified frequency.

        Args:
            freq: Frequency string ('M', 'Q', 'Y', 'Q-DEC', etc.)

        Returns:
            Aggregated DataFrame with PeriodIndex
        """
        return aggregate_totals(self.to_frame(), freq=freq)

    def monthly(self) -> pd.DataFrame:
        """Return monthly data."""
        return self.to_frame()

    def quarterly(self) -> pd.DataFrame:
        """Return quarterly aggregated data."""
        return self.to_freq("Q")

    def yearly(self) -> pd.DataFrame:
        """Return yearly aggregated data."""
        return self.to_freq("Y")

    def events_frame(self) -> pd.DataFrame:
        """One row per firing, in month then firing order."""
        rows = []
        for month_key, entry in self.cashflow.items():
            for event in entry.events:
                rows.append(
                    {
                        "month": month_key,
                        "name": event.name,
                        "type": event.type,
                        "recurrence": event.recurrence,
                        "amount": event.signed_amount,
                    }
                )
        return pd.DataFrame(
            rows, columns=["month", "name", "type", "recurrence", "amount"]
        )

    # --- Introspection helpers -------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation (events reduced to name/type/amount)."""
        return {
            "scenario": self.scenario_name,
            "initial_balance": self.initial_balance,
            "cashflow": {
                month_key: {
                    "amount": entry.amount,
                    "events": [
                        {"name": e.name, "type": e.type, "amount": e.signed_amount}
                        for e in entry.events
                    ],
                }
                for month_key, entry in self.cashflow.items()
            },
            "balance": dict(self.balance),
            "fired_events": {
                name: {
                    "first_fired_month": info.first_fired_month,
                    "last_fired_month": info.last_fired_month,
                    "total_fire_count": info.total_fire_count,
                }
                for name, info in self.fired_events.items()
            },
        }

    def summary(self) -> dict[str, Any]:
        """Lightweight summary for API/CLI usage."""
        from fineventlab import kpi

        lowest_month, lowest_value = kpi.lowest_balance(self)
        months = self.months
        frame = self.to_frame()
        return {
            "type": "scenario_result",
            "scenario": self.scenario_name,
            "frame": {
                "freq": "M",
                "rows": len(months),
                "date_start": months[0] if months else None,
                "date_end": months[-1] if months else None,
            },
            "kpis": {
                "initial_balance": self.initial_balance,
                "final_balance": kpi.final_balance(self),
                "net_change": kpi.net_change(self),
                "net_change_pct": kpi.net_change_pct(self),
                "lowest_balance": lowest_value,
                "lowest_balance_month": lowest_month,
                "avg_monthly_change": kpi.avg_monthly_change(self),
                "total_inflows": float(frame["inflows"].sum()),
                "total_outflows": float(frame["outflows"].sum()),
            },
        }


def aggregate_totals(df: pd.DataFrame, freq: str = "Q") -> pd.DataFrame:
    """
    Aggregate monthly totals by frequency with proper financial semantics.

    Stocks (balance) are aggregated using 'last' (period-end values). Flows
    (inflows, outflows, net_cashflow, event_count) are aggregated using 'sum'.

    Args:
        df: Monthly totals DataFrame (PeriodIndex or DatetimeIndex)
        freq: Frequency string ('M', 'Q', 'Y', 'Q-DEC', 'Q-MAR', etc.)

    Returns:
        Aggregated DataFrame with PeriodIndex

    Example:
        >>> monthly = result.to_frame()
        >>> quarterly = aggregate_totals(monthly, "Q")
        >>> yearly = aggregate_totals(monthly, "Y")
    """
    if not isinstance(df.index, pd.PeriodIndex):
        df = df.copy()
        df.index = df.index.to_period("M")

    if freq.upper() in ["M", "MONTHLY"]:
        return df

    agg = {}
    for col in df.columns:
        if col in FLOW_COLUMNS:
            agg[col] = "sum"
        else:
            agg[col] = "last"

    out = df.groupby(df.index.asfreq(freq)).agg(agg)
    out.index.name = df.index.name
    return out.reindex(columns=df.columns)
