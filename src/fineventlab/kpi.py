"""
KPI calculation utilities for scenario results.

Scalar helpers take a ``ScenarioResult`` and return plain Python values;
frame helpers take the monthly DataFrame from ``ScenarioResult.to_frame()``
and return pandas Series aligned to its index.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from fineventlab.core.results import ScenarioResult


def final_balance(result: ScenarioResult) -> float:
    """Balance after the last month (the initial balance if nothing was evaluated)."""
    return result.final_balance


def net_change(result: ScenarioResult) -> float:
    return final_balance(result) - result.initial_balance


def net_change_pct(result: ScenarioResult) -> float:
    """
    Net change relative to the initial balance, in percent.

    The sign follows the initial balance, so a negative starting balance
    flips it. Returns 0.0 when the initial balance is zero.
    """
    if result.initial_balance == 0:
        return 0.0
    return net_change(result) / result.initial_balance * 100.0


def avg_monthly_change(result: ScenarioResult) -> float:
    months = len(result.balance)
    if months == 0:
        return 0.0
    return net_change(result) / months


def lowest_balance(result: ScenarioResult) -> tuple[str | None, float]:
    """
    Lowest balance reached during the run.

    The search starts from the initial balance, so the month is ``None`` when
    no month ever dropped below it. Ties keep the earliest month.

    Returns:
        (month_key or None, balance)
    """
    lowest_month: str | None = None
    lowest_value = result.initial_balance
    for month_key, value in result.balance.items():
        if value < lowest_value:
            lowest_month, lowest_value = month_key, value
    return lowest_month, lowest_value


def year_end_balances(result: ScenarioResult) -> dict[int, float]:
    """December balances keyed by year, for every year whose December was evaluated."""
    return {
        int(month_key.split("-")[0]): value
        for month_key, value in result.balance.items()
        if month_key.endswith("-12")
    }


def months_below(result: ScenarioResult, threshold: float = 0.0) -> list[str]:
    """Month keys whose closing balance is strictly below ``threshold``."""
    return [k for k, v in result.balance.items() if v < threshold]


def max_drawdown(result: ScenarioResult) -> float:
    """
    Largest peak-to-trough drop of the balance, in currency units.

    The initial balance counts as the first peak. Returns 0.0 for a balance
    that never falls.
    """
    series = pd.Series([result.initial_balance, *result.balance.values()], dtype=float)
    running_max = series.cummax()
    return float((running_max - series).max())


def liquidity_runway(
    df: pd.DataFrame,
    lookback_months: int = 6,
    balance_col: str = "balance",
    outflows_col: str = "outflows",
) -> pd.Series:
    """
    Calculate liquidity runway in months.

    Liquidity runway = balance / rolling_average(outflows, lookback_months)

    Args:
        df: Monthly frame from ``ScenarioResult.to_frame()``
        lookback_months: Number of months to look back for outflows
        balance_col: Column name for the balance
        outflows_col: Column name for outflows

    Returns:
        Series with liquidity runway in months per row (inf without outflows)
    """
    rolling_avg_outflows = (
        df[outflows_col].rolling(window=lookback_months, min_periods=1).mean()
    )

    with np.errstate(divide="ignore", invalid="ignore"):
        runway = np.where(
            rolling_avg_outflows > 0,
            df[balance_col] / rolling_avg_outflows,
            np.inf,
        )

    return pd.Series(runway, index=df.index, name="liquidity_runway_months")


def savings_rate(
    df: pd.DataFrame, inflows_col: str = "inflows", outflows_col: str = "outflows"
) -> pd.Series:
    """
    Share of inflows kept each period: (inflows - outflows) / inflows.

    Periods without inflows yield NaN.
    """
    inflows = df[inflows_col]
    rate = (inflows - df[outflows_col]) / inflows.where(inflows != 0)
    return rate.rename("savings_rate")
