"""
Stable tabular view of a synthesized path.

Field names and order are a contract with downstream serializers:

    index, date, value, underlying, pe_ratio, expected_earnings,
    benchmark, delta, gamma, vega, theta, rho

This module builds in-memory views only; writing files is the caller's job.
"""

import pandas as pd

from path_synthesis.data.schemas import PathPoint, SimulationResult

EXPORT_COLUMNS: tuple[str, ...] = (
    "index",
    "date",
    "value",
    "underlying",
    "pe_ratio",
    "expected_earnings",
    "benchmark",
    "delta",
    "gamma",
    "vega",
    "theta",
    "rho",
)

#: Header used by the CSV rendering, aligned with EXPORT_COLUMNS
CSV_HEADER: tuple[str, ...] = (
    "Index",
    "Date",
    "Value",
    "Underlying",
    "PE_Ratio",
    "Earnings",
    "MarketProxy",
    "Delta",
    "Gamma",
    "Vega",
    "Theta",
    "Rho",
)

_SIX_DECIMALS = ("value", "underlying", "benchmark")
_FOUR_DECIMALS = ("pe_ratio", "expected_earnings", "delta", "gamma", "vega", "theta", "rho")


def _point_record(point: PathPoint) -> dict:
    greeks = point.greeks
    return {
        "index": point.index,
        "date": point.date.isoformat(),
        "value": point.value,
        "underlying": point.underlying,
        "pe_ratio": point.pe_ratio,
        "expected_earnings": point.expected_earnings,
        "benchmark": point.benchmark,
        "delta": greeks.delta if greeks else None,
        "gamma": greeks.gamma if greeks else None,
        "vega": greeks.vega if greeks else None,
        "theta": greeks.theta if greeks else None,
        "rho": greeks.rho if greeks else None,
    }


def to_records(result: SimulationResult) -> list[dict]:
    """
    Path as a list of flat dicts keyed by EXPORT_COLUMNS.

    Missing optional fields are None; dates are ISO strings.
    """
    return [_point_record(p) for p in result.points]


def to_frame(result: SimulationResult) -> pd.DataFrame:
    """
    Path as a DataFrame with columns in EXPORT_COLUMNS order.

    Missing optional fields are NaN.
    """
    df = pd.DataFrame.from_records(to_records(result), columns=list(EXPORT_COLUMNS))
    numeric = [c for c in EXPORT_COLUMNS if c not in ("index", "date")]
    df[numeric] = df[numeric].astype(float)
    return df


def _format_column(series: pd.Series, decimals: int) -> pd.Series:
    return series.map(lambda v: "" if pd.isna(v) else f"{v:.{decimals}f}")


def to_csv_text(result: SimulationResult) -> str:
    """
    Render the path as CSV text.

    Value, underlying and benchmark use 6 decimals; P/E, earnings and
    Greeks use 4 decimals; missing fields are empty.
    """
    df = to_frame(result)
    for col in _SIX_DECIMALS:
        df[col] = _format_column(df[col], 6)
    for col in _FOUR_DECIMALS:
        df[col] = _format_column(df[col], 4)
    return df.to_csv(index=False, header=list(CSV_HEADER), lineterminator="\n")
