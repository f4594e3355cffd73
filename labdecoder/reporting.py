"""Tabular views over parameter records: results table, trend series and trend summaries."""

from dataclasses import dataclass
from typing import Iterable, Literal, Optional

import pandas as pd

from labdecoder.models import ParameterRecord

# Most severe first
STATUS_ORDER = {"critical": 0, "high": 1, "low": 2, "normal": 3}

RECORD_COLUMNS = ["id", "name", "value", "unit", "reference_range", "status", "category"]

SortKey = Literal["name", "category", "status"]


@dataclass
class TrendSummary:
    """Change between the first and last point of a parameter's history."""
    name: str
    unit: str
    first_value: float
    last_value: float
    change: float
    percent_change: Optional[float]
    direction: Literal["up", "down", "flat"]


def records_to_dataframe(records: Iterable[ParameterRecord]) -> pd.DataFrame:
    """One row per parameter, without history."""
    rows = [record.model_dump(include=set(RECORD_COLUMNS)) for record in records]
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)


def history_to_dataframe(records: Iterable[ParameterRecord], names: Optional[list[str]] = None) -> pd.DataFrame:
    """Wide trend table: one row per date, one column per parameter name.

    Args:
        records: Parameter records
        names: Restrict to these parameter names (all when omitted)

    Returns:
        DataFrame indexed by date, sorted chronologically
    """
    series = {}
    for record in records:
        # Skip parameters not selected
        if names is not None and record.name not in names:
            continue
        series[record.name] = pd.Series(
            [point.value for point in record.history],
            index=pd.to_datetime([point.date for point in record.history]),
        )

    # No selected parameters
    if not series:
        return pd.DataFrame()

    df = pd.DataFrame(series).sort_index()
    df.index.name = "date"
    return df


def filter_and_sort(
    records: Iterable[ParameterRecord],
    category: Optional[str] = None,
    sort_by: SortKey = "category",
    ascending: bool = True,
) -> list[ParameterRecord]:
    """Filter by category and sort by name, category or status severity.

    The sort is stable, so ties keep extraction order.
    """
    selected = [record for record in records if category is None or record.category == category]

    if sort_by == "status":
        key = lambda record: STATUS_ORDER[record.status]
    elif sort_by in ("name", "category"):
        key = lambda record: getattr(record, sort_by)
    else:
        raise ValueError(f"Unsupported sort key: {sort_by}")

    return sorted(selected, key=key, reverse=not ascending)


def categories(records: Iterable[ParameterRecord]) -> list[str]:
    """Distinct categories in first-seen order."""
    return list(dict.fromkeys(record.category for record in records))


def summarize_trend(record: ParameterRecord) -> Optional[TrendSummary]:
    """Compare the first and last history points. None when there are fewer than two."""

    # Not enough points for a trend
    if len(record.history) < 2:
        return None

    first_value = record.history[0].value
    last_value = record.history[-1].value
    change = last_value - first_value
    percent_change = (change / first_value) * 100 if first_value else None

    if change > 0:
        direction = "up"
    elif change < 0:
        direction = "down"
    else:
        direction = "flat"

    return TrendSummary(
        name=record.name,
        unit=record.unit,
        first_value=first_value,
        last_value=last_value,
        change=change,
        percent_change=percent_change,
        direction=direction,
    )
