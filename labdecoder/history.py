"""Synthetic trend history for extracted lab values."""

import datetime
import random
from typing import Protocol

import pandas as pd

from labdecoder.models import HistoryPoint

# Six month-start samples (Jan-Jun 2024) followed by the current reading
HISTORY_DATES = tuple(ts.date() for ts in pd.date_range("2024-01-01", periods=6, freq="MS"))
CURRENT_DATE = datetime.date(2024, 7, 1)

MAX_VARIATION = 0.10


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning a float in [0, 1)."""

    def random(self) -> float: ...


def _perturb(current_value: float, rng: RandomSource) -> float:
    """Offset a value by up to ±10% and round to 2 decimals."""

    variation = (rng.random() - 0.5) * 2 * MAX_VARIATION
    base_value = current_value * (1 + variation)
    rounded = round(base_value, 2)

    # Rounding small values can push them past the ±10% band; keep the exact offset then
    if abs(rounded - current_value) > abs(current_value) * MAX_VARIATION:
        return base_value

    return rounded


def synthesize_history(current_value: float, rng: RandomSource | None = None) -> list[HistoryPoint]:
    """
    Fabricate a plausible seven-point trend ending at the current value.

    Args:
        current_value: Value extracted from the report
        rng: Random source; a fresh unseeded ``random.Random`` when omitted

    Returns:
        Chronologically ordered points: six perturbed samples, then the current value
    """
    rng = rng or random.Random()

    history = [HistoryPoint(date=day, value=_perturb(current_value, rng)) for day in HISTORY_DATES]
    history.append(HistoryPoint(date=CURRENT_DATE, value=current_value))

    return history
