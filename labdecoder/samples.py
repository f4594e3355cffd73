"""Fixed sample dataset returned when nothing could be extracted from a report."""

import datetime

from labdecoder.models import HistoryPoint, ParameterRecord


def _history(values: list[float]) -> list[HistoryPoint]:
    """Pair literal values with the Jan-Jul 2024 month starts."""
    return [HistoryPoint(date=datetime.date(2024, month, 1), value=value) for month, value in enumerate(values, start=1)]


SAMPLE_RECORDS = (
    ParameterRecord(
        id="glucose",
        name="GLUCOSE",
        value=95,
        unit="mg/dL",
        reference_range="70-99 mg/dL",
        status="normal",
        category="Diabetes",
        history=_history([92, 89, 94, 91, 93, 96, 95]),
    ),
    ParameterRecord(
        id="cholesterol",
        name="TOTAL CHOLESTEROL",
        value=185,
        unit="mg/dL",
        reference_range="<200 mg/dL",
        status="normal",
        category="Lipid Panel",
        history=_history([190, 188, 192, 186, 183, 181, 185]),
    ),
    ParameterRecord(
        id="ldl",
        name="LDL CHOLESTEROL",
        value=110,
        unit="mg/dL",
        reference_range="<100 mg/dL",
        status="high",
        category="Lipid Panel",
        history=_history([115, 118, 112, 108, 105, 107, 110]),
    ),
)


def sample_records() -> list[ParameterRecord]:
    """Fresh copies of the sample dataset, so callers cannot alter the originals."""
    return [record.model_copy(deep=True) for record in SAMPLE_RECORDS]
