"""Pydantic models for extracted lab parameters."""

import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Status = Literal["normal", "high", "low", "critical"]


class RangeThreshold(BaseModel):
    """Numeric reference interval. A missing side is unbounded (e.g. '<200' has only max)."""

    model_config = ConfigDict(frozen=True)

    min: float | None = None
    max: float | None = None


class RawMatch(BaseModel):
    """Candidate lab value as matched in free text, before classification."""

    name: str = Field(description="Normalized parameter name (uppercased, trimmed)")
    value: float
    unit: str = ""
    min_range: float | None = Field(default=None, description="Lower bound of an explicit range found in the text")
    max_range: float | None = Field(default=None, description="Upper bound of an explicit range found in the text")

    @property
    def has_explicit_range(self) -> bool:
        return self.min_range is not None and self.max_range is not None


class HistoryPoint(BaseModel):
    """Single (date, value) sample of a parameter's trend."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    value: float


class ParameterRecord(BaseModel):
    """Fully classified lab parameter handed back to the caller.

    Field names are snake_case in Python; ``model_dump(by_alias=True)`` produces
    the camelCase keys (``referenceRange``) expected by UI consumers.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    value: float
    unit: str
    reference_range: str
    status: Status
    category: str
    history: list[HistoryPoint] = Field(default_factory=list)
