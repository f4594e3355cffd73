"""Status classification of lab values against explicit or default reference ranges."""

import logging

from labdecoder.models import RangeThreshold, Status
from labdecoder.reference import critical_ceiling, default_range

logger = logging.getLogger(__name__)


def compare_to_range(value: float, threshold: RangeThreshold) -> Status:
    """Place a value below, inside or above a range. Missing bounds are unbounded."""

    # Below the lower bound
    if threshold.min is not None and value < threshold.min:
        return "low"

    # Above the upper bound
    if threshold.max is not None and value > threshold.max:
        return "high"

    return "normal"


def classify_status(
    parameter_name: str,
    value: float,
    min_range: float | None = None,
    max_range: float | None = None,
) -> Status:
    """
    Decide the status of a lab value.

    Decision order:
    1. An explicit range (both bounds present) is authoritative and skips the
       critical ceiling entirely.
    2. Without an explicit range, a value above the parameter's critical
       ceiling is critical.
    3. Otherwise the default range from the knowledge base applies; parameters
       without one are normal.

    Args:
        parameter_name: Normalized parameter name
        value: Numeric value
        min_range: Lower bound parsed from the report text, if any
        max_range: Upper bound parsed from the report text, if any

    Returns:
        One of "normal", "high", "low", "critical"
    """

    # Explicit range from the report text wins
    if min_range is not None and max_range is not None:
        return compare_to_range(value, RangeThreshold(min=min_range, max=max_range))

    # Critical ceiling only applies when no explicit range was found
    ceiling = critical_ceiling(parameter_name)
    if ceiling is not None and value > ceiling:
        logger.info(f"{parameter_name}={value} exceeds critical ceiling {ceiling}")
        return "critical"

    threshold = default_range(parameter_name)
    if threshold is None:
        return "normal"

    return compare_to_range(value, threshold)
