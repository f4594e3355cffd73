"""Static reference knowledge: display ranges, categories, numeric ranges and critical ceilings.

All tables are keyed by the exact normalized parameter name produced by the
extractor. Names that do not match a key verbatim (e.g. ``LDL`` instead of
``LDL CHOLESTEROL``) fall through to the unrecognized defaults.
"""

from types import MappingProxyType

from labdecoder.models import RangeThreshold

UNRECOGNIZED_RANGE_TEXT = "Normal"
UNRECOGNIZED_CATEGORY = "General"

REFERENCE_RANGE_TEXT = MappingProxyType({
    "GLUCOSE": "70-99 mg/dL",
    "CHOLESTEROL": "<200 mg/dL",
    "HDL CHOLESTEROL": ">40 mg/dL",
    "LDL CHOLESTEROL": "<100 mg/dL",
    "TRIGLYCERIDES": "<150 mg/dL",
    "HEMOGLOBIN A1C": "<5.7%",
    "CREATININE": "0.7-1.3 mg/dL",
    "BUN": "7-20 mg/dL",
    "SODIUM": "136-145 mEq/L",
    "POTASSIUM": "3.5-5.0 mEq/L",
    "VITAMIN D": "30-100 ng/mL",
    "TSH": "0.4-4.0 mIU/L",
})

CATEGORIES = MappingProxyType({
    "GLUCOSE": "Diabetes",
    "HEMOGLOBIN A1C": "Diabetes",
    "CHOLESTEROL": "Lipid Panel",
    "HDL CHOLESTEROL": "Lipid Panel",
    "LDL CHOLESTEROL": "Lipid Panel",
    "TRIGLYCERIDES": "Lipid Panel",
    "CREATININE": "Kidney Function",
    "BUN": "Kidney Function",
    "SODIUM": "Electrolytes",
    "POTASSIUM": "Electrolytes",
    "VITAMIN D": "Vitamins",
    "TSH": "Thyroid Function",
})

# HEMOGLOBIN A1C has display text and a category but no numeric default range
DEFAULT_RANGES = MappingProxyType({
    "GLUCOSE": RangeThreshold(min=70, max=99),
    "CHOLESTEROL": RangeThreshold(min=0, max=200),
    "HDL CHOLESTEROL": RangeThreshold(min=40, max=100),
    "LDL CHOLESTEROL": RangeThreshold(min=0, max=100),
    "TRIGLYCERIDES": RangeThreshold(min=0, max=150),
    "CREATININE": RangeThreshold(min=0.7, max=1.3),
    "BUN": RangeThreshold(min=7, max=20),
    "SODIUM": RangeThreshold(min=136, max=145),
    "POTASSIUM": RangeThreshold(min=3.5, max=5.0),
    "VITAMIN D": RangeThreshold(min=30, max=100),
    "TSH": RangeThreshold(min=0.4, max=4.0),
})

CRITICAL_CEILINGS = MappingProxyType({
    "GLUCOSE": 400.0,
    "CHOLESTEROL": 300.0,
    "LDL CHOLESTEROL": 190.0,
    "TRIGLYCERIDES": 500.0,
    "CREATININE": 3.0,
    "BUN": 50.0,
})


def reference_range_text(parameter_name: str, unit: str = "") -> str:
    """Display reference range for a parameter, or ``"Normal"`` when unknown.

    The unit is accepted for callers that have one but does not affect the lookup.
    """
    return REFERENCE_RANGE_TEXT.get(parameter_name, UNRECOGNIZED_RANGE_TEXT)


def category_of(parameter_name: str) -> str:
    """Panel category of a parameter, or ``"General"`` when unknown."""
    return CATEGORIES.get(parameter_name, UNRECOGNIZED_CATEGORY)


def default_range(parameter_name: str) -> RangeThreshold | None:
    return DEFAULT_RANGES.get(parameter_name)


def critical_ceiling(parameter_name: str) -> float | None:
    return CRITICAL_CEILINGS.get(parameter_name)
