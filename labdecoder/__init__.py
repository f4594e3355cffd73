"""Lab Decoder - Clinical lab value extraction and classification from report text."""

from labdecoder.classification import classify_status, compare_to_range
from labdecoder.config import DecoderConfig
from labdecoder.documents import (
    LabDocument,
    SimulatedPdfTextSource,
    TesseractRecognizer,
    check_upload,
)
from labdecoder.exceptions import ConfigurationError, UnsupportedFileError
from labdecoder.extraction import extract_raw_matches, normalize_parameter_name
from labdecoder.history import synthesize_history
from labdecoder.models import HistoryPoint, ParameterRecord, RangeThreshold, RawMatch, Status
from labdecoder.pipeline import parse_lab_text, process_document
from labdecoder.reference import (
    category_of,
    critical_ceiling,
    default_range,
    reference_range_text,
)
from labdecoder.reporting import (
    categories,
    filter_and_sort,
    history_to_dataframe,
    records_to_dataframe,
    summarize_trend,
)
from labdecoder.samples import sample_records
from labdecoder.utils import load_dotenv_with_env, setup_logging

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Exceptions
    "ConfigurationError",
    "UnsupportedFileError",
    # Config
    "DecoderConfig",
    # Models
    "HistoryPoint",
    "ParameterRecord",
    "RangeThreshold",
    "RawMatch",
    "Status",
    # Knowledge base
    "category_of",
    "critical_ceiling",
    "default_range",
    "reference_range_text",
    # Extraction and classification
    "extract_raw_matches",
    "normalize_parameter_name",
    "classify_status",
    "compare_to_range",
    "synthesize_history",
    "sample_records",
    # Pipeline
    "parse_lab_text",
    "process_document",
    # Documents
    "LabDocument",
    "SimulatedPdfTextSource",
    "TesseractRecognizer",
    "check_upload",
    # Reporting
    "records_to_dataframe",
    "history_to_dataframe",
    "filter_and_sort",
    "categories",
    "summarize_trend",
    # Utils
    "load_dotenv_with_env",
    "setup_logging",
]
