"""Extraction pipeline: text -> classified parameter records, and the async document entry point."""

import logging
from typing import Optional

from labdecoder.classification import classify_status
from labdecoder.documents import (
    DocumentTextSource,
    LabDocument,
    ProgressCallback,
    SimulatedPdfTextSource,
    TesseractRecognizer,
    TextRecognizer,
)
from labdecoder.extraction import extract_raw_matches
from labdecoder.history import RandomSource, synthesize_history
from labdecoder.models import ParameterRecord, RawMatch
from labdecoder.reference import category_of, reference_range_text
from labdecoder.samples import sample_records
from labdecoder.utils import format_number

logger = logging.getLogger(__name__)


def _display_range(raw: RawMatch) -> str:
    """Explicit '<min>-<max> <unit>' when the text had one, else the knowledge-base text."""
    if raw.has_explicit_range:
        return f"{format_number(raw.min_range)}-{format_number(raw.max_range)} {raw.unit}"
    return reference_range_text(raw.name, raw.unit)


def build_record(raw: RawMatch, index: int, rng: Optional[RandomSource] = None) -> ParameterRecord:
    """Classify one raw match and assemble its record."""
    return ParameterRecord(
        id=f"param_{index}",
        name=raw.name,
        value=raw.value,
        unit=raw.unit,
        reference_range=_display_range(raw),
        status=classify_status(raw.name, raw.value, raw.min_range, raw.max_range),
        category=category_of(raw.name),
        history=synthesize_history(raw.value, rng),
    )


def parse_lab_text(text: str, rng: Optional[RandomSource] = None) -> list[ParameterRecord]:
    """
    Turn raw report text into classified parameter records.

    Args:
        text: Text produced by OCR or document text extraction
        rng: Random source for the synthetic history

    Returns:
        Records in extraction order, or the fixed sample dataset when nothing matched
    """

    raw_matches = extract_raw_matches(text)

    # Nothing recognizable: fall back to the sample dataset
    if not raw_matches:
        logger.warning("No lab parameters found in text, returning sample data")
        return sample_records()

    records = [build_record(raw, index, rng) for index, raw in enumerate(raw_matches)]

    abnormal = sum(1 for record in records if record.status != "normal")
    logger.info(f"Classified {len(records)} parameters ({abnormal} outside normal)")

    return records


async def process_document(
    document: LabDocument,
    on_progress: Optional[ProgressCallback] = None,
    *,
    recognizer: Optional[TextRecognizer] = None,
    pdf_source: Optional[DocumentTextSource] = None,
    rng: Optional[RandomSource] = None,
) -> list[ParameterRecord]:
    """
    Obtain text for an uploaded document and run it through the pipeline.

    PDFs go to the document text source; everything else goes to OCR. Progress
    is reported in percent (0-100): PDFs report 50 then 100, OCR maps its
    fraction onto 50-100. Collaborator errors propagate unchanged.

    Args:
        document: Uploaded document
        on_progress: Callback receiving progress percentages
        recognizer: OCR collaborator (Tesseract by default)
        pdf_source: PDF text collaborator (simulated text by default)
        rng: Random source for the synthetic history

    Returns:
        Classified parameter records
    """

    def report(percent: float) -> None:
        if on_progress:
            on_progress(percent)

    if document.is_pdf:
        pdf_source = pdf_source or SimulatedPdfTextSource()
        report(50)
        text = await pdf_source.extract_text(document)
        report(100)
    else:
        recognizer = recognizer or TesseractRecognizer()
        text = await recognizer.recognize(document, on_progress=lambda fraction: report(50 + fraction * 50))

    logger.info(f"Processing {document.name}: {len(text)} characters of text")
    return parse_lab_text(text, rng)
