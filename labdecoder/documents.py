"""Document intake and the external text collaborators (OCR and PDF text)."""

import asyncio
import io
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional, Protocol

import pytesseract
from PIL import Image, ImageFilter, ImageOps

from labdecoder.exceptions import UnsupportedFileError

if TYPE_CHECKING:
    from labdecoder.config import DecoderConfig

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
ALLOWED_CONTENT_TYPES = frozenset({
    PDF_CONTENT_TYPE,
    "image/png",
    "image/jpeg",
    "image/gif",
    "image/bmp",
    "image/webp",
})
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024

ProgressCallback = Callable[[float], None]


@dataclass
class LabDocument:
    """An uploaded lab report: file name, MIME type and raw bytes."""
    name: str
    content_type: str
    data: bytes

    @classmethod
    def from_path(cls, path: Path | str, content_type: Optional[str] = None) -> 'LabDocument':
        """Read a file from disk, guessing the MIME type from its name when not given."""
        path = Path(path)
        if content_type is None:
            content_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            content_type=content_type or "application/octet-stream",
            data=path.read_bytes(),
        )

    @property
    def is_pdf(self) -> bool:
        return self.content_type == PDF_CONTENT_TYPE

    @property
    def size(self) -> int:
        return len(self.data)


def check_upload(document: LabDocument, config: Optional['DecoderConfig'] = None) -> None:
    """Reject documents outside the MIME allow-list or above the size ceiling.

    Args:
        document: Uploaded document
        config: Supplies ``max_upload_bytes``; the 10 MiB default applies when omitted

    Raises:
        UnsupportedFileError: when the document must not reach the pipeline
    """
    max_bytes = config.max_upload_bytes if config is not None else DEFAULT_MAX_UPLOAD_BYTES

    # Type allow-list
    if document.content_type not in ALLOWED_CONTENT_TYPES:
        raise UnsupportedFileError(f"{document.name}: file type '{document.content_type}' is not supported")

    # Size ceiling
    if document.size > max_bytes:
        raise UnsupportedFileError(f"{document.name}: file is larger than {max_bytes} bytes")


# ========================================
# Collaborator protocols
# ========================================


class TextRecognizer(Protocol):
    """Image-to-text collaborator. Reports progress as a fraction in [0, 1]."""

    async def recognize(self, document: LabDocument, on_progress: Optional[ProgressCallback] = None) -> str: ...


class DocumentTextSource(Protocol):
    """Text extraction collaborator for PDF documents."""

    async def extract_text(self, document: LabDocument) -> str: ...


# ========================================
# Tesseract OCR
# ========================================


OCR_MIN_WIDTH = 1000
OCR_MAX_WIDTH = 2000


def _fit_width(image: Image.Image, width: int) -> Image.Image:
    """Resize to the given width, keeping the aspect ratio."""
    height = max(1, round(image.height * width / image.width))
    return image.resize((width, height), Image.Resampling.LANCZOS)


def preprocess_page_image(image: Image.Image) -> Image.Image:
    """
    Prepare a scanned lab report for Tesseract.

    The page is upright-rotated, converted to grayscale, resized into the
    [OCR_MIN_WIDTH, OCR_MAX_WIDTH] width band, contrast-stretched and sharpened.

    Args:
        image: Page image in any Pillow mode (EXIF orientation is honoured)

    Returns:
        Grayscale image ready for recognition
    """

    # Phone photos carry their rotation in EXIF
    page = ImageOps.grayscale(ImageOps.exif_transpose(image))

    if page.width < OCR_MIN_WIDTH:
        page = _fit_width(page, OCR_MIN_WIDTH)
    elif page.width > OCR_MAX_WIDTH:
        page = _fit_width(page, OCR_MAX_WIDTH)

    # Stretch the histogram, ignoring the 1% extremes (dust, glare)
    page = ImageOps.autocontrast(page, cutoff=1)

    return page.filter(ImageFilter.SHARPEN)


class TesseractRecognizer:
    """OCR collaborator backed by the Tesseract engine through pytesseract.

    Tesseract gives no intermediate progress, so only 0.0 and 1.0 are reported.
    Recognition errors propagate unchanged.

    ``tesseract_cmd`` is process-wide in pytesseract; it is applied once here,
    on the constructing thread, never from the recognition worker threads.
    """

    def __init__(self, language: str = "eng", tesseract_cmd: Optional[str] = None):
        self.language = language
        self.tesseract_cmd = tesseract_cmd

        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
            logger.info(f"Using Tesseract binary at {tesseract_cmd}")

    def _recognize_sync(self, data: bytes) -> str:
        with Image.open(io.BytesIO(data)) as image:
            prepared = preprocess_page_image(image)

        return pytesseract.image_to_string(prepared, lang=self.language)

    async def recognize(self, document: LabDocument, on_progress: Optional[ProgressCallback] = None) -> str:
        logger.info(f"Recognizing text in {document.name} ({document.size} bytes, lang={self.language})")

        if on_progress:
            on_progress(0.0)

        text = await asyncio.to_thread(self._recognize_sync, document.data)

        if on_progress:
            on_progress(1.0)

        logger.info(f"Recognized {len(text)} characters from {document.name}")
        return text


# ========================================
# PDF text stand-in
# ========================================

SIMULATED_PDF_TEXT = """
    COMPREHENSIVE METABOLIC PANEL
    Patient: John Doe
    Date: 2024-07-02

    GLUCOSE: 95 mg/dL (Reference Range: 70-99 mg/dL)
    CHOLESTEROL, TOTAL: 185 mg/dL (Reference Range: <200 mg/dL)
    HDL CHOLESTEROL: 55 mg/dL (Reference Range: >40 mg/dL)
    LDL CHOLESTEROL: 110 mg/dL (Reference Range: <100 mg/dL)
    TRIGLYCERIDES: 120 mg/dL (Reference Range: <150 mg/dL)
    HEMOGLOBIN A1C: 5.4% (Reference Range: <5.7%)
    CREATININE: 1.0 mg/dL (Reference Range: 0.7-1.3 mg/dL)
    BUN: 15 mg/dL (Reference Range: 7-20 mg/dL)
    SODIUM: 140 mEq/L (Reference Range: 136-145 mEq/L)
    POTASSIUM: 4.2 mEq/L (Reference Range: 3.5-5.0 mEq/L)
    VITAMIN D: 32 ng/mL (Reference Range: 30-100 ng/mL)
    TSH: 2.1 mIU/L (Reference Range: 0.4-4.0 mIU/L)
"""


class SimulatedPdfTextSource:
    """Stand-in for PDF text extraction: returns a fixed metabolic panel for every PDF.

    A real deployment replaces this with genuine document text extraction.
    """

    async def extract_text(self, document: LabDocument) -> str:
        logger.info(f"Using simulated text for PDF {document.name}")
        return SIMULATED_PDF_TEXT
