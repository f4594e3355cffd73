"""Configuration management for the lab report decoder."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from labdecoder.documents import DEFAULT_MAX_UPLOAD_BYTES, TesseractRecognizer
from labdecoder.exceptions import ConfigurationError
from labdecoder.utils import setup_logging

logger = logging.getLogger(__name__)


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} ('{raw}') is not a valid integer") from e


@dataclass
class DecoderConfig:
    """Configuration for document intake and text recognition."""
    ocr_language: str = "eng"
    tesseract_cmd: Optional[str] = None
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    log_dir: Path = Path("./logs")

    @classmethod
    def from_env(cls) -> 'DecoderConfig':
        """Load configuration from environment variables."""
        ocr_language = os.getenv("OCR_LANGUAGE", "eng").strip() or "eng"
        tesseract_cmd = os.getenv("TESSERACT_CMD") or None
        max_upload_bytes = _int_from_env("MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES)
        log_dir = os.getenv("LOG_DIR", "./logs")

        # Validate
        if max_upload_bytes <= 0:
            raise ConfigurationError(f"MAX_UPLOAD_BYTES must be positive, got {max_upload_bytes}")
        if tesseract_cmd and not Path(tesseract_cmd).exists():
            logger.warning(f"TESSERACT_CMD ('{tesseract_cmd}') does not exist; recognition will fail")

        return cls(
            ocr_language=ocr_language,
            tesseract_cmd=tesseract_cmd,
            max_upload_bytes=max_upload_bytes,
            log_dir=Path(log_dir),
        )

    def build_recognizer(self) -> TesseractRecognizer:
        """OCR collaborator configured from this config."""
        return TesseractRecognizer(language=self.ocr_language, tesseract_cmd=self.tesseract_cmd)

    def configure_logging(self, clear_logs: bool = False, level: int = logging.INFO) -> logging.Logger:
        """Send package logs to info.log/error.log under log_dir and to the console."""
        return setup_logging(self.log_dir, clear_logs=clear_logs, level=level)
