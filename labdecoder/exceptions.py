"""Custom exceptions for the lab report decoder."""


class ConfigurationError(Exception):
    """Raised when environment configuration is invalid."""

    pass


class UnsupportedFileError(ValueError):
    """Raised when an uploaded document is rejected by type or size."""

    pass
