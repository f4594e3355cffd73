"""Shared utility functions for the lab report decoder."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def load_dotenv_with_env() -> str:
    """Load .env.{name} where name comes from LABDECODER_ENV (default: "local").

    Falls back to a plain .env file when the named file does not exist.

    Returns:
        The environment name.
    """
    env_name = os.getenv("LABDECODER_ENV", "local")

    # Load .env.{name} file
    env_file = Path(f".env.{env_name}")
    if env_file.exists():
        load_dotenv(env_file, override=True)
        logger.info(f"Loaded environment: .env.{env_name}")
    else:
        # Warn when env file is not found
        logger.warning(f".env.{env_name} not found, falling back to .env")
        load_dotenv()

    return env_name


def format_number(value: float) -> str:
    """Render a number in its shortest form: 70.0 -> '70', 3.5 -> '3.5'."""
    return str(int(value)) if float(value).is_integer() else str(value)


PACKAGE_LOGGER = "labdecoder"
LOG_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def _owned_handlers(package_logger: logging.Logger) -> list[logging.Handler]:
    """Handlers installed by an earlier setup_logging call."""
    return [h for h in package_logger.handlers if getattr(h, "labdecoder_owned", False)]


def setup_logging(log_dir: Path, clear_logs: bool = False, level: int = logging.INFO) -> logging.Logger:
    """
    Route the package's log records to info/error files and the console.

    Handlers go on the ``labdecoder`` logger; the root logger is left
    untouched. Calling again swaps out only the handlers a previous call
    installed.

    Args:
        log_dir: Directory for info.log and error.log (created if missing)
        clear_logs: Truncate both files before attaching
        level: Threshold for the package logger, info file and console

    Returns:
        The package logger
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_paths = {logging.INFO: log_dir / "info.log", logging.ERROR: log_dir / "error.log"}

    if clear_logs:
        for path in log_paths.values():
            path.write_text("", encoding="utf-8")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    for handler in _owned_handlers(package_logger):
        package_logger.removeHandler(handler)
        handler.close()

    file_formatter = logging.Formatter(LOG_FILE_FORMAT)
    handlers: list[logging.Handler] = []
    for file_level, path in log_paths.items():
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setLevel(max(file_level, level))
        file_handler.setFormatter(file_formatter)
        handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_CONSOLE_FORMAT))
    handlers.append(console_handler)

    for handler in handlers:
        handler.labdecoder_owned = True
        package_logger.addHandler(handler)

    logger.debug(f"Logging to {log_dir} at level {logging.getLevelName(level)}")
    return package_logger
