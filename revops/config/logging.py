"""Process-wide logging configuration."""

import logging
import sys

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def config_configure_logging(level: str = "INFO", format_string: str = DEFAULT_LOG_FORMAT) -> None:
    """Configure the root logger once at process startup.

    Existing root handlers are replaced so repeated calls stay idempotent.

    Args:
        level: Log level name, for example `INFO`.
        format_string: `logging.Formatter` format string.

    Returns:
        None: Configures logging as a side effect.

    Raises:
        ValueError: Raised when level is not a known logging level name.
    """

    numeric_level = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"unknown log level: {level}")

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(console_handler)
    root_logger.setLevel(numeric_level)
