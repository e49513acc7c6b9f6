"""Logging setup shared by the API and the web frontend."""
import logging

from finance_ledger.config import Settings

LOGGER_NAME = "finance_ledger"


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure the application logger with a console handler.

    Safe to call more than once; existing handlers are replaced.

    Args:
        settings: Application settings containing the log level.

    Returns:
        The configured ``finance_ledger`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level)

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setLevel(settings.log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
