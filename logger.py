"""Logging configuration for Vaultix.

Log records go to a dated file under the configured log directory and,
unless disabled, to the console.
"""

import logging
from datetime import date
from config import Config

LOGGER_NAME = "vaultix"


def setup_logging(config: Config, console: bool = True) -> logging.Logger:
    """Set up application logging.

    Args:
        config: Application configuration containing log settings.
        console: Also echo records to stderr. The CLI relies on this to
                 show command output.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)

    # Calling setup twice must not duplicate output
    logger.handlers.clear()

    file_handler = logging.FileHandler(
        config.log_dir / f"vaultix-{date.today().isoformat()}.log"
    )
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(threadName)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(config.log_level)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger."""
    return logging.getLogger(LOGGER_NAME)
