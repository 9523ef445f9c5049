"""
Logging setup for the atm_ledger logger hierarchy.

Modules log through logging.getLogger(__name__), so everything
under the package shares the handler installed here.
"""

import logging

LOGGER_NAME = "atm_ledger"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger with a single console handler.

    Existing handlers are removed first, so calling this more
    than once (app reloads, tests) never duplicates output.
    """
    logger = logging.getLogger(LOGGER_NAME)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    return logger


def mask_card(card: int) -> str:
    """Render a card number for logs, keeping only the last four digits."""
    digits = str(card)
    return f"****{digits[-4:]}"
