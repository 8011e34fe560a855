"""Diagnostics logging to stderr.

Level comes from LOG_LEVEL (default INFO). INFO messages are printed bare so the
run summary reads like plain tool output; warnings and errors carry their level.
"""
import logging
import os
import sys


class _PlainFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        msg = record.getMessage()
        if record.levelno >= logging.WARNING:
            return f"{record.levelname.lower()}: {msg}"
        return msg


def configure_logging() -> logging.Logger:
    logger = logging.getLogger("poi_clean")
    logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    for h in list(logger.handlers):
        logger.removeHandler(h)
    # bind to the current stderr so repeated runs in one process follow redirection
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_PlainFormatter())
    logger.addHandler(handler)
    return logger
