"""
Logging setup for the CLI.
"""
import logging

LOG_FORMAT = '%(name)s - %(levelname)s - %(message)s'


def configure_logging(level: int = logging.WARNING) -> None:
    """Send log records to stderr. Does nothing if logging is already configured."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
