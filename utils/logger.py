"""
Logging setup.

stdout carries the MCP protocol, so all diagnostics go to stderr.
"""

import logging
import sys


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging on stderr.

    Args:
        level: Log level name (DEBUG, INFO, WARNING...)
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(level=log_level, format=LOG_FORMAT, stream=sys.stderr)

    # The transport logs every request at INFO
    if log_level > logging.DEBUG:
        logging.getLogger("elastic_transport").setLevel(logging.WARNING)
