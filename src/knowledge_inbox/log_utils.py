"""Logging configuration.

Library modules only create loggers with ``logging.getLogger(__name__)``;
applications (the CLI and the HTTP server) call ``configure_logging`` once.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are chatty at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "LiteLLM", "litellm", "chromadb")


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure root logging with a single stream handler.

    Args:
        level: Level for the root logger (name or number).
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
