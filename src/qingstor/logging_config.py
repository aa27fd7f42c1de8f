from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from qingstor.config.qingstor_config import Config


SDK_LOGGER_NAME = "qingstor"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s message=%(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def resolve_level(level: str | None) -> int:
    """Map a level name such as Config.log_level to a logging constant, INFO when unknown."""
    resolved = getattr(logging, (level or "INFO").strip().upper(), None)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(config: Config) -> logging.Logger:
    """
    Route the SDK's own log records to stdout at config.log_level.
    Only the `qingstor` logger is touched; the application's root logger is left alone.
    Calling it again replaces the handler instead of adding a second one.
    """
    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    for handler in [h for h in sdk_logger.handlers if getattr(h, "_qingstor_sdk", False)]:
        sdk_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler._qingstor_sdk = True
    sdk_logger.addHandler(handler)
    sdk_logger.setLevel(resolve_level(config.log_level))
    return sdk_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
