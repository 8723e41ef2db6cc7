from __future__ import annotations

"""Public facade for lzd logging.

Wraps loguru with package defaults, a coloured formatter for records bound
to wrapper operations, and a bridge for stdlib `logging` records.
"""

from .static import (
    DEFAULT_STATUS_COLORS,
    OPERATION_COLORS,
    LOGLEVEL_MAPPING,
    REVERSE_LOGLEVEL_MAPPING,
)
from .base import Logger, NullLogger, InterceptHandler, get_logging_level
from .main import (
    create_default_logger,
    change_logger_level,
    get_logger,
    get_settings_level,
    default_logger,
    null_logger,
    logger,
)

__all__ = [
    "DEFAULT_STATUS_COLORS",
    "OPERATION_COLORS",
    "LOGLEVEL_MAPPING",
    "REVERSE_LOGLEVEL_MAPPING",
    "Logger",
    "NullLogger",
    "InterceptHandler",
    "get_logging_level",
    "create_default_logger",
    "change_logger_level",
    "get_logger",
    "get_settings_level",
    "default_logger",
    "null_logger",
    "logger",
]
