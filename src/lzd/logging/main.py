from __future__ import annotations

"""Factory helpers for configuring lzd logging."""

import atexit as _atexit
import os
import sys
import threading
import typing as t

from loguru._logger import Core as _Core
from lzd.configs import settings as _settings

from .base import InterceptHandler, Logger, NullLogger, get_logging_level
from .formatters import LoggerFormatter
from .static import REVERSE_LOGLEVEL_MAPPING

if t.TYPE_CHECKING:
    from pydantic_settings import BaseSettings
    from lzd.configs import LzdSettings
    from logging import Handler as LoggingHandler


_lock = threading.Lock()
_logger_contexts: t.Dict[str, Logger] = {}
_ENQUEUE = os.getenv('LZD_LOGURU_ENQUEUE', '0') == '1'

__all__ = [
    "create_global_logger",
    "create_default_logger",
    "change_logger_level",
    "get_logger",
    "get_settings_level",
    "logger",
    "default_logger",
    "null_logger",
]


def create_global_logger(
    name: str = "lzd",
    level: t.Union[str, int] = "INFO",
    format: t.Optional[t.Callable[[t.Dict[str, t.Any]], str]] = None,
    filter: t.Optional[t.Callable[[t.Dict[str, t.Any]], bool]] = None,
    handlers: t.Optional[t.Sequence['LoggingHandler']] = None,
    settings: t.Optional['BaseSettings'] = None,
    **kwargs: t.Any,
) -> Logger:
    """Instantiate the shared loguru logger used across lzd.

    Args:
        name: Registry key for the logger instance.
        level: Minimum level of the stdout sink.
        format: Optional callable used to format log records.
        filter: Optional predicate used to filter records.
        handlers: stdlib :mod:`logging` handlers bridged into loguru.
        settings: Optional settings object attached to the logger.
        **kwargs: Forwarded to :meth:`loguru.Logger.add`.

    Returns:
        Logger: The configured logger.
    """
    _logger = Logger(
        core = _Core(),
        exception = None,
        depth = 0,
        record = False,
        lazy = False,
        colors = False,
        raw = False,
        capture = True,
        patchers = [],
        extra = {},
    )
    _logger.name = name
    _logger.is_global = True
    _atexit.register(_logger.remove)

    import logging
    logging.basicConfig(handlers = handlers or [InterceptHandler()], level = 0)

    _logger.add(
        sys.stdout,
        enqueue = _ENQUEUE,
        backtrace = True,
        colorize = True,
        level = get_logging_level(level),
        format = format if format is not None else LoggerFormatter.default_formatter,
        filter = filter,
        **kwargs,
    )
    if settings is not None: _logger.settings = settings
    _logger_contexts[name] = _logger
    return _logger


def create_default_logger(
    name: t.Optional[str] = None,
    level: t.Union[str, int] = "INFO",
    settings: t.Optional['BaseSettings'] = None,
    **kwargs: t.Any,
) -> Logger:
    """Return a named logger that shares the global logger's sinks.

    Args:
        name: Optional logger namespace. Only the root component of a dotted
            name is used, so `lzd.delegate.base` maps to `lzd`.
        level: Level used when the global logger still has to be created.
        settings: Optional settings object attached to the returned logger.
        **kwargs: Forwarded to :func:`create_global_logger`.
    """
    name = name.split('.')[0] if name else 'lzd'
    if name in _logger_contexts:
        return _logger_contexts[name]

    with _lock:
        if 'lzd' not in _logger_contexts:
            create_global_logger(name = 'lzd', level = level, **kwargs)
        if name == 'lzd':
            _logger = _logger_contexts['lzd']
            if settings is not None: _logger.settings = settings
            return _logger

        _logger = _logger_contexts['lzd']
        *options, extra = _logger._options
        new_logger = Logger(_logger._core, *options, {**extra, 'module_name': name})
        new_logger.name = name
        new_logger.settings = settings or _logger.settings
        _logger_contexts[name] = new_logger
        return new_logger


def change_logger_level(
    level: t.Union[str, int] = "INFO",
    verbose: bool = False,
) -> None:
    """Update the minimum level of every sink on the shared core."""
    global logger_level
    level = get_logging_level(level)
    if level == logger_level: return
    if verbose: logger.info(f"Changing logger level from {logger_level} -> {level}")
    logger_level = level
    for handler in logger._core.handlers.values():
        handler._levelno = REVERSE_LOGLEVEL_MAPPING[level]
    logger._core.min_level = float(REVERSE_LOGLEVEL_MAPPING[level])


def get_settings_level(settings: 'LzdSettings') -> str:
    """Return the level configured by `debug_enabled` / `log_level`."""
    if settings.debug_enabled: return 'DEBUG'
    return get_logging_level(settings.log_level or 'INFO')


logger_level: str = get_settings_level(_settings)

get_logger = create_default_logger
logger = create_default_logger('lzd', level = logger_level, settings = _settings)
default_logger = logger
null_logger = NullLogger(name = 'null_logger')
