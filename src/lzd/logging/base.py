from __future__ import annotations

"""
Loguru Logger subclass and stdlib bridge used by lzd
"""

import logging
import typing as t

from loguru._logger import Logger as _Logger
from .static import LOGLEVEL_MAPPING, REVERSE_LOGLEVEL_MAPPING

if t.TYPE_CHECKING:
    from pydantic_settings import BaseSettings


def get_logging_level(level: t.Union[str, int]) -> str:
    """
    Returns the level name for a level name or number
    """
    if isinstance(level, str):
        level = level.upper()
        if level not in REVERSE_LOGLEVEL_MAPPING:
            raise ValueError(f'Invalid log level: {level}')
        return level
    return LOGLEVEL_MAPPING.get(level, 'INFO')


class Logger(_Logger):

    name: str = None
    settings: t.Optional['BaseSettings'] = None
    conditions: t.Dict[str, t.Tuple[t.Union[t.Callable[..., bool], bool], str]] = {}
    is_global: bool = False

    def add_if_condition(
        self,
        name: str,
        condition: t.Union[t.Callable[..., bool], bool],
        level: t.Optional[t.Union[str, int]] = 'INFO',
    ):
        """
        Adds a named condition that `log_if` checks before emitting
        """
        self.conditions[name] = (condition, get_logging_level(level))

    def remove_if_condition(self, name: str):
        """
        Removes a named condition
        """
        if name in self.conditions:
            del self.conditions[name]

    def _filter_if(
        self,
        name: str,
        message: t.Optional[t.Any] = None,
        level: t.Optional[t.Union[str, int]] = None,
    ) -> t.Tuple[bool, str]:
        """
        Resolves a named condition into (should_log, level)
        """
        if name in self.conditions:
            condition, clevel = self.conditions[name]
            if isinstance(condition, bool):
                return condition, clevel
            if callable(condition):
                return bool(condition(message)), clevel
            return False, clevel
        return True, get_logging_level(level or 'INFO')

    def log_if(
        self,
        name: str,
        message: t.Any,
        *args,
        level: t.Optional[t.Union[str, int]] = None,
        **kwargs,
    ):
        """
        Log ``message`` with severity ``level`` if the named condition is met.
        """
        condition, clevel = self._filter_if(name, message = message, level = level)
        if condition:
            return self.opt(depth = 1).log((level or clevel), message, *args, **kwargs)

    def opt(
        self,
        *,
        exception = None,
        record = False,
        lazy = False,
        colors = False,
        raw = False,
        capture = True,
        depth = 0,
        ansi = False,
    ) -> 'Logger':
        """
        Return a new logger with the specified options changed.
        """
        if ansi: colors = True
        args = self._options[-2:]
        new = type(self)(self._core, exception, depth, record, lazy, colors, raw, capture, *args)
        new.name, new.settings, new.is_global = self.name, self.settings, self.is_global
        return new

    def bind(__self, **kwargs: t.Any) -> 'Logger':  # noqa: N805
        """
        Bind attributes to the `extra` dict of each logged message record.
        """
        *options, extra = __self._options
        new = type(__self)(__self._core, *options, {**extra, **kwargs})
        new.name, new.settings, new.is_global = __self.name, __self.settings, __self.is_global
        return new


class NullLogger(logging.Logger):
    """Logger that swallows every call, used where output is muted."""

    def info(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def debug(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def warning(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def error(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def critical(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def exception(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def log(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def trace(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def success(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def log_if(self, *args: t.Any, **kwargs: t.Any) -> None: ...

    def bind(self, **kwargs: t.Any) -> 'NullLogger':
        return self


class InterceptHandler(logging.Handler):
    """Routes stdlib `logging` records into the lzd loguru logger."""

    loglevel_mapping = LOGLEVEL_MAPPING

    def emit(self, record: logging.LogRecord):
        from .main import logger
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = self.loglevel_mapping.get(record.levelno, 'DEBUG')
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        logger.opt(depth = depth, exception = record.exc_info).log(level, record.getMessage())
