from __future__ import annotations

"""Record formatters for the lzd loguru sinks."""

import typing as t
from .static import (
    DEFAULT_CLASS_COLOR,
    DEFAULT_FUNCTION_COLOR,
    FALLBACK_STATUS_COLOR,
    OPERATION_COLORS,
    RESET_COLOR,
)


class LoggerFormatter:

    max_extra_lengths: t.Dict[str, int] = {}

    @classmethod
    def get_extra_length(cls, key: str, value: str) -> int:
        """
        Returns the max length seen so far for an extra key
        """
        if key not in cls.max_extra_lengths:
            cls.max_extra_lengths[key] = len(key)
        if len(value) > cls.max_extra_lengths[key]:
            cls.max_extra_lengths[key] = len(value)
        return cls.max_extra_lengths[key]

    @classmethod
    def operation_formatter(cls, record: t.Dict[str, t.Any]) -> str:
        """
        Formats the prefix for records bound to a wrapper operation

        Bind with `logger.bind(wrapper='DelegatingDockerClient', operation='pause', kind='forward')`
        """
        _extra: t.Dict[str, t.Any] = record.get('extra', {})
        kind: str = _extra.get('kind') or 'forward'
        kind_color = OPERATION_COLORS.get(kind.lower(), FALLBACK_STATUS_COLOR)
        extra = kind_color + '{extra[kind]}</>:'
        if not _extra.get('kind'):
            record['extra']['kind'] = kind
        if _extra.get('wrapper'):
            wrapper_length = cls.get_extra_length('wrapper', _extra['wrapper'])
            extra += '<b><fg #006d77>{extra[wrapper]:<' + str(wrapper_length) + '}</></>:'
        extra += '<fg #83c5be>{extra[operation]}</>: '
        return extra

    @classmethod
    def default_formatter(cls, record: t.Dict[str, t.Any]) -> str:
        """
        Formats a record for the stdout sink.

        Records bound with an `operation` extra get the operation prefix,
        everything else gets the `module:function` prefix.
        """
        _extra = record.get('extra', {})
        if _extra.get('operation'):
            extra = cls.operation_formatter(record)
        elif _extra.get('module_name'):
            extra = DEFAULT_CLASS_COLOR + '{extra[module_name]}</>:' + DEFAULT_FUNCTION_COLOR + '{function}</>: '
        else:
            extra = DEFAULT_CLASS_COLOR + '{name}</>:' + DEFAULT_FUNCTION_COLOR + '{function}</>: '
        return "<level>{level: <8}</> <green>{time:YYYY-MM-DD HH:mm:ss.SSS}</>: " \
            + extra + "<level>{message}</level>" + RESET_COLOR + "\n"
