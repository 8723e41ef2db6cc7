from __future__ import annotations

"""Exceptions raised by lzd."""

import typing as t


class LzdError(Exception):
    """Base class for errors raised by lzd itself.

    Errors raised by a delegate or by a hook are never wrapped in this type.
    """


class InterfaceError(LzdError, TypeError):
    """Describes an interface that cannot be wrapped"""

    def __init__(self, msg: str, interface: t.Any = None) -> None:
        super().__init__(msg)
        self.interface = interface
        """The interface that was being introspected"""


class ArgumentSynthesisError(LzdError):
    """Describes a parameter for which no fake value could be produced.

    This is a test-infrastructure failure, distinct from a conformance
    failure.
    """

    def __init__(self, operation: str, parameter: str, annotation: t.Any, reason: t.Optional[str] = None) -> None:
        msg = f'Cannot synthesize a value for parameter `{parameter}` ({annotation!r}) of `{operation}`'
        if reason: msg += f': {reason}'
        super().__init__(msg)
        self.operation = operation
        """The display name of the operation"""

        self.parameter = parameter
        """The name of the parameter"""

        self.annotation = annotation
        """The type the value was requested for"""

        self.reason = reason
        """Why no value could be produced, if known"""


class ConformanceError(LzdError, AssertionError):
    """Describes a wrapper that does not forward an operation correctly"""

    def __init__(self, msg: str, operation: t.Optional[str] = None) -> None:
        super().__init__(f'[{operation}] {msg}' if operation else msg)
        self.operation = operation
        """The display name of the failing operation, if any"""
