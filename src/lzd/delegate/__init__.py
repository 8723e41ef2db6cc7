from __future__ import annotations

"""Delegating wrappers with answer / void-completion hooks."""

from .base import (
    AnswerHook,
    DelegatingClient,
    DelegateT,
    RESERVED_NAMES,
    VoidHook,
    build_forwarder,
)

__all__ = [
    "AnswerHook",
    "DelegatingClient",
    "DelegateT",
    "RESERVED_NAMES",
    "VoidHook",
    "build_forwarder",
]
