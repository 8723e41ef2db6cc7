from __future__ import annotations

"""Delegating client wrappers with answer / void-completion hooks.

The Docker binding lives in `lzd.docker` and the conformance harness in
`lzd.testing`.
"""

from .version import VERSION
from .errors import ArgumentSynthesisError, ConformanceError, InterfaceError, LzdError
from .interface import Operation, Parameter, discover_operations
from .delegate import DelegatingClient

__version__ = VERSION

__all__ = [
    "VERSION",
    "ArgumentSynthesisError",
    "ConformanceError",
    "InterfaceError",
    "LzdError",
    "Operation",
    "Parameter",
    "discover_operations",
    "DelegatingClient",
]
