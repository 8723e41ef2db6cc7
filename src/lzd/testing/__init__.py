from __future__ import annotations

"""Conformance harness for delegating clients.

`lzd.testing.pytest` holds the pytest parametrisation helpers and is
imported separately, since pytest is only a test dependency.
"""

from .fakes import FakeValueFactory, default_factory, is_mockable
from .harness import (
    ConformanceCase,
    check_operation,
    check_wrapper_conformance,
    discover_cases,
    missing_operations,
    wrapper_cases,
)

__all__ = [
    "FakeValueFactory",
    "default_factory",
    "is_mockable",
    "ConformanceCase",
    "check_operation",
    "check_wrapper_conformance",
    "discover_cases",
    "missing_operations",
    "wrapper_cases",
]
