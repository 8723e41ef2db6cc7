from __future__ import annotations

"""Capability introspection over wrapped interfaces."""

from .operations import (
    Operation,
    Parameter,
    ParameterKind,
    build_operation,
    discover_operations,
    render_annotation,
)

__all__ = [
    "Operation",
    "Parameter",
    "ParameterKind",
    "build_operation",
    "discover_operations",
    "render_annotation",
]
