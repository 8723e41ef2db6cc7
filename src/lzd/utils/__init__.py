from __future__ import annotations

"""Shared helpers for lzd."""

from .proxy import ProxyObject, ProxyObjT

__all__ = [
    "ProxyObject",
    "ProxyObjT",
]
