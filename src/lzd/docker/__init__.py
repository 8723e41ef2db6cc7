from __future__ import annotations

"""Delegating wrapper for the `docker` SDK's low-level API client."""

from .config import DockerClientSettings, get_docker_settings, settings
from .client import (
    DOCKER_EXTRA_OPERATIONS,
    DelegatingDockerClient,
    build_api_client,
    create_docker_client,
)

__all__ = [
    "DockerClientSettings",
    "get_docker_settings",
    "settings",
    "DOCKER_EXTRA_OPERATIONS",
    "DelegatingDockerClient",
    "build_api_client",
    "create_docker_client",
]
