from __future__ import annotations

"""
Delegating wrapper for the Docker Engine API client
"""

import typing as t
import docker
from lzd.delegate import AnswerHook, DelegatingClient, VoidHook
from lzd.logging import logger
from lzd.utils import ProxyObject
from .config import DockerClientSettings, settings as _settings

# `close` comes from `requests.Session` but releases the client's connection pool
DOCKER_EXTRA_OPERATIONS = ('close',)


class DelegatingDockerClient(
    DelegatingClient['docker.APIClient'],
    interface = docker.APIClient,
    include = DOCKER_EXTRA_OPERATIONS,
):
    """
    Simple delegate for `docker.APIClient`.

    Every API method of the installed `docker` SDK is forwarded to the
    delegate and routed through `on_answer` / `on_void_complete`, so
    subclasses can override the few methods they care about and keep
    working when the SDK gains new ones.

    The `docker.APIClient` methods carry no return annotation and are treated
    as returning a value: their result, even `None`, goes through
    `on_answer`. `close` is annotated `-> None` by `requests.Session` and
    calls `on_void_complete`.
    """


def build_api_client(
    settings: t.Optional[DockerClientSettings] = None,
    **overrides: t.Any,
) -> 'docker.APIClient':
    """
    Builds a `docker.APIClient` from the settings
    """
    settings = settings or _settings
    kwargs = settings.get_client_kwargs(**overrides)
    logger.bind(wrapper = 'APIClient', operation = 'build', kind = 'bind').debug(
        f'Connecting to {kwargs.get("base_url") or "the default docker socket"}'
    )
    return docker.APIClient(**kwargs)


def create_docker_client(
    settings: t.Optional[DockerClientSettings] = None,
    lazy: t.Optional[bool] = None,
    on_answer: t.Optional[AnswerHook] = None,
    on_void_complete: t.Optional[VoidHook] = None,
    wrapper_cls: t.Type[DelegatingDockerClient] = DelegatingDockerClient,
    **overrides: t.Any,
) -> DelegatingDockerClient:
    """
    Creates a delegating docker client.

    Args:
        settings: The settings to build the `docker.APIClient` from.
        lazy: If True, the `docker.APIClient` is only built on the first
            forwarded call. Defaults to `settings.lazy`.
        on_answer: Hook applied to every non-void result.
        on_void_complete: Hook called after every void operation.
        wrapper_cls: The `DelegatingDockerClient` subclass to instantiate.
        **overrides: Keyword arguments for `docker.APIClient`.
    """
    settings = settings or _settings
    lazy = settings.lazy if lazy is None else lazy
    if lazy:
        delegate = ProxyObject(obj_getter = build_api_client, obj_kwargs = {'settings': settings, **overrides})
    else:
        delegate = build_api_client(settings, **overrides)
    return wrapper_cls(delegate, on_answer = on_answer, on_void_complete = on_void_complete)
