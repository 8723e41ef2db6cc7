from __future__ import annotations

"""
Docker Client Configuration
"""

import typing as t
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from lzd.utils import ProxyObject


class DockerClientSettings(BaseSettings):
    """
    The Docker Client Settings

    `base_url` / `tls` are taken from `DOCKER_HOST`, `DOCKER_TLS_VERIFY` and
    `DOCKER_CERT_PATH` when `use_env` is enabled and they are not set here.
    """

    base_url: t.Optional[str] = None
    version: t.Optional[str] = 'auto'
    timeout: t.Optional[int] = 60
    tls: t.Optional[bool] = False
    user_agent: t.Optional[str] = None
    use_ssh_client: t.Optional[bool] = False
    max_pool_size: t.Optional[int] = 10

    # Extra
    use_env: t.Optional[bool] = True
    lazy: t.Optional[bool] = False
    client_kwargs: t.Dict[str, t.Any] = Field(default_factory = dict)

    model_config = SettingsConfigDict(
        env_prefix = 'LZD_DOCKER_',
        case_sensitive = False,
        extra = 'ignore',
    )

    def get_client_kwargs(self, **overrides: t.Any) -> t.Dict[str, t.Any]:
        """
        Returns the keyword arguments for `docker.APIClient`

        Precedence: `overrides` > explicitly set fields > the docker environment.
        """
        kwargs: t.Dict[str, t.Any] = {}
        if self.use_env:
            from docker.utils import kwargs_from_env
            kwargs.update(kwargs_from_env())
        new = {
            'base_url': self.base_url,
            'version': self.version,
            'timeout': self.timeout,
            'tls': self.tls or None,
            'user_agent': self.user_agent,
            'use_ssh_client': self.use_ssh_client,
            'max_pool_size': self.max_pool_size,
        }
        kwargs.update({k: v for k, v in new.items() if v is not None})
        kwargs.update(self.client_kwargs)
        kwargs.update(overrides)
        return kwargs


def get_docker_settings(**kwargs: t.Any) -> DockerClientSettings:
    """
    Returns the docker client settings
    """
    return DockerClientSettings(**kwargs)


settings: DockerClientSettings = ProxyObject(obj_getter = get_docker_settings)
