from __future__ import annotations

"""
lzd Settings
"""

import typing as t
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from lzd.utils import ProxyObject


class LzdSettings(BaseSettings):
    """
    The lzd Settings
    """

    debug_enabled: t.Optional[bool] = False
    log_level: t.Optional[str] = 'INFO'

    model_config = SettingsConfigDict(
        env_prefix = 'LZD_',
        case_sensitive = False,
        extra = 'ignore',
    )

    @field_validator('log_level', mode = 'before')
    def validate_log_level(cls, v: t.Optional[str]) -> str:
        """
        Normalizes the log level
        """
        return (v or 'INFO').upper()

    def update_config(self, **kwargs: t.Any) -> None:
        """
        Updates the settings in place
        """
        for key, value in kwargs.items():
            if not hasattr(self, key): continue
            setattr(self, key, value)


def get_settings(**kwargs: t.Any) -> LzdSettings:
    """
    Returns the lzd settings
    """
    return LzdSettings(**kwargs)


settings: LzdSettings = ProxyObject(obj_getter = get_settings)
