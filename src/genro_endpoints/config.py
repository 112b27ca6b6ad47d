# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Settings for Genro Endpoints.

Values come from the environment (prefix ``GENRO_ENDPOINTS_``) or a ``.env``
file in the working directory::

    GENRO_ENDPOINTS_PACKAGES=myapp.endpoints,myapp.admin
    GENRO_ENDPOINTS_SCOPE=singleton
    GENRO_ENDPOINTS_STRICT=true

``packages`` is used by ``add_endpoints`` when called without explicit
packages. ``scope`` is the default lifetime of registered endpoints.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

__all__ = ["EndpointSettings", "get_settings"]


class EndpointSettings(BaseSettings):
    """Library-wide defaults for endpoint discovery and registration."""

    model_config = SettingsConfigDict(
        env_prefix="GENRO_ENDPOINTS_",
        env_file=".env",
        extra="ignore",
    )

    packages: Annotated[list[str], NoDecode] = Field(default_factory=list)
    scope: Literal["transient", "singleton"] = "transient"
    strict: bool = False

    @field_validator("packages", mode="before")
    @classmethod
    def _split_packages(cls, value):
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


@lru_cache(maxsize=1)
def get_settings() -> EndpointSettings:
    """Return the process-wide settings, loaded once."""
    return EndpointSettings()
