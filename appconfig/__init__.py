"""
appconfig - Application configuration with OS environment overrides.

This package provides:
- fetch_env / fetch_env_or_raise / get_env*: resolve a key from an
  application's registry or an explicit mapping, substituting
  (ENV, "VAR") and (ENV, "VAR", default) indicators from os.environ.
- AppConfig: the same operations bound to one application.
- ApplicationRegistry: the in-process store of per-application values.
"""

from __future__ import annotations

from .binding import AppConfig
from .exceptions import (
    BindingConfigurationError,
    ConfigurationError,
    RequiredValueMissing,
)
from .registry import ApplicationRegistry, default_registry
from .resolver import (
    fetch_env,
    fetch_env_or_raise,
    get_env,
    get_env_boolean,
    get_env_float,
    get_env_integer,
    resolve_value,
)
from .sources import ApplicationSource, ConfigSource, DictSource
from .values import (
    ENV,
    NOT_FOUND,
    EnvRef,
    EnvRefWithDefault,
    Found,
    LiteralValue,
    NotFound,
    classify,
    env,
)

__all__ = [
    "AppConfig",
    "ApplicationRegistry",
    "ApplicationSource",
    "BindingConfigurationError",
    "ConfigSource",
    "ConfigurationError",
    "DictSource",
    "ENV",
    "EnvRef",
    "EnvRefWithDefault",
    "Found",
    "LiteralValue",
    "NOT_FOUND",
    "NotFound",
    "RequiredValueMissing",
    "classify",
    "default_registry",
    "env",
    "fetch_env",
    "fetch_env_or_raise",
    "get_env",
    "get_env_boolean",
    "get_env_float",
    "get_env_integer",
    "resolve_value",
]
