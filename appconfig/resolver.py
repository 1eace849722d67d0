"""
Resolution of configuration values with OS environment substitution.

A stored value may be an environment indicator instead of a literal:

    (ENV, "DB_USER")                 read DB_USER; unresolved when unset
    (ENV, "DB_PORT", "5432")         read DB_PORT; "5432" when unset

Every call re-reads both the configuration source and ``os.environ``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from typing import Any

from .coercion import to_boolean, to_float, to_integer
from .exceptions import RequiredValueMissing
from .registry import ApplicationRegistry
from .sources import ApplicationSource, ConfigSource, DictSource, as_source
from .utils import is_key_value_collection, normalize_key
from .values import NOT_FOUND, EnvRef, EnvRefWithDefault, Found, LiteralValue, Result, classify

logger = logging.getLogger(__name__)

SourceLike = str | ConfigSource | Mapping[str, Any] | Sequence[Any]
KeyLike = str | Sequence[str]


def resolve_value(raw: Any) -> Result:
    """Substitute environment indicators; literals are returned unchanged."""
    value = classify(raw)
    if isinstance(value, LiteralValue):
        return Found(value.value)
    if isinstance(value, EnvRef):
        env_value = os.environ.get(value.name)
        if env_value is None:
            logger.debug("Environment variable %s is not set", value.name)
            return NOT_FOUND
        return Found(env_value)
    if isinstance(value, EnvRefWithDefault):
        env_value = os.environ.get(value.name)
        if env_value is None:
            logger.debug(
                "Environment variable %s is not set, using configured default",
                value.name,
            )
            return Found(value.default)
        return Found(env_value)
    raise TypeError(f"Unhandled raw value {value!r}")  # pragma: no cover


def fetch_env(
    source: SourceLike,
    key: KeyLike,
    *,
    registry: ApplicationRegistry | None = None,
) -> Result:
    """
    Look up `key` in `source` and resolve environment indicators.

    `key` is either a single key or a path (list/tuple) into nested
    mappings or (key, value) pair lists. Returns Found(value) or NOT_FOUND;
    a path that crosses a value which is not a key/value collection is
    NOT_FOUND as well.
    """
    path = normalize_key(key)
    current = as_source(source, registry)

    for depth, part in enumerate(path):
        raw = current.lookup(part)
        if not raw:
            return NOT_FOUND
        result = resolve_value(raw.value)
        if not result or depth == len(path) - 1:
            return result
        if not is_key_value_collection(result.value):
            logger.debug(
                "Value at %r is not a key/value collection, cannot descend",
                list(path[: depth + 1]),
            )
            return NOT_FOUND
        current = DictSource(result.value, name=current.name)

    return NOT_FOUND  # pragma: no cover - the path is never empty


def fetch_env_or_raise(
    source: SourceLike,
    key: KeyLike,
    *,
    registry: ApplicationRegistry | None = None,
) -> Any:
    """
    Same as fetch_env(), but return the bare value.

    :raises RequiredValueMissing: if the value cannot be resolved.
    """
    result = fetch_env(source, key, registry=registry)
    if not result:
        config_source = as_source(source, registry)
        raise RequiredValueMissing(
            config_source.name,
            key,
            application=isinstance(config_source, ApplicationSource),
        )
    return result.value


def get_env(
    source: SourceLike,
    key: KeyLike,
    default: Any = None,
    *,
    registry: ApplicationRegistry | None = None,
) -> Any:
    """Return the resolved value for `key`, or `default` if there is none."""
    result = fetch_env(source, key, registry=registry)
    if result:
        return result.value
    return default


def get_env_integer(
    source: SourceLike,
    key: KeyLike,
    default: Any = None,
    *,
    registry: ApplicationRegistry | None = None,
) -> Any:
    """
    Same as get_env(), but return the value as an int.

    Strings are parsed from their leading digits ("8080/tcp" -> 8080). If the
    value is missing or cannot be converted, `default` is returned as given.
    """
    return _coerce(source, key, default, registry, to_integer, "integer")


def get_env_float(
    source: SourceLike,
    key: KeyLike,
    default: Any = None,
    *,
    registry: ApplicationRegistry | None = None,
) -> Any:
    """Same as get_env_integer(), but for floating-point values."""
    return _coerce(source, key, default, registry, to_float, "float")


def get_env_boolean(
    source: SourceLike,
    key: KeyLike,
    default: Any = None,
    *,
    registry: ApplicationRegistry | None = None,
) -> Any:
    """
    Same as get_env(), but return the value as a bool.

    Recognised strings (case-insensitive):
      - "1", "true", "yes", "on", "enabled"    -> True
      - "0", "false", "no", "off", "disabled"  -> False
    Anything else returns `default` as given.
    """
    return _coerce(source, key, default, registry, to_boolean, "boolean")


def _coerce(source, key, default, registry, convert, type_name):
    result = fetch_env(source, key, registry=registry)
    if not result:
        return default
    converted = convert(result.value)
    if converted is None:
        logger.debug("Value of %r cannot be read as %s, using default", key, type_name)
        return default
    return converted
