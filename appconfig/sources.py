from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from .registry import ApplicationRegistry, default_registry
from .utils import is_pair_sequence
from .values import NOT_FOUND, Found, Result


class ConfigSource(ABC):
    """Abstract base class for read-only configuration sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Identifier reported in diagnostics."""
        raise NotImplementedError

    @abstractmethod
    def lookup(self, key: str) -> Result:
        """Return Found(raw value) for `key`, or NOT_FOUND if absent."""
        raise NotImplementedError


class ApplicationSource(ConfigSource):
    """Configuration source backed by a named application in a registry."""

    def __init__(self, app: str, registry: ApplicationRegistry | None = None):
        self._app = app
        self._registry = registry if registry is not None else default_registry

    @property
    def name(self) -> str:
        return self._app

    def lookup(self, key: str) -> Result:
        return self._registry.lookup(self._app, key)

    def __repr__(self) -> str:
        return f"ApplicationSource({self._app!r})"


class DictSource(ConfigSource):
    """
    Configuration source backed by an explicit key/value collection.

    Accepts either a mapping or an ordered sequence of (key, value) pairs.
    The collection is read on each lookup, never copied or mutated.
    """

    def __init__(self, data: Mapping[str, Any] | Sequence[Any], *, name: str = "<dict>"):
        if not isinstance(data, Mapping) and not is_pair_sequence(data):
            raise TypeError(
                "DictSource expects a mapping or a sequence of (key, value) pairs."
            )
        self._data = data
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def lookup(self, key: str) -> Result:
        if isinstance(self._data, Mapping):
            if key in self._data:
                return Found(self._data[key])
            return NOT_FOUND
        for item_key, item_value in self._data:
            if item_key == key:
                return Found(item_value)
        return NOT_FOUND

    def __repr__(self) -> str:
        return f"DictSource(name={self._name!r})"


def as_source(
    source: str | ConfigSource | Mapping[str, Any] | Sequence[Any],
    registry: ApplicationRegistry | None = None,
) -> ConfigSource:
    """
    Normalise anything accepted as a configuration source.

    - ConfigSource instances are returned unchanged
    - str names an application in `registry` (default: the global registry)
    - mappings and (key, value) pair sequences become a DictSource
    """
    if isinstance(source, ConfigSource):
        return source
    if isinstance(source, str):
        return ApplicationSource(source, registry)
    if isinstance(source, Mapping) or is_pair_sequence(source):
        return DictSource(source)
    raise TypeError(
        f"Unsupported configuration source {source!r}: expected an application "
        "name, a mapping, a sequence of (key, value) pairs or a ConfigSource."
    )
