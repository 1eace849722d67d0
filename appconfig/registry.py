from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List

from .exceptions import ConfigurationError
from .utils import deep_merge
from .values import NOT_FOUND, Found, Result

logger = logging.getLogger(__name__)


class ApplicationRegistry:
    """
    Process-wide store of per-application configuration.

    Each loaded application owns a flat mapping of keys to raw values. Raw
    values are kept exactly as given: environment indicators are stored
    unresolved and only substituted when a value is looked up.

    Typical usage:

        from appconfig import default_registry, env

        default_registry.load("my_app", {
            "db_host": env("DB_HOST", "localhost"),
            "db_port": env("DB_PORT", "5432"),
            "db_name": "my_database",
        })
    """

    def __init__(self) -> None:
        self._apps: Dict[str, Dict[str, Any]] = {}
        self._modules: Dict[str, str] = {}

    def load(self, app: str, data: Mapping[str, Any] | None = None) -> None:
        """Register `app`, merging `data` into any values it already has."""
        _check_app_name(app)
        current = self._apps.get(app, {})
        if data is not None:
            if not isinstance(data, Mapping):
                raise ConfigurationError(
                    f"Configuration for application {app!r} must be a mapping, "
                    f"got {type(data).__name__}."
                )
            current = deep_merge(current, data)
        self._apps[app] = current
        logger.debug("Loaded application %r (%d keys)", app, len(current))

    def unload(self, app: str) -> None:
        """Forget `app` and all its values. Unknown applications are ignored."""
        self._apps.pop(app, None)
        for module, owner in list(self._modules.items()):
            if owner == app:
                del self._modules[module]

    def is_loaded(self, app: str) -> bool:
        return app in self._apps

    def loaded_applications(self) -> List[str]:
        return sorted(self._apps)

    def put_env(self, app: str, key: str, value: Any) -> None:
        _check_key(key)
        self.load(app)
        self._apps[app][key] = value

    def put_all_env(self, app: str, data: Mapping[str, Any]) -> None:
        """Deep-merge `data` into the configuration of `app`."""
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Configuration for application {app!r} must be a mapping, "
                f"got {type(data).__name__}."
            )
        for key in data:
            _check_key(key)
        self.load(app, data)

    def delete_env(self, app: str, key: str) -> None:
        values = self._apps.get(app)
        if values is not None:
            values.pop(key, None)

    def get_all_env(self, app: str) -> Dict[str, Any]:
        """Return a shallow copy of the raw values of `app` ({} if not loaded)."""
        return dict(self._apps.get(app, {}))

    def lookup(self, app: str, key: str) -> Result:
        """Return the raw stored value for `key`, unresolved."""
        values = self._apps.get(app)
        if values is None or key not in values:
            return NOT_FOUND
        return Found(values[key])

    def associate(self, module: str, app: str) -> None:
        """
        Declare that `module` (and every module below it) belongs to `app`.

        Used by AppConfig to infer the application when none is given.
        """
        _check_app_name(app)
        if not module:
            raise ValueError("Module name must not be empty.")
        self._modules[module] = app

    def application_for(self, module: str) -> str | None:
        """
        Return the application `module` belongs to, or None.

        The longest associated dotted prefix wins. Without an association, a
        loaded application named like the module's top-level package is used.
        """
        parts = module.split(".")
        for end in range(len(parts), 0, -1):
            owner = self._modules.get(".".join(parts[:end]))
            if owner is not None:
                return owner
        if parts[0] in self._apps:
            return parts[0]
        return None

    def clear(self) -> None:
        self._apps.clear()
        self._modules.clear()

    def __repr__(self) -> str:
        apps_preview = ", ".join(self.loaded_applications()[:5])
        more = "..." if len(self._apps) > 5 else ""
        return f"<ApplicationRegistry apps=[{apps_preview}{more}]>"


def _check_app_name(app: Any) -> None:
    if not isinstance(app, str) or not app:
        raise ValueError(f"Application name must be a non-empty str, got {app!r}.")


def _check_key(key: Any) -> None:
    if not isinstance(key, str):
        raise TypeError(f"Configuration key {key!r} is not a str.")


default_registry = ApplicationRegistry()
