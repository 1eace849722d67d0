from __future__ import annotations

from typing import Any

from . import resolver
from .exceptions import BindingConfigurationError
from .registry import ApplicationRegistry, default_registry
from .resolver import KeyLike
from .sources import ApplicationSource
from .values import Result


class AppConfig:
    """
    Configuration accessors bound to a single application.

    Typical usage, in the module that reads the configuration:

        from appconfig import AppConfig

        config = AppConfig("my_app")
        # or: AppConfig(module=__name__), once the module's package was
        # associated with an application in the registry

        db_host = config.get_env("db_host", "localhost")
        db_port = config.get_env_integer("db_port", 5432)
        password = config.fetch_env_or_raise("db_password")

    The application is fixed when the binding is created. Lookups still read
    the registry and the OS environment on every call.
    """

    def __init__(
        self,
        app: str | None = None,
        *,
        module: str | None = None,
        registry: ApplicationRegistry | None = None,
    ):
        self._registry = registry if registry is not None else default_registry

        if app is None and module:
            app = self._registry.application_for(module)
        if not app:
            raise BindingConfigurationError(
                "'app' argument was not given to AppConfig and could not be "
                f"deduced from the {module!r} caller module"
            )
        self._app = app
        self._source = ApplicationSource(app, self._registry)

    @property
    def app(self) -> str:
        return self._app

    def fetch_env(self, key: KeyLike) -> Result:
        return resolver.fetch_env(self._source, key)

    def fetch_env_or_raise(self, key: KeyLike) -> Any:
        return resolver.fetch_env_or_raise(self._source, key)

    def get_env(self, key: KeyLike, default: Any = None) -> Any:
        return resolver.get_env(self._source, key, default)

    def get_env_integer(self, key: KeyLike, default: Any = None) -> Any:
        return resolver.get_env_integer(self._source, key, default)

    def get_env_float(self, key: KeyLike, default: Any = None) -> Any:
        return resolver.get_env_float(self._source, key, default)

    def get_env_boolean(self, key: KeyLike, default: Any = None) -> Any:
        return resolver.get_env_boolean(self._source, key, default)

    def __repr__(self) -> str:
        return f"<AppConfig app={self._app!r}>"
