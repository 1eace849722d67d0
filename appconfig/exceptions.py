from __future__ import annotations

from typing import Any


class ConfigurationError(Exception):
    """Raised when there is a problem looking up or binding configuration."""


class RequiredValueMissing(ConfigurationError):
    """Raised when a required configuration parameter cannot be resolved."""

    def __init__(self, source: str, key: Any, *, application: bool = True):
        self.source = source
        self.key = key
        if application:
            message = (
                f"application {source!r} is not loaded, "
                f"or the configuration parameter {key!r} is not set"
            )
        else:
            message = f"configuration parameter {key!r} is not set in {source}"
        super().__init__(message)


class BindingConfigurationError(ConfigurationError):
    """Raised when an AppConfig binding cannot determine its application."""
