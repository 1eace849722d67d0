from __future__ import annotations

import pytest

from appconfig import (
    NOT_FOUND,
    AppConfig,
    BindingConfigurationError,
    Found,
    RequiredValueMissing,
    default_registry,
    env,
)


def test_binding_exposes_bound_operations(clean_env, registry):
    registry.load(
        "my_app",
        {
            "db_host": env("APPCFG_TEST_DB_HOST", "localhost"),
            "db_port": env("APPCFG_TEST_DB_PORT", "5432"),
            "db_user": env("APPCFG_TEST_DB_USER"),
            "db_password": env("APPCFG_TEST_DB_PASSWORD"),
            "db_name": "my_database",
            "db_ssl": "enabled",
            "db_timeout": "1.5",
        },
    )
    clean_env.setenv("APPCFG_TEST_DB_USER", "my_user")
    clean_env.setenv("APPCFG_TEST_DB_PASSWORD", "guess_me")

    config = AppConfig("my_app", registry=registry)

    assert config.app == "my_app"
    assert config.get_env("db_host") == "localhost"
    assert config.get_env_integer("db_port") == 5432
    assert config.fetch_env("db_user") == Found("my_user")
    assert config.fetch_env_or_raise("db_password") == "guess_me"
    assert config.get_env("db_name", "unknown") == "my_database"
    assert config.get_env_boolean("db_ssl", False) is True
    assert config.get_env_float("db_timeout") == 1.5

    assert config.fetch_env("unknown") is NOT_FOUND
    assert config.get_env("unknown") is None
    with pytest.raises(RequiredValueMissing):
        config.fetch_env_or_raise("unknown")


def test_binding_sees_later_registry_changes(registry):
    config = AppConfig("my_app", registry=registry)

    assert config.get_env("late", "default") == "default"

    registry.put_env("my_app", "late", "value")
    assert config.get_env("late", "default") == "value"


def test_binding_uses_default_registry():
    default_registry.put_env("my_app", "name", "x")

    assert AppConfig("my_app").get_env("name") == "x"


def test_binding_infers_app_from_module(registry):
    registry.associate("myproject", "my_app")
    registry.put_env("my_app", "name", "x")

    config = AppConfig(module="myproject.settings", registry=registry)

    assert config.app == "my_app"
    assert config.get_env("name") == "x"


def test_binding_without_app_raises(registry):
    with pytest.raises(BindingConfigurationError) as excinfo:
        AppConfig(module="unknown.module", registry=registry)
    assert "unknown.module" in str(excinfo.value)

    with pytest.raises(BindingConfigurationError):
        AppConfig(registry=registry)
