from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


class _EnvMarker:
    """Tag placed first in a tuple to mark a value as read from the environment."""

    _instance: _EnvMarker | None = None

    def __new__(cls) -> _EnvMarker:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ENV"

    def __reduce__(self) -> str:
        return "ENV"


ENV = _EnvMarker()


@dataclass(frozen=True)
class Found:
    """A successfully resolved configuration value."""

    value: Any

    def __bool__(self) -> bool:
        return True


class NotFound:
    """Result of a lookup that could not resolve a value."""

    _instance: NotFound | None = None

    def __new__(cls) -> NotFound:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __reduce__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound()

Result = Union[Found, NotFound]


@dataclass(frozen=True)
class LiteralValue:
    value: Any


@dataclass(frozen=True)
class EnvRef:
    """Read the OS environment variable `name`; unresolved when unset."""

    name: str


@dataclass(frozen=True)
class EnvRefWithDefault:
    """Read the OS environment variable `name`; use `default` when unset."""

    name: str
    default: Any


RawValue = Union[LiteralValue, EnvRef, EnvRefWithDefault]


def env(name: str, *default: Any) -> tuple:
    """
    Build an environment indicator tuple.

        env("DB_PORT")          -> (ENV, "DB_PORT")
        env("DB_PORT", "5432")  -> (ENV, "DB_PORT", "5432")
    """
    if len(default) > 1:
        raise TypeError("env() takes at most one default value")
    return (ENV, name, *default)


def classify(raw: Any) -> RawValue:
    """
    Turn a stored value into exactly one of LiteralValue, EnvRef or EnvRefWithDefault.

    Recognised indicator shapes are `(ENV, "VAR")` and `(ENV, "VAR", default)`,
    plus EnvRef / EnvRefWithDefault instances stored directly. Everything else,
    including other tuples, is a literal.
    """
    if isinstance(raw, (EnvRef, EnvRefWithDefault, LiteralValue)):
        return raw
    if (
        isinstance(raw, tuple)
        and len(raw) in (2, 3)
        and raw[0] is ENV
        and isinstance(raw[1], str)
    ):
        if len(raw) == 2:
            return EnvRef(raw[1])
        return EnvRefWithDefault(raw[1], raw[2])
    return LiteralValue(raw)
