from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Dict, Tuple


def normalize_key(key: str | Sequence[str]) -> Tuple[str, ...]:
    """
    Return a lookup key as a non-empty tuple of path segments.

    A plain string is a path of length one.
    """
    if isinstance(key, str):
        return (key,)
    if not isinstance(key, (list, tuple)):
        raise TypeError(
            f"Configuration key must be a str or a list/tuple of str, got {type(key).__name__}."
        )
    if not key:
        raise ValueError("Configuration key path must not be empty.")
    for part in key:
        if not isinstance(part, str):
            raise TypeError(f"Configuration key path segment {part!r} is not a str.")
    return tuple(key)


def is_pair_sequence(value: Any) -> bool:
    """True for a list/tuple whose every element is a (str, value) pair."""
    if not isinstance(value, (list, tuple)):
        return False
    return all(
        isinstance(item, (list, tuple)) and len(item) == 2 and isinstance(item[0], str)
        for item in value
    )


def is_key_value_collection(value: Any) -> bool:
    """True for a mapping with str keys or a sequence of (str, value) pairs."""
    if isinstance(value, Mapping):
        return all(isinstance(k, str) for k in value)
    return is_pair_sequence(value)


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two mappings.

    Values from `override` take precedence.
    Nested mappings are merged, all other values (environment indicators
    and pair lists included) are replaced.
    """
    result: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], Mapping)
            and isinstance(value, Mapping)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
