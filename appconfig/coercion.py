from __future__ import annotations

import re
from typing import Any

_INTEGER_PREFIX = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_PREFIX = re.compile(r"[+-]?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?", re.ASCII)

FALSE_STRINGS = frozenset({"0", "false", "no", "off", "disabled"})
TRUE_STRINGS = frozenset({"1", "true", "yes", "on", "enabled"})


def parse_integer(raw: str) -> int | None:
    """
    Parse the leading base-10 integer of `raw`.

    Trailing characters are ignored ("42abc" -> 42). Returns None when
    `raw` does not start with an optionally signed digit run.
    """
    match = _INTEGER_PREFIX.match(raw)
    if match is None:
        return None
    try:
        return int(match.group(0))
    except ValueError:
        # digit runs beyond the interpreter's int conversion limit
        return None


def parse_float(raw: str) -> float | None:
    """
    Parse the leading floating-point literal of `raw`.

    Accepts an optional sign, digits, an optional fractional part and an
    optional exponent ("1.5e3ms" -> 1500.0). Returns None when nothing
    matches.
    """
    match = _FLOAT_PREFIX.match(raw)
    if match is None:
        return None
    return float(match.group(0))


def parse_boolean(raw: str) -> bool | None:
    lowered = raw.lower()
    if lowered in TRUE_STRINGS:
        return True
    if lowered in FALSE_STRINGS:
        return False
    return None


def to_integer(value: Any) -> int | None:
    """Coerce a resolved value to int, or None if it cannot be."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return parse_integer(value)
    return None


def to_float(value: Any) -> float | None:
    """Coerce a resolved value to float, or None if it cannot be."""
    if isinstance(value, float):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return float(value)
        except OverflowError:
            return None
    if isinstance(value, str):
        return parse_float(value)
    return None


def to_boolean(value: Any) -> bool | None:
    """Coerce a resolved value to bool, or None if it cannot be."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return parse_boolean(value)
    return None
