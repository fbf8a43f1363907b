"""Utility functions for KindConf."""

import re

from .exceptions import ConfigError
from .value import INT64_MAX, INT64_MIN, Kind, Value

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"""
    [+-]?
    (?:
        (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?   # decimal or scientific
        | (?i:inf|infinity|nan)
    )
    """,
    re.VERBOSE,
)


def parse_bool(key: str, text: str) -> Value:
    """Parse the canonical bool literals ``true`` and ``false``."""
    if text == "true":
        return Value.bool_(True)
    if text == "false":
        return Value.bool_(False)
    raise ConfigError(key, "is a badly formed bool")


def parse_int(key: str, text: str) -> Value:
    """Parse an optionally signed base-10 integer that fits in 64 bits."""
    if _INT_PATTERN.fullmatch(text):
        number = int(text)
        if INT64_MIN <= number <= INT64_MAX:
            return Value.int_(number)
    raise ConfigError(key, "is a badly formed int")


def parse_float(key: str, text: str) -> Value:
    """Parse a decimal or scientific float literal, or inf/infinity/nan."""
    # float() alone would also accept whitespace and digit separators
    if _FLOAT_PATTERN.fullmatch(text):
        return Value.float_(float(text))
    raise ConfigError(key, "is a badly formed float")


def parse_string(key: str, text: str) -> Value:
    if not isinstance(text, str):
        raise ConfigError(key, "is a badly formed string")
    return Value.string(text)


_PARSERS = {
    Kind.BOOL: parse_bool,
    Kind.INT: parse_int,
    Kind.FLOAT: parse_float,
    Kind.STRING: parse_string,
}


def parse_value(kind: Kind, key: str, text: str) -> Value:
    """Parse a raw string as a value of the given kind.

    Args:
        kind: Kind the key was declared with
        key: Key being parsed  # (used for error reporting only)
        text: Raw string, e.g. from a ``key=value`` argument

    Returns:
        Value of ``kind``

    Raises:
        ConfigError: If ``text`` is not a well formed literal of ``kind``
    """
    return _PARSERS[kind](key, text)
