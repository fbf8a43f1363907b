"""Command line ``key=value`` argument parsing."""

import sys
from typing import Dict, Iterable, Optional

from .exceptions import ConfigError


def split_argument(arg: str) -> tuple[str, str]:
    """Split a ``key=value`` argument into its left and right hand sides.

    Raises:
        ConfigError: If the argument does not contain exactly one ``=`` with
            text on both sides
    """
    parts = arg.split("=")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ConfigError(arg, "is a badly formed argument")
    return parts[0], parts[1]


def parse_key_value_pairs(args: Iterable[str], allow_duplicates: bool = False) -> Dict[str, str]:
    """Convert a sequence of ``key=value`` strings into a string map.

    Args:
        args: Arguments such as ``["tfinal=0.4", "quiet=true"]``
        allow_duplicates: Let a later occurrence of a key overwrite an earlier one

    Returns:
        Mapping of key to raw value string, in argument order

    Raises:
        ConfigError: If an argument is malformed, or a key repeats while
            ``allow_duplicates`` is false
    """
    result = {}  # Dict[str, str] (raw overrides)
    for arg in args:
        key, value = split_argument(arg)
        if key in result and not allow_duplicates:
            raise ConfigError(key, "duplicate parameter")
        result[key] = value
    return result


def parse_args(args: Optional[Iterable[str]] = None, allow_duplicates: bool = False) -> Dict[str, str]:
    """Parse ``key=value`` arguments, defaulting to ``sys.argv[1:]``."""
    if args is None:
        args = sys.argv[1:]
    return parse_key_value_pairs(args, allow_duplicates=allow_duplicates)
