"""KindConf form module."""

from __future__ import annotations

import logging
from typing import Any, Collection, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .exceptions import ConfigError
from .parameter import Parameter
from .parser import parse_args, parse_key_value_pairs
from .utils import parse_value
from .value import Native, Value

_logger = logging.getLogger(__name__)


class Form:
    """A configuration data structure that is kind-checked at runtime.

    Items are declared with :meth:`item`, after which their value can be
    updated but their kind (bool, int, float, string) cannot change. Every
    operation returns a new form and leaves the receiver untouched, so a merge
    that raises never leaves a half-updated form behind.

    Example:
        form = (
            Form()
            .item("num_zones", 5000, "Number of grid cells to use")
            .item("tfinal", 0.2, "Time at which to stop the simulation")
            .merge_args(["tfinal=0.4"])
        )
        form.get("tfinal").as_float()  # 0.4
    """

    def __init__(self, parameters: Optional[Mapping[str, Parameter]] = None):
        """Initialize form.

        Args:
            parameters: Declared parameters by key  # (empty for a blank form)
        """
        self._parameters: Dict[str, Parameter] = dict(parameters or {})

    def item(self, key: str, default: Native | Value, about: str = "") -> "Form":
        """Declare a new config item. Any item already declared with that name is replaced.

        Args:
            key: The name of the config item
            default: The default value  # (its kind becomes the item's kind)
            about: A description of the item for use in user reporting

        Returns:
            New form including the item
        """
        parameters = dict(self._parameters)
        parameters[key] = Parameter(value=Value.of(default), about=about)
        return Form(parameters)

    def freeze(self, key: str) -> "Form":
        """Mark an item frozen, so that its value can no longer change.

        Raises:
            KeyError: If ``key`` was never declared
        """
        parameters = dict(self._parameters)
        parameters[key] = self._parameter(key).frozen_copy()
        _logger.debug("Froze config key %s", key)
        return Form(parameters)

    def merge_value_map(self, updates: Mapping[str, Native | Value], freeze: Collection[str] = ()) -> "Form":
        """Merge in the contents of a key-value map.

        Keys are processed in the mapping's iteration order and the first
        rejected key raises. Whether a key is accepted depends only on its own
        old and new values.

        Args:
            updates: New values by key  # (Value instances or native scalars)
            freeze: Keys to mark frozen if they appear in ``updates``  # (a collection, never a bare str)

        Returns:
            New form with the updates applied

        Raises:
            ConfigError: If a key is undeclared, was declared as a different
                kind, or is frozen and the new value differs from the old one
            TypeError: If ``freeze`` is a string instead of a collection of keys
        """
        _check_freeze_keys(freeze)
        parameters = dict(self._parameters)
        for key, new in updates.items():
            parameters[key] = self._checked_update(key, new)

        frozen = [key for key in freeze if key in updates]
        for key in frozen:
            parameters[key] = parameters[key].frozen_copy()

        _logger.debug("Merged config keys %s (frozen: %s)", sorted(updates), sorted(frozen))
        return Form(parameters)

    def merge_value_map_freezing(
        self, updates: Mapping[str, Native | Value], keys_to_freeze: Collection[str]
    ) -> "Form":
        """Merge in a key-value map, then freeze the listed keys that were updated."""
        return self.merge_value_map(updates, freeze=keys_to_freeze)

    def merge_string_map(self, strings: Mapping[str, str], freeze: Collection[str] = ()) -> "Form":
        """Merge in the contents of a string-string map.

        Each string is parsed according to the kind its key was declared with,
        then the result is merged with :meth:`merge_value_map`.

        Args:
            strings: Raw value strings by key  # (e.g. from command line arguments)
            freeze: Keys to mark frozen if they appear in ``strings``

        Raises:
            ConfigError: If a key is undeclared, a string does not parse to the
                declared kind, or a frozen item would change
        """
        _check_freeze_keys(freeze)
        updates = {}  # Dict[str, Value] (parsed updates)
        for key, text in strings.items():
            if key not in self._parameters:
                raise ConfigError(key, "is not a valid key")
            updates[key] = parse_value(self._parameters[key].value.kind, key, text)
        return self.merge_value_map(updates, freeze=freeze)

    def merge_args(self, args: Iterable[str], allow_duplicates: bool = False, freeze: Collection[str] = ()) -> "Form":
        """Merge in ``key=value`` arguments.

        Args:
            args: Arguments such as ``["tfinal=0.4", "quiet=true"]``
            allow_duplicates: Let a later occurrence of a key win instead of failing
            freeze: Keys to mark frozen if they appear in ``args``
        """
        _check_freeze_keys(freeze)
        strings = parse_key_value_pairs(args, allow_duplicates=allow_duplicates)
        return self.merge_string_map(strings, freeze=freeze)

    def parse_args(
        self, args: Optional[Iterable[str]] = None, allow_duplicates: bool = False, freeze: Collection[str] = ()
    ) -> "Form":
        """Merge in ``key=value`` command line arguments.

        Args:
            args: Command line arguments (defaults to sys.argv[1:])
            allow_duplicates: Let a later occurrence of a key win instead of failing
            freeze: Keys to mark frozen if they appear in the arguments
        """
        _check_freeze_keys(freeze)
        strings = parse_args(args, allow_duplicates=allow_duplicates)
        return self.merge_string_map(strings, freeze=freeze)

    def _checked_update(self, key: str, new: Native | Value) -> Parameter:
        """Validate a single update against the current parameter.

        Returns:
            Parameter holding the new value
        """
        if key not in self._parameters:
            raise ConfigError(key, "is not a valid key")
        new_value = Value.of(new)
        parameter = self._parameters[key]
        if not parameter.value.same_kind_as(new_value):
            raise ConfigError(key, "has the wrong type")
        if parameter.frozen and not parameter.value.same_as(new_value):
            raise ConfigError(key, "cannot be modified")
        return parameter.with_value(new_value)

    def get(self, key: str) -> Value:
        """Get an item's value. Raises KeyError if the item was not declared."""
        return self._parameter(key).value

    def about(self, key: str) -> str:
        return self._parameter(key).about

    def is_frozen(self, key: str) -> bool:
        return self._parameter(key).frozen

    def value_map(self) -> Dict[str, Value]:
        """Snapshot of the current values, without descriptions or frozen flags."""
        return {key: self._parameters[key].value for key in self.sorted_keys()}

    def sorted_keys(self) -> List[str]:
        return sorted(self._parameters)

    def pretty(self) -> Dict[str, Any]:
        """Native values by key, in sorted key order, for reporting."""
        return {key: value.native for key, value in self.value_map().items()}

    def format_help(self) -> str:
        """Format the declared items for console display.

        Returns:
            One line per item, e.g. ``tfinal(float, value=0.2): Time at which to stop``
        """
        lines = []  # List[str] (formatted lines for display)
        for key, parameter in self:
            line = f"{key}({parameter.value.kind}, value={parameter.value})"
            if parameter.about:
                line += f": {parameter.about}"
            if parameter.frozen:
                line += " [frozen]"
            lines.append(line)
        return "\n".join(lines)

    def _parameter(self, key: str) -> Parameter:
        try:
            return self._parameters[key]
        except KeyError as e:
            raise KeyError(f"Config key '{key}' was never declared") from e

    def __getitem__(self, key: str) -> Value:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._parameters

    def __len__(self) -> int:
        return len(self._parameters)

    def __iter__(self) -> Iterator[Tuple[str, Parameter]]:
        """Iterate over ``(key, parameter)`` pairs in sorted key order."""
        for key in self.sorted_keys():
            yield key, self._parameters[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Form):
            return NotImplemented
        return self._parameters == other._parameters

    def __repr__(self) -> str:
        """String representation."""
        return f"Form({self.pretty()})"


def _check_freeze_keys(freeze: Collection[str]) -> None:
    # A bare str would be iterated character by character
    if isinstance(freeze, str):
        raise TypeError(f"freeze takes a collection of keys, not the string '{freeze}'")
