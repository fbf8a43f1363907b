"""Form parameters: a value with its description and frozen flag."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .value import Value


@dataclass(frozen=True)
class Parameter:
    """A declared config item.

    Attributes:
        value: Current value; its kind was fixed when the item was declared
        about: Description of the item for use in user reporting
        frozen: Once set, only an identical value may be merged in
    """

    value: Value
    about: str = ""
    frozen: bool = False

    def with_value(self, value: Value) -> "Parameter":
        return replace(self, value=value)

    def frozen_copy(self) -> "Parameter":
        return replace(self, frozen=True)
