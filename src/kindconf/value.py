"""Scalar values stored in a form."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Native = Union[bool, int, float, str]


class Kind(Enum):
    """The closed set of kinds a value can have."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Value:
    """A bool, 64-bit int, 64-bit float or string, tagged with its kind.

    Build values with :meth:`of` (kind inferred from the Python type) or with
    the per-kind constructors. Two values compare equal only when both kind and
    payload match, so ``Value.of(1) != Value.of(True)``.
    """

    kind: Kind
    payload: Native

    def __post_init__(self):
        expected = _PAYLOAD_TYPES[self.kind]
        # bool is a subclass of int, so compare exact types
        if type(self.payload) is not expected:
            raise TypeError(f"{self.kind} value cannot hold {type(self.payload).__name__} payload")
        if self.kind is Kind.INT and not INT64_MIN <= self.payload <= INT64_MAX:
            raise OverflowError(f"int value {self.payload} does not fit in 64 bits")

    @classmethod
    def of(cls, native: Any) -> "Value":
        """Convert a native scalar into a value.

        Args:
            native: bool, int, float, str, or an existing Value (returned as-is)

        Returns:
            Value whose kind matches the Python type of ``native``

        Raises:
            TypeError: If ``native`` is not one of the supported scalar types
            OverflowError: If an int does not fit in 64 bits
        """
        if isinstance(native, Value):
            return native
        # Check bool before int
        if isinstance(native, bool):
            return cls.bool_(native)
        if isinstance(native, int):
            return cls.int_(native)
        if isinstance(native, float):
            return cls.float_(native)
        if isinstance(native, str):
            return cls.string(native)
        raise TypeError(f"Cannot make a config value from {type(native).__name__}")

    @classmethod
    def bool_(cls, x: bool) -> "Value":
        return cls(Kind.BOOL, x)

    @classmethod
    def int_(cls, x: int) -> "Value":
        return cls(Kind.INT, x)

    @classmethod
    def float_(cls, x: float) -> "Value":
        """Make a float value. Ints and float subclasses are widened to float."""
        if isinstance(x, (int, float)) and not isinstance(x, bool):
            x = float(x)
        return cls(Kind.FLOAT, x)

    @classmethod
    def string(cls, x: str) -> "Value":
        return cls(Kind.STRING, x)

    def same_kind_as(self, other: "Value") -> bool:
        """Determine whether this value and another are of the same kind."""
        return self.kind is other.kind

    def same_as(self, other: "Value") -> bool:
        """Determine whether this value and another have equal kind and payload."""
        return self.same_kind_as(other) and self.payload == other.payload

    def as_bool(self) -> bool:
        return self._extract(Kind.BOOL)

    def as_int(self) -> int:
        return self._extract(Kind.INT)

    def as_float(self) -> float:
        return self._extract(Kind.FLOAT)

    def as_string(self) -> str:
        return self._extract(Kind.STRING)

    @property
    def native(self) -> Native:
        """The plain Python payload."""
        return self.payload

    def _extract(self, kind: Kind) -> Any:
        """Return the payload if this value is of ``kind``.

        Raises:
            TypeError: Always a programming error; the key was declared with
                another kind or the wrong key was read
        """
        if self.kind is not kind:
            raise TypeError(f"Cannot read {self.kind} value {self} as {kind}")
        return self.payload

    def __str__(self) -> str:
        if self.kind is Kind.BOOL:
            return "true" if self.payload else "false"
        if self.kind is Kind.INT:
            return str(self.payload)
        if self.kind is Kind.FLOAT:
            return repr(self.payload)
        if self.kind is Kind.STRING:
            return self.payload
        raise AssertionError(f"Unhandled kind {self.kind!r}")

    def __repr__(self) -> str:
        return f"Value({self.kind}, {self.payload!r})"


_PAYLOAD_TYPES = {
    Kind.BOOL: bool,
    Kind.INT: int,
    Kind.FLOAT: float,
    Kind.STRING: str,
}
