"""Decode results — immutable containers for an accepted value or failures."""

from dataclasses import dataclass
from typing import Any

# Path segment from the root value to a failing leaf: a field name or key
type PathSegment = str | int
type Path = tuple[PathSegment, ...]


@dataclass(frozen=True, slots=True)
class ValidationFailure:
    """One rejection produced by a leaf codec.

    ``path`` leads from the decoded root to the rejected value, so a
    failure inside a record field starts with that field's name::

        ValidationFailure(value="", path=("email",), codec="NonEmptyString",
                          message_key="NonEmptyString", message="Can not be empty.")
    """

    value: Any
    path: Path
    codec: str
    message_key: str
    message: str

    @property
    def field(self) -> str | None:
        """Top-level field name, or None for a failure at the root."""
        if not self.path:
            return None
        return str(self.path[0])


@dataclass(frozen=True, slots=True)
class Decoded[T]:
    """The outcome of running a codec over a value.

    ``is_valid`` is True when there are no failures.
    The result is falsy when invalid, so you can write::

        decoded = Email.decode(raw)
        if not decoded:
            print(decoded.failures[0].message)

    ``value`` is the accepted value on success and the rejected input
    otherwise.
    """

    value: T
    failures: tuple[ValidationFailure, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True if decoding produced no failures."""
        return not self.failures

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not decoded:`` pattern."""
        return self.is_valid
