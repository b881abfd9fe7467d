"""Codec core — leaf refinements and the composition operators.

A codec is an immutable, stateless value with one job::

    decoded = codec.decode(value)   # Decoded[T]: accepted value or failures

Leaves check one thing and carry one message key. Everything else is
built by composition, never by subclassing::

    NonEmptyTrimmedString = intersection([type_string, non_empty_string, trimmed_string])

``intersection`` checks members left to right and stops at the first
failure, so later members may assume earlier ones hold (a format check
can assume it is looking at a string). ``union`` accepts the first member
that succeeds. ``record`` decodes a mapping field by field and collects
the failures of every field.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from formcodec.codecs.messages import message_for
from formcodec.codecs.result import Decoded, Path, ValidationFailure
from formcodec.errors import ConfigurationError


class Codec[T](ABC):
    """Base for all codecs.

    Subclasses set ``name`` (the kind tag used in failures and reports)
    and ``base`` (the Python type every accepted value is an instance of,
    or None when members disagree).
    """

    __slots__ = ()

    name: str
    base: type | None

    @abstractmethod
    def decode(self, value: Any, path: Path = ()) -> Decoded[T]:
        """Accept *value* or describe why not. Failures are returned, never raised."""

    def is_valid(self, value: Any) -> bool:
        """Shorthand for ``bool(codec.decode(value))``."""
        return self.decode(value).is_valid

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Refinement[T](Codec[T]):
    """A leaf: a base-type check plus a predicate, failing with one message.

    The base type is checked first and reported with this leaf's own
    message, so ``non_empty_string`` on ``None`` says "Can not be empty.",
    not "Invalid string type.".
    """

    name: str
    base: type
    predicate: Callable[[Any], bool]
    message_key: str
    message: str

    def decode(self, value: Any, path: Path = ()) -> Decoded[T]:
        if isinstance(value, self.base) and self.predicate(value):
            return Decoded(value)
        failure = ValidationFailure(
            value=value,
            path=path,
            codec=self.name,
            message_key=self.message_key,
            message=self.message,
        )
        return Decoded(value, (failure,))


def refine[T](
    base: type[T],
    predicate: Callable[[T], bool],
    name: str,
    message_key: str,
) -> Refinement[T]:
    """Build a leaf codec.

    Args:
        base: Type the value must be an instance of before *predicate* runs.
        predicate: Returns True when an instance of *base* is acceptable.
        name: Kind tag, e.g. ``"Max64String"``.
        message_key: Key into ``VALIDATION_ERRORS``.

    Raises:
        ConfigurationError: If *message_key* is not in the catalog.
    """
    return Refinement(
        name=name,
        base=base,
        predicate=predicate,
        message_key=message_key,
        message=message_for(message_key),
    )


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def _common_base(members: tuple[Codec[Any], ...]) -> type | None:
    bases = {m.base for m in members}
    if len(bases) == 1:
        return bases.pop()
    return None


def _members(operator: str, codecs: Iterable[Codec[Any]]) -> tuple[Codec[Any], ...]:
    members = tuple(codecs)
    if not members:
        raise ConfigurationError(f"{operator}() needs at least one codec")
    for member in members:
        if not isinstance(member, Codec):
            raise ConfigurationError(
                f"{operator}() members must be codecs, got {type(member).__name__}"
            )
    return members


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class IntersectionCodec[T](Codec[T]):
    """All members must pass; the first failing member is the only one reported."""

    members: tuple[Codec[Any], ...]
    name: str = ""
    base: type | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", " & ".join(m.name for m in self.members))
        object.__setattr__(self, "base", _common_base(self.members))

    def decode(self, value: Any, path: Path = ()) -> Decoded[T]:
        current = value
        for member in self.members:
            decoded = member.decode(current, path)
            if not decoded:
                return Decoded(value, decoded.failures)
            current = decoded.value
        return Decoded(current)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class UnionCodec[T](Codec[T]):
    """The first passing member wins; if none pass, every member's failures are kept."""

    members: tuple[Codec[Any], ...]
    name: str = ""
    base: type | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", " | ".join(m.name for m in self.members))
        object.__setattr__(self, "base", _common_base(self.members))

    def decode(self, value: Any, path: Path = ()) -> Decoded[T]:
        failures: list[ValidationFailure] = []
        for member in self.members:
            decoded = member.decode(value, path)
            if decoded:
                return decoded
            failures.extend(decoded.failures)
        return Decoded(value, tuple(failures))


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class RecordCodec(Codec[dict[str, Any]]):
    """A mapping of field name to codec, decoded field by field.

    Every field is decoded independently, so one decode may report
    failures for several fields. A missing key decodes as ``None``.
    Keys the record does not declare are left out of the decoded value.
    """

    fields: Mapping[str, Codec[Any]]
    name: str = "Record"
    base: type | None = field(default=dict, init=False)

    def decode(self, value: Any, path: Path = ()) -> Decoded[dict[str, Any]]:
        if not isinstance(value, Mapping):
            failure = ValidationFailure(
                value=value,
                path=path,
                codec=self.name,
                message_key="TypeRecord",
                message=message_for("TypeRecord"),
            )
            return Decoded(value, (failure,))

        accepted: dict[str, Any] = {}
        failures: list[ValidationFailure] = []
        for key, codec in self.fields.items():
            decoded = codec.decode(value.get(key), (*path, key))
            if decoded:
                accepted[key] = decoded.value
            else:
                failures.extend(decoded.failures)

        if failures:
            return Decoded(value, tuple(failures))  # type: ignore[arg-type]
        return Decoded(accepted)


def intersection[T](codecs: Iterable[Codec[Any]], name: str = "") -> IntersectionCodec[T]:
    """Combine codecs that must all pass, checked in the given order.

    Raises:
        ConfigurationError: If *codecs* is empty.
    """
    return IntersectionCodec(members=_members("intersection", codecs), name=name)


def union[T](codecs: Iterable[Codec[Any]], name: str = "") -> UnionCodec[T]:
    """Combine alternative codecs; the first one that passes wins.

    Raises:
        ConfigurationError: If *codecs* is empty.
    """
    return UnionCodec(members=_members("union", codecs), name=name)


def record(fields: Mapping[str, Codec[Any]], name: str = "Record") -> RecordCodec:
    """Declare a record schema: field name → codec, in iteration order.

    The field map is copied, so later changes to *fields* do not leak in.

    Raises:
        ConfigurationError: If *fields* is empty or holds a non-codec value
            or a non-string field name.
    """
    if not fields:
        raise ConfigurationError("record() needs at least one field")
    for key, codec in fields.items():
        if not isinstance(key, str) or not key:
            raise ConfigurationError(f"record() field names must be non-empty strings, got {key!r}")
        if not isinstance(codec, Codec):
            raise ConfigurationError(
                f"record() field {key!r} must be a codec, got {type(codec).__name__}"
            )
    return RecordCodec(fields=MappingProxyType(dict(fields)), name=name)
