"""Field-state controller — holds a form's value and its validation errors.

One controller per displayed form. It owns the current value, the last
set of field errors, and one ``ElementRef`` per field, and derives
everything the UI needs from those::

    form = create_controller(sign_up_form, {
        "company": "", "email": "", "password": "", "phone": "",
        "sendNewsletter": False,
    })
    form.set_field_value("email", "a@b.com")
    result = form.validate()
    if not result:
        # result.errors == {"company": "Can not be empty.", ...}
        ...

Errors change only through ``validate()``. ``reset()`` restores the
initial value and leaves the errors of the last ``validate()`` in place;
the next ``validate()`` decides what is current.
"""

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import partial
from types import MappingProxyType
from typing import Any

from formcodec.codecs.core import Codec, RecordCodec, record
from formcodec.codecs.report import errors_to_form_errors
from formcodec.codecs.result import ValidationFailure
from formcodec.config import FormConfig
from formcodec.errors import ConfigurationError, UnknownFieldError
from formcodec.fields import (
    CheckboxProps,
    FieldKind,
    FieldProps,
    FieldState,
    TextInputProps,
    UnhandledProps,
    resolve_field_kind,
)
from formcodec.refs import ElementRef, focus_first

logger = logging.getLogger("formcodec.controller")


@dataclass(frozen=True, slots=True)
class FormResult:
    """The outcome of ``FormController.validate()``.

    ``value`` is the decoded form on success and None otherwise.
    ``errors`` maps each invalid field to exactly one message.
    ``failures`` keeps every raw failure for callers that want detail.
    Falsy when invalid::

        result = form.validate()
        if not result:
            show(result.errors)
    """

    value: dict[str, Any] | None = None
    errors: dict[str, str] = field(default_factory=dict)
    failures: tuple[ValidationFailure, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True if every field passed."""
        return not self.errors and not self.failures

    def __bool__(self) -> bool:
        return self.is_valid


def _as_record(schema: RecordCodec | Mapping[str, Codec[Any]]) -> RecordCodec:
    if isinstance(schema, RecordCodec):
        return schema
    if isinstance(schema, Codec):
        raise ConfigurationError(
            f"A form schema must be a record, got {type(schema).__name__} {schema.name!r}"
        )
    return record(schema)


class FormController:
    """Binds a record schema to a mutable value.

    Field names are fixed by the schema. Every method that takes a field
    name raises ``UnknownFieldError`` for a name the schema does not declare.
    """

    __slots__ = ("_config", "_errors", "_initial", "_kinds", "_refs", "_schema", "_value")

    def __init__(
        self,
        schema: RecordCodec | Mapping[str, Codec[Any]],
        initial_value: Mapping[str, Any],
        *,
        config: FormConfig | None = None,
    ) -> None:
        self._schema = _as_record(schema)
        self._config = config or FormConfig()

        names = tuple(self._schema.fields)
        missing = [n for n in names if n not in initial_value]
        extra = [k for k in initial_value if k not in self._schema.fields]
        if missing or extra:
            raise ConfigurationError(
                f"Initial value does not match schema {self._schema.name!r}: "
                f"missing {missing}, undeclared {extra}"
            )

        self._initial: Mapping[str, Any] = MappingProxyType(
            copy.deepcopy({n: initial_value[n] for n in names})
        )
        self._value: dict[str, Any] = copy.deepcopy(dict(self._initial))
        self._errors: dict[str, str] = {}
        # Resolved once; the schema cannot change under a controller.
        self._kinds: dict[str, FieldKind] = {
            n: resolve_field_kind(c) for n, c in self._schema.fields.items()
        }
        self._refs: dict[str, ElementRef] = {n: ElementRef(n) for n in names}

    # -- Read-only views --

    @property
    def schema(self) -> RecordCodec:
        return self._schema

    @property
    def config(self) -> FormConfig:
        return self._config

    @property
    def initial_value(self) -> Mapping[str, Any]:
        return self._initial

    @property
    def state(self) -> dict[str, Any]:
        """A copy of the current value."""
        return dict(self._value)

    @property
    def errors(self) -> dict[str, str]:
        """A copy of the errors from the last ``validate()``."""
        return dict(self._errors)

    @property
    def refs(self) -> Mapping[str, ElementRef]:
        return MappingProxyType(self._refs)

    @property
    def fields(self) -> dict[str, FieldState]:
        """Every field's state, in schema order."""
        return {name: self.get_field_state(name) for name in self._schema.fields}

    def kind_of(self, name: str) -> FieldKind:
        self._check_field(name)
        return self._kinds[name]

    # -- Operations --

    def set_field_value(self, name: str, value: Any) -> None:
        """Replace one field's current value. Does not validate."""
        self._check_field(name)
        self._value[name] = value

    def validate(self) -> FormResult:
        """Decode the whole current value.

        On success the errors are cleared and the decoded value returned.
        On failure each invalid field gets exactly one message, and the
        first invalid field in document order is focused when its element
        is mounted. Focusing never changes the result.
        """
        decoded = self._schema.decode(self._value)
        if decoded:
            self._errors = {}
            logger.debug("Form %r is valid", self._schema.name)
            return FormResult(value=decoded.value)

        errors = errors_to_form_errors(decoded.failures, self._config.messages)
        self._errors = errors
        logger.debug("Form %r has invalid fields: %s", self._schema.name, ", ".join(errors))

        if self._config.focus_first_invalid:
            focus_first(self._refs[name] for name in errors)

        return FormResult(errors=dict(errors), failures=decoded.failures)

    def reset(self) -> None:
        """Restore the initial value. Errors stay until the next ``validate()``."""
        self._value = copy.deepcopy(dict(self._initial))

    def submit_on_key(self, key: str) -> FormResult | None:
        """Validate when *key* is the configured submit key (Enter by default)."""
        if key != self._config.submit_key:
            return None
        return self.validate()

    def get_field_state(self, name: str) -> FieldState:
        """Derive the UI-facing state of one field."""
        self._check_field(name)
        kind = self._kinds[name]
        value = self._value[name]
        return FieldState(
            name=name,
            kind=kind,
            value=value,
            is_invalid=name in self._errors,
            error=self._errors.get(name, ""),
            props=self._props(name, kind, value),
        )

    # -- Internal --

    def _props(self, name: str, kind: FieldKind, value: Any) -> FieldProps:
        match kind:
            case FieldKind.TEXT:
                return TextInputProps(
                    value=value,
                    on_change=partial(self.set_field_value, name),
                    on_key_press=self.submit_on_key,
                    ref=self._refs[name],
                )
            case FieldKind.CHECKBOX:
                return CheckboxProps(
                    is_checked=bool(value),
                    on_change=partial(self.set_field_value, name),
                    ref=self._refs[name],
                )
            case _:
                return UnhandledProps()

    def _check_field(self, name: str) -> None:
        if name not in self._kinds:
            raise UnknownFieldError(name, tuple(self._kinds))

    def __repr__(self) -> str:
        return f"FormController({self._schema.name!r}, invalid={sorted(self._errors)})"


def create_controller(
    schema: RecordCodec | Mapping[str, Codec[Any]],
    initial_value: Mapping[str, Any],
    *,
    config: FormConfig | None = None,
) -> FormController:
    """Create a controller for one form instance.

    Args:
        schema: A ``record()`` codec, or a mapping of field name → codec.
        initial_value: Value for every declared field; restored by ``reset()``.
        config: Optional ``FormConfig``.

    Raises:
        ConfigurationError: If the schema is not a record or the initial
            value's keys differ from the schema's fields.
    """
    return FormController(schema, initial_value, config=config)
