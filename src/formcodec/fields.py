"""Field kinds and the UI-facing field descriptors.

Every schema field is resolved to a ``FieldKind`` once, when the
controller is built. The kind decides which props a field exposes:

- ``TEXT`` — string codecs: ``TextInputProps`` (value, change and key handlers)
- ``CHECKBOX`` — exactly ``boolean``: ``CheckboxProps`` (checked flag, change handler)
- ``UNHANDLED`` — anything else: ``UnhandledProps``, an empty extension point
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from formcodec.codecs.core import Codec
from formcodec.codecs.domain import text_input_field
from formcodec.codecs.rules import boolean
from formcodec.refs import ElementRef


class FieldKind(Enum):
    """Presentation category of a field."""

    TEXT = "text"
    CHECKBOX = "checkbox"
    UNHANDLED = "unhandled"


def resolve_field_kind(codec: Codec[Any]) -> FieldKind:
    """Decide how a field with *codec* is presented.

    ``boolean`` itself is a checkbox. Members of ``text_input_field``, and
    any other codec whose accepted values are all strings, are text inputs.
    """
    if codec is boolean:
        return FieldKind.CHECKBOX
    if codec in text_input_field.members or codec.base is str:
        return FieldKind.TEXT
    return FieldKind.UNHANDLED


@dataclass(frozen=True, slots=True)
class TextInputProps:
    """Props for a text-like input."""

    value: str
    on_change: Callable[[str], object]
    on_key_press: Callable[[str], object]
    ref: ElementRef
    kind: FieldKind = FieldKind.TEXT


@dataclass(frozen=True, slots=True)
class CheckboxProps:
    """Props for a checkbox."""

    is_checked: bool
    on_change: Callable[[bool], object]
    ref: ElementRef
    kind: FieldKind = FieldKind.CHECKBOX


@dataclass(frozen=True, slots=True)
class UnhandledProps:
    """No props: the field's codec has no presentation yet."""

    kind: FieldKind = FieldKind.UNHANDLED


type FieldProps = TextInputProps | CheckboxProps | UnhandledProps


@dataclass(frozen=True, slots=True)
class FieldState:
    """Snapshot of one field, derived from the controller's state.

    ``is_invalid`` is True only while the last ``validate()`` reported an
    error for this field. A field that was never validated and a field
    that passed look the same.
    """

    name: str
    kind: FieldKind
    value: Any
    is_invalid: bool
    error: str
    props: FieldProps
