"""Host adapters — feed submitted form data into a controller.

``apply_form_data()`` is the change-event adapter for a plain HTML form
post: it maps a flat ``Mapping[str, str]`` (e.g. parsed
``application/x-www-form-urlencoded`` data) onto ``set_field_value``
calls, using each field's kind to pick the value shape::

    apply_form_data(form, {"email": "a@b.com", "sendNewsletter": "on"})
    result = form.validate()
"""

from collections.abc import Mapping

from formcodec.controller import FormController
from formcodec.fields import FieldKind

# Browsers send "on" for a checked box with no value attribute
_TRUTHY = frozenset({"on", "true", "1", "yes"})


def checkbox_value(raw: str | None) -> bool:
    """Coerce a submitted checkbox value. An absent box is unchecked."""
    if raw is None:
        return False
    return raw.strip().lower() in _TRUTHY


def apply_form_data(controller: FormController, data: Mapping[str, str]) -> None:
    """Set every declared field from *data*.

    Text fields missing from *data* become ``""``. Checkboxes missing from
    *data* become False, matching how browsers omit unchecked boxes.
    Fields of unhandled kinds keep their value, and keys the schema does
    not declare are ignored.
    """
    for name in controller.schema.fields:
        match controller.kind_of(name):
            case FieldKind.TEXT:
                controller.set_field_value(name, data.get(name, ""))
            case FieldKind.CHECKBOX:
                controller.set_field_value(name, checkbox_value(data.get(name)))
            case _:
                continue
