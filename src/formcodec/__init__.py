"""formcodec — composable form codecs and a field-state controller.

Validate structured input (form data) against a schema of small,
composable codecs, and get back one readable message per invalid field.

Basic usage::

    from formcodec import create_controller
    from formcodec.codecs import sign_up_form

    form = create_controller(sign_up_form, {
        "company": "", "email": "", "password": "", "phone": "",
        "sendNewsletter": False,
    })
    form.set_field_value("email", "a@b.com")
    result = form.validate()
    if not result:
        print(result.errors)   # {"company": "Can not be empty.", ...}

Custom codecs::

    from formcodec.codecs import intersection, max_length, non_empty_trimmed_string

    Title = intersection([non_empty_trimmed_string, max_length(200)])
"""

__version__ = "0.1.0"
__all__ = [
    "CheckboxProps",
    "ConfigurationError",
    "ElementHandle",
    "ElementRef",
    "FieldKind",
    "FieldState",
    "FormConfig",
    "FormController",
    "FormResult",
    "FormcodecError",
    "TextInputProps",
    "UnhandledProps",
    "UnknownFieldError",
    "apply_form_data",
    "create_controller",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import formcodec`` fast while providing a clean top-level API.
    """
    if name in ("FormController", "FormResult", "create_controller"):
        from formcodec import controller as _ctl

        return getattr(_ctl, name)

    if name == "FormConfig":
        from formcodec.config import FormConfig

        return FormConfig

    if name in ("FormcodecError", "ConfigurationError", "UnknownFieldError"):
        from formcodec import errors as _errors

        return getattr(_errors, name)

    if name in ("FieldKind", "FieldState", "TextInputProps", "CheckboxProps", "UnhandledProps"):
        from formcodec import fields as _fields

        return getattr(_fields, name)

    if name in ("ElementHandle", "ElementRef"):
        from formcodec import refs as _refs

        return getattr(_refs, name)

    if name == "apply_form_data":
        from formcodec.adapters import apply_form_data

        return apply_form_data

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
