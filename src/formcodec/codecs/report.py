"""Turn decode failures into something a person can read."""

from collections.abc import Iterable, Mapping

from formcodec.codecs.result import Decoded, ValidationFailure


def errors_to_form_errors(
    failures: Iterable[ValidationFailure],
    messages: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Project failures onto one message per top-level field.

    The first path segment of each failure names the field. Only the first
    failure seen for a field is kept, so the result never holds more than
    one message per field no matter how many failures a field produced.
    Failures at the root (empty path) name no field and are skipped.

    Args:
        failures: Failures in the order the codec produced them.
        messages: Optional overrides, message key → display text.

    Returns:
        A dict of field name → message, in first-failure order.
    """
    form_errors: dict[str, str] = {}
    for failure in failures:
        key = failure.field
        if key is None or key in form_errors:
            continue
        if messages is not None and failure.message_key in messages:
            form_errors[key] = messages[failure.message_key]
        else:
            form_errors[key] = failure.message
    return form_errors


def _format_path(failure: ValidationFailure) -> str:
    if not failure.path:
        return "<root>"
    return ".".join(str(segment) for segment in failure.path)


def report(decoded: Decoded[object]) -> list[str]:
    """Describe a decode result line by line.

    Example::

        >>> report(email.decode(""))
        ['<root>: Can not be empty.']
        >>> report(sign_up_form.decode({"company": "Acme"}))[0]
        'email: Invalid string type.'
    """
    if decoded:
        return ["No errors!"]
    return [f"{_format_path(f)}: {f.message}" for f in decoded.failures]
