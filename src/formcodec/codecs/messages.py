"""Validation error catalog.

One object maps every message key to its display text, so every failure a
codec can produce has a translation by construction. Translating the
catalog is the host's job; see ``FormConfig.messages``.
"""

from collections.abc import Mapping
from types import MappingProxyType

from formcodec.errors import ConfigurationError

VALIDATION_ERRORS: Mapping[str, str] = MappingProxyType(
    {
        "TypeString": "Invalid string type.",
        "NonEmptyString": "Can not be empty.",
        "TrimmedString": "Please remove leading and trailing whitespaces.",
        "TooLong": "Too long.",
        "TooShort": "Too short.",
        "EmailString": "Email is not valid.",
        "PhoneString": "Invalid phone number.",
        "TypeBoolean": "Invalid boolean type.",
        "TypeRecord": "Invalid object type.",
    }
)


def message_for(key: str) -> str:
    """Return the catalog text for *key*.

    Raises:
        ConfigurationError: If *key* is not in the catalog.
    """
    try:
        return VALIDATION_ERRORS[key]
    except KeyError:
        known = ", ".join(VALIDATION_ERRORS)
        raise ConfigurationError(
            f"Unknown message key {key!r}. Known keys: {known}"
        ) from None
