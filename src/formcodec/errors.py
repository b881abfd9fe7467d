"""formcodec exception hierarchy.

Only programming mistakes are raised. A value that fails a codec is data,
carried in ``Decoded.failures`` and ``FormResult.errors``, never an exception.
"""


class FormcodecError(Exception):
    """Base for all formcodec-specific errors."""


class ConfigurationError(FormcodecError):
    """Raised when a codec, schema, or controller is set up incorrectly.

    Typically raised at construction time: empty ``intersection()`` or
    ``union()``, negative length bounds, unknown message keys, or an
    initial value that does not match the schema.
    """


class UnknownFieldError(ConfigurationError, KeyError):
    """Raised when a controller is asked about a field the schema does not declare."""

    def __init__(self, field: str, declared: tuple[str, ...] = ()) -> None:
        self.field = field
        self.declared = declared
        detail = f"Unknown field {field!r}"
        if declared:
            detail += f". Declared fields: {', '.join(declared)}"
        super().__init__(detail)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])
