"""Controller configuration.

FormConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from formcodec.codecs.messages import VALIDATION_ERRORS
from formcodec.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Controller configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FormConfig(submit_key="Return", messages={"TooLong": "Keep it short."})
    """

    # Key name that triggers validate() from a text input
    submit_key: str = "Enter"

    # Focus the first invalid field (document order) after a failed validate()
    focus_first_invalid: bool = True

    # Display text overrides, message key -> text. Keys must exist in VALIDATION_ERRORS.
    messages: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        unknown = sorted(set(self.messages) - set(VALIDATION_ERRORS))
        if unknown:
            raise ConfigurationError(f"Unknown message keys in FormConfig.messages: {unknown}")
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))
