"""Tests for formcodec.config — FormConfig frozen dataclass."""

import pytest

from formcodec.config import FormConfig
from formcodec.errors import ConfigurationError


class TestFormConfig:
    def test_defaults(self) -> None:
        cfg = FormConfig()

        assert cfg.submit_key == "Enter"
        assert cfg.focus_first_invalid is True
        assert dict(cfg.messages) == {}

    def test_override(self) -> None:
        cfg = FormConfig(submit_key="Return", focus_first_invalid=False)

        assert cfg.submit_key == "Return"
        assert cfg.focus_first_invalid is False

    def test_frozen(self) -> None:
        cfg = FormConfig()

        with pytest.raises(AttributeError):
            cfg.submit_key = "Tab"  # type: ignore[misc]

    def test_messages_copied_and_read_only(self) -> None:
        messages = {"TooLong": "Shorter, please."}
        cfg = FormConfig(messages=messages)
        messages["TooShort"] = "Longer."

        assert dict(cfg.messages) == {"TooLong": "Shorter, please."}
        with pytest.raises(TypeError):
            cfg.messages["TooShort"] = "x"  # type: ignore[index]

    def test_unknown_message_key(self) -> None:
        with pytest.raises(ConfigurationError, match="NotAKey"):
            FormConfig(messages={"NotAKey": "?"})

