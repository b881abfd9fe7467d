"""Tests for formcodec.controller — field state, validate, reset."""

import logging

import pytest

from formcodec.codecs import (
    boolean,
    email,
    password,
    phone,
    record,
    refine,
    sign_up_form,
    string64,
    union,
)
from formcodec.config import FormConfig
from formcodec.controller import FormController, FormResult, create_controller
from formcodec.errors import ConfigurationError, UnknownFieldError
from formcodec.fields import CheckboxProps, FieldKind, TextInputProps, UnhandledProps

INITIAL = {
    "company": "",
    "email": "",
    "password": "",
    "phone": "",
    "sendNewsletter": False,
}


class FakeElement:
    """Element handle with a fixed document position."""

    def __init__(self, position: int) -> None:
        self.position = position
        self.focused = 0

    def compare_position(self, other: "FakeElement") -> int:
        return self.position - other.position

    def focus(self) -> None:
        self.focused += 1


class BrokenElement(FakeElement):
    def focus(self) -> None:
        raise RuntimeError("element detached")


def _sign_up(**kwargs) -> FormController:
    return create_controller(sign_up_form, INITIAL, **kwargs)


def _fill(form: FormController) -> None:
    form.set_field_value("email", "a@b.com")
    form.set_field_value("company", "Acme")
    form.set_field_value("password", "abcd")
    form.set_field_value("phone", "+14155552671")


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestCreate:
    def test_returns_controller(self) -> None:
        form = _sign_up()
        assert isinstance(form, FormController)
        assert form.state == INITIAL
        assert form.errors == {}

    def test_plain_mapping_schema(self) -> None:
        form = create_controller({"name": string64}, {"name": ""})
        assert list(form.schema.fields) == ["name"]

    def test_non_record_codec_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="record"):
            create_controller(string64, {"name": ""})  # type: ignore[arg-type]

    def test_missing_initial_field(self) -> None:
        with pytest.raises(ConfigurationError, match="missing"):
            create_controller(sign_up_form, {"company": ""})

    def test_undeclared_initial_field(self) -> None:
        with pytest.raises(ConfigurationError, match="undeclared"):
            create_controller(sign_up_form, {**INITIAL, "nickname": ""})

    def test_initial_value_copied(self) -> None:
        initial = dict(INITIAL)
        form = create_controller(sign_up_form, initial)
        initial["company"] = "Changed"
        assert form.initial_value["company"] == ""

    def test_one_ref_per_field(self) -> None:
        form = _sign_up()
        assert list(form.refs) == list(INITIAL)
        assert all(ref.current is None for ref in form.refs.values())

    def test_controllers_are_independent(self) -> None:
        a = _sign_up()
        b = _sign_up()
        a.set_field_value("company", "Acme")
        a.validate()
        assert b.state["company"] == ""
        assert b.errors == {}
        assert a.refs["company"] is not b.refs["company"]


# ---------------------------------------------------------------------------
# set_field_value
# ---------------------------------------------------------------------------


class TestSetFieldValue:
    def test_updates_state(self) -> None:
        form = _sign_up()
        form.set_field_value("company", "Acme")
        assert form.state["company"] == "Acme"

    def test_last_write_wins(self) -> None:
        form = _sign_up()
        form.set_field_value("company", "A")
        form.set_field_value("company", "B")
        assert form.state["company"] == "B"

    def test_does_not_validate(self) -> None:
        form = _sign_up()
        form.set_field_value("email", "not an email")
        assert form.errors == {}

    def test_unknown_field(self) -> None:
        form = _sign_up()
        with pytest.raises(UnknownFieldError) as exc_info:
            form.set_field_value("nickname", "x")
        assert exc_info.value.field == "nickname"
        assert "company" in str(exc_info.value)

    def test_initial_value_untouched(self) -> None:
        form = _sign_up()
        form.set_field_value("company", "Acme")
        assert form.initial_value["company"] == ""

    def test_state_is_a_copy(self) -> None:
        form = _sign_up()
        form.state["company"] = "Sneaky"
        assert form.state["company"] == ""


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidate:
    def test_initial_sign_up_errors(self) -> None:
        result = _sign_up().validate()
        assert isinstance(result, FormResult)
        assert not result
        assert result.value is None
        assert result.errors == {
            "company": "Can not be empty.",
            "email": "Can not be empty.",
            "password": "Can not be empty.",
            "phone": "Can not be empty.",
        }

    def test_filled_sign_up_passes(self) -> None:
        form = _sign_up()
        form.validate()
        _fill(form)
        result = form.validate()
        assert result
        assert result.errors == {}
        assert result.value == {
            "company": "Acme",
            "email": "a@b.com",
            "password": "abcd",
            "phone": "+14155552671",
            "sendNewsletter": False,
        }
        assert form.errors == {}

    def test_one_message_per_field(self) -> None:
        schema = record({"email": union([email, phone]), "phone": union([phone, password])})
        form = create_controller(schema, {"email": 1, "phone": 2})
        result = form.validate()
        assert set(result.errors) == {"email", "phone"}
        assert len(result.failures) == 4
        assert all(isinstance(msg, str) for msg in result.errors.values())

    def test_idempotent(self) -> None:
        form = _sign_up()
        form.set_field_value("email", "nope")
        first = form.validate()
        second = form.validate()
        assert first.errors == second.errors
        assert form.errors == second.errors

    def test_sees_every_prior_edit(self) -> None:
        form = _sign_up()
        _fill(form)
        form.set_field_value("email", "broken")
        assert form.validate().errors == {"email": "Email is not valid."}

    def test_errors_replaced_not_merged(self) -> None:
        form = _sign_up()
        form.validate()
        _fill(form)
        form.set_field_value("phone", "nope")
        assert form.validate().errors == {"phone": "Invalid phone number."}

    def test_message_overrides(self) -> None:
        form = _sign_up(config=FormConfig(messages={"NonEmptyString": "Required."}))
        assert set(form.validate().errors.values()) == {"Required."}

    def test_logs_outcome(self, caplog: pytest.LogCaptureFixture) -> None:
        form = _sign_up()
        with caplog.at_level(logging.DEBUG, logger="formcodec.controller"):
            form.validate()
        assert "company" in caplog.text


# ---------------------------------------------------------------------------
# Focus
# ---------------------------------------------------------------------------


class TestFocus:
    def test_focuses_first_invalid_in_document_order(self) -> None:
        form = _sign_up()
        _fill(form)
        form.set_field_value("company", "")
        form.set_field_value("phone", "x")
        company, phone_el = FakeElement(10), FakeElement(2)
        form.refs["company"].current = company
        form.refs["phone"].current = phone_el
        form.validate()
        assert phone_el.focused == 1
        assert company.focused == 0

    def test_valid_fields_not_focused(self) -> None:
        form = _sign_up()
        _fill(form)
        form.set_field_value("phone", "x")
        email_el, phone_el = FakeElement(0), FakeElement(5)
        form.refs["email"].current = email_el
        form.refs["phone"].current = phone_el
        form.validate()
        assert email_el.focused == 0
        assert phone_el.focused == 1

    def test_unmounted_is_noop(self) -> None:
        result = _sign_up().validate()
        assert set(result.errors) == {"company", "email", "password", "phone"}

    def test_failing_focus_does_not_change_result(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        form = _sign_up()
        form.refs["company"].current = BrokenElement(0)
        with caplog.at_level(logging.WARNING, logger="formcodec.refs"):
            result = form.validate()
        assert "company" in result.errors
        assert "Focusing the first invalid field failed" in caplog.text

    def test_disabled_by_config(self) -> None:
        form = _sign_up(config=FormConfig(focus_first_invalid=False))
        element = FakeElement(0)
        form.refs["company"].current = element
        form.validate()
        assert element.focused == 0

    def test_success_does_not_focus(self) -> None:
        form = _sign_up()
        _fill(form)
        element = FakeElement(0)
        form.refs["company"].current = element
        form.validate()
        assert element.focused == 0


# ---------------------------------------------------------------------------
# reset
# ---------------------------------------------------------------------------


class TestReset:
    def test_restores_nested_value_edited_in_place(self) -> None:
        form = create_controller(record({"tags": record({"a": string64})}), {"tags": {"a": "x"}})
        form.get_field_state("tags").value["a"] = "changed"
        form.reset()
        assert form.state["tags"] == {"a": "x"}
        assert form.initial_value["tags"] == {"a": "x"}

    def test_caller_initial_value_not_shared(self) -> None:
        initial = {"tags": {"a": "x"}}
        form = create_controller(record({"tags": record({"a": string64})}), initial)
        initial["tags"]["a"] = "changed"
        form.reset()
        assert form.state["tags"] == {"a": "x"}

    def test_restores_initial_value(self) -> None:
        form = _sign_up()
        form.set_field_value("email", "x")
        form.reset()
        assert form.state == INITIAL

    def test_next_validate_uses_restored_value(self) -> None:
        form = _sign_up()
        form.set_field_value("email", "x")
        form.reset()
        assert form.validate().errors["email"] == "Can not be empty."

    def test_keeps_errors_until_next_validate(self) -> None:
        form = _sign_up()
        form.validate()
        form.reset()
        assert form.errors["company"] == "Can not be empty."
        assert form.get_field_state("company").is_invalid

    def test_repeatable(self) -> None:
        form = _sign_up()
        _fill(form)
        form.reset()
        _fill(form)
        form.reset()
        assert form.state == INITIAL


# ---------------------------------------------------------------------------
# get_field_state
# ---------------------------------------------------------------------------


class TestFieldState:
    def test_text_field(self) -> None:
        form = _sign_up()
        state = form.get_field_state("email")
        assert state.kind is FieldKind.TEXT
        assert state.value == ""
        assert state.is_invalid is False
        assert state.error == ""
        assert isinstance(state.props, TextInputProps)
        assert state.props.ref is form.refs["email"]

    def test_checkbox_field(self) -> None:
        form = _sign_up()
        state = form.get_field_state("sendNewsletter")
        assert state.kind is FieldKind.CHECKBOX
        assert isinstance(state.props, CheckboxProps)
        assert state.props.is_checked is False

    def test_unhandled_field(self) -> None:
        positive = refine(int, lambda n: n > 0, "PositiveInt", "TooShort")
        form = create_controller({"age": positive}, {"age": 1})
        state = form.get_field_state("age")
        assert state.kind is FieldKind.UNHANDLED
        assert isinstance(state.props, UnhandledProps)

    def test_invalid_after_validate(self) -> None:
        form = _sign_up()
        form.validate()
        state = form.get_field_state("password")
        assert state.is_invalid is True
        assert state.error == "Can not be empty."
        assert form.get_field_state("sendNewsletter").is_invalid is False

    def test_text_on_change(self) -> None:
        form = _sign_up()
        form.get_field_state("company").props.on_change("Acme")  # type: ignore[union-attr]
        assert form.get_field_state("company").value == "Acme"

    def test_checkbox_on_change(self) -> None:
        form = _sign_up()
        form.get_field_state("sendNewsletter").props.on_change(True)  # type: ignore[union-attr]
        state = form.get_field_state("sendNewsletter")
        assert state.props.is_checked is True  # type: ignore[union-attr]

    def test_enter_submits(self) -> None:
        form = _sign_up()
        props = form.get_field_state("email").props
        assert isinstance(props, TextInputProps)
        props.on_key_press("Enter")
        assert form.get_field_state("email").is_invalid

    def test_other_keys_do_not_submit(self) -> None:
        form = _sign_up()
        props = form.get_field_state("email").props
        assert isinstance(props, TextInputProps)
        props.on_key_press("a")
        assert form.errors == {}

    def test_custom_submit_key(self) -> None:
        form = _sign_up(config=FormConfig(submit_key="Return"))
        assert form.submit_on_key("Enter") is None
        assert form.submit_on_key("Return") is not None

    def test_unknown_field(self) -> None:
        with pytest.raises(UnknownFieldError):
            _sign_up().get_field_state("nickname")

    def test_fields_in_schema_order(self) -> None:
        fields = _sign_up().fields
        assert list(fields) == list(INITIAL)
        assert fields["sendNewsletter"].kind is FieldKind.CHECKBOX

    def test_kind_of(self) -> None:
        form = _sign_up()
        assert form.kind_of("phone") is FieldKind.TEXT
        assert form.kind_of("sendNewsletter") is FieldKind.CHECKBOX


class TestEndToEnd:
    def test_sign_up_flow(self) -> None:
        form = create_controller(
            {
                "company": string64,
                "email": email,
                "password": password,
                "phone": phone,
                "sendNewsletter": boolean,
            },
            INITIAL,
        )
        first = form.validate()
        assert first.errors == {
            "company": "Can not be empty.",
            "email": "Can not be empty.",
            "password": "Can not be empty.",
            "phone": "Can not be empty.",
        }
        assert "sendNewsletter" not in first.errors

        form.set_field_value("email", "a@b.com")
        form.set_field_value("company", "Acme")
        form.set_field_value("password", "abcd")
        form.set_field_value("phone", "+14155552671")
        second = form.validate()
        assert second.errors == {}
        assert second.value is not None
        assert second.value["email"] == "a@b.com"
        assert all(not s.is_invalid for s in form.fields.values())
