import pytest

from contacts.validators import (
    FORM_ERROR_MESSAGE,
    is_valid_email,
    validate_field,
    validate_submission,
)


@pytest.mark.parametrize("field, message", [
    ("name", "Name is required"),
    ("email", "Email is required"),
    ("subject", "Subject is required"),
    ("message", "Message is required"),
])
def test_empty_field_fails_with_required_message(field, message):
    assert validate_field(field, "") == (False, message)
    assert validate_field(field, "   ") == (False, message)


def test_name_length():
    assert validate_field("name", "A") == (False, "Name must be at least 2 characters")
    assert validate_field("name", "Al") == (True, "")
    assert validate_field("name", " A ") == (False, "Name must be at least 2 characters")


@pytest.mark.parametrize("value", ["a@b.c", "ann@x.com", "first.last@sub.example.org"])
def test_valid_emails(value):
    assert is_valid_email(value)
    assert validate_field("email", value) == (True, "")


@pytest.mark.parametrize("value", ["a@b", "a.b.com", "a@b@c.com", "a b@c.com"])
def test_invalid_emails(value):
    assert not is_valid_email(value)
    assert validate_field("email", value) == (False, "Please enter a valid email address")


def test_message_length():
    assert validate_field("message", "x" * 9) == (False, "Message must be at least 10 characters")
    assert validate_field("message", "x" * 10) == (True, "")


def test_unknown_field_passes():
    assert validate_field("phone", "") == (True, "")


def test_submission_all_valid(valid_payload):
    assert validate_submission(valid_payload) == {}


def test_submission_reports_every_failing_field():
    errors = validate_submission({"name": "", "email": "", "subject": "", "message": ""})
    assert errors == {
        "name": "Name is required and must be at least 2 characters",
        "email": "Please enter a valid email address",
        "subject": "Subject is required",
        "message": "Message must be at least 10 characters",
    }


def test_submission_single_invalid_field(valid_payload):
    valid_payload["message"] = "too short"
    assert validate_submission(valid_payload) == {
        "message": "Message must be at least 10 characters",
    }


def test_submission_missing_keys_are_empty():
    assert set(validate_submission({})) == {"name", "email", "subject", "message"}


def test_submit_wording_differs_from_field_wording():
    field_ok, field_msg = validate_field("name", "A")
    submit_msg = validate_submission({"name": "A"})["name"]
    assert not field_ok
    assert field_msg != submit_msg


def test_banner_text():
    assert FORM_ERROR_MESSAGE == "Please fix the errors above."
