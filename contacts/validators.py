"""
Правила валідації контактної форми.

Два набори повідомлень: `validate_field` для перевірки одного поля (blur),
`validate_submission` для перевірки всієї форми при відправці. Формулювання
у них різні, і обидва варіанти зберігаються.
"""
import re

FIELDS = ("name", "email", "subject", "message")

NAME_MIN_LENGTH = 2
MESSAGE_MIN_LENGTH = 10

FORM_ERROR_MESSAGE = "Please fix the errors above."
SENDING_LABEL = "Sending…"
SUBMIT_RESET_SECONDS = 5

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_RE.match(value or ""))


def _clean(value) -> str:
    return str(value or "").strip()


def validate_field(field: str, value) -> tuple[bool, str]:
    """Перевіряє одне поле. Повертає (ok, error_message)."""
    value = _clean(value)

    if field == "name":
        if not value:
            return False, "Name is required"
        if len(value) < NAME_MIN_LENGTH:
            return False, "Name must be at least 2 characters"
    elif field == "email":
        if not value:
            return False, "Email is required"
        if not is_valid_email(value):
            return False, "Please enter a valid email address"
    elif field == "subject":
        if not value:
            return False, "Subject is required"
    elif field == "message":
        if not value:
            return False, "Message is required"
        if len(value) < MESSAGE_MIN_LENGTH:
            return False, "Message must be at least 10 characters"

    return True, ""


def validate_submission(data) -> dict[str, str]:
    """
    Перевірка всієї форми перед відправкою.
    Повертає {field: message} для кожного поля з помилкою, або {} якщо все ок.
    """
    name = _clean(data.get("name"))
    email = _clean(data.get("email"))
    subject = _clean(data.get("subject"))
    message = _clean(data.get("message"))

    errors = {}
    if not name or len(name) < NAME_MIN_LENGTH:
        errors["name"] = "Name is required and must be at least 2 characters"
    if not email or not is_valid_email(email):
        errors["email"] = "Please enter a valid email address"
    if not subject:
        errors["subject"] = "Subject is required"
    if not message or len(message) < MESSAGE_MIN_LENGTH:
        errors["message"] = "Message must be at least 10 characters"
    return errors
