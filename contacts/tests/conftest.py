import pytest

from contacts.models import ContactMessage

OWNER = "owner@example.com"


@pytest.fixture(autouse=True)
def mail_settings(settings):
    settings.DEFAULT_FROM_EMAIL = "noreply@example.com"
    settings.CONTACT_RECEIVER_EMAIL = OWNER
    settings.CONTACT_FROM_NAME = "Portfolio Contact"
    settings.EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
    return settings


@pytest.fixture
def valid_payload():
    return {
        "name": "Ann",
        "email": "ann@x.com",
        "subject": "Hi",
        "message": "Hello there, testing.",
    }


@pytest.fixture
def make_message(db):
    def _make(**overrides):
        data = {
            "name": "Ann",
            "email": "ann@x.com",
            "subject": "Hi",
            "message": "Hello there, testing.",
        }
        data.update(overrides)
        return ContactMessage.objects.create(**data)
    return _make
