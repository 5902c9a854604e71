from django.utils import timezone

from contacts.utils import clean_header, current_year


def test_clean_header_strips_newlines():
    assert clean_header("Hi\r\nBcc: evil@x.com") == "Hi  Bcc: evil@x.com"
    assert clean_header(None) == ""


def test_current_year():
    assert current_year() == timezone.now().year
