import pytest
from django.core import mail
from django.urls import reverse

from contacts.forms import ContactForm
from contacts.models import ContactMessage

pytestmark = pytest.mark.django_db


def test_contact_page_renders(client):
    resp = client.get(reverse("contact-page"))
    assert resp.status_code == 200
    content = resp.content.decode()
    assert 'class="contact-form"' in content
    assert 'data-sending-label="Sending…"' in content
    assert 'data-reset-after="5000"' in content
    assert '<div class="error-message">' not in content


def test_valid_post_redirects_and_stores(client, valid_payload, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        resp = client.post(reverse("contact-page"), valid_payload)

    assert resp.status_code == 302
    assert resp.url == reverse("contact-thanks")
    assert ContactMessage.objects.count() == 1
    assert len(mail.outbox) == 1


def test_invalid_post_shows_inline_errors_and_banner(client, valid_payload):
    valid_payload["email"] = "a.b.com"
    resp = client.post(reverse("contact-page"), valid_payload)

    assert resp.status_code == 200
    content = resp.content.decode()
    assert "Please enter a valid email address" in content
    assert "Please fix the errors above." in content
    assert ContactMessage.objects.count() == 0


def test_form_marks_errored_fields(valid_payload):
    valid_payload["name"] = "A"
    form = ContactForm(data=valid_payload)

    assert not form.is_valid()
    assert form.errors["name"] == ["Name is required and must be at least 2 characters"]
    assert "error" in form.fields["name"].widget.attrs["class"].split()
    assert "error" not in form.fields["email"].widget.attrs["class"].split()
    assert form.banner == "Please fix the errors above."


def test_valid_form_has_no_banner(valid_payload):
    form = ContactForm(data=valid_payload)
    assert form.is_valid()
    assert form.banner == ""


def test_thanks_page_shows_year(client):
    resp = client.get(reverse("contact-thanks"))
    assert resp.status_code == 200
    assert str(resp.context["current_year"]) in resp.content.decode()


def test_contact_page_wires_browser_script(client):
    resp = client.get(reverse("contact-page"))
    content = resp.content.decode()
    assert '<script src="/static/contacts/contact.js" defer></script>' in content
    assert f'data-check-url="{reverse("contact-check")}"' in content
    assert 'data-error-banner="Please fix the errors above."' in content


def test_contact_script_ships_with_app():
    from django.contrib.staticfiles import finders

    path = finders.find("contacts/contact.js")
    assert path is not None
    with open(path, encoding="utf-8") as fh:
        script = fh.read()
    assert "dataset.checkUrl" in script
    assert "dataset.resetAfter" in script
    assert "preventDefault" in script
