from django import forms

from .models import ContactMessage
from .validators import FORM_ERROR_MESSAGE, validate_submission


class ContactForm(forms.ModelForm):
    name = forms.CharField(max_length=100, required=False)
    email = forms.CharField(max_length=254, required=False)
    subject = forms.CharField(max_length=150, required=False)
    message = forms.CharField(required=False, widget=forms.Textarea(attrs={"rows": 6}))

    class Meta:
        model = ContactMessage
        fields = ['name', 'email', 'subject', 'message']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for name, field in self.fields.items():
            css = "form-textarea" if name == "message" else "form-input"
            field.widget.attrs.setdefault("class", css)
            field.widget.attrs.setdefault("id", name)

    def clean(self):
        cleaned = super().clean()
        for field, error in validate_submission(cleaned).items():
            if field not in self.errors:
                self.add_error(field, error)
        for field in self.errors:
            if field in self.fields:
                self.fields[field].widget.attrs["class"] += " error"
        return cleaned

    @property
    def banner(self) -> str:
        return FORM_ERROR_MESSAGE if self.errors else ""
