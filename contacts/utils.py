from django.utils import timezone


def clean_header(s: str) -> str:
    # Захист від інʼєкцій заголовків у subject/headers
    return (s or "").replace("\r", " ").replace("\n", " ").strip()


def current_year() -> int:
    return timezone.now().year
