import logging
from dataclasses import dataclass
from email.utils import formataddr

from django.conf import settings
from django.core.mail import EmailMessage, get_connection
from django.db import transaction

from .models import ContactMessage
from .utils import clean_header

logger = logging.getLogger("contact")


@dataclass(frozen=True)
class DeliveryTask:
    """Одне сповіщення власнику сайту про одне нове повідомлення."""
    message_id: int


def enqueue_delivery(message: ContactMessage) -> DeliveryTask:
    """
    Ставить доставку в чергу після коміту транзакції.
    Тут же можна буде додати повтори/backoff, не чіпаючи сигнал.
    """
    task = DeliveryTask(message_id=message.pk)
    transaction.on_commit(lambda: deliver(task))
    logger.info("Доставку поставлено в чергу", extra={"msg_id": message.pk})
    return task


def deliver(task: DeliveryTask) -> bool:
    try:
        message = ContactMessage.objects.get(pk=task.message_id)
    except ContactMessage.DoesNotExist:
        logger.warning("Повідомлення зникло до доставки", extra={"msg_id": task.message_id})
        return False
    return send_contact_notification(message)


def compose_notification(message: ContactMessage, connection=None) -> EmailMessage:
    subject = clean_header(f"New message from {message.name}: {message.subject}")
    body = "\n".join([
        f"Name: {message.name}",
        f"Email: {message.email}",
        f"Message: {message.message}",
    ])

    from_name = getattr(settings, "CONTACT_FROM_NAME", "") or ""
    from_email = settings.DEFAULT_FROM_EMAIL
    if from_name:
        from_email = formataddr((from_name, from_email))

    return EmailMessage(
        subject=subject,
        body=body,
        from_email=from_email,
        to=[settings.CONTACT_RECEIVER_EMAIL],
        reply_to=[clean_header(message.email)] if message.email else None,
        headers={"X-Contact-Message-ID": str(message.pk)},
        connection=connection,
    )


def send_contact_notification(message: ContactMessage) -> bool:
    """
    Надсилає лист власнику. Помилки логуються і не прокидаються далі,
    тому повторних викликів не буде.
    """
    from_email = getattr(settings, "DEFAULT_FROM_EMAIL", None)
    to_email = getattr(settings, "CONTACT_RECEIVER_EMAIL", None)
    if not from_email or not to_email:
        logger.error(
            "Не налаштовано адреси DEFAULT_FROM_EMAIL/CONTACT_RECEIVER_EMAIL",
            extra={"msg_id": message.pk},
        )
        return False

    try:
        logger.info("Спроба відправити лист", extra={"msg_id": message.pk, "to": to_email})

        # Нове SMTP-зʼєднання на кожну доставку
        connection = get_connection(
            fail_silently=False,
            timeout=getattr(settings, "EMAIL_TIMEOUT", 30),
        )
        compose_notification(message, connection=connection).send()
    except Exception as e:
        logger.error("Помилка при відправці пошти", exc_info=e, extra={"msg_id": message.pk})
        return False

    logger.info("Лист успішно відправлено", extra={"msg_id": message.pk})
    return True
