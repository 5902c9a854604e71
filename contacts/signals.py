from django.db.models.signals import post_save
from django.dispatch import receiver

from .dispatch import enqueue_delivery
from .models import ContactMessage


@receiver(post_save, sender=ContactMessage)
def _contact_message_created(sender, instance: ContactMessage, created: bool, raw=False, **kwargs):
    # Лише нові записи; оновлення та завантаження фікстур не шлють листів
    if not created or raw:
        return
    enqueue_delivery(instance)
