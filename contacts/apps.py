from django.apps import AppConfig


class ContactsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'contacts'

    def ready(self):
        # Import signals so they register when app is ready
        import contacts.signals  # noqa: F401
