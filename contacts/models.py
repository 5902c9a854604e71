from django.db import models


class ContactMessage(models.Model):
    name = models.CharField(max_length=100)
    email = models.CharField(max_length=254)
    subject = models.CharField(max_length=150)
    message = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "contact_messages"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["created_at"], name="contact_msg_created_idx"),
        ]

    def __str__(self):
        return f"{self.name} — {self.subject}"
