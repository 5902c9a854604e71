import logging
from django.conf import settings
from django.urls import reverse_lazy
from django.views.generic import FormView, TemplateView
from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .forms import ContactForm
from .models import ContactMessage
from .serializers import (
    ContactMessageSerializer,
    ContactMessageAdminSerializer,
    FieldCheckSerializer,
)
from .validators import FORM_ERROR_MESSAGE, SENDING_LABEL, SUBMIT_RESET_SECONDS

logger = logging.getLogger("contact")


class ContactMessageView(APIView):
    """
    Прийом контактної форми (form-encoded або JSON).
    POST /api/contacts/
    Лист власнику надсилає сигнал після збереження, а не цей view.
    """
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def post(self, request):
        logger.info("POST /api/contacts/ — отримано дані", extra={"fields": sorted(request.data.keys())})

        serializer = ContactMessageSerializer(data=request.data)
        if not serializer.is_valid():
            errors = {field: str(msgs[0]) for field, msgs in serializer.errors.items()}
            logger.warning("Валідація не пройшла", extra={"errors": errors})
            return Response(
                {"detail": FORM_ERROR_MESSAGE, "errors": errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        msg = serializer.save()
        logger.info("Повідомлення збережене в БД", extra={"id": msg.id})

        return Response(
            {"success": "Your message has been received.", "id": msg.id},
            status=status.HTTP_201_CREATED,
        )


class FieldCheckView(APIView):
    """
    Перевірка одного поля (аналог blur).
    POST /api/contacts/check/  body: {"field": "email", "value": "a@b.c"}
    """
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def post(self, request):
        ser = FieldCheckSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        return Response(ser.check())


class PublicConfigView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response(getattr(settings, "SITE_PUBLIC_CONFIG", {}))


class ContactMessageAdminListAPIView(generics.ListAPIView):
    """
    Список повідомлень для власника сайту.
    GET /api/contacts/admin/?email=<email>&ordering=created_at
    """
    queryset = ContactMessage.objects.all()
    serializer_class = ContactMessageAdminSerializer
    permission_classes = [permissions.IsAdminUser]
    filterset_fields = ["email"]
    ordering_fields = ["created_at"]
    ordering = ["-created_at"]


class ContactPageView(FormView):
    template_name = "contacts/contact.html"
    form_class = ContactForm
    success_url = reverse_lazy("contact-thanks")

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx.update({
            "sending_label": SENDING_LABEL,
            "error_banner": FORM_ERROR_MESSAGE,
            "submit_reset_ms": SUBMIT_RESET_SECONDS * 1000,
        })
        return ctx

    def form_valid(self, form):
        msg = form.save()
        logger.info("Повідомлення збережене в БД", extra={"id": msg.id})
        return super().form_valid(form)

    def form_invalid(self, form):
        logger.warning("Валідація не пройшла", extra={"errors": form.errors.get_json_data()})
        return super().form_invalid(form)


class ContactThanksView(TemplateView):
    template_name = "contacts/thanks.html"
