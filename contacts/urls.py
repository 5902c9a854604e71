from django.urls import path
from .views import (
    ContactMessageView,
    FieldCheckView,
    PublicConfigView,
    ContactMessageAdminListAPIView,
)

urlpatterns = [
    path('', ContactMessageView.as_view(), name='contact-create'),
    path('check/', FieldCheckView.as_view(), name='contact-check'),
    path('config/', PublicConfigView.as_view(), name='contact-config'),
    path('admin/', ContactMessageAdminListAPIView.as_view(), name='contact-admin-list'),
]
