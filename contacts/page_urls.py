from django.urls import path
from .views import ContactPageView, ContactThanksView

urlpatterns = [
    path('', ContactPageView.as_view(), name='contact-page'),
    path('thanks/', ContactThanksView.as_view(), name='contact-thanks'),
]
