from django.conf import settings

from .utils import current_year


def site(request):
    return {
        "current_year": current_year(),
        "site_public_config": getattr(settings, "SITE_PUBLIC_CONFIG", {}),
    }
