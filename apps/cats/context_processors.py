from allauth.socialaccount.models import SocialApp
from django.conf import settings


def google_login(request):
    """Expose whether a Google SocialApp is enabled for the current site.

    ``provider_login_url`` raises until one exists, so templates only render
    the login button when this is true.
    """
    user = getattr(request, "user", None)
    if user is not None and user.is_authenticated:
        return {"google_login_enabled": False}
    enabled = SocialApp.objects.filter(provider="google", sites__id=settings.SITE_ID).exists()
    return {"google_login_enabled": enabled}
