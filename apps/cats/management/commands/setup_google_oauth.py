"""
Register the Site and the Google SocialApp records django-allauth needs.

Credentials default to the GOOGLE_OAUTH_CLIENT_ID / GOOGLE_OAUTH_CLIENT_SECRET
settings (read from the environment). Idempotent: safe to re-run after
credential rotation or fresh DB setup.

The authorized redirect URI registered in the Google Cloud Console must be
http://<domain>/accounts/google/login/callback/

Usage:
    python manage.py setup_google_oauth
    python manage.py setup_google_oauth --client-id ID --secret SECRET --domain localhost:8000
"""
import logging

from allauth.socialaccount.models import SocialApp
from django.conf import settings
from django.contrib.sites.models import Site
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.urls import reverse

logger = logging.getLogger(__name__)

PROVIDER_ID = "google"
APP_NAME = "Google"


class Command(BaseCommand):
    help = "Create or update the Site and the Google Social Application for django-allauth"

    def add_arguments(self, parser):
        parser.add_argument(
            "--client-id",
            type=str,
            default=None,
            help="Google OAuth client ID (default: GOOGLE_OAUTH_CLIENT_ID)",
        )
        parser.add_argument(
            "--secret",
            type=str,
            default=None,
            help="Google OAuth client secret (default: GOOGLE_OAUTH_CLIENT_SECRET)",
        )
        parser.add_argument(
            "--domain",
            type=str,
            default=None,
            help="Site domain (default: SITE_DOMAIN)",
        )
        parser.add_argument(
            "--name",
            type=str,
            default=None,
            help="Site display name (default: SITE_NAME)",
        )

    def handle(self, *args, **options):
        client_id = options["client_id"] or settings.GOOGLE_OAUTH_CLIENT_ID
        secret = options["secret"] or settings.GOOGLE_OAUTH_CLIENT_SECRET
        domain = options["domain"] or settings.SITE_DOMAIN
        name = options["name"] or settings.SITE_NAME

        if not client_id or not secret:
            raise CommandError(
                "Missing Google OAuth credentials. Set GOOGLE_OAUTH_CLIENT_ID and "
                "GOOGLE_OAUTH_CLIENT_SECRET or pass --client-id and --secret."
            )

        with transaction.atomic():
            site, site_created = Site.objects.update_or_create(
                id=settings.SITE_ID,
                defaults={"domain": domain, "name": name},
            )
            # Admins may keep one Google app per site; only touch the one for SITE_ID.
            app = (
                SocialApp.objects.filter(provider=PROVIDER_ID, sites__id=site.id)
                .order_by("id")
                .first()
            )
            app_created = app is None
            if app_created:
                app = SocialApp(provider=PROVIDER_ID)
            app.name = APP_NAME
            app.client_id = client_id
            app.secret = secret
            app.key = ""
            app.save()
            app.sites.add(site)

        logger.info(
            "Google SocialApp %s for site %s (%s)",
            "created" if app_created else "updated",
            site.id,
            site.domain,
        )
        self.stdout.write(f"  {'created' if site_created else 'updated'}  Site {site.id}: {site.domain} ({site.name})")
        self.stdout.write(f"  {'created' if app_created else 'updated'}  {APP_NAME} (provider={PROVIDER_ID})")

        callback = reverse("google_callback")
        self.stdout.write(f"\nAuthorized redirect URI: http://{site.domain}{callback}")
        self.stdout.write(self.style.SUCCESS("Google SocialApp configured."))
