"""Django system checks for Google social login.

Each check maps a known setup mistake to the step that fixes it, so the
problem shows up in ``manage.py check`` rather than as a traceback at
login time.
"""

from __future__ import annotations

import importlib

from django.apps import apps
from django.conf import settings
from django.core import checks
from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections
from django.db.migrations.exceptions import InconsistentMigrationHistory
from django.db.migrations.loader import MigrationLoader

# Libraries django-allauth needs for Google login but does not always pull in.
# (module, check id)
REQUIRED_MODULES = [
    ("requests", "catcollector.E001"),
    ("cryptography", "catcollector.E002"),
]

REQUIRED_APPS = [
    "django.contrib.sites",
    "allauth",
    "allauth.account",
    "allauth.socialaccount",
    "allauth.socialaccount.providers.google",
]


def _module_available(name: str) -> bool:
    try:
        importlib.import_module(name)
    except ImportError:
        return False
    return True


@checks.register()
def social_login_dependencies(app_configs, **kwargs):
    """Error when a library the Google provider imports is missing."""
    errors = []
    for module, check_id in REQUIRED_MODULES:
        if not _module_available(module):
            errors.append(
                checks.Error(
                    f"No module named '{module}'.",
                    hint=f"Install it with: pip install {module}",
                    id=check_id,
                )
            )
    return errors


@checks.register()
def social_login_apps_installed(app_configs, **kwargs):
    """Error when an app needed for the Google login URL is not installed."""
    missing = [name for name in REQUIRED_APPS if name not in settings.INSTALLED_APPS]
    if not missing:
        return []
    return [
        checks.Error(
            "Google login URL is unavailable: %s missing from INSTALLED_APPS." % ", ".join(missing),
            hint="Add %s to INSTALLED_APPS and restart the server." % ", ".join(missing),
            id="catcollector.E003",
        )
    ]


@checks.register(checks.Tags.database)
def migration_history_consistent(app_configs, databases=None, **kwargs):
    """Error when migrations were applied out of dependency order.

    Typically allauth's socialaccount migrations ran before the sites
    framework's, which ``migrate`` reports as InconsistentMigrationHistory.
    """
    errors = []
    for alias in databases or []:
        connection = connections[alias]
        try:
            loader = MigrationLoader(connection, ignore_no_migrations=True)
            loader.check_consistent_history(connection)
        except DatabaseError:
            # Unreachable database; `migrate` reports the connection error itself.
            continue
        except InconsistentMigrationHistory as exc:
            errors.append(
                checks.Error(
                    str(exc),
                    hint=(
                        "Run `manage.py migrate sites` before `manage.py migrate`, "
                        "or use `manage.py migrate_social` which runs both in order."
                    ),
                    obj=alias,
                    id="catcollector.E004",
                )
            )
    return errors


@checks.register(checks.Tags.database)
def google_social_app_configured(app_configs, databases=None, **kwargs):
    """Warn when the Site or the Google Social Application record is missing."""
    if not databases or DEFAULT_DB_ALIAS not in databases:
        return []
    if not apps.is_installed("django.contrib.sites") or not apps.is_installed("allauth.socialaccount"):
        # Reported by social_login_apps_installed
        return []

    from allauth.socialaccount.models import SocialApp
    from django.contrib.sites.models import Site

    try:
        site_exists = Site.objects.filter(id=settings.SITE_ID).exists()
        app_exists = SocialApp.objects.filter(provider="google", sites__id=settings.SITE_ID).exists()
    except DatabaseError:
        # Tables not created yet; migrate first.
        return []

    messages = []
    if not site_exists:
        messages.append(
            checks.Warning(
                f"No Site with id {settings.SITE_ID} (SITE_ID).",
                hint="Run `manage.py setup_google_oauth` or add the Site in the admin.",
                id="catcollector.W002",
            )
        )
    if not app_exists:
        messages.append(
            checks.Warning(
                f"No Google Social Application is enabled for site {settings.SITE_ID}.",
                hint=(
                    "Run `manage.py setup_google_oauth` with GOOGLE_OAUTH_CLIENT_ID and "
                    "GOOGLE_OAUTH_CLIENT_SECRET set, or create it in the admin under "
                    "Social Accounts > Social applications."
                ),
                id="catcollector.W001",
            )
        )
    return messages
