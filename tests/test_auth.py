"""
Tests for Google social login through django-allauth.

Covers settings, URL routing order, the login redirect to Google, the login
template tag, and the profile sync that runs after a Google login.
"""

from unittest.mock import Mock
from urllib.parse import parse_qs, urlparse

import pytest
from allauth.socialaccount.models import SocialAccount
from django.contrib.auth import get_user_model
from django.db import IntegrityError
from django.template import Context, Template
from django.test import RequestFactory
from django.urls import resolve, reverse

from apps.users.signals import sync_google_profile

User = get_user_model()


@pytest.fixture
def social_account(db, user):
    """Create a Google SocialAccount linked to a user."""
    return SocialAccount.objects.create(
        user=user,
        provider="google",
        uid="123456789",
        extra_data={
            "email": user.email,
            "given_name": "Gina",
            "family_name": "Googler",
            "picture": "https://example.com/photo.jpg",
        },
    )


def _sociallogin(user, extra_data, provider="google"):
    sociallogin = Mock()
    sociallogin.user = user
    sociallogin.account.provider = provider
    sociallogin.account.extra_data = extra_data
    return sociallogin


# ============================================================================
# 1. TestDjangoAllauthConfiguration
# ============================================================================


class TestDjangoAllauthConfiguration:
    """Tests for django-allauth configuration and settings."""

    def test_allauth_installed_apps(self, settings):
        installed = settings.INSTALLED_APPS
        assert "django.contrib.sites" in installed
        assert "allauth" in installed
        assert "allauth.account" in installed
        assert "allauth.socialaccount" in installed
        assert "allauth.socialaccount.providers.google" in installed

    def test_account_middleware_installed(self, settings):
        assert "allauth.account.middleware.AccountMiddleware" in settings.MIDDLEWARE

    def test_authentication_backends_configured(self, settings):
        backends = settings.AUTHENTICATION_BACKENDS
        assert backends == [
            "django.contrib.auth.backends.ModelBackend",
            "allauth.account.auth_backends.AuthenticationBackend",
        ]

    def test_site_id_configured(self, settings):
        assert settings.SITE_ID == 1

    def test_google_provider_configured(self, settings):
        google = settings.SOCIALACCOUNT_PROVIDERS["google"]
        assert google["SCOPE"] == ["profile", "email"]
        assert google["AUTH_PARAMS"] == {"access_type": "online"}

    def test_socialaccount_settings(self, settings):
        assert settings.SOCIALACCOUNT_AUTO_SIGNUP is True
        assert settings.SOCIALACCOUNT_EMAIL_AUTHENTICATION_AUTO_CONNECT is True
        assert settings.SOCIALACCOUNT_EMAIL_VERIFICATION == "none"

    def test_login_redirects(self, settings):
        assert settings.LOGIN_REDIRECT_URL == "/cats/"
        assert settings.LOGOUT_REDIRECT_URL == "/"


# ============================================================================
# 2. TestUrlRouting
# ============================================================================


class TestUrlRouting:
    def test_google_callback_url(self):
        assert reverse("google_callback") == "/accounts/google/login/callback/"

    def test_google_login_url(self):
        assert reverse("google_login") == "/accounts/google/login/"

    def test_accounts_resolve_to_allauth_not_app(self):
        match = resolve("/accounts/google/login/callback/")
        assert match.url_name == "google_callback"
        assert match.namespace == ""

    def test_app_routes_after_allauth(self):
        assert resolve("/").url_name == "home"
        assert resolve("/").namespace == "cats"


# ============================================================================
# 3. TestGoogleLoginRedirect
# ============================================================================


@pytest.mark.django_db
class TestGoogleLoginRedirect:
    def test_login_redirects_to_google_consent(self, client, google_social_app):
        response = client.post("/accounts/google/login/")

        assert response.status_code == 302
        location = urlparse(response["Location"])
        assert location.netloc == "accounts.google.com"

        query = parse_qs(location.query)
        assert query["client_id"] == ["test-google-client-id"]
        assert query["redirect_uri"] == ["http://testserver/accounts/google/login/callback/"]
        assert query["access_type"] == ["online"]
        assert {"profile", "email"} <= set(query["scope"][0].split())

    def test_provider_login_url_tag(self, google_social_app):
        request = RequestFactory().get("/")
        rendered = Template(
            "{% load socialaccount %}{% provider_login_url 'google' %}"
        ).render(Context({"request": request}))
        assert rendered.startswith("/accounts/google/login/")

    def test_home_page_renders_login_with_google(self, client, google_social_app):
        response = client.get("/")
        assert response.status_code == 200
        content = response.content.decode()
        assert "Login with Google" in content
        assert "/accounts/google/login/" in content

    def test_home_page_for_logged_in_user_offers_logout(self, authenticated_client):
        response = authenticated_client.get("/")
        content = response.content.decode()
        assert "Log Out" in content
        assert "Login with Google" not in content


# ============================================================================
# 4. TestSocialAccounts
# ============================================================================


@pytest.mark.django_db
class TestSocialAccounts:
    def test_get_user_by_social_uid(self, user, social_account):
        found_account = SocialAccount.objects.filter(provider="google", uid="123456789").first()

        assert found_account is not None
        assert found_account.user == user

    def test_no_duplicate_uid_per_provider(self, user, social_account):
        with pytest.raises(IntegrityError):
            SocialAccount.objects.create(
                user=user,
                provider="google",
                uid="123456789",
                extra_data={},
            )


# ============================================================================
# 5. TestGoogleProfileSync
# ============================================================================


@pytest.mark.django_db
class TestGoogleProfileSync:
    def test_copies_picture_and_names(self, user, social_account):
        sync_google_profile(request=None, sociallogin=_sociallogin(user, social_account.extra_data))

        user.refresh_from_db()
        assert user.avatar_url == "https://example.com/photo.jpg"
        assert user.first_name == "Gina"
        assert user.last_name == "Googler"

    def test_ignores_other_providers(self, user):
        sync_google_profile(
            request=None,
            sociallogin=_sociallogin(user, {"picture": "https://example.com/x.png"}, provider="github"),
        )

        user.refresh_from_db()
        assert user.avatar_url == ""

    def test_missing_fields_leave_user_unchanged(self, user):
        sync_google_profile(request=None, sociallogin=_sociallogin(user, {}))

        user.refresh_from_db()
        assert user.first_name == "Test"
        assert user.last_name == "User"

    def test_ignores_non_social_signup(self, user):
        # user_signed_up also fires for email/password signups
        sync_google_profile(request=None, user=user)

        user.refresh_from_db()
        assert user.avatar_url == ""

    def test_connected_to_user_signed_up(self, user):
        from allauth.account.signals import user_signed_up

        user_signed_up.send(
            sender=User,
            request=None,
            user=user,
            sociallogin=_sociallogin(user, {"picture": "https://example.com/new.jpg"}),
        )

        user.refresh_from_db()
        assert user.avatar_url == "https://example.com/new.jpg"

    def test_connected_to_social_account_updated(self, user):
        from allauth.socialaccount.signals import social_account_updated

        social_account_updated.send(
            sender=SocialAccount,
            request=None,
            sociallogin=_sociallogin(user, {"given_name": "Renamed"}),
        )

        user.refresh_from_db()
        assert user.first_name == "Renamed"

    def test_connected_to_social_account_added(self, user):
        # Existing email account linked to Google on its first Google login
        from allauth.socialaccount.signals import social_account_added

        social_account_added.send(
            sender=SocialAccount,
            request=None,
            sociallogin=_sociallogin(user, {"picture": "https://example.com/linked.jpg"}),
        )

        user.refresh_from_db()
        assert user.avatar_url == "https://example.com/linked.jpg"


# ============================================================================
# 6. TestUserModel
# ============================================================================


@pytest.mark.django_db
class TestUserModel:
    def test_email_is_username_field(self, user):
        assert User.USERNAME_FIELD == "email"
        assert str(user) == "test@example.com"

    def test_create_user_requires_email(self):
        with pytest.raises(ValueError, match="Email"):
            User.objects.create_user(email="", password="x")

    def test_create_superuser_flags(self, admin_user):
        assert admin_user.is_staff is True
        assert admin_user.is_superuser is True

    def test_create_superuser_rejects_non_staff(self):
        with pytest.raises(ValueError, match="is_staff"):
            User.objects.create_superuser(email="bad@example.com", password="x", is_staff=False)

    def test_full_name_falls_back_to_email(self, other_user):
        assert other_user.get_full_name() == "other@example.com"


# ============================================================================
# 7. TestUserAdmin
# ============================================================================


@pytest.mark.django_db
class TestUserAdmin:
    def test_changelist_shows_cat_count(self, client, admin_user, cat, social_account):
        client.force_login(admin_user)
        response = client.get("/admin/users/user/")
        assert response.status_code == 200
        assert b"Cats" in response.content

    def test_change_page(self, client, admin_user, user):
        client.force_login(admin_user)
        response = client.get(f"/admin/users/user/{user.id}/change/")
        assert response.status_code == 200
        assert b"Google profile" in response.content
