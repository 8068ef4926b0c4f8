"""
Pytest configuration and fixtures for Cat Collector tests.
"""
import pytest
from django.contrib.auth import get_user_model


@pytest.fixture
def user(db):
    """Create a test user."""
    User = get_user_model()
    return User.objects.create_user(
        email="test@example.com",
        password="testpass123",
        first_name="Test",
        last_name="User",
    )


@pytest.fixture
def other_user(db):
    """Create a second user who owns nothing the first user can see."""
    User = get_user_model()
    return User.objects.create_user(
        email="other@example.com",
        password="otherpass123",
    )


@pytest.fixture
def admin_user(db):
    """Create a test admin user."""
    User = get_user_model()
    return User.objects.create_superuser(
        email="admin@example.com",
        password="adminpass123",
        first_name="Admin",
        last_name="User",
    )


@pytest.fixture
def site(db):
    """Get or create the default Site object required by django-allauth."""
    from django.contrib.sites.models import Site

    site, _ = Site.objects.update_or_create(
        id=1,
        defaults={
            "domain": "testserver",
            "name": "Test Server",
        },
    )
    return site


@pytest.fixture
def google_social_app(db, site):
    """Create a Google OAuth social app configuration."""
    from allauth.socialaccount.models import SocialApp

    app = SocialApp.objects.create(
        provider="google",
        name="Google",
        client_id="test-google-client-id",
        secret="test-google-secret",
    )
    app.sites.add(site)
    return app


@pytest.fixture
def authenticated_client(client, user):
    """Django test client logged in as ``user``."""
    client.force_login(user)
    return client


@pytest.fixture
def toy(db):
    from apps.cats.models import Toy

    return Toy.objects.create(name="Feather Wand", color="purple")


@pytest.fixture
def cat(db, user):
    from apps.cats.models import Cat

    return Cat.objects.create(
        name="Maki",
        breed="Tabby",
        description="Likes boxes",
        age=3,
        user=user,
    )


@pytest.fixture
def other_cat(db, other_user):
    from apps.cats.models import Cat

    return Cat.objects.create(
        name="Biscuit",
        breed="Siamese",
        description="Not yours",
        age=5,
        user=other_user,
    )
