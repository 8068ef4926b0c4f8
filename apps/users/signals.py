"""Signal receivers for social account events."""

import logging

logger = logging.getLogger(__name__)

# Google userinfo key -> User field
GOOGLE_PROFILE_FIELDS = {
    "picture": "avatar_url",
    "given_name": "first_name",
    "family_name": "last_name",
}


def sync_google_profile(request=None, sociallogin=None, **kwargs):
    """After a Google login, copy the profile picture and names onto the user."""
    if sociallogin is None or sociallogin.account.provider != "google":
        return

    user = sociallogin.user
    if user is None or user.pk is None:
        return

    extra_data = sociallogin.account.extra_data or {}
    changed = []
    for source, field in GOOGLE_PROFILE_FIELDS.items():
        value = extra_data.get(source)
        if value and getattr(user, field) != value:
            setattr(user, field, value)
            changed.append(field)

    if changed:
        user.save(update_fields=changed + ["updated_at"])
        logger.info("Synced Google profile fields %s for %s", ", ".join(changed), user.email)
