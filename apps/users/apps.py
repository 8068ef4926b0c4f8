from django.apps import AppConfig


class UsersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.users"
    verbose_name = "Users"

    def ready(self):
        from allauth.account.signals import user_signed_up
        from allauth.socialaccount.signals import social_account_added, social_account_updated

        from apps.users.signals import sync_google_profile

        # New user, existing user auto-connected by email, returning user
        user_signed_up.connect(sync_google_profile)
        social_account_added.connect(sync_google_profile)
        social_account_updated.connect(sync_google_profile)
