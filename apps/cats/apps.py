from django.apps import AppConfig


class CatsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.cats"
    verbose_name = "Cat Collector"

    def ready(self):
        from apps.cats import checks  # noqa: F401
