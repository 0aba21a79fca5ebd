from django.apps import AppConfig  # type: ignore


class SpacesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.spaces"
    verbose_name = "Spaces"
