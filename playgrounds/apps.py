from django.apps import AppConfig


class PlaygroundsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "playgrounds"
    verbose_name = "Playgrounds"
