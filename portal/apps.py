from django.apps import AppConfig


class PortalConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'portal'
    verbose_name = 'HealHub portal'

    def ready(self) -> None:
        # Connect auth signal receivers for the session context
        from . import session  # noqa: F401
