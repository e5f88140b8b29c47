from django.apps import AppConfig


class CoreConfig(AppConfig):
    name = 'apps.core'
    verbose_name = 'Console core'

    def ready(self):
        from . import receivers  # noqa: F401
