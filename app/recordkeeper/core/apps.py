from django.apps import AppConfig

__all__ = [
    "CoreConfig",
]


class CoreConfig(AppConfig):
    name = "recordkeeper.core"
    verbose_name = "Core"
