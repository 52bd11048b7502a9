import logging

from django.apps import AppConfig
from django.core import checks
from django.db.models.signals import pre_delete

__all__ = [
    "GuardConfig",
]

logger = logging.getLogger(__name__)


class GuardConfig(AppConfig):
    name = "recordkeeper.guard"
    verbose_name = "Deletion guard"

    def ready(self):
        from recordkeeper.guard.checks import check_deletion_guards
        from recordkeeper.guard.handlers import reject_deletion
        from recordkeeper.guard.helpers import get_guarded_models

        for model in get_guarded_models():
            pre_delete.connect(
                reject_deletion,
                sender=model,
                dispatch_uid=f"reject_deletion_{model._meta.label_lower}",
            )
            logger.debug(f"Deletion guard installed for {model._meta.label}")

        checks.register(check_deletion_guards, checks.Tags.models)
