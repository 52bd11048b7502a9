from django.core import checks
from django.db.models.signals import pre_delete

from recordkeeper.guard.models import UndeletableQuerySet

__all__ = [
    "check_deletion_guards",
    "check_guarded_model",
]


def _is_guarded_manager(manager):
    return issubclass(getattr(manager, "_queryset_class", type(None)), UndeletableQuerySet)


def check_guarded_model(model):
    """
    Verifies that every removal entry point of an undeletable model is intercepted.
    """
    errors = []

    if not _is_guarded_manager(model._default_manager):
        errors.append(
            checks.Error(
                f"The default manager of {model._meta.label} does not use an UndeletableQuerySet.",
                hint="Use UndeletableManager (or a manager created from a subclass of UndeletableQuerySet).",
                obj=model,
                id="guard.E001",
            ),
        )

    if not pre_delete.has_listeners(model):
        errors.append(
            checks.Error(
                f"No pre_delete receiver is connected for {model._meta.label}, cascading deletions are not rejected.",
                hint="Add 'recordkeeper.guard' to INSTALLED_APPS.",
                obj=model,
                id="guard.E002",
            ),
        )

    if not _is_guarded_manager(model._base_manager):
        errors.append(
            checks.Warning(
                f"The base manager of {model._meta.label} does not use an UndeletableQuerySet.",
                hint='Set base_manager_name = "objects" in the Meta class of the model.',
                obj=model,
                id="guard.W001",
            ),
        )

    return errors


def check_deletion_guards(app_configs=None, **kwargs):
    from recordkeeper.guard.helpers import get_guarded_models

    errors = []

    for model in get_guarded_models(app_configs):
        errors.extend(check_guarded_model(model))

    return errors
