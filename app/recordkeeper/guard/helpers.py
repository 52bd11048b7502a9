import logging

from django.apps import apps
from django.conf import settings
from django.db import router
from django.db.models import QuerySet
from django.db.models.deletion import Collector

from recordkeeper.guard.exceptions import forbid_deletion
from recordkeeper.guard.handlers import forced_deletion
from recordkeeper.guard.models import UndeletableMixin

__all__ = [
    "get_guarded_models",
    "is_guarded_model",
    "force_delete",
]

logger = logging.getLogger(__name__)


def is_guarded_model(model) -> bool:
    return issubclass(model, UndeletableMixin) and not model._meta.abstract


def get_guarded_models(app_configs=None) -> list:
    if app_configs is None:
        models = apps.get_models()
    else:
        models = [model for app_config in app_configs for model in app_config.get_models()]

    return [model for model in models if is_guarded_model(model)]


def force_delete(target, using=None):
    """
    Permanently removes an element or all elements of a query set, including everything that cascades from them.

    This does not go through `delete()` of the model or the query set, but hands the elements to django's deletion
    collector directly. It is only available if `DELETION_GUARD_ALLOW_FORCE_DELETE` is enabled.

    :param target: model instance or query set
    :param using: database alias, defaults to the write database of the target
    :return: tuple of the number of deleted elements and a dict with the number of deletions per model label
    """
    is_queryset = isinstance(target, QuerySet)
    model = target.model if is_queryset else target.__class__

    if not settings.DELETION_GUARD_ALLOW_FORCE_DELETE:
        raise forbid_deletion(model, "force_delete", pk=None if is_queryset else target.pk)

    if is_queryset:
        using = using or target.db
        instances = list(target)
    else:
        using = using or router.db_for_write(model, instance=target)
        instances = [target]

    if not instances:
        return 0, {}

    logger.warning(
        "Force deleting %d element(s) of %s: %s",
        len(instances),
        model._meta.label,
        ", ".join(str(instance.pk) for instance in instances),
    )

    collector = Collector(using=using, origin=target)
    collector.collect(instances)

    with forced_deletion():
        return collector.delete()
