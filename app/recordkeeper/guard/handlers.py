import threading
from contextlib import contextmanager

from recordkeeper.guard.exceptions import forbid_deletion

__all__ = [
    "forced_deletion",
    "is_forced_deletion",
    "reject_deletion",
]

local_state = threading.local()


@contextmanager
def forced_deletion():
    local_state.forced_deletion = True
    try:
        yield
    finally:
        local_state.forced_deletion = False


def is_forced_deletion():
    return getattr(local_state, "forced_deletion", False)


def reject_deletion(sender, instance, **kwargs):
    """
    pre_delete receiver for undeletable models.

    The deletion collector removes related elements (e.g., via `on_delete=CASCADE`) without calling `delete()` on
    them, so this receiver is the only interception point for cascades. It is connected per model in
    `GuardConfig.ready()`.

    The collector deletes within `transaction.atomic(savepoint=False)`. A cascade rejected inside an outer atomic
    block therefore marks the outer transaction for rollback. Callers that want to go on using the transaction after
    catching `DeletionForbidden` need to wrap the deletion in its own savepoint, e.g.:

        with transaction.atomic():
            category.delete()
    """
    if is_forced_deletion():
        return

    raise forbid_deletion(sender, "cascade", pk=instance.pk)
