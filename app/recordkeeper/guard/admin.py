__all__ = [
    "UndeletableModelAdminMixin",
]


class UndeletableModelAdminMixin:
    """
    Hides every way of deleting elements in the admin panel, for models guarded by `UndeletableMixin`.
    """

    def has_delete_permission(self, request, obj=None):
        return False

    def get_actions(self, request):
        actions = super().get_actions(request)
        actions.pop("delete_selected", None)
        return actions
