from django.db.models.query import QuerySet

__all__ = [
    "BaseQuerySet",
]


class BaseQuerySet(QuerySet):
    """
    Custom query set

    Extends django query sets by common filters. This is a base class only for each of the custom query sets responsible
    for each of the models.
    """

    def deletable(self, *args, **kwargs):
        """
        Returns all elements of the QuerySet which may be removed from the database. Query sets of models that forbid
        deletion return a `none` QuerySet.

        :param args:
        :param kwargs:
        :return:
        """
        return self.all()
