from django.apps import apps
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.db import DEFAULT_DB_ALIAS
from django.utils.translation import gettext_lazy as _

from recordkeeper.guard.exceptions import DeletionForbidden
from recordkeeper.guard.helpers import force_delete


class Command(BaseCommand):
    help = _("Permanently deletes elements of a model, including elements of undeletable models")

    def add_arguments(self, parser):
        parser.add_argument(
            "model",
            help=_("Model label, e.g. records.Record"),
        )
        parser.add_argument(
            "pks",
            nargs="+",
            help=_("Primary keys of the elements to delete"),
        )
        parser.add_argument(
            "--database",
            default=DEFAULT_DB_ALIAS,
            help=_("Database to delete from"),
        )

    def handle(self, *args, **options):
        try:
            model = apps.get_model(options["model"])
        except (LookupError, ValueError):
            raise CommandError(_("Unknown model: {model}").format(model=options["model"]))

        database = options["database"]
        try:
            queryset = model._base_manager.using(database).filter(pk__in=options["pks"])
            found = {str(pk) for pk in queryset.values_list("pk", flat=True)}
        except (ValueError, ValidationError) as e:
            raise CommandError(str(e))

        missing = [pk for pk in options["pks"] if pk not in found]
        if missing:
            raise CommandError(
                _("{model} elements not found: {pks}").format(
                    model=model._meta.label,
                    pks=", ".join(missing),
                ),
            )

        try:
            count, per_model = force_delete(queryset, using=database)
        except DeletionForbidden as e:
            raise CommandError(str(e))

        for label, label_count in sorted(per_model.items()):
            self.stdout.write(
                _("{label}: {count} deleted").format(
                    label=label,
                    count=label_count,
                ),
            )

        self.stdout.write(
            self.style.SUCCESS(
                _("Deleted {count} element(s).").format(
                    count=count,
                ),
            ),
        )
