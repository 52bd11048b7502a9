from django.db.models.signals import post_delete, pre_delete

import pytest

from recordkeeper.core.helpers import set_request_for_user
from recordkeeper.records.models import Attachment, Category, Record


@pytest.mark.django_db
class TestBaseModel:
    @pytest.fixture(autouse=True)
    def _setup(self, initial_users):
        self.user_1 = initial_users["user_1"]
        set_request_for_user(self.user_1)

        self.category = Category.objects.create(
            name="Invoices",
        )

        self.record = Record.objects.create(
            title="Invoice 2024-001",
            category=self.category,
        )

        self.attachment = Attachment.objects.create(
            record=self.record,
            name="invoice.pdf",
        )

    def test_str_fields(self):
        """
        Ensure the string representation is built from the `str_fields` meta option.
        """
        assert str(self.category) == "Invoices"
        assert str(self.record) == "Invoice 2024-001"
        assert str(self.attachment) == "invoice.pdf"

    def test_by_user(self):
        """
        Ensure the current user is stored as creator.
        """
        assert self.record.created_by == self.user_1
        assert self.record.last_modified_by == self.user_1

    def test_is_deletable(self):
        """
        Ensure unguarded elements are deletable.
        """
        assert self.category.is_deletable() is True
        assert self.attachment.is_deletable() is True
        assert Attachment.objects.deletable().count() == 1

    def test_raw_delete(self):
        """
        Ensure raw_delete removes the row without cascading and without sending signals.
        """
        other = Attachment.objects.create(
            record=self.record,
            name="other.pdf",
        )

        assert self.attachment.raw_delete() == 1
        assert not Attachment.objects.filter(pk=self.attachment.pk).exists()
        assert Attachment.objects.filter(pk=other.pk).exists()

    def test_raw_delete_fires_no_hooks(self):
        """
        Ensure raw_delete sends neither pre_delete nor post_delete.
        """
        calls = []

        def hook(sender, instance, **kwargs):
            calls.append((sender, instance.pk))

        pre_delete.connect(hook, sender=Attachment, weak=False)
        post_delete.connect(hook, sender=Attachment, weak=False)

        try:
            assert self.attachment.raw_delete() == 1
        finally:
            pre_delete.disconnect(hook, sender=Attachment)
            post_delete.disconnect(hook, sender=Attachment)

        assert calls == []
        assert not Attachment.objects.filter(pk=self.attachment.pk).exists()

    def test_raw_delete_without_pk(self):
        """
        Ensure unsaved elements can't be raw deleted.
        """
        with pytest.raises(ValueError):
            Attachment(record=self.record, name="unsaved.pdf").raw_delete()

    def test_delete_cascades(self):
        """
        Ensure the regular delete still works for unguarded models.
        """
        category = Category.objects.create(
            name="Empty",
        )

        category.delete()

        assert not Category.objects.filter(name="Empty").exists()
