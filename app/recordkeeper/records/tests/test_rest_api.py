from django.urls import reverse

from rest_framework import status

import pytest

from recordkeeper.core.helpers import set_request_for_user
from recordkeeper.records.models import Attachment, Category, Record


@pytest.mark.django_db
class TestRecordAPI:
    @pytest.fixture(autouse=True)
    def _setup(self, initial_users, auth_user_1):
        self.user_1 = initial_users["user_1"]
        set_request_for_user(self.user_1)

        self.category = Category.objects.create(
            name="Reports",
        )

        self.record_1 = Record.objects.create(
            id=1,
            title="Report 1",
            content="Quarterly report",
            category=self.category,
        )

        self.record_2 = Record.objects.create(
            id=2,
            title="Report 2",
        )

        Attachment.objects.create(
            record=self.record_1,
            name="report.pdf",
        )

    def test_read_record_list(self, client):
        """
        Ensure we can read the record list.
        """
        url = reverse("record-list")

        response = client.get(url, format="json")
        assert response.status_code == status.HTTP_200_OK
        assert response.data["count"] == 2
        assert response.data["results"][0]["title"] == "Report 1"
        assert response.data["results"][0]["category"] == self.category.pk
        assert response.data["results"][0]["attachments"][0]["name"] == "report.pdf"
        assert response.data["results"][0]["is_deletable"] is False
        assert response.data["results"][1]["title"] == "Report 2"

    def test_filter_record_list(self, client):
        url = reverse("record-list")

        response = client.get(url, {"category": self.category.pk}, format="json")
        assert response.status_code == status.HTTP_200_OK
        assert response.data["count"] == 1
        assert response.data["results"][0]["pk"] == 1

    def test_create_record(self, client):
        """
        Ensure we can create records.
        """
        url = reverse("record-list")

        response = client.post(
            url,
            {
                "title": "Report 3",
                "category": self.category.pk,
            },
            format="json",
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["title"] == "Report 3"
        assert Record.objects.count() == 3

    def test_update_record(self, client):
        url = reverse("record-detail", kwargs={"pk": 2})

        response = client.patch(url, {"content": "Annual report"}, format="json")
        assert response.status_code == status.HTTP_200_OK
        assert Record.objects.get(pk=2).content == "Annual report"

    def test_delete_record(self, client):
        """
        Ensure we can't delete records.
        """
        url = reverse("record-detail", kwargs={"pk": 1})

        response = client.delete(url, format="json")
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data["success"] is False
        assert response.data["status_code"] == status.HTTP_403_FORBIDDEN
        assert response.data["detail"] == "Record 1 must not be deleted."
        assert response.data["detail"].code == "deletion_forbidden"

        response = client.get(url, format="json")
        assert response.status_code == status.HTTP_200_OK

    def test_delete_record_unauthenticated(self, client):
        client.force_authenticate(user=None)
        url = reverse("record-detail", kwargs={"pk": 1})

        response = client.delete(url, format="json")
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data["detail"].code == "not_authenticated"
        assert Record.objects.filter(pk=1).exists()


@pytest.mark.django_db
class TestCategoryAPI:
    @pytest.fixture(autouse=True)
    def _setup(self, initial_users, auth_user_1):
        set_request_for_user(initial_users["user_1"])

        self.category_1 = Category.objects.create(
            name="Category 1",
        )

        self.category_2 = Category.objects.create(
            name="Category 2",
        )

        self.record = Record.objects.create(
            title="Record",
            category=self.category_1,
        )

    def test_read_category_list(self, client):
        url = reverse("record-category-list")

        response = client.get(url, format="json")
        assert response.status_code == status.HTTP_200_OK
        assert response.data["count"] == 2
        assert response.data["results"][0]["name"] == "Category 1"
        assert response.data["results"][0]["is_deletable"] is True

    def test_delete_category_with_records(self, client):
        """
        Ensure we can't delete a category which still holds records.
        """
        url = reverse("record-category-detail", kwargs={"pk": self.category_1.pk})

        response = client.delete(url, format="json")
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data["detail"].code == "deletion_forbidden"
        assert Category.objects.filter(pk=self.category_1.pk).exists()
        assert Record.objects.filter(pk=self.record.pk).exists()

    def test_delete_empty_category(self, client):
        """
        Ensure we can delete a category without records.
        """
        url = reverse("record-category-detail", kwargs={"pk": self.category_2.pk})

        response = client.delete(url, format="json")
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Category.objects.filter(pk=self.category_2.pk).exists()
