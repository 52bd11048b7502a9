from django.contrib.auth import get_user_model

from rest_framework.test import APIClient

import pytest

User = get_user_model()


@pytest.fixture
def client():
    yield APIClient()


@pytest.fixture
def initial_users(db):
    user_1 = User.objects.create_user("user_1", "user_1@test.local", "password")
    user_1.is_active = True
    user_1.save()

    user_2 = User.objects.create_user("user_2", "user_2@test.local", "password")
    user_2.is_active = True
    user_2.save()

    admin_user = User.objects.create_superuser("admin", "admin@test.local", "password")

    yield {
        "user_1": user_1,
        "user_2": user_2,
        "admin_user": admin_user,
    }


def auth_user(client: APIClient, user: User):
    client.force_authenticate(user=user)


@pytest.fixture
def auth_user_1(client, initial_users):
    auth_user(client, initial_users["user_1"])
