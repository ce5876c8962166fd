# conftest.py
# 계정 생성 및 인증된 API 클라이언트 공통 픽스처
import itertools

import pytest
from rest_framework.test import APIClient

from accounts.models import Account, Role
from accounts.tokens import issue_token
from complaints.models import Complaint

PASSWORD = 'password123'

_counter = itertools.count(1)


@pytest.fixture
def make_account(db):
    def _make(role=Role.CUSTOMER, email=None, name=None, password=PASSWORD, is_active=True):
        number = next(_counter)
        return Account.objects.create_user(
            email or f'{role}{number}@example.com',
            password,
            name=name or f'{role.title()} {number}',
            role=role,
            is_active=is_active,
        )
    return _make


@pytest.fixture
def customer(make_account):
    return make_account(Role.CUSTOMER)


@pytest.fixture
def other_customer(make_account):
    return make_account(Role.CUSTOMER)


@pytest.fixture
def technician(make_account):
    return make_account(Role.TECHNICIAN)


@pytest.fixture
def other_technician(make_account):
    return make_account(Role.TECHNICIAN)


@pytest.fixture
def admin_account(make_account):
    return make_account(Role.ADMIN)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    def _client(account):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_token(account)}')
        return client
    return _client


@pytest.fixture
def make_complaint(db):
    def _make(creator, **fields):
        fields.setdefault('title', 'Internet is down')
        fields.setdefault('description', 'No connection since this morning.')
        return Complaint.objects.create(created_by=creator, **fields)
    return _make
