"""
Pytest configuration for brandvoice tests.

Settings come from brandvoice.settings_test (see pyproject.toml): in-memory
SQLite and a fixed JWT secret so tests can mint bearer tokens.
"""

import time

import jwt
import pytest
from django.conf import settings
from django.test import Client

from brandvoice.core.models import Brand, Organization
from brandvoice.users.models import Membership, User


def _make_token(sub: str, email: str | None = None, **claims) -> str:
    """Mint an HS256 token the way the auth provider would."""
    payload = {
        "sub": sub,
        "aud": settings.AUTH_JWT_AUDIENCE,
        "exp": int(time.time()) + 3600,
    }
    if email:
        payload["email"] = email
    payload.update(claims)
    return jwt.encode(payload, settings.AUTH_JWT_SECRET, algorithm="HS256")


@pytest.fixture
def mint_token():
    """Factory fixture: mint_token(sub, email=None, **claims) -> str."""
    return _make_token


@pytest.fixture
def client() -> Client:
    """Django test client without credentials."""
    return Client()


@pytest.fixture
def org1(db):
    return Organization.objects.create(name="Org One", slug="org-one")


@pytest.fixture
def org2(db):
    return Organization.objects.create(name="Org Two", slug="org-two")


@pytest.fixture
def foreign_org(db):
    """An organization the test user does not belong to."""
    return Organization.objects.create(name="Foreign Org", slug="foreign-org")


@pytest.fixture
def brand(db, org1):
    return Brand.objects.create(organization=org1, name="Acme", slug="acme")


@pytest.fixture
def user(db, org1, org2):
    """A user belonging to org1 (first) and org2."""
    user = User.objects.create(email="writer@example.com", auth_uid="auth-writer")
    Membership.objects.create(user=user, organization=org1)
    Membership.objects.create(user=user, organization=org2)
    return user


@pytest.fixture
def auth_client(user) -> Client:
    """Django test client authenticated as `user`."""
    token = _make_token(user.auth_uid, user.email)
    return Client(HTTP_AUTHORIZATION=f"Bearer {token}")
