import base64
import uuid
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from quora.config import refresh_settings_cache
from quora.db import models
from quora.db.database import SessionLocal, engine
from quora.db.repositories import users as users_repo
from quora.utils.role_permissions import ROLE_ADMIN

from quora.api.main import app

DEFAULT_PASSWORD = "s3cret-pass"


def basic_auth(user_name: str, password: str) -> str:
    raw = f"{user_name}:{password}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")


def bearer(token: str) -> dict:
    return {"authorization": f"Bearer {token}"}


def signup_payload(user_name: str, **overrides) -> dict:
    payload = {
        "first_name": "Test",
        "last_name": "User",
        "user_name": user_name,
        "email_address": f"{user_name}@example.com",
        "password": DEFAULT_PASSWORD,
        "country": "India",
        "about_me": "I ask things",
        "dob": "1990-01-01",
        "contact_number": "9999999999",
    }
    payload.update(overrides)
    return payload


@pytest.fixture(autouse=True)
def _fresh_settings():
    refresh_settings_cache()
    yield
    refresh_settings_cache()


# Each test starts from an empty schema on the shared in-memory engine
@pytest.fixture(autouse=True)
def _reset_schema():
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_user(client, db_session):
    """Sign a user up and in through the API.

    Returns a namespace with ``id`` (UUID), ``user_name``, ``token`` and
    ready-to-use ``headers``. ``admin=True`` promotes the stored role before
    signing in.
    """

    def _create(user_name: str = None, admin: bool = False, password: str = DEFAULT_PASSWORD):
        user_name = user_name or f"user{uuid.uuid4().hex[:8]}"
        r = client.post("/user/signup", json=signup_payload(user_name, password=password))
        assert r.status_code == 201, r.text
        user_id = uuid.UUID(r.json()["id"])
        if admin:
            user = users_repo.get_user(db_session, user_id)
            users_repo.set_role(db_session, user=user, role=ROLE_ADMIN)
        r = client.post("/user/signin", headers={"authorization": basic_auth(user_name, password)})
        assert r.status_code == 200, r.text
        token = r.headers["access-token"]
        return SimpleNamespace(id=user_id, user_name=user_name, token=token, headers=bearer(token))

    return _create
