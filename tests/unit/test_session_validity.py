import base64
from datetime import timedelta
from types import SimpleNamespace

import pytest

from quora.db.models import now_utc
from quora.errors import AuthenticationFailedError
from quora.services.user_service import decode_basic_credentials, parse_uuid_maybe, token_is_active


def _auth(expires_in, logout_in=None):
    now = now_utc()
    return SimpleNamespace(
        expires_at=now + expires_in,
        logout_at=None if logout_in is None else now + logout_in,
    )


def _basic(raw: str) -> str:
    return "Basic " + base64.b64encode(raw.encode("utf-8")).decode("ascii")


def test_fresh_session_is_active():
    assert token_is_active(_auth(timedelta(hours=8)))


def test_expired_session_is_inactive():
    assert not token_is_active(_auth(timedelta(seconds=-1)))


def test_signed_out_session_is_inactive():
    assert not token_is_active(_auth(timedelta(hours=8), logout_in=timedelta(seconds=-1)))


def test_future_logout_does_not_end_session_yet():
    assert token_is_active(_auth(timedelta(hours=8), logout_in=timedelta(hours=1)))


def test_naive_timestamps_are_treated_as_utc():
    now = now_utc()
    auth = SimpleNamespace(expires_at=(now + timedelta(minutes=5)).replace(tzinfo=None), logout_at=None)
    assert token_is_active(auth, now=now)
    assert not token_is_active(auth, now=now + timedelta(minutes=6))


def test_decode_basic_credentials():
    assert decode_basic_credentials(_basic("alice:pw")) == ("alice", "pw")
    # Only the first ':' separates user name and password
    assert decode_basic_credentials(_basic("alice:p:w")) == ("alice", "p:w")
    # The scheme prefix is optional
    raw = base64.b64encode(b"bob:pw").decode("ascii")
    assert decode_basic_credentials(raw) == ("bob", "pw")


@pytest.mark.parametrize(
    "header",
    [None, "", "Basic !!!not-base64!!!", _basic("no-separator"), _basic("alice:"), "Basic " + base64.b64encode(b"\xff\xfe:x").decode()],
)
def test_decode_basic_credentials_rejects_malformed(header):
    with pytest.raises(AuthenticationFailedError) as exc:
        decode_basic_credentials(header)
    assert exc.value.code == "ATN-002"
    assert exc.value.status_code == 401


def test_parse_uuid_maybe():
    assert parse_uuid_maybe(None) is None
    assert parse_uuid_maybe("not-a-uuid") is None
    value = "6f1c1b8e-3c44-4f6e-9a55-0f6d2b0d4c11"
    assert str(parse_uuid_maybe(value)) == value
