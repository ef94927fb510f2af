"""Unit tests for the PyJWT-backed token service."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from blog_api.domain.entities import Role
from blog_api.domain.exceptions import InvalidTokenError
from blog_api.infrastructure.security import JwtTokenService

SECRET = "unit-test-secret-with-at-least-32-bytes!!"


def _service(**overrides) -> JwtTokenService:
    params = {"secret": SECRET, "issuer": "iss", "audience": "aud"}
    params.update(overrides)
    return JwtTokenService(**params)


def test_issue_and_verify_round_trip():
    service = _service(lifetime=timedelta(minutes=10))
    issued = service.issue("admin", Role.ADMIN)

    claims = service.verify(issued.token)
    assert claims.subject == "admin"
    assert claims.role == "Admin"
    assert claims.issuer == "iss"
    assert claims.expires_at - claims.issued_at == 600
    assert int(issued.expires_at.timestamp()) == claims.expires_at


def test_token_carries_standard_claims():
    issued = _service().issue("admin", Role.ADMIN)
    payload = jwt.decode(issued.token, SECRET, algorithms=["HS256"], audience="aud")
    assert {"sub", "role", "iss", "aud", "iat", "nbf", "exp"} <= payload.keys()


def test_expired_token_is_rejected():
    past = datetime.now(timezone.utc) - timedelta(hours=1)
    issued = _service(clock=lambda: past).issue("admin", Role.ADMIN)
    with pytest.raises(InvalidTokenError):
        _service().verify(issued.token)


def test_token_from_the_future_is_rejected():
    future = datetime.now(timezone.utc) + timedelta(hours=1)
    issued = _service(clock=lambda: future).issue("admin", Role.ADMIN)
    with pytest.raises(InvalidTokenError):
        _service().verify(issued.token)


@pytest.mark.parametrize(
    "overrides",
    [
        {"secret": "another-secret-with-at-least-32-bytes!!!"},
        {"issuer": "someone-else"},
        {"audience": "another-audience"},
    ],
)
def test_mismatched_secret_issuer_or_audience_is_rejected(overrides):
    issued = _service(**overrides).issue("admin", Role.ADMIN)
    with pytest.raises(InvalidTokenError):
        _service().verify(issued.token)


def test_token_missing_role_claim_is_rejected():
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"sub": "admin", "iss": "iss", "aud": "aud", "iat": now, "exp": now + timedelta(minutes=5)},
        SECRET,
        algorithm="HS256",
    )
    with pytest.raises(InvalidTokenError):
        _service().verify(token)


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        JwtTokenService(secret="", issuer="iss", audience="aud")
