"""HS256 bearer tokens via PyJWT — implements the TokenService port."""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import jwt

from blog_api.application.interfaces import TokenService
from blog_api.domain.entities import IssuedToken, Role, TokenClaims
from blog_api.domain.exceptions import InvalidTokenError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
_REQUIRED_CLAIMS = ["sub", "role", "iss", "aud", "iat", "exp"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JwtTokenService(TokenService):
    """Signs and verifies admin bearer tokens with a shared secret.

    A token is accepted only when the signature matches, ``iss``/``aud``
    equal the configured values and the current time falls in ``[iat, exp)``.
    """

    def __init__(
        self,
        secret: str,
        issuer: str,
        audience: str,
        lifetime: timedelta = timedelta(minutes=15),
        clock: Callable[[], datetime] = _utcnow,
    ):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._lifetime = lifetime
        self._clock = clock

    def issue(self, username: str, role: Role) -> IssuedToken:
        # Whole seconds, so expires_at matches the encoded exp claim exactly
        now = self._clock().replace(microsecond=0)
        expires_at = now + self._lifetime
        payload = {
            "sub": username,
            "role": role.value,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": now,
            "nbf": now,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self._secret, algorithm=ALGORITHM)
        return IssuedToken(
            token=token,
            token_type="Bearer",
            username=username,
            role=role,
            expires_at=expires_at,
        )

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired bearer token")
            raise InvalidTokenError("Invalid token")
        except jwt.InvalidTokenError as exc:
            logger.warning("Rejected bearer token: %s", type(exc).__name__)
            raise InvalidTokenError("Invalid token")

        issued_at = int(payload["iat"])
        if issued_at > int(self._clock().timestamp()):
            logger.warning("Rejected bearer token issued in the future")
            raise InvalidTokenError("Invalid token")

        return TokenClaims(
            subject=str(payload["sub"]),
            role=str(payload["role"]),
            issuer=payload["iss"],
            audience=self._audience,
            issued_at=issued_at,
            expires_at=int(payload["exp"]),
        )
