"""Authentication use cases — credential resolution and admin login.

Requests authenticate with one of two schemes:

- ``Authorization: Bearer <token>`` — a signed, short-lived token from /auth/login
- ``X-API-Key: <secret>`` — a static pre-shared key

``parse_credential`` picks the scheme (bearer wins when both are sent) and
``AuthService.authenticate`` runs the matching verifier. No credential at all
resolves to an anonymous identity; a credential that fails its check raises.
"""

import hmac
import logging

from blog_api.application.interfaces import TokenService
from blog_api.domain.entities import Credential, CredentialKind, Identity, IssuedToken, Role
from blog_api.domain.exceptions import (
    AuthenticationError,
    ConfigurationError,
    InvalidCredentialsError,
    InvalidTokenError,
    ValidationError,
)

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def parse_credential(authorization: str | None, api_key: str | None) -> Credential:
    """Turn the raw credential headers into a tagged Credential."""
    if authorization:
        scheme, _, token = authorization.strip().partition(" ")
        if scheme.lower() == BEARER_SCHEME:
            return Credential.bearer(token.strip())
    if api_key is not None:
        return Credential.api_key(api_key)
    return Credential.none()


def _constant_time_equals(presented: str, expected: str) -> bool:
    return hmac.compare_digest(presented.encode("utf-8"), expected.encode("utf-8"))


class AuthService:
    """Resolves credentials to identities and exchanges admin credentials for tokens.

    There is exactly one admin identity, configured by username/password.
    ``token_service`` may be None when no signing secret is configured; bearer
    tokens are then always rejected and login reports a configuration error.
    """

    def __init__(
        self,
        *,
        admin_username: str,
        admin_password: str,
        api_key: str,
        token_service: TokenService | None,
    ):
        self._admin_username = admin_username
        self._admin_password = admin_password
        self._api_key = api_key
        self._token_service = token_service

    def authenticate(self, credential: Credential) -> Identity:
        if credential.kind is CredentialKind.BEARER:
            return self._verify_bearer(credential.value)
        if credential.kind is CredentialKind.API_KEY:
            return self._verify_api_key(credential.value)
        return Identity.anonymous()

    def login(self, username: str | None, password: str | None) -> IssuedToken:
        if not username or not username.strip() or not password or not password.strip():
            raise ValidationError("Username and password are required.")

        # Evaluate both comparisons so timing doesn't reveal which one failed
        user_ok = _constant_time_equals(username, self._admin_username)
        pass_ok = _constant_time_equals(password, self._admin_password)
        if not (user_ok and pass_ok):
            logger.warning("Rejected login attempt")
            raise InvalidCredentialsError()

        if self._token_service is None:
            logger.error("JWT signing secret is not configured")
            raise ConfigurationError("JWT signing secret is not configured")

        issued = self._token_service.issue(self._admin_username, Role.ADMIN)
        logger.info("Issued bearer token for '%s' (expires %s)", issued.username, issued.expires_at)
        return issued

    # ── Verifiers ───────────────────────────────────────────────────

    def _verify_api_key(self, presented: str) -> Identity:
        if not self._api_key or not _constant_time_equals(presented, self._api_key):
            logger.warning("Rejected request with invalid API key")
            raise AuthenticationError("Invalid API key")
        return Identity(scheme=CredentialKind.API_KEY, roles=(Role.ADMIN,))

    def _verify_bearer(self, token: str) -> Identity:
        if self._token_service is None:
            logger.warning("Bearer token presented but token signing is not configured")
            raise InvalidTokenError("Invalid token")
        if not token:
            raise InvalidTokenError("Invalid token")

        claims = self._token_service.verify(token)
        if claims.role != Role.ADMIN.value:
            logger.warning("Rejected bearer token with role '%s'", claims.role)
            raise InvalidTokenError("Invalid token")
        return Identity(
            scheme=CredentialKind.BEARER,
            username=claims.subject,
            roles=(Role.ADMIN,),
        )
