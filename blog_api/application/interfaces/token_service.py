"""Abstract token service interface — signs and verifies bearer tokens."""

from abc import ABC, abstractmethod

from blog_api.domain.entities import IssuedToken, Role, TokenClaims


class TokenService(ABC):
    """Port for bearer-token issuance and verification."""

    @abstractmethod
    def issue(self, username: str, role: Role) -> IssuedToken:
        """Sign a short-lived token for ``username`` carrying ``role``."""
        ...

    @abstractmethod
    def verify(self, token: str) -> TokenClaims:
        """Validate signature, issuer, audience and lifetime.

        Raises:
            InvalidTokenError: on any failed check.
        """
        ...
