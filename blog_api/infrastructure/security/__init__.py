from .jwt_token_service import JwtTokenService
from .rate_limit import enforce_login_rate_limit, limiter

__all__ = [
    "JwtTokenService",
    "enforce_login_rate_limit",
    "limiter",
]
