"""Login rate limiting (slowapi).

The limiter keeps a moving-window log of attempts per client address in process
memory. ``enforce_login_rate_limit`` is a route dependency, so it counts the
attempt before the request body is validated and reads the limit from the
injected ``Settings``.
"""

import logging
import math
import time

from fastapi import Depends, HTTPException, Request, status
from limits import parse
from slowapi import Limiter
from slowapi.util import get_remote_address

from blog_api.config import Settings, get_settings

logger = logging.getLogger(__name__)

LOGIN_SCOPE = "auth-login"

limiter = Limiter(key_func=get_remote_address, strategy="moving-window")


def enforce_login_rate_limit(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> None:
    """Count one login attempt for the caller; 429 once the window is full."""
    if not limiter.enabled:
        return

    limit = parse(settings.login_rate_limit)
    caller = get_remote_address(request)
    if limiter.limiter.hit(limit, LOGIN_SCOPE, caller):
        return

    reset_at, _ = limiter.limiter.get_window_stats(limit, LOGIN_SCOPE, caller)
    retry_after = max(1, math.ceil(reset_at - time.time()))
    logger.warning("Throttled login attempts from %s (%s)", caller, settings.login_rate_limit)
    raise HTTPException(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        detail="Too many login attempts. Try again later.",
        headers={"Retry-After": str(retry_after)},
    )
