"""Rate limiting for the unauthenticated generation endpoints.

Each generation request costs an LLM call, so they are limited per client IP
with slowapi's in-memory storage. Disabled in the testing environment.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from src.app.core.config import get_settings
from src.app.core.logging import get_logger

logger = get_logger(__name__)


def get_rate_limit_key(request: Request) -> str:
    """Rate limit key: client IP only.

    Never include user-controlled headers here; rotating them would create a
    fresh bucket per request and bypass the limit.
    """
    return get_remote_address(request) or "unknown"


def generation_rate_limit() -> str:
    """Limit string for generation endpoints, read from settings on each request."""
    return get_settings().generation_rate_limit


def create_limiter() -> Limiter:
    """Create the rate limiter, disabled in the testing environment."""
    settings = get_settings()

    if settings.app_env == "testing":
        logger.info("Rate limiter disabled (testing environment)")
        return Limiter(key_func=get_rate_limit_key, enabled=False)

    return Limiter(key_func=get_rate_limit_key)


limiter = create_limiter()
