"""Identity provider client - resolves a bearer token to a user.

Two verification modes:

- remote: ask the provider's auth API who the token belongs to
  (GET {IDENTITY_PROVIDER_URL}/auth/v1/user). Always authoritative, costs a
  round trip per request.
- local: when IDENTITY_JWT_SECRET is configured, verify the token's HS256
  signature and audience with python-jose and read the user id from `sub`.

Nothing is cached between requests.
"""

from dataclasses import dataclass
from typing import Any

import httpx
from jose import JWTError, jwt

from src.app.core.config import Settings, get_settings
from src.app.core.exceptions import AuthenticationError, InternalError, ProviderTimeoutError
from src.app.core.logging import get_logger

logger = get_logger(__name__)

USER_ENDPOINT = "/auth/v1/user"


@dataclass(frozen=True)
class AuthenticatedUser:
    """Verified caller identity."""

    id: str
    email: str | None = None


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token from an `Authorization: Bearer <token>` header value."""
    if not authorization:
        raise AuthenticationError("Missing authorization header")

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise AuthenticationError("Missing or invalid authorization header")
    return token


class IdentityProvider:
    """Verifies bearer tokens against the configured identity provider."""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient | None = None):
        self.settings = settings
        self._http_client = http_client

    @property
    def verifies_locally(self) -> bool:
        return bool(self.settings.identity_jwt_secret)

    async def verify_token(self, token: str) -> AuthenticatedUser:
        """Resolve a token to its user or raise AuthenticationError."""
        if self.verifies_locally:
            return self._verify_locally(token)
        return await self._verify_remotely(token)

    def _verify_locally(self, token: str) -> AuthenticatedUser:
        try:
            claims = jwt.decode(
                token,
                self.settings.identity_jwt_secret,  # type: ignore[arg-type]
                algorithms=["HS256"],
                audience=self.settings.identity_jwt_audience,
            )
        except JWTError as e:
            logger.info("Token rejected", reason=str(e))
            raise AuthenticationError("Invalid or expired token") from e

        user_id = claims.get("sub")
        if not user_id:
            raise AuthenticationError("Invalid or expired token")
        return AuthenticatedUser(id=str(user_id), email=claims.get("email"))

    def _client(self) -> httpx.AsyncClient:
        if not self.settings.identity_provider_url:
            raise InternalError("Identity provider is not configured")
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self.settings.identity_provider_url,
                timeout=httpx.Timeout(self.settings.identity_timeout_seconds),
            )
        return self._http_client

    async def _verify_remotely(self, token: str) -> AuthenticatedUser:
        client = self._client()
        headers = {"Authorization": f"Bearer {token}"}
        if self.settings.identity_provider_api_key:
            headers["apikey"] = self.settings.identity_provider_api_key

        try:
            response = await client.get(USER_ENDPOINT, headers=headers)
        except httpx.TimeoutException as e:
            logger.error(
                "Identity provider timed out",
                timeout=self.settings.identity_timeout_seconds,
            )
            raise ProviderTimeoutError() from e
        except httpx.HTTPError as e:
            raise InternalError("Identity provider unavailable") from e

        if response.status_code >= 500:
            raise InternalError(f"Identity provider returned {response.status_code}")
        if response.status_code != 200:
            logger.info("Token rejected by identity provider", status_code=response.status_code)
            raise AuthenticationError("Invalid or expired token")

        try:
            payload: Any = response.json()
        except ValueError as e:
            raise AuthenticationError("Invalid or expired token") from e
        if not isinstance(payload, dict):
            raise AuthenticationError("Invalid or expired token")
        user_id = payload.get("id")
        if not user_id:
            raise AuthenticationError("Invalid or expired token")
        return AuthenticatedUser(id=str(user_id), email=payload.get("email"))

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None


_provider: IdentityProvider | None = None


def get_identity_provider() -> IdentityProvider:
    """Get the process-wide identity provider client."""
    global _provider
    if _provider is None:
        _provider = IdentityProvider(get_settings())
    return _provider


async def close_identity_provider() -> None:
    """Close the identity provider's HTTP client. Call during shutdown."""
    global _provider
    if _provider is not None:
        await _provider.aclose()
        _provider = None
        logger.info("Identity provider client closed")
