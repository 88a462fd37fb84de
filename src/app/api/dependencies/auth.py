"""Authentication dependencies."""

from typing import Annotated

from fastapi import Depends, Header

from src.app.core.identity import (
    AuthenticatedUser,
    IdentityProvider,
    extract_bearer_token,
    get_identity_provider,
)
from src.app.core.logging import bind_user_context

IdentityProviderDep = Annotated[IdentityProvider, Depends(get_identity_provider)]


async def get_current_user(
    identity_provider: IdentityProviderDep,
    authorization: Annotated[str | None, Header()] = None,
) -> AuthenticatedUser:
    """Verify the bearer token and return the caller.

    Runs on every owner-scoped request and touches no database, so a request
    without valid credentials is rejected before any query is issued.
    """
    token = extract_bearer_token(authorization)
    user = await identity_provider.verify_token(token)
    bind_user_context(user.id)
    return user


CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
