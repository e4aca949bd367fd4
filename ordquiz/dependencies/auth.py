"""Identity dependencies for FastAPI."""
import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ordquiz.models.auth import Identity
from ordquiz.services.auth_service import identity_from_payload, verify_token

log = logging.getLogger(__name__)

# HTTP Bearer scheme for provider tokens
security = HTTPBearer(auto_error=False)


async def get_optional_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Identity | None:
    """Get the signed-in player if a valid token is present, otherwise None.

    Players may always play as guests, so a bad token never rejects the
    request.
    """
    if credentials is None:
        return None

    payload = verify_token(credentials.credentials)
    if payload is None:
        log.info("Ignoring invalid or expired identity token")
        return None

    return identity_from_payload(payload)
