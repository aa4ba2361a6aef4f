"""
Access token verification.

Users sign up and sign in through the hosted auth service, which issues JWT
access tokens. This module only verifies those tokens and turns their claims
into an ``AuthenticatedUser``; it never issues tokens itself.
"""

from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import BaseModel

from unthink.core.logging_config import get_logger

from .config import settings

logger = get_logger(__name__)

# Bearer token scheme; missing headers are handled per dependency
security = HTTPBearer(auto_error=False)


class AuthenticatedUser(BaseModel):
    """Identity carried by a verified access token."""

    id: str
    email: Optional[str] = None
    display_name: Optional[str] = None


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Decode and verify an access token.

    Args:
        token: JWT string from the Authorization header

    Returns:
        Claims dictionary, or None if the signature, expiry or audience check fails
    """
    auth = settings.auth
    options = {"verify_aud": auth.jwt_audience is not None}
    try:
        return jwt.decode(
            token,
            auth.jwt_secret,
            algorithms=[auth.jwt_algorithm],
            audience=auth.jwt_audience,
            options=options,
        )
    except JWTError as e:
        logger.debug(f"Rejected access token: {e}")
        return None


def user_from_claims(claims: Dict[str, Any]) -> AuthenticatedUser:
    metadata = claims.get("user_metadata") or {}
    return AuthenticatedUser(
        id=claims["sub"],
        email=claims.get("email"),
        display_name=metadata.get("display_name") or metadata.get("full_name"),
    )


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[AuthenticatedUser]:
    """
    Resolve the caller if a bearer token is present.

    Anonymous requests get None. A token that is present but invalid is
    still rejected so clients notice expired sessions.
    """
    if credentials is None:
        return None
    claims = decode_token(credentials.credentials)
    if not claims or not claims.get("sub"):
        raise _unauthorized("Invalid or expired token")
    return user_from_claims(claims)


async def get_current_user(
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
) -> AuthenticatedUser:
    """Resolve the caller, rejecting anonymous requests with 401."""
    if user is None:
        raise _unauthorized("Not authenticated")
    return user
