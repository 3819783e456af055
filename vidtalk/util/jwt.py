"""JWT encoding and verification for viewer identity."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import BaseModel, Field, ValidationError

from vidtalk.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims the comment engine reads from a token."""

    user_id: str
    display_name: str = Field(min_length=1, max_length=255)
    avatar_url: Optional[str] = None
    exp: datetime


class JWTError(Exception):
    """Raised when a token cannot be trusted."""

    pass


def create_token(
    user_id: str,
    display_name: str,
    settings: AuthSettings,
    avatar_url: Optional[str] = None,
) -> str:
    """Sign a token for ``user_id`` valid for ``settings.jwt_expiry_days``.

    Production tokens come from the platform's auth service. This is used
    by local tooling and tests.
    """
    claims = {
        "user_id": user_id,
        "display_name": display_name,
        "avatar_url": avatar_url,
        "exp": datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature and expiry, then parse the claims.

    Raises:
        JWTError: If the token is expired, badly signed or lacks claims
    """
    try:
        claims = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError:
        raise JWTError("Malformed token payload")
