"""Principal resolution from platform-issued JWTs."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import ValidationError

from vidtalk.config import AuthSettings
from vidtalk.domain.value import Principal, UserId
from vidtalk.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Turns bearer tokens into the principal a request acts as."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: str, display_name: str, avatar_url: Optional[str] = None
    ) -> str:
        """Issue a token carrying the claims the comment engine reads."""
        return create_token(
            user_id, display_name, self.auth_settings, avatar_url=avatar_url
        )

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If token is invalid or expired
        """
        return verify_token(token, self.auth_settings)

    def get_principal_from_token(self, token: str | None) -> Principal | None:
        """Resolve the principal, or None when the token is absent or unusable.

        A valid signature over a non-UUID ``user_id``, or over a display name
        a principal cannot carry, counts as unusable.
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return Principal(
                id=UserId(UUID(payload.user_id)),
                display_name=payload.display_name,
                avatar_url=payload.avatar_url,
            )
        except (JWTError, ValidationError, ValueError) as e:
            logfire.debug("Token rejected, treating as anonymous", error=str(e))
            return None
