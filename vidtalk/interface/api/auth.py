"""Resolve the calling principal from a request."""

from fastapi import Request

from vidtalk.domain.service import JWTService
from vidtalk.domain.value import Principal
from vidtalk.interface.error import AuthenticationRequiredError


def _extract_token(request: Request, cookie_name: str) -> str | None:
    header = request.headers.get("authorization")
    if header and header.lower().startswith("bearer "):
        token = header[len("bearer ") :].strip()
        if token:
            return token
    return request.cookies.get(cookie_name)


def get_principal(request: Request, jwt_service: JWTService) -> Principal | None:
    """Return the principal from the Bearer header or auth cookie, if valid."""
    token = _extract_token(request, jwt_service.auth_settings.cookie_name)
    return jwt_service.get_principal_from_token(token)


def require_principal(
    request: Request, jwt_service: JWTService, action: str
) -> Principal:
    """Return the principal or fail with 401.

    Raises:
        AuthenticationRequiredError: If no valid token was sent
    """
    principal = get_principal(request, jwt_service)
    if not principal:
        raise AuthenticationRequiredError(f"Authentication required to {action}")
    return principal
