"""Resolution of the authenticated user."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from recipe_nutrition.domain.errors import AuthenticationError


class AuthClient(Protocol):
    """Interface for the hosted auth provider."""

    def get_user_id(self, access_token: str) -> str | None:
        """Return the user id owning the access token, if it is valid."""


@dataclass
class AuthService:
    """Turns bearer tokens into user ids."""

    client: AuthClient

    def require_user(self, authorization: str | None) -> UUID:
        """Return the user id for an Authorization header or raise."""
        token = _bearer_token(authorization)
        if token is None:
            raise AuthenticationError("Authentication required")
        user_id = self.client.get_user_id(token)
        if not user_id:
            raise AuthenticationError("Authentication required")
        try:
            return UUID(user_id)
        except ValueError as exc:
            raise AuthenticationError("Authentication required") from exc


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
