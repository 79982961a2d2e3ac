"""Supabase Auth adapter."""

import logging
from dataclasses import dataclass

from supabase import AuthError, Client

from recipe_nutrition.services.auth import AuthClient

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthClient(AuthClient):
    """Validates access tokens against Supabase Auth."""

    client: Client

    def get_user_id(self, access_token: str) -> str | None:
        """Return the Supabase user id for a token, or None when rejected."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            _logger.info("Rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        return str(response.user.id)
