"""
Auth Service - Credential check against the fixed user list.
"""

import asyncio
import logging
import secrets
from typing import Optional

from timesheet.domain.exceptions import InvalidCredentialsError
from timesheet.domain.models import AuthResponse
from timesheet.infra.config import LatencySettings
from timesheet.infra.repository import UserRepository
from timesheet.utils import Delay, simulate_latency

logger = logging.getLogger(__name__)


class AuthService:
    """
    Signs users in and hands out opaque session tokens.
    Tokens are not stored; session handling belongs to the caller.
    """

    def __init__(self, users: Optional[UserRepository] = None,
                 latency: Optional[LatencySettings] = None,
                 delay: Optional[Delay] = None):
        self.users = users if users is not None else UserRepository()
        self.latency = latency if latency is not None else LatencySettings()
        self.delay = delay if delay is not None else asyncio.sleep

    @staticmethod
    def _mint_token(user_id: str) -> str:
        return f"{user_id}.{secrets.token_urlsafe(32)}"

    async def login(self, email: str, password: str) -> AuthResponse:
        """
        Check credentials and start a session.

        Raises:
            InvalidCredentialsError: if no user matches email and password exactly
        """
        await simulate_latency(self.delay, self.latency.login)

        user = self.users.find_by_credentials(email, password)
        if user is None:
            logger.warning(f"Failed login for {email}")
            raise InvalidCredentialsError()

        logger.info(f"User {user.id} logged in")
        return AuthResponse(user=user.to_public(), token=self._mint_token(user.id))

    async def logout(self) -> None:
        """End the session. Always succeeds."""
        await simulate_latency(self.delay, self.latency.logout)
