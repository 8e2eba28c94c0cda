from abc import ABC, abstractmethod
from uuid import UUID

from libs.result import Result
from src.domain.entities import User


class IdentityProvider(ABC):
    """
    Credential owner - application layer.

    Error codes:
        - INVALID_CREDENTIALS: unknown email or wrong password
        - USER_NOT_FOUND: no account for the given ID
        - SAME_PASSWORD: new password equals the current one
    """

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> Result[User]:
        """Verify credentials and return the user"""
        pass

    @abstractmethod
    async def update_password(self, user_id: UUID, new_password: str) -> Result[None]:
        """Replace the user's password"""
        pass
