from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import PasswordResetToken


class IPasswordResetTokenRepository(ABC):
    """PasswordResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[PasswordResetToken]:
        """Get password reset token by token hash"""
        pass

    @abstractmethod
    async def mark_used(self, token_id: UUID, used_at: datetime) -> bool:
        """
        Set used_at only if the token is still unused.

        Returns False when no row was updated, i.e. the token was already
        consumed by another request.
        """
        pass

    @abstractmethod
    async def delete_expired(self, expired_before: datetime) -> int:
        """Delete tokens whose expires_at is before the given time. Returns count."""
        pass
