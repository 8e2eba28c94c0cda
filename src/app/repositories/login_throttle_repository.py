from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import LoginThrottle


class ILoginThrottleRepository(ABC):
    """LoginThrottle repository interface - application layer"""

    @abstractmethod
    async def get(self, user_id: str, ip: str) -> Optional[LoginThrottle]:
        """Get throttle state for a handle and client IP"""
        pass

    @abstractmethod
    async def upsert(self, throttle: LoginThrottle) -> LoginThrottle:
        """Insert or replace throttle state"""
        pass
