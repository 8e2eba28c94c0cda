from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Profile


class IProfileRepository(ABC):
    """Profile repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, profile_id: UUID) -> Optional[Profile]:
        """Get profile by owning user ID"""
        pass

    @abstractmethod
    async def get_by_handle(self, handle: str) -> Optional[Profile]:
        """Get profile by login handle (profiles.user_id)"""
        pass

    @abstractmethod
    async def update(self, profile: Profile) -> Profile:
        """Update existing profile"""
        pass

    @abstractmethod
    async def top_by_best_streak(self, limit: int) -> List[Profile]:
        """Profiles ordered by best_streak desc, oldest update first on ties"""
        pass
