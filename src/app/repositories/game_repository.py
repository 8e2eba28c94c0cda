from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import GameKey, GameResult, UserGameStats, UserTitle


class IGameResultRepository(ABC):
    """GameResult repository interface - application layer"""

    @abstractmethod
    async def get_by_result_id(self, result_id: UUID) -> Optional[GameResult]:
        """Get a logged result by its idempotency key"""
        pass

    @abstractmethod
    async def create(self, result: GameResult) -> GameResult:
        """Append a result to the log"""
        pass


class IUserGameStatsRepository(ABC):
    """UserGameStats repository interface - application layer"""

    @abstractmethod
    async def get(self, user_id: UUID, game: GameKey) -> Optional[UserGameStats]:
        """Get stats for a player and game"""
        pass

    @abstractmethod
    async def save(self, stats: UserGameStats) -> UserGameStats:
        """Insert or update stats"""
        pass


class IUserTitleRepository(ABC):
    """UserTitle repository interface - application layer"""

    @abstractmethod
    async def exists(self, user_id: UUID, game: GameKey, title: str) -> bool:
        """Check whether the player already owns the title"""
        pass

    @abstractmethod
    async def create(self, title: UserTitle) -> UserTitle:
        """Grant a title"""
        pass
