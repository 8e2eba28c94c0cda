from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import MonthlyStats, Profile, RankingOrder, WeeklyStats


class IPeriodStatsRepository(ABC):
    """Weekly/monthly stats repository interface - application layer"""

    @abstractmethod
    async def get_weekly(self, user_id: UUID, week_start: str) -> Optional[WeeklyStats]:
        pass

    @abstractmethod
    async def get_monthly(self, user_id: UUID, month_start: str) -> Optional[MonthlyStats]:
        pass

    @abstractmethod
    async def save(self, stats):
        """Insert or update a WeeklyStats or MonthlyStats row"""
        pass

    @abstractmethod
    async def top_weekly(
        self, week_start: str, order_by: RankingOrder, limit: int
    ) -> List[Tuple[WeeklyStats, Optional[Profile]]]:
        """Weekly rows for a week joined with the player profile, best first"""
        pass

    @abstractmethod
    async def top_monthly(
        self, month_start: str, order_by: RankingOrder, limit: int
    ) -> List[Tuple[MonthlyStats, Optional[Profile]]]:
        """Monthly rows for a month joined with the player profile, best first"""
        pass
