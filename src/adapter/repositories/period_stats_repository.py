from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.period_stats_repository import IPeriodStatsRepository
from src.domain.entities import MonthlyStats, Profile, RankingOrder, WeeklyStats


class PeriodStatsRepository(IPeriodStatsRepository):
    """Weekly/monthly stats repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_weekly(self, user_id: UUID, week_start: str) -> Optional[WeeklyStats]:
        stmt = select(WeeklyStats).where(
            WeeklyStats.user_id == user_id, WeeklyStats.week_start == week_start
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_monthly(self, user_id: UUID, month_start: str) -> Optional[MonthlyStats]:
        stmt = select(MonthlyStats).where(
            MonthlyStats.user_id == user_id, MonthlyStats.month_start == month_start
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def save(self, stats):
        self.session.add(stats)
        await self.session.flush()
        await self.session.refresh(stats)
        return stats

    async def top_weekly(
        self, week_start: str, order_by: RankingOrder, limit: int
    ) -> List[Tuple[WeeklyStats, Optional[Profile]]]:
        column = getattr(WeeklyStats, order_by.value)
        stmt = (
            select(WeeklyStats, Profile)
            .join(Profile, Profile.id == WeeklyStats.user_id, isouter=True)
            .where(WeeklyStats.week_start == week_start)
            .order_by(column.desc(), WeeklyStats.updated_at.asc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def top_monthly(
        self, month_start: str, order_by: RankingOrder, limit: int
    ) -> List[Tuple[MonthlyStats, Optional[Profile]]]:
        column = getattr(MonthlyStats, order_by.value)
        stmt = (
            select(MonthlyStats, Profile)
            .join(Profile, Profile.id == MonthlyStats.user_id, isouter=True)
            .where(MonthlyStats.month_start == month_start)
            .order_by(column.desc(), MonthlyStats.updated_at.asc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
