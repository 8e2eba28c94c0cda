"""
Ranking Use Cases

Top 10 lists for the all-time streak, weekly and monthly rankings.
"""

from datetime import datetime
from typing import List, Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import RankingOrder
from src.domain.periods import month_start_jst, week_start_jst
from .dtos import PeriodRankingEntry, PeriodRankingResponse, StreakRankingEntry

RANKING_SIZE = 10


class GetStreakRankingUseCase:
    """All-time best streak, ties broken by who reached it first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, limit: int = RANKING_SIZE) -> Result[List[StreakRankingEntry]]:
        async with self.uow:
            profiles = await self.uow.profiles.top_by_best_streak(limit)

            # Read rows before leaving the unit of work; its rollback expires them
            entries = [
                StreakRankingEntry(
                    user_id=p.user_id,
                    username=p.username,
                    avatar_url=p.avatar_url,
                    best_streak=p.best_streak,
                )
                for p in profiles
            ]

        return Return.ok(entries)


class GetPeriodRankingUseCase:
    """Weekly or monthly top list for the current JST period"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        period: str,
        order_by: RankingOrder = RankingOrder.score,
        limit: int = RANKING_SIZE,
        now: Optional[datetime] = None,
    ) -> Result[PeriodRankingResponse]:
        now = now or utcnow()

        async with self.uow:
            if period == "weekly":
                period_start = week_start_jst(now)
                rows = await self.uow.period_stats.top_weekly(period_start, order_by, limit)
            else:
                period_start = month_start_jst(now)
                rows = await self.uow.period_stats.top_monthly(period_start, order_by, limit)

            entries = [
                PeriodRankingEntry(
                    user_id=profile.user_id if profile else str(stats.user_id),
                    username=profile.username if profile else None,
                    avatar_url=profile.avatar_url if profile else None,
                    score=stats.score,
                    correct_count=stats.correct_count,
                    play_count=stats.play_count,
                )
                for stats, profile in rows
            ]

        return Return.ok(
            PeriodRankingResponse(
                period_start=period_start, order_by=order_by.value, entries=entries
            )
        )
