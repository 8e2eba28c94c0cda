"""
Record Period Stats Use Case

Adds a play to the player's weekly and monthly ranking counters.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import MonthlyStats, WeeklyStats
from src.domain.periods import month_start_jst, week_start_jst
from .dtos import PeriodStatsSnapshot, RecordPeriodStatsCommand, RecordPeriodStatsResponse


def _apply(stats, command: RecordPeriodStatsCommand, now: datetime) -> None:
    stats.score += command.score_add
    stats.correct_count += command.correct_add
    stats.play_count += command.play_add
    stats.best_streak = max(stats.best_streak, command.best_streak)
    stats.updated_at = now


def _snapshot(stats, period_start: str) -> PeriodStatsSnapshot:
    return PeriodStatsSnapshot(
        period_start=period_start,
        score=stats.score,
        correct_count=stats.correct_count,
        play_count=stats.play_count,
        best_streak=stats.best_streak,
    )


class RecordPeriodStatsUseCase:
    """
    Business Rules:
    - Periods are the current JST week (Monday start) and month
    - Counters are additive, best_streak is max-merged
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: UUID,
        command: RecordPeriodStatsCommand,
        now: Optional[datetime] = None,
    ) -> Result[RecordPeriodStatsResponse]:
        now = now or utcnow()
        week_start = week_start_jst(now)
        month_start = month_start_jst(now)

        async with self.uow:
            weekly = await self.uow.period_stats.get_weekly(user_id, week_start)
            if weekly is None:
                weekly = WeeklyStats(user_id=user_id, week_start=week_start)
            _apply(weekly, command, now)
            weekly = await self.uow.period_stats.save(weekly)

            monthly = await self.uow.period_stats.get_monthly(user_id, month_start)
            if monthly is None:
                monthly = MonthlyStats(user_id=user_id, month_start=month_start)
            _apply(monthly, command, now)
            monthly = await self.uow.period_stats.save(monthly)

            response = RecordPeriodStatsResponse(
                weekly=_snapshot(weekly, week_start),
                monthly=_snapshot(monthly, month_start),
            )
            await self.uow.commit()

        return Return.ok(response)
