"""
Period Stats Entities

Weekly and monthly ranking counters, keyed by the JST period start.
"""

from datetime import datetime
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class WeeklyStats(SQLModel, table=True):
    """
    WeeklyStats entity.

    Business Rules:
    - week_start is the Monday of the JST week, "YYYY-MM-DD"
    - score, correct_count and play_count are additive
    - best_streak is max-merged
    """

    __tablename__ = "weekly_stats"

    user_id: UUID = Field(foreign_key="users.id", primary_key=True)
    week_start: str = Field(primary_key=True, max_length=10)

    score: int = Field(default=0)
    correct_count: int = Field(default=0)
    play_count: int = Field(default=0)
    best_streak: int = Field(default=0)

    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_weekly_stats_week_start", "week_start"),)


class MonthlyStats(SQLModel, table=True):
    """Same counters as WeeklyStats, keyed by the first day of the JST month"""

    __tablename__ = "monthly_stats"

    user_id: UUID = Field(foreign_key="users.id", primary_key=True)
    month_start: str = Field(primary_key=True, max_length=10)

    score: int = Field(default=0)
    correct_count: int = Field(default=0)
    play_count: int = Field(default=0)
    best_streak: int = Field(default=0)

    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_monthly_stats_month_start", "month_start"),)
