from typing import List, Optional

from pydantic import BaseModel


class StreakRankingEntry(BaseModel):
    user_id: str
    username: Optional[str]
    avatar_url: Optional[str]
    best_streak: int


class PeriodRankingEntry(BaseModel):
    user_id: str
    username: Optional[str]
    avatar_url: Optional[str]
    score: int
    correct_count: int
    play_count: int


class PeriodRankingResponse(BaseModel):
    period_start: str
    order_by: str
    entries: List[PeriodRankingEntry]
