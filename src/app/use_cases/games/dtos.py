"""
Game Use Case DTOs
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities import GameKey


class SubmitGameResultCommand(BaseModel):
    """A finished play as reported by the game client"""

    game: GameKey
    score: int = Field(default=0, ge=0)
    streak: int = Field(default=0, ge=0)
    stage: int = Field(default=0, ge=0)
    won: bool = False
    first_place: bool = False
    title: Optional[str] = Field(default=None, max_length=100)
    result_id: Optional[UUID] = None
    write_log: bool = True


class SubmitGameResultResponse(BaseModel):
    processed: bool
    is_new_record: bool
    record_kind: Optional[str]
    new_record_value: int
    is_new_title: bool
    new_title: Optional[str]
    stats_best_streak: int
    stats_best_score: int
    stats_best_stage: int
    stats_wins: int
    stats_first_places: int


class RecordPeriodStatsCommand(BaseModel):
    score_add: int = Field(default=0, ge=0)
    correct_add: int = Field(default=0, ge=0)
    play_add: int = Field(default=0, ge=0)
    best_streak: int = Field(default=0, ge=0)


class PeriodStatsSnapshot(BaseModel):
    period_start: str
    score: int
    correct_count: int
    play_count: int
    best_streak: int


class RecordPeriodStatsResponse(BaseModel):
    weekly: PeriodStatsSnapshot
    monthly: PeriodStatsSnapshot
