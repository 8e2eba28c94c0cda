"""
UserGameStats Entity

Personal bests and counters per player and game.
"""

from datetime import datetime
from uuid import UUID

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow

from .enums import GameKey


class UserGameStats(SQLModel, table=True):
    """
    UserGameStats entity.

    Business Rules:
    - best_* columns only ever grow (max-merge)
    - wins and first_places count submitted results with the flag set
    """

    __tablename__ = "user_game_stats"

    user_id: UUID = Field(foreign_key="users.id", primary_key=True)
    game: GameKey = Field(primary_key=True)

    best_streak: int = Field(default=0)
    best_score: int = Field(default=0)
    best_stage: int = Field(default=0)
    wins: int = Field(default=0)
    first_places: int = Field(default=0)

    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
