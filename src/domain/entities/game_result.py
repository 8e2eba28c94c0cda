"""
GameResult Entity

Log of submitted mini-game results.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import GameKey


class GameResult(SQLModel, table=True):
    """
    GameResult entity - one row per logged play.

    Business Rules:
    - result_id is the client idempotency key; a result is applied once
    - Rows are append-only
    """

    __tablename__ = "game_results"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    result_id: UUID = Field(unique=True, index=True)

    user_id: UUID = Field(foreign_key="users.id", index=True)
    game: GameKey

    score: int = Field(default=0)
    streak: int = Field(default=0)
    stage: int = Field(default=0)
    won: bool = Field(default=False)
    first_place: bool = Field(default=False)
    title: Optional[str] = Field(default=None, max_length=100)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_game_result_user_game", "user_id", "game"),)
