"""
UserTitle Entity

Titles a player has earned in a game.
"""

from datetime import datetime
from uuid import UUID

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow

from .enums import GameKey


class UserTitle(SQLModel, table=True):
    __tablename__ = "user_titles"

    user_id: UUID = Field(foreign_key="users.id", primary_key=True)
    game: GameKey = Field(primary_key=True)
    title: str = Field(primary_key=True, max_length=100)

    acquired_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
