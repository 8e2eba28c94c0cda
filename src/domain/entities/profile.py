"""
Profile Entity

Public player profile attached to a user account.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Profile(SQLModel, table=True):
    """
    Profile entity - player handle, display data and recovery email.

    Business Rules:
    - id is the owning users.id
    - user_id is the login handle, unique and never containing "@"
    - recovery_email authorizes password reset requests
    - best_streak feeds the all-time streak ranking
    """

    __tablename__ = "profiles"

    id: UUID = Field(foreign_key="users.id", primary_key=True)
    user_id: str = Field(unique=True, index=True, max_length=100)

    username: Optional[str] = Field(default=None, max_length=100)
    avatar_url: Optional[str] = Field(default=None, max_length=500)
    recovery_email: Optional[str] = Field(default=None, max_length=254)

    best_streak: int = Field(default=0)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_profile_best_streak", "best_streak"),)
