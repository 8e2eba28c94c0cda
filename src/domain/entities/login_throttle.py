"""
LoginThrottle Entity

Failed login counter per (handle, client IP).
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class LoginThrottle(SQLModel, table=True):
    """
    LoginThrottle entity - progressive lock-out state.

    Business Rules:
    - Keyed by the login handle as typed, so unknown handles are throttled too
    - 10/20/30 consecutive failures lock for 30s/2min/5min
    - Successful login resets failed_count and locked_until
    """

    __tablename__ = "login_throttles"

    user_id: str = Field(primary_key=True, max_length=100)
    ip: str = Field(primary_key=True, max_length=64)

    failed_count: int = Field(default=0)
    locked_until: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
