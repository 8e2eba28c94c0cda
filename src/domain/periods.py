"""
Ranking periods in Japan Standard Time.

Weeks start on Monday 00:00 JST, months on the 1st. Period keys are
``YYYY-MM-DD`` strings so they compare and index as plain text.
"""

from datetime import UTC, datetime, timedelta, timezone
from typing import Optional

# Japan has no daylight saving time
JST = timezone(timedelta(hours=9), "JST")


def _to_jst(now: Optional[datetime]) -> datetime:
    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return now.astimezone(JST)


def week_start_jst(now: Optional[datetime] = None) -> str:
    jst = _to_jst(now)
    monday = jst.date() - timedelta(days=jst.weekday())
    return monday.isoformat()


def month_start_jst(now: Optional[datetime] = None) -> str:
    jst = _to_jst(now)
    return jst.date().replace(day=1).isoformat()
