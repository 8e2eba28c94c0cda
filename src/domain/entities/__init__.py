"""
Quiz Site Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import GameKey, RecordKind, RankingOrder

# Export all entities
from .user import User
from .profile import Profile
from .password_reset_token import PasswordResetToken
from .login_throttle import LoginThrottle
from .audit_event import AuditEvent
from .game_result import GameResult
from .user_game_stats import UserGameStats
from .user_title import UserTitle
from .period_stats import WeeklyStats, MonthlyStats

__all__ = [
    # Enums
    "GameKey",
    "RecordKind",
    "RankingOrder",
    # Entities
    "User",
    "Profile",
    "PasswordResetToken",
    "LoginThrottle",
    "AuditEvent",
    "GameResult",
    "UserGameStats",
    "UserTitle",
    "WeeklyStats",
    "MonthlyStats",
]
