from abc import ABC, abstractmethod

from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.app.repositories.game_repository import (
    IGameResultRepository,
    IUserGameStatsRepository,
    IUserTitleRepository,
)
from src.app.repositories.login_throttle_repository import ILoginThrottleRepository
from src.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from src.app.repositories.period_stats_repository import IPeriodStatsRepository
from src.app.repositories.profile_repository import IProfileRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    profiles: IProfileRepository
    password_reset_tokens: IPasswordResetTokenRepository
    login_throttles: ILoginThrottleRepository
    audit_events: IAuditEventRepository
    game_results: IGameResultRepository
    game_stats: IUserGameStatsRepository
    titles: IUserTitleRepository
    period_stats: IPeriodStatsRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
