from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.audit_event_repository import AuditEventRepository
from src.adapter.repositories.game_repository import (
    GameResultRepository,
    UserGameStatsRepository,
    UserTitleRepository,
)
from src.adapter.repositories.login_throttle_repository import LoginThrottleRepository
from src.adapter.repositories.password_reset_token_repository import PasswordResetTokenRepository
from src.adapter.repositories.period_stats_repository import PeriodStatsRepository
from src.adapter.repositories.profile_repository import ProfileRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.profiles = ProfileRepository(self.session)
        self.password_reset_tokens = PasswordResetTokenRepository(self.session)
        self.login_throttles = LoginThrottleRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        self.game_results = GameResultRepository(self.session)
        self.game_stats = UserGameStatsRepository(self.session)
        self.titles = UserTitleRepository(self.session)
        self.period_stats = PeriodStatsRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
