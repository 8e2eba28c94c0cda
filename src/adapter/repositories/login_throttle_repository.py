from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.login_throttle_repository import ILoginThrottleRepository
from src.domain.entities import LoginThrottle


class LoginThrottleRepository(ILoginThrottleRepository):
    """LoginThrottle repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, user_id: str, ip: str) -> Optional[LoginThrottle]:
        stmt = select(LoginThrottle).where(
            LoginThrottle.user_id == user_id, LoginThrottle.ip == ip
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def upsert(self, throttle: LoginThrottle) -> LoginThrottle:
        # merge() resolves the (user_id, ip) primary key to an existing row
        merged = await self.session.merge(throttle)
        await self.session.flush()
        return merged
