from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.profile_repository import IProfileRepository
from src.domain.entities import Profile


class ProfileRepository(IProfileRepository):
    """Profile repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, profile_id: UUID) -> Optional[Profile]:
        stmt = select(Profile).where(Profile.id == profile_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_handle(self, handle: str) -> Optional[Profile]:
        stmt = select(Profile).where(Profile.user_id == handle)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, profile: Profile) -> Profile:
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile

    async def top_by_best_streak(self, limit: int) -> List[Profile]:
        stmt = (
            select(Profile)
            .order_by(Profile.best_streak.desc(), Profile.updated_at.asc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
