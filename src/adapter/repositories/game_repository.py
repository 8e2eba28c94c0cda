from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.game_repository import (
    IGameResultRepository,
    IUserGameStatsRepository,
    IUserTitleRepository,
)
from src.domain.entities import GameKey, GameResult, UserGameStats, UserTitle


class GameResultRepository(IGameResultRepository):
    """GameResult repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_result_id(self, result_id: UUID) -> Optional[GameResult]:
        stmt = select(GameResult).where(GameResult.result_id == result_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, result: GameResult) -> GameResult:
        self.session.add(result)
        await self.session.flush()
        await self.session.refresh(result)
        return result


class UserGameStatsRepository(IUserGameStatsRepository):
    """UserGameStats repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, user_id: UUID, game: GameKey) -> Optional[UserGameStats]:
        stmt = select(UserGameStats).where(
            UserGameStats.user_id == user_id, UserGameStats.game == game
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def save(self, stats: UserGameStats) -> UserGameStats:
        self.session.add(stats)
        await self.session.flush()
        await self.session.refresh(stats)
        return stats


class UserTitleRepository(IUserTitleRepository):
    """UserTitle repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def exists(self, user_id: UUID, game: GameKey, title: str) -> bool:
        stmt = select(UserTitle).where(
            UserTitle.user_id == user_id,
            UserTitle.game == game,
            UserTitle.title == title,
        )
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def create(self, title: UserTitle) -> UserTitle:
        self.session.add(title)
        await self.session.flush()
        return title
