"""
Submit Game Result Use Case

Applies a finished play to the player's per-game stats and titles.
"""

import logging
from uuid import UUID, uuid4

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import GameKey, GameResult, RecordKind, UserGameStats, UserTitle
from src.domain.games import record_kind_for
from .dtos import SubmitGameResultCommand, SubmitGameResultResponse

logger = logging.getLogger(__name__)


def _stats_response(
    stats: UserGameStats,
    processed: bool,
    record_kind: RecordKind,
    is_new_record: bool = False,
    is_new_title: bool = False,
    new_title=None,
) -> SubmitGameResultResponse:
    best_by_kind = {
        RecordKind.streak: stats.best_streak,
        RecordKind.score: stats.best_score,
        RecordKind.stage: stats.best_stage,
    }
    return SubmitGameResultResponse(
        processed=processed,
        is_new_record=is_new_record,
        record_kind=record_kind.value if is_new_record else None,
        new_record_value=best_by_kind[record_kind],
        is_new_title=is_new_title,
        new_title=new_title,
        stats_best_streak=stats.best_streak,
        stats_best_score=stats.best_score,
        stats_best_stage=stats.best_stage,
        stats_wins=stats.wins,
        stats_first_places=stats.first_places,
    )


class SubmitGameResultUseCase:
    """
    Use case for submitting a game result.

    Business Rules:
    - result_id is an idempotency key: a result already in the log is
      reported with processed=False and changes nothing
    - The game decides which best counts as a record (streak/score/stage)
    - A record needs a positive value strictly above the previous best
    - Bests are max-merged, wins and first places are counted
    - A title not yet owned for the game is granted
    - A new streak record also raises the profile best_streak used by the
      all-time ranking
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, command: SubmitGameResultCommand
    ) -> Result[SubmitGameResultResponse]:
        game = GameKey(command.game)
        record_kind = record_kind_for(game)

        async with self.uow:
            stats = await self.uow.game_stats.get(user_id, game)
            if stats is None:
                stats = UserGameStats(user_id=user_id, game=game)

            if command.result_id is not None:
                existing = await self.uow.game_results.get_by_result_id(command.result_id)
                if existing is not None:
                    logger.info(f"Duplicate game result {command.result_id} ignored")
                    return Return.ok(_stats_response(stats, False, record_kind))

            submitted = {
                RecordKind.streak: command.streak,
                RecordKind.score: command.score,
                RecordKind.stage: command.stage,
            }
            previous = {
                RecordKind.streak: stats.best_streak,
                RecordKind.score: stats.best_score,
                RecordKind.stage: stats.best_stage,
            }
            value = submitted[record_kind]
            is_new_record = value > 0 and value > previous[record_kind]

            stats.best_streak = max(stats.best_streak, command.streak)
            stats.best_score = max(stats.best_score, command.score)
            stats.best_stage = max(stats.best_stage, command.stage)
            if command.won:
                stats.wins += 1
            if command.first_place:
                stats.first_places += 1
            stats.updated_at = utcnow()
            stats = await self.uow.game_stats.save(stats)

            title = (command.title or "").strip() or None
            is_new_title = False
            if title is not None and not await self.uow.titles.exists(user_id, game, title):
                await self.uow.titles.create(UserTitle(user_id=user_id, game=game, title=title))
                is_new_title = True

            if game == GameKey.streak and is_new_record:
                profile = await self.uow.profiles.get_by_id(user_id)
                if profile is not None and profile.best_streak < stats.best_streak:
                    profile.best_streak = stats.best_streak
                    profile.updated_at = utcnow()
                    await self.uow.profiles.update(profile)

            if command.write_log:
                await self.uow.game_results.create(
                    GameResult(
                        result_id=command.result_id or uuid4(),
                        user_id=user_id,
                        game=game,
                        score=command.score,
                        streak=command.streak,
                        stage=command.stage,
                        won=command.won,
                        first_place=command.first_place,
                        title=title,
                    )
                )

            response = _stats_response(
                stats,
                True,
                record_kind,
                is_new_record=is_new_record,
                is_new_title=is_new_title,
                new_title=title if is_new_title else None,
            )
            await self.uow.commit()

        return Return.ok(response)
