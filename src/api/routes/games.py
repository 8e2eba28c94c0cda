"""
Game API Routes

Result submission for signed-in players.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.games import (
    RecordPeriodStatsCommand,
    RecordPeriodStatsResponse,
    RecordPeriodStatsUseCase,
    SubmitGameResultCommand,
    SubmitGameResultResponse,
    SubmitGameResultUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import GameKey

router = APIRouter(prefix="/game-results", tags=["Games"])


class SubmitGameResultRequest(BaseModel):
    """POST /game-results payload"""

    model_config = ConfigDict(populate_by_name=True)

    game: GameKey
    score: int = Field(0, ge=0)
    streak: int = Field(0, ge=0)
    stage: int = Field(0, ge=0)
    won: bool = False
    first_place: bool = Field(False, alias="firstPlace")
    title: Optional[str] = Field(None, max_length=100)
    result_id: Optional[UUID] = Field(None, alias="resultId", description="Idempotency key")
    write_log: bool = Field(True, alias="writeLog")


@router.post("", status_code=status.HTTP_200_OK, response_model=SubmitGameResultResponse)
async def submit_game_result(
    request: SubmitGameResultRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Submit Game Result

    Updates personal bests, wins, first places and titles for the game.
    Resubmitting the same resultId is a no-op reported as processed=false.

    Raises:
        - 401 Unauthorized: Not signed in
        - 422 Unprocessable Entity: Invalid payload
        - 500 Internal Server Error: Server error
    """
    command = SubmitGameResultCommand(
        game=request.game,
        score=request.score,
        streak=request.streak,
        stage=request.stage,
        won=request.won,
        first_place=request.first_place,
        title=request.title,
        result_id=request.result_id,
        write_log=request.write_log,
    )

    use_case = SubmitGameResultUseCase(uow)
    result = await use_case.execute(UUID(current_user["sub"]), command)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class RecordPeriodStatsRequest(BaseModel):
    """POST /game-results/period-stats payload"""

    model_config = ConfigDict(populate_by_name=True)

    score_add: int = Field(0, ge=0, alias="scoreAdd")
    correct_add: int = Field(0, ge=0, alias="correctAdd")
    play_add: int = Field(0, ge=0, alias="playAdd")
    best_streak: int = Field(0, ge=0, alias="bestStreak")


@router.post(
    "/period-stats",
    status_code=status.HTTP_200_OK,
    response_model=RecordPeriodStatsResponse,
)
async def record_period_stats(
    request: RecordPeriodStatsRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Record Weekly/Monthly Stats

    Adds a play to the current JST week and month counters.
    """
    command = RecordPeriodStatsCommand(
        score_add=request.score_add,
        correct_add=request.correct_add,
        play_add=request.play_add,
        best_streak=request.best_streak,
    )

    use_case = RecordPeriodStatsUseCase(uow)
    result = await use_case.execute(UUID(current_user["sub"]), command)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
