from typing import List

from fastapi import APIRouter, Depends, Query, status

from src.api.error import ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.rankings import (
    GetPeriodRankingUseCase,
    GetStreakRankingUseCase,
    PeriodRankingResponse,
    StreakRankingEntry,
)
from src.depends import get_unit_of_work
from src.domain.entities import RankingOrder

router = APIRouter(prefix="/rankings", tags=["Rankings"])


@router.get("/streak", status_code=status.HTTP_200_OK, response_model=List[StreakRankingEntry])
async def get_streak_ranking(uow: UnitOfWork = Depends(get_unit_of_work)):
    """All-time best streak top 10"""
    result = await GetStreakRankingUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/weekly", status_code=status.HTTP_200_OK, response_model=PeriodRankingResponse)
async def get_weekly_ranking(
    order_by: RankingOrder = Query(RankingOrder.score, description="Ranking column"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Top 10 of the current JST week (Monday 00:00 start)"""
    result = await GetPeriodRankingUseCase(uow).execute("weekly", order_by)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/monthly", status_code=status.HTTP_200_OK, response_model=PeriodRankingResponse)
async def get_monthly_ranking(
    order_by: RankingOrder = Query(RankingOrder.score, description="Ranking column"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Top 10 of the current JST month"""
    result = await GetPeriodRankingUseCase(uow).execute("monthly", order_by)
    if result.is_err():
        raise ServerError(result.error)
    return result.value
