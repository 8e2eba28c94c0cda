"""
Ranking Use Cases
"""

from .get_rankings_use_case import GetPeriodRankingUseCase, GetStreakRankingUseCase, RANKING_SIZE
from .dtos import PeriodRankingEntry, PeriodRankingResponse, StreakRankingEntry

__all__ = [
    "GetStreakRankingUseCase",
    "GetPeriodRankingUseCase",
    "RANKING_SIZE",
    "StreakRankingEntry",
    "PeriodRankingEntry",
    "PeriodRankingResponse",
]
