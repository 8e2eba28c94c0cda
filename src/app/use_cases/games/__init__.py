"""
Game Use Cases

Result submission and ranking counters.
"""

from .submit_game_result_use_case import SubmitGameResultUseCase
from .record_period_stats_use_case import RecordPeriodStatsUseCase
from .dtos import (
    SubmitGameResultCommand,
    SubmitGameResultResponse,
    RecordPeriodStatsCommand,
    RecordPeriodStatsResponse,
    PeriodStatsSnapshot,
)

__all__ = [
    "SubmitGameResultUseCase",
    "RecordPeriodStatsUseCase",
    "SubmitGameResultCommand",
    "SubmitGameResultResponse",
    "RecordPeriodStatsCommand",
    "RecordPeriodStatsResponse",
    "PeriodStatsSnapshot",
]
