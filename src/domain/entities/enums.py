"""
Quiz Site Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class GameKey(str, Enum):
    """Mini-game identifier"""

    streak = "streak"
    timed = "timed"
    dungeon = "dungeon"
    battle = "battle"
    coop_dungeon = "coop_dungeon"
    survival = "survival"


class RecordKind(str, Enum):
    """Which personal best a game competes on"""

    streak = "streak"
    score = "score"
    stage = "stage"


class RankingOrder(str, Enum):
    """Sort column for weekly/monthly rankings"""

    score = "score"
    correct_count = "correct_count"
    play_count = "play_count"
