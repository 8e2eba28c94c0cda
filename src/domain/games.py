"""
Game rules shared by result submission and presentation.
"""

from typing import Iterable, Optional

from pydantic import BaseModel

from src.domain.entities.enums import GameKey, RecordKind

RECORD_KIND_BY_GAME = {
    GameKey.streak: RecordKind.streak,
    GameKey.timed: RecordKind.score,
    GameKey.survival: RecordKind.score,
    GameKey.battle: RecordKind.score,
    GameKey.dungeon: RecordKind.stage,
    GameKey.coop_dungeon: RecordKind.stage,
}

GAME_LABELS = {
    GameKey.streak: "Streak Challenge",
    GameKey.timed: "Time Attack Quiz",
    GameKey.dungeon: "Quiz Dungeon",
    GameKey.battle: "Quiz Battle",
    GameKey.coop_dungeon: "Co-op Dungeon",
    GameKey.survival: "Survival Quiz",
}

RECORD_KIND_LABELS = {
    RecordKind.streak: "Correct streak",
    RecordKind.score: "Score",
    RecordKind.stage: "Stage",
}


class TitleThreshold(BaseModel):
    threshold: int
    title: str


def calc_title(titles: Iterable[TitleThreshold], value: int) -> Optional[str]:
    """
    Return the title of the last threshold reached by ``value``.

    ``titles`` is expected in ascending threshold order; a later row that is
    reached overrides an earlier one.
    """
    result = None
    for row in titles:
        if value >= row.threshold:
            result = row.title
    return result


def record_kind_for(game: GameKey) -> RecordKind:
    return RECORD_KIND_BY_GAME[game]


def game_label(game: GameKey) -> str:
    return GAME_LABELS[game]


def record_kind_label(kind: Optional[str]) -> str:
    if not kind:
        return ""
    try:
        return RECORD_KIND_LABELS[RecordKind(kind)]
    except ValueError:
        return kind
