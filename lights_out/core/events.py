from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Literal

EventType = Literal[
    "MOVE_APPLIED",
    "SELECTION_REJECTED",
    "GAME_WON",
    "GAME_QUIT",
]


@dataclass(frozen=True, slots=True)
class GameEvent:
    type: EventType
    move: int
    payload: dict[str, Any]
    ts: datetime

    @staticmethod
    def now(*, type: EventType, move: int, payload: dict[str, Any]) -> "GameEvent":
        return GameEvent(type=type, move=move, payload=payload, ts=datetime.now(timezone.utc))
