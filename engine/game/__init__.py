"""Game engine and state management."""

from engine.game.events import GameEvent, EventEmitter, EventType
from engine.game.state import GameState
from engine.game.engine import Action, BlackjackGame

__all__ = [
    "GameEvent",
    "EventEmitter",
    "EventType",
    "GameState",
    "Action",
    "BlackjackGame",
]
