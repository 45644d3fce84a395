"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Round state machine states.

    Flow: IDLE → DEALING → PLAYER_TURN → DEALER_TURN → RESOLVING → DONE
    """

    # No round started yet, or the last round was aborted
    IDLE = auto()

    # Cards being dealt
    DEALING = auto()

    # Player hits or stands
    PLAYER_TURN = auto()

    # Dealer plays
    DEALER_TURN = auto()

    # Determining the winner
    RESOLVING = auto()

    # Round finished, ready for next
    DONE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.IDLE: [GameState.DEALING],
    GameState.DEALING: [GameState.PLAYER_TURN, GameState.IDLE],
    # RESOLVING directly when the player reaches 21 or busts
    GameState.PLAYER_TURN: [GameState.PLAYER_TURN, GameState.DEALER_TURN, GameState.RESOLVING, GameState.IDLE],
    GameState.DEALER_TURN: [GameState.RESOLVING, GameState.IDLE],
    GameState.RESOLVING: [GameState.DONE],
    GameState.DONE: [GameState.DEALING],
}


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
