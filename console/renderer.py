"""Text rendering of the table, outcomes and score."""

from engine.game.engine import BlackjackGame
from engine.hand import Participant
from engine.outcome import Outcome
from engine.score import ScoreTracker

OUTCOME_MESSAGES = {
    Outcome.PUSH: "Push...",
    Outcome.BLACKJACK: "21! You win with a BlackJack!",
    Outcome.BUST: "Busted! Better luck next time...",
    Outcome.DEALER_BUST: "Dealer busted.. You win!",
    Outcome.DEALER_WINS: "Dealer wins. Better luck next time...",
    Outcome.WIN: "You win!",
}


def render_hand(participant: Participant) -> str:
    """
    Render one participant's block.

    Hidden cards show as a placeholder and are left out of the total.
    """
    hand = participant.hand
    return "\n".join(
        [
            f"---- {participant.name} ----",
            hand.show_hand(),
            f"Total: {hand.value}",
            "",
        ]
    )


def render_table(game: BlackjackGame) -> str:
    """Render the dealer's block above the player's."""
    return "\n".join([render_hand(game.dealer), render_hand(game.player)])


def render_outcome(outcome: Outcome) -> str:
    """Return the message announcing an outcome."""
    return OUTCOME_MESSAGES[outcome]


def render_score(score: ScoreTracker) -> str:
    """Render the running score."""
    return str(score)
