"""Round outcomes and how they are decided."""

from enum import Enum

from engine.hand import Hand


class Result(Enum):
    """Score column an outcome counts towards."""

    WIN = "win"
    LOSS = "loss"
    TIE = "tie"


class Outcome(Enum):
    """How a round ended, from the player's point of view."""

    PUSH = "push"
    BLACKJACK = "blackjack"
    BUST = "bust"
    DEALER_BUST = "dealer_bust"
    DEALER_WINS = "dealer_wins"
    WIN = "win"

    @property
    def result(self) -> Result:
        """Return the score column for this outcome."""
        if self == Outcome.PUSH:
            return Result.TIE
        if self in (Outcome.BUST, Outcome.DEALER_WINS):
            return Result.LOSS
        return Result.WIN

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


def determine_outcome(player_hand: Hand, dealer_hand: Hand) -> Outcome:
    """
    Compare the fully revealed player and dealer hands.

    The checks run in a fixed order and the first match wins, so equal
    totals are a push even when both hands are over 21 or both hold 21.
    """
    player_value = player_hand.total
    dealer_value = dealer_hand.total

    if player_value == dealer_value:
        return Outcome.PUSH
    if player_hand.is_blackjack:
        return Outcome.BLACKJACK
    if player_hand.is_busted:
        return Outcome.BUST
    if dealer_hand.is_busted:
        return Outcome.DEALER_BUST
    if dealer_value > player_value:
        return Outcome.DEALER_WINS
    return Outcome.WIN
