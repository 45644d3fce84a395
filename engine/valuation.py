"""Hand valuation - blackjack totals with Ace dual-value resolution."""

from typing import Iterable

from engine.cards import Card

BLACKJACK = 21


def _counted(cards: Iterable[Card], reveal_all: bool) -> list[Card]:
    """Return the cards that take part in the total."""
    return [card for card in cards if reveal_all or not card.face_down]


def hand_value(cards: Iterable[Card], reveal_all: bool = False) -> int:
    """
    Calculate the best blackjack total of a hand.

    Face-down cards are skipped unless ``reveal_all`` is set. Every counted
    Ace starts at 11; while the hand is over 21, counted Aces drop to 1 one
    at a time. The result may still exceed 21 when no Ace is left to drop.

    Args:
        cards: A Hand or any iterable of cards
        reveal_all: Count face-down cards too

    Returns:
        The hand total
    """
    total = 0
    aces = 0

    for card in _counted(cards, reveal_all):
        if card.is_ace:
            aces += 1
        total += card.value

    # Reduce aces from 11 to 1 as needed
    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1

    return total


def is_blackjack(cards: Iterable[Card]) -> bool:
    """Check if the fully revealed hand totals exactly 21."""
    return hand_value(cards, reveal_all=True) == BLACKJACK


def is_busted(cards: Iterable[Card], reveal_all: bool = True) -> bool:
    """Check if the hand total exceeds 21."""
    return hand_value(cards, reveal_all=reveal_all) > BLACKJACK


def is_soft(cards: Iterable[Card], reveal_all: bool = False) -> bool:
    """
    Check if the hand is soft (has an ace counted as 11).

    A hand is soft if it contains an ace that can be counted as 11
    without busting.
    """
    counted = _counted(cards, reveal_all)
    if not any(card.is_ace for card in counted):
        return False

    total_hard = sum(1 if card.is_ace else card.value for card in counted)
    return total_hard + 10 <= BLACKJACK
