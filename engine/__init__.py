"""Blackjack engine - deck, hands, valuation and scoring, UI-agnostic."""

from engine.cards import Card, Deck, DeckExhaustedError, Rank, Suit
from engine.hand import Dealer, Hand, Participant, Player
from engine.outcome import Outcome, Result, determine_outcome
from engine.score import ScoreTracker
from engine.valuation import hand_value, is_blackjack, is_busted, is_soft

__all__ = [
    "Card",
    "Deck",
    "DeckExhaustedError",
    "Rank",
    "Suit",
    "Hand",
    "Participant",
    "Player",
    "Dealer",
    "Outcome",
    "Result",
    "determine_outcome",
    "ScoreTracker",
    "hand_value",
    "is_blackjack",
    "is_busted",
    "is_soft",
]
