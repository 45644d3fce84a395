"""Pytest fixtures for blackjack tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from engine.cards import Card, Deck, Rank, Suit
from engine.game import BlackjackGame
from engine.hand import Hand


def make_hand(*codes: str) -> Hand:
    """Build a face-up hand from card codes like 'AS', '10H'."""
    hand = Hand()
    for code in codes:
        hand.take_card(Card.from_string(code))
    return hand


def stacked_game(*codes: str, **kwargs) -> BlackjackGame:
    """
    A game whose deck deals the given cards first.

    Deal order is player, dealer (hole card), player, dealer, then hits.
    """
    rng = kwargs.pop("rng", Random(7))
    deck = Deck.stacked([Card.from_string(code) for code in codes], rng=rng)
    return BlackjackGame(deck=deck, rng=rng, **kwargs)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


@pytest.fixture
def game(rng):
    """A new game instance."""
    return BlackjackGame(rng=rng)


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def cards_strategy(draw, min_cards=1, max_cards=8):
    """Generate a list of distinct cards."""
    return draw(
        st.lists(card_strategy(), min_size=min_cards, max_size=max_cards, unique=True)
    )
