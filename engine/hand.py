"""Hands and the participants holding them."""

from dataclasses import dataclass, field
from typing import Iterator

from engine.cards import Card
from engine.valuation import hand_value, is_blackjack, is_busted, is_soft


@dataclass
class Hand:
    """An ordered set of cards held by one participant."""

    cards: list[Card] = field(default_factory=list)

    def take_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def discard(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    def reveal(self) -> None:
        """Turn every card face up."""
        for card in self.cards:
            card.face_down = False

    def show_hand(self) -> str:
        """Render the cards in order, hidden cards as a placeholder."""
        return ", ".join(str(card) for card in self.cards)

    @property
    def value(self) -> int:
        """Total of the face-up cards."""
        return hand_value(self.cards)

    @property
    def total(self) -> int:
        """Total with every card counted, hidden or not."""
        return hand_value(self.cards, reveal_all=True)

    @property
    def is_soft(self) -> bool:
        """Check if a visible ace still counts as 11."""
        return is_soft(self.cards)

    @property
    def is_blackjack(self) -> bool:
        """Check if the revealed hand totals 21."""
        return is_blackjack(self.cards)

    @property
    def is_busted(self) -> bool:
        """Check if the revealed hand is over 21."""
        return is_busted(self.cards)

    @property
    def has_hidden_cards(self) -> bool:
        """Check if any card is still face down."""
        return any(card.face_down for card in self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return f"{self.show_hand()} ({self.value})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"


@dataclass
class Participant:
    """Someone seated at the table: a name and the hand they hold."""

    name: str
    hand: Hand = field(default_factory=Hand)

    def __str__(self) -> str:
        return self.name


@dataclass
class Player(Participant):
    """The human player."""

    name: str = "Player"


@dataclass
class Dealer(Participant):
    """The house, playing a fixed hit-below-17 policy."""

    name: str = field(default="Dealer", init=False)
