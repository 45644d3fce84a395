"""Card and Deck classes - the 52-card deck used by the table."""

from dataclasses import dataclass, field
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator


class DeckExhaustedError(IndexError):
    """Raised when a card is dealt from an empty deck."""


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks with blackjack values."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


RANK_CODES = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}

SUIT_CODES = {
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
}

FACE_DOWN_PLACEHOLDER = "[]"


@dataclass(slots=True)
class Card:
    """
    Playing card with a visibility flag.

    Rank and suit are fixed once the card is built; only ``face_down``
    changes while the card moves between deck and hands. Equality and
    hashing ignore visibility.
    """

    rank: Rank
    suit: Suit
    face_down: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.rank, Rank):
            raise ValueError(f"Invalid rank: {self.rank!r}")
        if not isinstance(self.suit, Suit):
            valid = ", ".join(s.name.lower() for s in Suit)
            raise ValueError(f"Suit must be one of {valid}, got {self.suit!r}")

    def __setattr__(self, name: str, value: object) -> None:
        if name in ("rank", "suit") and hasattr(self, name):
            raise AttributeError(f"Card {name} cannot be changed")
        object.__setattr__(self, name, value)

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))

    def __str__(self) -> str:
        if self.face_down:
            return FACE_DOWN_PLACEHOLDER
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        hidden = ", face_down=True" if self.face_down else ""
        return f"Card({self.rank.name}, {self.suit.name}{hidden})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in RANK_CODES:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in SUIT_CODES:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(RANK_CODES[rank_str], SUIT_CODES[suit_str])


class Deck:
    """A standard 52-card deck, shuffled as soon as it is built."""

    SIZE = 52

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize and shuffle a new deck.

        Args:
            rng: Random number generator for shuffling (seed it for
                reproducible games)
        """
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.rebuild()

    @classmethod
    def stacked(cls, top_cards: Iterable[Card], rng: Random | None = None) -> "Deck":
        """
        Build a full deck whose next deals are ``top_cards``, in order.

        The remaining cards are shuffled underneath. Useful for replaying
        a known scenario.
        """
        top = [Card(card.rank, card.suit) for card in top_cards]
        if len(set(top)) != len(top):
            raise ValueError("Stacked cards must be unique")

        deck = cls(rng=rng)
        rest = [card for card in deck._cards if card not in top]
        # Cards are dealt from the end of the list
        deck._cards = rest + list(reversed(top))
        return deck

    def reset(self) -> None:
        """Reset deck to all 52 cards in order."""
        self._cards = [Card(rank, suit) for suit in Suit for rank in Rank]

    def shuffle(self) -> None:
        """Shuffle the remaining cards."""
        self._rng.shuffle(self._cards)

    def rebuild(self) -> None:
        """Collect a fresh set of 52 cards and shuffle them."""
        self.reset()
        self.shuffle()

    def deal_card(self, face_down: bool = False) -> Card:
        """
        Deal the top card of the deck.

        Args:
            face_down: Whether the card is dealt hidden

        Raises:
            DeckExhaustedError: If no cards remain
        """
        if not self._cards:
            raise DeckExhaustedError("Cannot deal from an empty deck")
        card = self._cards.pop()
        card.face_down = face_down
        return card

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)
