"""Blackjack game engine with state machine."""

import logging
from enum import Enum
from random import Random
from typing import Callable, Literal

from transitions import Machine

from engine.cards import Card, Deck, DeckExhaustedError
from engine.game.events import EventEmitter, EventType, GameEvent
from engine.game.state import GameState
from engine.hand import Dealer, Participant, Player
from engine.outcome import Outcome, Result, determine_outcome
from engine.score import ScoreTracker
from engine.valuation import hand_value

logger = logging.getLogger(__name__)

ReshufflePolicy = Literal["every_round", "when_low"]

OUTCOME_EVENTS = {
    Result.WIN: EventType.PLAYER_WINS,
    Result.LOSS: EventType.PLAYER_LOSES,
    Result.TIE: EventType.PUSH,
}


class Action(Enum):
    """Player decisions during their turn."""

    HIT = "h"
    STAND = "s"


class BlackjackGame:
    """
    Blackjack game engine using a state machine.

    This is the core game logic, completely UI-agnostic.
    Communication happens through events and return values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "begin_deal", "source": ["idle", "done"], "dest": "dealing"},
        {"trigger": "cards_dealt", "source": "dealing", "dest": "player_turn"},
        {"trigger": "player_action", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        # Player reached 21 or busted, the dealer does not play
        {"trigger": "player_finished", "source": "player_turn", "dest": "resolving"},
        {"trigger": "dealer_plays", "source": "dealer_turn", "dest": "resolving"},
        {"trigger": "resolve", "source": "resolving", "dest": "done"},
        {"trigger": "abort", "source": ["dealing", "player_turn", "dealer_turn"], "dest": "idle"},
    ]

    def __init__(
        self,
        player_name: str = "Player",
        deck: Deck | None = None,
        dealer_stands_on: int = 17,
        reshuffle_policy: ReshufflePolicy = "every_round",
        reshuffle_threshold: int = 21,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new blackjack game.

        Args:
            player_name: Name shown for the player's hand
            deck: Deck to play the first round from (a fresh shuffled deck
                if not provided)
            dealer_stands_on: Lowest total the dealer stands on
            reshuffle_policy: "every_round" rebuilds the deck before each new
                round, "when_low" only once fewer than reshuffle_threshold
                cards remain
            reshuffle_threshold: Card count that triggers a "when_low" rebuild
            rng: Random number generator for reproducible games
        """
        if reshuffle_policy not in ("every_round", "when_low"):
            raise ValueError(f"Unknown reshuffle policy: {reshuffle_policy}")
        if reshuffle_threshold < 0:
            raise ValueError("Reshuffle threshold cannot be negative")

        self.deck = deck if deck is not None else Deck(rng=rng)
        self.dealer_stands_on = dealer_stands_on
        self.reshuffle_policy = reshuffle_policy
        self.reshuffle_threshold = reshuffle_threshold

        self.player = Player(name=player_name)
        self.dealer = Dealer()
        self.score = ScoreTracker()
        self.events = EventEmitter()
        self.last_outcome: Outcome | None = None
        self.rounds_started = 0

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="idle",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def start_round(self) -> bool:
        """
        Deal a new round.

        Returns:
            True if the round was dealt

        Raises:
            DeckExhaustedError: If the deck runs out while dealing; the
                round is aborted first
        """
        if self.state not in (GameState.IDLE, GameState.DONE):
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Cannot deal while a round is in progress",
                state=self.state.name,
            )
            return False

        self.discard_hands()
        self._prepare_deck()
        self.last_outcome = None
        self.rounds_started += 1
        self.begin_deal()
        logger.debug("Round %d: dealing from %d cards", self.rounds_started, len(self.deck))

        return self._deal_initial_cards()

    def _prepare_deck(self) -> None:
        """Apply the reshuffle policy before a round is dealt."""
        if self.reshuffle_policy == "every_round":
            needs_rebuild = self.rounds_started > 0
        else:
            needs_rebuild = len(self.deck) < self.reshuffle_threshold

        if needs_rebuild:
            self.deck.rebuild()
            self.events.emit_new(EventType.DECK_SHUFFLED, cards_remaining=len(self.deck))

    def _deal_initial_cards(self) -> bool:
        """Deal the initial cards."""
        # Deal: player, dealer (face down), player, dealer
        self._deal_card_to(self.player)
        self._deal_card_to(self.dealer, face_down=True)
        self._deal_card_to(self.player)
        self._deal_card_to(self.dealer)

        self.events.emit_new(
            EventType.ROUND_STARTED,
            round=self.rounds_started,
            player_hand=self.player.hand.show_hand(),
            dealer_hand=self.dealer.hand.show_hand(),
            player_value=self.player.hand.value,
            dealer_value=self.dealer.hand.value,
        )
        self.cards_dealt()

        if self.player.hand.is_blackjack:
            self.events.emit_new(EventType.PLAYER_BLACKJACK, hand_value=self.player.hand.total)
            self.player_finished()
            return self._resolve_round()

        return True

    def _deal_card_to(self, participant: Participant, face_down: bool = False) -> Card:
        """Deal a card from the deck into a participant's hand."""
        try:
            card = self.deck.deal_card(face_down=face_down)
        except DeckExhaustedError as exc:
            self._abort_round(exc)
            raise

        participant.hand.take_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            hand="dealer" if participant is self.dealer else "player",
            hand_value=participant.hand.value,
        )
        return card

    def _abort_round(self, exc: Exception) -> None:
        """Throw away the round in progress without scoring it."""
        logger.error("Round %d aborted in %s: %s", self.rounds_started, self.state, exc)
        self.events.emit_new(
            EventType.ROUND_ABORTED,
            reason=str(exc),
            state=self.state.name,
            cards_remaining=len(self.deck),
        )
        self.discard_hands()
        self.abort()

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        if self.state != GameState.PLAYER_TURN:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Cannot hit in current state",
                state=self.state.name,
            )
            return False

        hand = self.player.hand
        self._deal_card_to(self.player)
        self.events.emit_new(
            EventType.PLAYER_HIT,
            hand_value=hand.value,
            player_hand=hand.show_hand(),
        )

        if hand.is_blackjack:
            self.events.emit_new(EventType.PLAYER_BLACKJACK, hand_value=hand.total)
        elif hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=hand.total)
        else:
            self.player_action()  # Stay in player turn
            return True

        self.player_finished()
        return self._resolve_round()

    def stand(self) -> bool:
        """Player stands (keeps current hand)."""
        if self.state != GameState.PLAYER_TURN:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Cannot stand in current state",
                state=self.state.name,
            )
            return False

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player.hand.value)
        self.player_done()
        return self._play_dealer()

    def _play_dealer(self) -> bool:
        """Dealer reveals the hole card and draws to the stand threshold."""
        hand = self.dealer.hand
        hidden = [card for card in hand if card.face_down]
        hand.reveal()
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            card=", ".join(str(card) for card in hidden),
            dealer_hand=hand.show_hand(),
            hand_value=hand.value,
        )

        while self._dealer_should_hit():
            self._deal_card_to(self.dealer)
            self.events.emit_new(
                EventType.DEALER_HITS,
                hand_value=hand.value,
                dealer_hand=hand.show_hand(),
            )

        if hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=hand.value)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=hand.value)

        self.dealer_plays()
        return self._resolve_round()

    def _dealer_should_hit(self) -> bool:
        """Determine if dealer should hit."""
        return hand_value(self.dealer.hand, reveal_all=True) < self.dealer_stands_on

    def _resolve_round(self) -> bool:
        """Decide the outcome, record it and clear the table."""
        # The hole card stays hidden when the dealer did not play
        self.dealer.hand.reveal()

        outcome = determine_outcome(self.player.hand, self.dealer.hand)
        result = self.score.record(outcome)
        self.last_outcome = outcome
        logger.debug("Round %d resolved: %s (%s)", self.rounds_started, outcome, self.score)

        self.events.emit_new(OUTCOME_EVENTS[result], outcome=outcome.value)
        self.events.emit_new(
            EventType.ROUND_ENDED,
            round=self.rounds_started,
            outcome=outcome.value,
            player_hand=self.player.hand.show_hand(),
            dealer_hand=self.dealer.hand.show_hand(),
            player_value=self.player.hand.total,
            dealer_value=self.dealer.hand.total,
            score=self.score.as_dict(),
        )

        self.resolve()
        self.discard_hands()
        return True

    def discard_hands(self) -> None:
        """Clear both hands."""
        self.player.hand.discard()
        self.dealer.hand.discard()

    def play_round(self, decide: Callable[["BlackjackGame"], Action]) -> Outcome:
        """
        Play one full round.

        Args:
            decide: Called with the game whenever the player must choose
                between hitting and standing

        Returns:
            How the round ended
        """
        if not self.start_round():
            raise RuntimeError(f"Cannot start a round in state {self.state}")

        while self.state == GameState.PLAYER_TURN:
            if decide(self) == Action.HIT:
                self.hit()
            else:
                self.stand()

        assert self.last_outcome is not None
        return self.last_outcome

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == GameState.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == GameState.PLAYER_TURN
