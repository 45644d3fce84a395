"""Tests for hand valuation."""

from random import Random

from hypothesis import given, strategies as st

from conftest import cards_strategy, make_hand
from engine.cards import Card
from engine.valuation import hand_value, is_blackjack, is_busted, is_soft


class TestHandValue:
    """Tests for hand_value."""

    def test_empty_hand(self, empty_hand):
        """Test that an empty hand is worth nothing."""
        assert hand_value(empty_hand) == 0

    def test_face_cards_are_ten(self):
        """Test face card values."""
        assert hand_value(make_hand("JS", "QH", "KC")) == 30

    def test_ace_counts_eleven(self, soft_17_hand):
        """Test an ace that fits as 11."""
        assert hand_value(soft_17_hand) == 17

    def test_ace_downgraded_once(self):
        """Test 10 + 9 + A evaluates to 20."""
        assert hand_value(make_hand("10S", "9H", "AC")) == 20

    def test_two_aces_and_nine(self):
        """Test A + A + 9 evaluates to 21."""
        assert hand_value(make_hand("AS", "AH", "9C")) == 21

    def test_four_aces(self):
        """Test each ace drops to 1 only as needed."""
        assert hand_value(make_hand("AS", "AH", "AC", "AD")) == 14
        assert hand_value(make_hand("AS", "AH", "AC", "AD", "9C")) == 13

    def test_bust_without_aces(self):
        """Test 10 + 10 + 5 stays at 25."""
        hand = make_hand("10S", "10H", "5C")
        assert hand_value(hand) == 25
        assert is_busted(hand)

    def test_bust_after_all_aces_downgraded(self):
        """Test a hand that busts even with every ace at 1."""
        assert hand_value(make_hand("AS", "KH", "QC", "5D")) == 26

    def test_face_down_cards_are_skipped(self):
        """Test that hidden cards are left out unless revealed."""
        hand = make_hand("KS", "7H")
        hand.cards[0].face_down = True
        assert hand_value(hand) == 7
        assert hand_value(hand, reveal_all=True) == 17

    def test_hidden_ace_not_downgraded(self):
        """Test that only visible aces can drop to 1."""
        cards = [Card.from_string(code) for code in ("AS", "KH", "QC")]
        cards[0].face_down = True
        assert hand_value(cards) == 20
        assert hand_value(cards, reveal_all=True) == 21

    def test_accepts_plain_list(self):
        """Test valuing a list of cards."""
        assert hand_value([Card.from_string("AS"), Card.from_string("KD")]) == 21

    @given(cards_strategy(), st.randoms(use_true_random=False))
    def test_order_invariant(self, cards, random):
        """Test that the order cards were added does not matter."""
        shuffled = list(cards)
        random.shuffle(shuffled)
        assert hand_value(cards) == hand_value(shuffled)

    @given(cards_strategy())
    def test_never_busts_while_an_ace_is_soft(self, cards):
        """Test that a busted total never still counts an ace as 11."""
        total = hand_value(cards)
        if total > 21:
            assert not is_soft(cards)

    @given(cards_strategy())
    def test_total_within_hard_and_soft_bounds(self, cards):
        """Test the total lies between all-aces-as-one and all-aces-as-eleven."""
        hard = sum(1 if card.is_ace else card.value for card in cards)
        soft = sum(card.value for card in cards)
        assert hard <= hand_value(cards) <= soft


class TestBlackjackAndBust:
    """Tests for the blackjack and bust predicates."""

    def test_ace_and_ten_value_is_blackjack(self, blackjack_hand):
        """Test a two-card 21."""
        assert is_blackjack(blackjack_hand)
        assert not is_busted(blackjack_hand)

    def test_three_card_21_counts(self):
        """Test that any 21 ends the player's turn as a blackjack."""
        assert is_blackjack(make_hand("7S", "7H", "7C"))

    def test_blackjack_uses_full_reveal(self):
        """Test that a hidden card still counts towards blackjack."""
        hand = make_hand("AS", "KH")
        hand.cards[0].face_down = True
        assert is_blackjack(hand)

    def test_twenty_is_not_blackjack(self, hard_16_hand):
        """Test a hand under 21."""
        assert not is_blackjack(hard_16_hand)
        assert not is_busted(hard_16_hand)

    def test_bust_visible_only(self):
        """Test bust check limited to visible cards."""
        hand = make_hand("KS", "QH", "5C")
        hand.cards[2].face_down = True
        assert not is_busted(hand, reveal_all=False)
        assert is_busted(hand)


class TestIsSoft:
    """Tests for soft hand detection."""

    def test_soft(self, soft_17_hand):
        """Test an ace still counted as 11."""
        assert is_soft(soft_17_hand)

    def test_hard_after_downgrade(self):
        """Test a hand where the ace had to drop."""
        assert not is_soft(make_hand("AS", "5H", "8C"))

    def test_no_aces(self, hard_16_hand):
        """Test a hand without aces is hard."""
        assert not is_soft(hard_16_hand)

    def test_seeded_random_hands(self):
        """Test soft totals always have room for ten more points."""
        rng = Random(5)
        deck = [Card.from_string(f"{r}{s}") for r in "23456789TJQKA" for s in "CDHS"]
        for _ in range(200):
            cards = rng.sample(deck, rng.randint(1, 5))
            if is_soft(cards):
                assert hand_value(cards) <= 21
