from itertools import permutations
from random import Random

import pytest

from handeval.poker.deck import Deck
from handeval.poker.errors import InvalidCard, InvalidHand
from handeval.poker.hand import Hand
from handeval.poker.hand_evaluator import (
    HandCategory,
    HandEvaluator,
    HandResult,
    evaluate_hand,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Jd 10d Ad Qd Kd", "Royal flush, diamonds"),
        ("Jd 10d 9d Qd Kd", "King-high straight flush, diamonds"),
        ("9c 7c Jc 10c 8c", "Jack-high straight flush, clubs"),
        ("9s 4c 9h 9c 9d", "Four of a kind, nines"),
        ("Qs Qh Qc 7h Qd", "Four of a kind, queens"),
        ("Qd Qc 7s 7h Qh", "Full house, queens full of sevens"),
        ("Qd Qc As Ah Qh", "Full house, queens full of aces"),
        ("Jh 2h 5h Ah 7h", "Ace-high flush, hearts"),
        ("2s 3s 4s 5s 7s", "Seven-high flush, spades"),
        ("6d 7h 8s 9d 10c", "Ten-high straight"),
        ("Ad 2c 3d 4h 5s", "Five-high straight"),
        ("10h Jh Qs Kd Ac", "Ace-high straight"),
        ("Jd 10d Ad Qd Kc", "Ace-high straight"),
        ("Jd 10d 9d Qd Ks", "King-high straight"),
        ("2c 2s 2h 3d 4s", "Three of a kind, twos"),
        ("5c As 7d Ah Ad", "Three of a kind, aces"),
        ("2c 6d 4s 6s 2h", "Two pair, twos and sixes"),
        ("Ks Kd Jd Jh Qs", "Two pair, jacks and kings"),
        ("2c 4d Js 7s 4h", "One pair, fours"),
        ("2h 3c 7s 4d 9d", "High card, nine of diamonds"),
        ("2c 4d Js 7s 10h", "High card, jack of spades"),
        ("Ah As 10c 7d 6s", "One pair, aces"),
        ("Kh Kc 3s 3h 2d", "Two pair, threes and kings"),
        ("Kh Qh 6h 2h 9h", "King-high flush, hearts"),
        ("3s Kc 3h 2d Kh", "Two pair, threes and kings"),  # shuffled
        ("6h Qh 2h Kh 9h", "King-high flush, hearts"),  # shuffled
        ("6h 6c 9d 2s Ks", "One pair, sixes"),
        ("Kd Ac 2h 3s 4c", "High card, ace of clubs"),  # no wrap-around straight
    ],
)
def test_evaluate(text, expected):
    assert Hand(text).evaluate() == expected
    assert evaluate_hand(text) == expected


@pytest.mark.parametrize(
    "text, category",
    [
        ("Jd 10d Ad Qd Kd", HandCategory.ROYAL_FLUSH),
        ("9c 7c Jc 10c 8c", HandCategory.STRAIGHT_FLUSH),
        ("9s 4c 9h 9c 9d", HandCategory.FOUR_OF_A_KIND),
        ("Qd Qc 7s 7h Qh", HandCategory.FULL_HOUSE),
        ("Jh 2h 5h Ah 7h", HandCategory.FLUSH),
        ("Ad 2c 3d 4h 5s", HandCategory.STRAIGHT),
        ("2c 2s 2h 3d 4s", HandCategory.THREE_OF_A_KIND),
        ("Kh Kc 3s 3h 2d", HandCategory.TWO_PAIR),
        ("2c 4d Js 7s 4h", HandCategory.ONE_PAIR),
        ("2h 3c 7s 4d 9d", HandCategory.HIGH_CARD),
    ],
)
def test_category(text, category):
    evaluator = HandEvaluator(Hand(text))
    assert evaluator.category is category
    assert evaluator.evaluate() == HandResult(category, evaluator.result)


def test_ace_high_one_suit_run_is_royal_flush():
    # the flush family goes by the high card, so a suited wheel is royal
    assert evaluate_hand("Ah 2h 3h 4h 5h") == "Royal flush, hearts"
    assert HandEvaluator(Hand("Ah 2h 3h 4h 5h")).category is HandCategory.ROYAL_FLUSH
    assert evaluate_hand("Ad 2c 3d 4h 5s") == "Five-high straight"


def test_category_label():
    assert HandCategory.THREE_OF_A_KIND.label == "three_of_a_kind"
    assert str(HandResult(HandCategory.HIGH_CARD, "High card, two of clubs")) == (
        "High card, two of clubs"
    )


def test_token_order_does_not_change_result():
    tokens = "3s Kc 3h 2d Kh".split()
    results = {evaluate_hand(" ".join(p)) for p in permutations(tokens)}
    assert results == {"Two pair, threes and kings"}


def test_duplicate_is_never_evaluated_as_a_pair():
    with pytest.raises(InvalidHand, match="No cheating!"):
        evaluate_hand("As As 3c 7d 9h")


@pytest.mark.parametrize("text", [None, ""])
def test_missing_input_raises_invalid_hand(text):
    with pytest.raises(InvalidHand):
        evaluate_hand(text)


@pytest.mark.parametrize("token", ["0d", "11d", "Th", "jh", "2S"])
def test_invalid_card_raises_invalid_card(token):
    with pytest.raises(InvalidCard):
        evaluate_hand(f"2h 3c 4s 5d {token}")


DESCRIPTION_PREFIXES = {
    HandCategory.ROYAL_FLUSH: "Royal flush, ",
    HandCategory.STRAIGHT_FLUSH: "-high straight flush, ",
    HandCategory.FOUR_OF_A_KIND: "Four of a kind, ",
    HandCategory.FULL_HOUSE: "Full house, ",
    HandCategory.FLUSH: "-high flush, ",
    HandCategory.STRAIGHT: "-high straight",
    HandCategory.THREE_OF_A_KIND: "Three of a kind, ",
    HandCategory.TWO_PAIR: "Two pair, ",
    HandCategory.ONE_PAIR: "One pair, ",
    HandCategory.HIGH_CARD: "High card, ",
}


def test_random_hands_follow_priority_order():
    deck = Deck(Random(1234))
    for _ in range(500):
        if len(deck) < 5:
            deck.reset()
        hand = deck.deal_hand()
        result = HandEvaluator(hand).evaluate()

        assert DESCRIPTION_PREFIXES[result.category] in result.description

        if hand.max_rank_count == 4:
            assert result.category is HandCategory.FOUR_OF_A_KIND
        elif hand.max_rank_count == 3:
            assert result.category in (HandCategory.FULL_HOUSE, HandCategory.THREE_OF_A_KIND)
        elif hand.is_all_one_suit() and hand.is_in_consecutive_order():
            assert result.category in (HandCategory.STRAIGHT_FLUSH, HandCategory.ROYAL_FLUSH)
        elif hand.is_all_one_suit():
            assert result.category is HandCategory.FLUSH
        elif hand.is_in_consecutive_order():
            assert result.category is HandCategory.STRAIGHT
        elif hand.max_rank_count == 2:
            assert result.category in (HandCategory.TWO_PAIR, HandCategory.ONE_PAIR)
        else:
            assert result.category is HandCategory.HIGH_CARD
