import logging
from dataclasses import dataclass
from enum import IntEnum

from .cards import Card, Rank
from .hand import Hand

logger = logging.getLogger(__name__)


# Hand categories from worst -> best.
class HandCategory(IntEnum):
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def label(self) -> str:
        # e.g. "three_of_a_kind"
        return self.name.lower()


@dataclass(frozen=True)
class HandResult:
    category: HandCategory
    description: str

    def __str__(self) -> str:
        return self.description


def _high(card: Card) -> str:
    return card.rank_name.capitalize() + "-high"


class HandEvaluator:
    """
    Classifies a validated Hand.

    Rules are checked in priority order and the first match wins:
    four of a kind, full house / three of a kind, the flush family,
    straight, one / two pair, then high card.
    """

    def __init__(self, hand: Hand):
        self.hand = hand
        self._result: HandResult | None = None

    @property
    def result(self) -> str:
        return self.evaluate().description

    @property
    def category(self) -> HandCategory:
        return self.evaluate().category

    def evaluate(self) -> HandResult:
        if self._result is None:
            self._result = self._classify()
            logger.debug("Evaluated %s as %s", self.hand, self._result.description)
        return self._result

    def _classify(self) -> HandResult:
        hand = self.hand
        max_rank_count = hand.max_rank_count

        if max_rank_count == 4:
            quads = hand.cards_by_rank_count(4)[0]
            return HandResult(
                HandCategory.FOUR_OF_A_KIND, f"Four of a kind, {quads.rank_plural}"
            )

        if max_rank_count == 3:
            return self._three_count_result()

        if hand.is_all_one_suit():
            return self._all_one_suit_result()

        if hand.is_in_consecutive_order():
            return self._consecutive_order_result()

        if max_rank_count == 2:
            return self._pair_result()

        high = hand.high_card
        return HandResult(
            HandCategory.HIGH_CARD, f"High card, {high.rank_name} of {high.suit_name}"
        )

    def _three_count_result(self) -> HandResult:
        trips = self.hand.cards_by_rank_count(3)[0]
        pairs = self.hand.cards_by_rank_count(2)

        if pairs:
            return HandResult(
                HandCategory.FULL_HOUSE,
                f"Full house, {trips.rank_plural} full of {pairs[0].rank_plural}",
            )
        return HandResult(
            HandCategory.THREE_OF_A_KIND, f"Three of a kind, {trips.rank_plural}"
        )

    def _all_one_suit_result(self) -> HandResult:
        # High card is a convenient way to get the suit of a flush
        high = self.hand.high_card

        if not self.hand.is_in_consecutive_order():
            return HandResult(
                HandCategory.FLUSH, f"{_high(high)} flush, {high.suit_name}"
            )
        if high.rank == Rank.ACE:
            return HandResult(HandCategory.ROYAL_FLUSH, f"Royal flush, {high.suit_name}")
        return HandResult(
            HandCategory.STRAIGHT_FLUSH, f"{_high(high)} straight flush, {high.suit_name}"
        )

    def _consecutive_order_result(self) -> HandResult:
        return HandResult(HandCategory.STRAIGHT, f"{_high(self._straight_high())} straight")

    def _straight_high(self) -> Card:
        # In A-2-3-4-5 the ace plays low, so the five is the top card
        if self.hand.is_ace_low():
            return self.hand.cards[-2]
        return self.hand.high_card

    def _pair_result(self) -> HandResult:
        pairs = self.hand.cards_by_rank_count(2)
        ranks = " and ".join(c.rank_plural for c in pairs)

        if len(pairs) == 2:
            return HandResult(HandCategory.TWO_PAIR, f"Two pair, {ranks}")
        return HandResult(HandCategory.ONE_PAIR, f"One pair, {ranks}")


def evaluate_hand(text: str | None) -> str:
    """Parse ``text`` and return its description, e.g. ``"Royal flush, diamonds"``."""
    return Hand(text).evaluate()
