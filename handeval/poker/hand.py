from typing import Dict, Iterable, List, Tuple

from .cards import Card, Rank
from .errors import HandErrorCause, InvalidHand


HAND_SIZE = 5


class Hand:
    """
    Five distinct cards parsed from a space-delimited string, e.g.
    ``"Kh Kc 3s 3h 2d"``.

    Cards are kept sorted by rank then suit. Construction either succeeds
    with a valid hand or raises; there is no partially built hand.
    """

    def __init__(self, text: str | None):
        if not text:
            raise InvalidHand(HandErrorCause.MISSING, text)

        # Card errors propagate unchanged
        cards = sorted(Card.from_string(token) for token in text.split())
        self._validate(cards, text)

        self._cards: Tuple[Card, ...] = tuple(cards)
        self._rank_counts: Dict[Rank, int] = self._count_ranks(self._cards)

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "Hand":
        return cls(" ".join(str(c) for c in cards))

    @staticmethod
    def _validate(cards: List[Card], text: str) -> None:
        if len(cards) != HAND_SIZE:
            raise InvalidHand(HandErrorCause.INVALID_SIZE, text)
        if len(set(cards)) < HAND_SIZE:
            raise InvalidHand(HandErrorCause.DUPLICATE_CARD, text)

    @staticmethod
    def _count_ranks(cards: Tuple[Card, ...]) -> Dict[Rank, int]:
        # Cards are sorted, so keys come out in ascending rank order
        counts: Dict[Rank, int] = {}
        for c in cards:
            counts[c.rank] = counts.get(c.rank, 0) + 1
        return counts

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self._cards

    @property
    def low_card(self) -> Card:
        return self._cards[0]

    @property
    def high_card(self) -> Card:
        return self._cards[-1]

    def is_all_one_suit(self) -> bool:
        return len({c.suit for c in self._cards}) == 1

    def is_in_consecutive_order(self) -> bool:
        """
        True if each rank is one more than the previous one.

        The only exception is the ace-low straight (A-2-3-4-5): when the
        lowest card is a two and the highest an ace, the gap between the
        last two cards is allowed.
        """
        last = len(self._cards) - 1
        for idx in range(last):
            current, following = self._cards[idx], self._cards[idx + 1]
            if current.rank + 1 == following.rank:
                continue
            ace_low = (
                idx + 1 == last
                and self.low_card.rank == Rank.TWO
                and following.rank == Rank.ACE
            )
            if not ace_low:
                return False
        return True

    def is_ace_low(self) -> bool:
        return self.high_card.rank == Rank.ACE and self.low_card.rank == Rank.TWO

    @property
    def rank_counts(self) -> Dict[Rank, int]:
        """Rank -> number of cards of that rank, e.g. {SEVEN: 2, ACE: 3}."""
        return dict(self._rank_counts)

    @property
    def max_rank_count(self) -> int:
        return max(self._rank_counts.values())

    def cards_by_rank_count(self, rank_count: int) -> List[Card]:
        """
        One card per rank that occurs exactly ``rank_count`` times, lowest
        rank first. A count of 2 gives zero, one or two cards (no pair, one
        pair, two pair).
        """
        ranks = [r for r, n in self._rank_counts.items() if n == rank_count]
        return [next(c for c in self._cards if c.rank == r) for r in ranks]

    def evaluate(self) -> str:
        from .hand_evaluator import HandEvaluator

        return HandEvaluator(self).result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._cards == other._cards

    def __hash__(self) -> int:
        return hash(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(self._cards)

    def __str__(self) -> str:
        return " ".join(str(c) for c in self._cards)

    def __repr__(self) -> str:
        return f"Hand({', '.join(repr(c) for c in self._cards)})"
