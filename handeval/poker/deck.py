from random import Random, SystemRandom
from typing import List

from .cards import Card, Rank, Suit
from .hand import HAND_SIZE, Hand

FULL_DECK = tuple(Card(rank, suit) for suit in Suit for rank in Rank)


class Deck:
    """
    A single 52-card deck, so hands dealt from it never repeat a card.

    Pass a seeded ``random.Random`` for reproducible deals; the default is
    ``SystemRandom``.
    """

    def __init__(self, rng: Random | None = None):
        self._rng: Random = rng if rng is not None else SystemRandom()
        self._stock: List[Card] = []
        self.reset()

    def reset(self) -> None:
        """Put all 52 cards back and shuffle."""
        self._stock = list(FULL_DECK)
        self._rng.shuffle(self._stock)

    def deal_one(self) -> Card:
        if not self._stock:
            raise ValueError("Deck is empty")
        return self._stock.pop()

    def deal_hand(self) -> Hand:
        if len(self._stock) < HAND_SIZE:
            raise ValueError(f"Only {len(self._stock)} cards left, need {HAND_SIZE}")
        dealt, self._stock = self._stock[-HAND_SIZE:], self._stock[:-HAND_SIZE]
        return Hand.from_cards(dealt)

    def __len__(self) -> int:
        return len(self._stock)
