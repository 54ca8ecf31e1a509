import re
from dataclasses import dataclass
from enum import IntEnum

from .errors import CardErrorCause, InvalidCard


_TOKEN_CHARS = re.compile(r"[0-9A-Za-z]+")


class Suit(IntEnum):
    # Order only matters for sorting; no suit outranks another in a hand.
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    def short(self) -> str:
        return "cdhs"[self.value]

    def word(self) -> str:
        mapping = {
            Suit.CLUBS: "clubs",
            Suit.DIAMONDS: "diamonds",
            Suit.HEARTS: "hearts",
            Suit.SPADES: "spades",
        }
        return mapping[self]

    @classmethod
    def parse(cls, text: str) -> "Suit":
        mapping = {
            "c": Suit.CLUBS,
            "d": Suit.DIAMONDS,
            "h": Suit.HEARTS,
            "s": Suit.SPADES,
        }
        try:
            return mapping[text]
        except KeyError:
            raise InvalidCard(CardErrorCause.INVALID_SUIT) from None


class Rank(IntEnum):
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

    def short(self) -> str:
        mapping = {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }
        return mapping.get(self, str(self.value))

    def word(self) -> str:
        mapping = {
            Rank.TWO: "two",
            Rank.THREE: "three",
            Rank.FOUR: "four",
            Rank.FIVE: "five",
            Rank.SIX: "six",
            Rank.SEVEN: "seven",
            Rank.EIGHT: "eight",
            Rank.NINE: "nine",
            Rank.TEN: "ten",
            Rank.JACK: "jack",
            Rank.QUEEN: "queen",
            Rank.KING: "king",
            Rank.ACE: "ace",
        }
        return mapping[self]

    def plural(self) -> str:
        if self is Rank.SIX:
            return self.word() + "es"
        return self.word() + "s"

    @classmethod
    def parse(cls, text: str) -> "Rank":
        """Parse ``2``-``10`` or an uppercase ``J``/``Q``/``K``/``A``."""
        if text.isdigit():
            value = int(text)
            if value < 2 or value > 10:
                raise InvalidCard(CardErrorCause.INVALID_NUMERIC_RANK)
            return Rank(value)

        faces = {
            "J": Rank.JACK,
            "Q": Rank.QUEEN,
            "K": Rank.KING,
            "A": Rank.ACE,
        }
        try:
            return faces[text]
        except KeyError:
            raise InvalidCard(CardErrorCause.INVALID_FACE_RANK) from None


@dataclass(frozen=True, order=True)
class Card:
    # Field order is the sort order: rank first, then suit.
    rank: Rank
    suit: Suit

    @classmethod
    def from_string(cls, token: str | None) -> "Card":
        """
        Parse a token such as ``"Ah"`` or ``"10c"``.

        The last character is the suit and everything before it is the rank.
        The suit is checked before the rank, so ``"13p"`` is reported as an
        invalid suit.
        """
        if not token:
            raise InvalidCard(CardErrorCause.MISSING, token)
        if not _TOKEN_CHARS.fullmatch(token):
            raise InvalidCard(CardErrorCause.BAD_CHARACTERS, token)
        if len(token) < 2:
            raise InvalidCard(CardErrorCause.TOO_SHORT, token)

        try:
            suit = Suit.parse(token[-1])
            rank = Rank.parse(token[:-1])
        except InvalidCard as exc:
            # report the whole token, not just the failing part
            exc.token = token
            raise
        return cls(rank, suit)

    @property
    def rank_name(self) -> str:
        return self.rank.word()

    @property
    def rank_plural(self) -> str:
        return self.rank.plural()

    @property
    def suit_name(self) -> str:
        return self.suit.word()

    def __str__(self) -> str:
        # Example: "10h" (ten of hearts); parses back to an equal card
        return f"{self.rank.short()}{self.suit.short()}"

    def __repr__(self) -> str:
        return f"Card({self.rank_name} of {self.suit_name})"
