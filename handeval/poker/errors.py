from enum import Enum


class CardErrorCause(Enum):
    """Why a card token was rejected, in the order the checks run."""

    MISSING = "Missing card string"
    BAD_CHARACTERS = "Invalid card string characters"
    TOO_SHORT = "Invalid card string"
    INVALID_SUIT = "Invalid suit"
    INVALID_NUMERIC_RANK = "Invalid numeric rank"
    INVALID_FACE_RANK = "Invalid face card rank"


class HandErrorCause(Enum):
    MISSING = "Missing hand input string"
    INVALID_SIZE = "Invalid hand size"
    DUPLICATE_CARD = "No cheating!"


class HandEvalError(ValueError):
    """Base class for rejected input. ``cause`` says which rule failed."""

    kind = "invalid_input"

    def __init__(self, cause: Enum, token: str | None = None):
        super().__init__(cause.value)
        self.cause = cause
        self.token = token

    @property
    def message(self) -> str:
        return self.cause.value


class InvalidCard(HandEvalError):
    kind = "invalid_card"

    def __init__(self, cause: CardErrorCause, token: str | None = None):
        super().__init__(cause, token)


class InvalidHand(HandEvalError):
    kind = "invalid_hand"

    def __init__(self, cause: HandErrorCause, token: str | None = None):
        super().__init__(cause, token)
