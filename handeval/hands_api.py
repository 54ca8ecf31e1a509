import logging

from fastapi import APIRouter, HTTPException

from . import config, schemas
from .poker.deck import Deck
from .poker.errors import HandEvalError
from .poker.hand import Hand
from .poker.hand_evaluator import HandEvaluator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hands", tags=["hands"])


def _to_response(hand: Hand) -> schemas.EvaluateResponse:
    result = HandEvaluator(hand).evaluate()
    return schemas.EvaluateResponse(
        hand=str(hand),
        cards=[str(c) for c in hand.cards],
        category=result.category.label,
        description=result.description,
    )


def _to_error(exc: HandEvalError) -> schemas.HandError:
    return schemas.HandError(
        error=exc.kind,
        cause=exc.cause.name.lower(),
        message=exc.message,
        token=exc.token,
    )


@router.post("/evaluate", response_model=schemas.EvaluateResponse)
def evaluate(req: schemas.EvaluateRequest):
    try:
        hand = Hand(req.hand)
    except HandEvalError as exc:
        logger.info("Rejected hand %r: %s", req.hand, exc)
        raise HTTPException(status_code=400, detail=_to_error(exc).model_dump())

    return _to_response(hand)


@router.post("/evaluate/batch", response_model=schemas.BatchEvaluateResponse)
def evaluate_batch(req: schemas.BatchEvaluateRequest):
    """Evaluate several hands; a bad hand only fails its own entry."""

    if len(req.hands) > config.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=400,
            detail=f"At most {config.MAX_BATCH_SIZE} hands per batch",
        )

    entries = []
    for text in req.hands:
        try:
            hand = Hand(text)
        except HandEvalError as exc:
            logger.info("Rejected hand %r in batch: %s", text, exc)
            entries.append(schemas.BatchEvaluateEntry(input=text, error=_to_error(exc)))
            continue
        entries.append(schemas.BatchEvaluateEntry(input=text, result=_to_response(hand)))

    return schemas.BatchEvaluateResponse(results=entries)


@router.get("/random", response_model=schemas.EvaluateResponse)
def random_hand():
    """Deal five cards from a freshly shuffled deck and evaluate them."""

    return _to_response(Deck().deal_hand())
