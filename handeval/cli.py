import argparse
import logging
import random
import sys
from typing import List, Optional

from handeval import config
from handeval.poker.deck import Deck
from handeval.poker.errors import HandEvalError
from handeval.poker.hand import HAND_SIZE, Hand

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="handeval",
        description="Classify five-card poker hands, e.g. handeval \"Kh Kc 3s 3h 2d\"",
    )
    parser.add_argument(
        "hands",
        nargs="*",
        help="hand as five space-separated cards, quoted",
    )
    parser.add_argument("--deal", type=int, default=0, metavar="N", help="deal N random hands")
    parser.add_argument("--seed", type=int, default=None, help="seed for --deal")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.LOG_LEVEL,
    )
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level)

    if not args.hands and args.deal <= 0:
        parser.error("give at least one hand or --deal N")

    status = 0
    labelled = len(args.hands) > 1
    for text in args.hands:
        try:
            hand = Hand(text)
        except HandEvalError as exc:
            logger.debug("Rejected %r (%s)", text, exc.cause.name)
            print(f"error: {text!r}: {exc}", file=sys.stderr)
            status = EXIT_INVALID_INPUT
            continue

        description = hand.evaluate()
        print(f"{hand}: {description}" if labelled else description)

    if args.deal > 0:
        rng = random.Random(args.seed) if args.seed is not None else None
        deck = Deck(rng)
        for _ in range(args.deal):
            if len(deck) < HAND_SIZE:
                deck.reset()
            hand = deck.deal_hand()
            print(f"{hand}: {hand.evaluate()}")

    return status


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
