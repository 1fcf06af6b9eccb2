from __future__ import annotations

import logging
from typing import Dict, Hashable, List, Mapping, Sequence, TypeVar

from .cards import Card, cards_to_labels, sort_by_rank
from .evaluator import evaluate
from .models import RankedHand

LOGGER = logging.getLogger("handrank.rules")

HOLE_CARDS = 2
COMMUNITY_CARDS = 5
SEVEN_CARDS = HOLE_CARDS + COMMUNITY_CARDS

SeatT = TypeVar("SeatT", bound=Hashable)

# Texas Hold'em rules layer: owns the input contract the evaluator assumes
# (seven distinct cards, highest rank first).


def rank_hand(hole_cards: Sequence[Card], community_cards: Sequence[Card]) -> RankedHand:
    cards = list(hole_cards) + list(community_cards)
    if len(cards) != SEVEN_CARDS:
        raise ValueError(f"Expected {SEVEN_CARDS} cards, got {len(cards)}")
    if len(set(cards)) != len(cards):
        raise ValueError(f"Duplicate cards: {' '.join(cards_to_labels(cards))}")
    return evaluate(sort_by_rank(cards))


def find_winners(hands: Mapping[SeatT, RankedHand]) -> List[SeatT]:
    """Every seat holding the best hand; more than one means a split pot."""
    if not hands:
        return []
    best = max(hands.values())
    winners = [seat for seat, hand in hands.items() if hand == best]
    if len(winners) > 1:
        LOGGER.debug("Split pot between %s with %s", winners, best)
    return winners


def showdown(hole_cards: Mapping[SeatT, Sequence[Card]], community_cards: Sequence[Card]) -> Dict[SeatT, RankedHand]:
    return {seat: rank_hand(cards, community_cards) for seat, cards in hole_cards.items()}


def describe_hand(hand: RankedHand) -> str:
    return str(hand)
