from __future__ import annotations

import itertools
from collections import Counter
from typing import Iterable, List, Optional, Sequence, Tuple

from handrank.cards import Card, parse_cards
from handrank.models import HandRanking, RankedHand

# Reference categories used by the brute-force scorer below.
ORACLE_CATEGORY = {
    HandRanking.HIGH_CARD: 0,
    HandRanking.PAIR: 1,
    HandRanking.TWO_PAIR: 2,
    HandRanking.THREE_OF_A_KIND: 3,
    HandRanking.STRAIGHT: 4,
    HandRanking.FLUSH: 5,
    HandRanking.FULL_HOUSE: 6,
    HandRanking.FOUR_OF_A_KIND: 7,
    HandRanking.STRAIGHT_FLUSH: 8,
    HandRanking.ROYAL_FLUSH: 8,
}


def cards(*labels: str) -> List[Card]:
    """Parse labels, keeping the order given."""
    return parse_cards(labels)


def labels(hand: RankedHand) -> List[str]:
    return [card.label for card in hand.cards]


def brute_force_score(hand: Sequence[Card]) -> Tuple[int, List[int]]:
    """Score every 5-card combination independently and keep the best."""
    best: Optional[Tuple[int, List[int]]] = None
    for combo in itertools.combinations(hand, 5):
        score = _score_five(combo)
        if best is None or score > best:
            best = score
    assert best is not None
    return best


def _score_five(hand: Sequence[Card]) -> Tuple[int, List[int]]:
    ranks = sorted((card.value for card in hand), reverse=True)
    is_flush = len({card.suit for card in hand}) == 1
    straight_high = _straight_high(ranks)

    counts = Counter(ranks)
    ordered_counts = sorted(counts.items(), key=lambda x: (x[1], x[0]), reverse=True)
    count_values = sorted(counts.values(), reverse=True)

    if straight_high and is_flush:
        return (8, [straight_high])
    if count_values[0] == 4:
        return (7, [ordered_counts[0][0], ordered_counts[1][0]])
    if count_values[0] == 3 and count_values[1] == 2:
        return (6, [ordered_counts[0][0], ordered_counts[1][0]])
    if is_flush:
        return (5, ranks)
    if straight_high:
        return (4, [straight_high])
    return (
        {3: 3, 2: 2 if count_values[1] == 2 else 1, 1: 0}[count_values[0]],
        [rank for rank, _ in ordered_counts],
    )


def _straight_high(ranks: Iterable[int]) -> Optional[int]:
    unique = set(ranks)
    if len(unique) != 5:
        return None
    if max(unique) - min(unique) == 4:
        return max(unique)
    if unique == {14, 5, 4, 3, 2}:
        return 5
    return None


def compare(left, right) -> int:
    return (left > right) - (left < right)
