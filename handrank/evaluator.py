"""Seven-card hand evaluation for Texas Hold'em and 7-Card Stud.

Any five of the seven cards may form the hand, so this evaluator does not fit
games that restrict how hole and community cards combine (Omaha). Cards must
arrive as seven distinct cards sorted by descending rank. That is not
re-checked here; see ``handrank.rules.rank_hand``.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Optional, Sequence, Tuple

from .cards import ACE, TWO, Card
from .models import HAND_SIZE, HandRanking, RankedHand


def evaluate(cards: Sequence[Card]) -> RankedHand:
    """Return the best five-card hand from seven rank-descending cards."""
    straight_or_flush = rank_straight_or_flush(cards)
    grouped = rank_grouped_hand(cards)
    if straight_or_flush is not None and straight_or_flush > grouped:
        return straight_or_flush
    return grouped


# Straights and flushes ---------------------------------------------------


def rank_straight_or_flush(cards: Sequence[Card]) -> Optional[RankedHand]:
    """Best flush, straight, straight flush or royal flush, or ``None``."""
    flush_cards = filter_flush_cards(cards)
    straight_cards = filter_straight_cards(cards if flush_cards is None else flush_cards)
    if flush_cards is not None:
        # A straight inside the suited cards beats any higher unsuited straight.
        if straight_cards is not None:
            ranking = HandRanking.ROYAL_FLUSH if straight_cards[0].rank == ACE else HandRanking.STRAIGHT_FLUSH
            return RankedHand(straight_cards, ranking)
        return RankedHand(flush_cards[:HAND_SIZE], HandRanking.FLUSH)
    if straight_cards is not None:
        return RankedHand(straight_cards, HandRanking.STRAIGHT)
    return None


def filter_flush_cards(cards: Sequence[Card]) -> Optional[List[Card]]:
    """All cards of a suit held five or more times, in their original order.

    Every suited card is kept, not just the top five, since a straight flush
    may need the low ones.
    """
    suit_counts = Counter(card.suit for card in cards)
    for suit, count in suit_counts.items():
        if count >= HAND_SIZE:
            return [card for card in cards if card.suit == suit]
    return None


def filter_straight_cards(cards: Sequence[Card]) -> Optional[List[Card]]:
    """Highest five-card run of consecutive ranks, or ``None``."""
    if not cards:
        return None
    cards = list(cards)
    if cards[0].rank == ACE and cards[-1].rank == TWO:
        cards.append(cards[0])  # ace plays low for 5-4-3-2-A

    run = [cards[0]]
    for previous, card in zip(cards, cards[1:]):
        if _is_next_lower(card, previous):
            run.append(card)
            if len(run) == HAND_SIZE:
                return run
        elif card.rank != previous.rank:
            run = [card]
    return None


def _is_next_lower(card: Card, previous: Card) -> bool:
    return card.value == previous.value - 1 or (card.rank == ACE and previous.rank == TWO)


# Pairs, trips and quads --------------------------------------------------


def count_pairs(cards: Sequence[Card]) -> Tuple[int, int, List[List[Card]]]:
    """Walk rank-sorted cards and return ``(pairs, biggest_group, groups)``.

    ``pairs`` counts every unordered same-rank pair, so trips add three and
    quads add six. ``groups`` holds each run of equal ranks in input order.
    """
    pairs = 0
    biggest_group = 1
    groups: List[List[Card]] = []
    for card in cards:
        if groups and groups[-1][0].rank == card.rank:
            groups[-1].append(card)
            pairs += len(groups[-1]) - 1
            biggest_group = max(biggest_group, len(groups[-1]))
        else:
            groups.append([card])
    return pairs, biggest_group, groups


def map_pairs_to_ranking(pairs: int, biggest_group: int) -> HandRanking:
    if pairs == 0:
        return HandRanking.HIGH_CARD
    if pairs == 1:
        return HandRanking.PAIR
    if pairs == 2:
        return HandRanking.TWO_PAIR
    if pairs == 3:
        # Three separate pairs also count three.
        return HandRanking.THREE_OF_A_KIND if biggest_group == 3 else HandRanking.TWO_PAIR
    if pairs in (4, 5):
        return HandRanking.FULL_HOUSE
    if pairs == 6:
        # Two sets of trips count six as well.
        return HandRanking.FOUR_OF_A_KIND if biggest_group == 4 else HandRanking.FULL_HOUSE
    if pairs in (7, 9):
        return HandRanking.FOUR_OF_A_KIND
    raise ValueError(f"Invalid pair count: {pairs}")


def rank_grouped_hand(cards: Sequence[Card]) -> RankedHand:
    """Best hand built only from same-rank groups, ignoring suits and runs."""
    pairs, biggest_group, groups = count_pairs(cards)
    ranking = map_pairs_to_ranking(pairs, biggest_group)

    if ranking in (HandRanking.TWO_PAIR, HandRanking.FULL_HOUSE):
        leading = 2
    elif biggest_group > 1:
        leading = 1
    else:
        leading = 0

    # Stable sort keeps equal-sized groups in descending rank.
    ordered = sorted(groups, key=len, reverse=True)
    hand: List[Card] = []
    for group in ordered[:leading]:
        hand.extend(group[: HAND_SIZE - len(hand)])
    used = set(hand)
    kickers = [card for card in cards if card not in used]
    hand.extend(kickers[: HAND_SIZE - len(hand)])
    return RankedHand(hand, ranking)
