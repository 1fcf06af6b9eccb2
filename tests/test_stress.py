import random

from handrank.cards import build_deck, deal, sort_by_rank
from handrank.evaluator import evaluate
from handrank.models import HandRanking

from .helpers import ORACLE_CATEGORY, brute_force_score, compare

STRAIGHTS_AND_FLUSHES = {
    HandRanking.STRAIGHT,
    HandRanking.FLUSH,
    HandRanking.STRAIGHT_FLUSH,
    HandRanking.ROYAL_FLUSH,
}


def test_evaluate_matches_brute_force_category_on_random_hands():
    for seed in range(2_000):
        seven = sort_by_rank(build_deck(seed=seed)[:7])
        hand = evaluate(seven)
        category, _ = brute_force_score(seven)
        assert ORACLE_CATEGORY[hand.ranking] == category, [card.label for card in seven]
        assert len(set(hand.cards)) == 5
        assert set(hand.cards) <= set(seven)


def test_showdowns_order_like_brute_force():
    rng = random.Random(2024)
    for _ in range(1_500):
        deck = build_deck(rng=rng)
        board = deal(deck, 5)
        first = sort_by_rank(deal(deck, 2) + board)
        second = sort_by_rank(deal(deck, 2) + board)
        expected = compare(brute_force_score(first), brute_force_score(second))
        assert compare(evaluate(first), evaluate(second)) == expected, (
            [card.label for card in first],
            [card.label for card in second],
        )


def test_plain_hands_never_classified_as_straight_or_flush():
    checked = 0
    for seed in range(3_000):
        seven = sort_by_rank(build_deck(seed=seed)[:7])
        category, _ = brute_force_score(seven)
        if category in (4, 5, 8):
            continue
        assert evaluate(seven).ranking not in STRAIGHTS_AND_FLUSHES
        checked += 1
    assert checked > 2_000


def test_result_ignores_suit_order_within_equal_ranks():
    rng = random.Random(99)
    for seed in range(1_000):
        seven = sort_by_rank(build_deck(seed=seed)[:7])
        shuffled = sorted(seven, key=lambda card: (card.value, rng.random()), reverse=True)
        first, second = evaluate(seven), evaluate(shuffled)
        assert first == second
        assert first.ranking == second.ranking
