"""Seven-card poker hand evaluation plus a thin Texas Hold'em rules layer."""

from .cards import Card, RANKS, SUITS, build_deck, deal, parse_cards, sort_by_rank
from .evaluator import evaluate
from .models import HAND_SIZE, HandRanking, RankedHand, SimulationConfig
from .rules import describe_hand, find_winners, rank_hand, showdown

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "build_deck",
    "deal",
    "parse_cards",
    "sort_by_rank",
    "evaluate",
    "HAND_SIZE",
    "HandRanking",
    "RankedHand",
    "SimulationConfig",
    "describe_hand",
    "find_winners",
    "rank_hand",
    "showdown",
]
