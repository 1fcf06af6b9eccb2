from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple

from .cards import Card

HAND_SIZE = 5


class HandRanking(str, Enum):
    HIGH_CARD = "HIGH_CARD"
    PAIR = "PAIR"
    TWO_PAIR = "TWO_PAIR"
    THREE_OF_A_KIND = "THREE_OF_A_KIND"
    STRAIGHT = "STRAIGHT"
    FLUSH = "FLUSH"
    FULL_HOUSE = "FULL_HOUSE"
    FOUR_OF_A_KIND = "FOUR_OF_A_KIND"
    STRAIGHT_FLUSH = "STRAIGHT_FLUSH"
    ROYAL_FLUSH = "ROYAL_FLUSH"

    @property
    def priority(self) -> int:
        return RANKING_PRIORITY[self]

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


# Comparison order of hand categories, weakest first.
RANKING_PRIORITY = {
    HandRanking.HIGH_CARD: 0,
    HandRanking.PAIR: 1,
    HandRanking.TWO_PAIR: 2,
    HandRanking.THREE_OF_A_KIND: 3,
    HandRanking.STRAIGHT: 4,
    HandRanking.FLUSH: 5,
    HandRanking.FULL_HOUSE: 6,
    HandRanking.FOUR_OF_A_KIND: 7,
    HandRanking.STRAIGHT_FLUSH: 8,
    HandRanking.ROYAL_FLUSH: 9,
}


@dataclass(frozen=True, eq=False)
class RankedHand:
    """Best five cards out of a larger holding, plus their category.

    ``cards`` are ordered from most to least significant, so two hands of the
    same category compare card by card. Suits are never part of the order:
    hands that compare equal split the pot, and ``==`` follows the same rule.
    """

    cards: Tuple[Card, ...]
    ranking: HandRanking

    def __init__(self, cards: Iterable[Card], ranking: HandRanking) -> None:
        cards = tuple(cards)
        if len(cards) != HAND_SIZE:
            raise ValueError(f"A ranked hand needs exactly {HAND_SIZE} cards, got {len(cards)}")
        object.__setattr__(self, "cards", cards)
        object.__setattr__(self, "ranking", ranking)

    @property
    def strength(self) -> Tuple[int, Tuple[int, ...]]:
        return self.ranking.priority, tuple(card.value for card in self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    def __len__(self) -> int:
        return len(self.cards)

    def __contains__(self, card: object) -> bool:
        return card in self.cards

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RankedHand):
            return NotImplemented
        return self.strength == other.strength

    def __hash__(self) -> int:
        return hash(self.strength)

    def __lt__(self, other: RankedHand) -> bool:
        if not isinstance(other, RankedHand):
            return NotImplemented
        return self.strength < other.strength

    def __le__(self, other: RankedHand) -> bool:
        if not isinstance(other, RankedHand):
            return NotImplemented
        return self.strength <= other.strength

    def __gt__(self, other: RankedHand) -> bool:
        if not isinstance(other, RankedHand):
            return NotImplemented
        return self.strength > other.strength

    def __ge__(self, other: RankedHand) -> bool:
        if not isinstance(other, RankedHand):
            return NotImplemented
        return self.strength >= other.strength

    def __str__(self) -> str:
        return f"{self.ranking.display_name}: {' '.join(card.label for card in self.cards)}"


MAX_HOLDEM_SEATS = 23  # 2 * 23 + 5 = 51 cards


@dataclass
class SimulationConfig:
    iterations: int = 100_000
    seats: int = 2
    workers: int = field(default_factory=lambda: os.cpu_count() or 1)
    seed: Optional[int] = None
    show_progress: bool = True

    def __post_init__(self) -> None:
        if self.iterations <= 0:
            raise ValueError("iterations must be positive")
        if not 2 <= self.seats <= MAX_HOLDEM_SEATS:
            raise ValueError(f"seats must be between 2 and {MAX_HOLDEM_SEATS}")
        if self.workers <= 0:
            raise ValueError("workers must be positive")
