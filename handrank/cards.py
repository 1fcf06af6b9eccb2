from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

RANKS = "AKQJT98765432"
SUITS = "hdcs"

RANK_VALUE = {rank: idx for idx, rank in enumerate(reversed(RANKS), start=2)}
SUIT_INDEX = {suit: idx for idx, suit in enumerate(SUITS)}

ACE = "A"
TWO = "2"


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank}")
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def label(self) -> str:
        return f"{self.rank}{self.suit}"

    @property
    def value(self) -> int:
        """Face value, Two=2 through Ace=14."""
        return RANK_VALUE[self.rank]

    @property
    def sort_key(self) -> tuple[int, int]:
        return RANK_VALUE[self.rank], SUIT_INDEX[self.suit]

    def __lt__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def __str__(self) -> str:
        return self.label


FULL_DECK = tuple(Card(rank, suit) for rank in RANKS[::-1] for suit in SUITS)


def build_deck(seed: Optional[int] = None, rng: Optional[random.Random] = None) -> List[Card]:
    """Return a shuffled 52-card deck. Pass ``rng`` to draw from an existing source."""
    if rng is None:
        rng = random.Random(seed)
    deck = list(FULL_DECK)
    rng.shuffle(deck)
    return deck


def deal(deck: List[Card], count: int) -> List[Card]:
    if len(deck) < count:
        raise ValueError("Not enough cards left in deck")
    cards = deck[:count]
    del deck[:count]
    return cards


def sort_by_rank(cards: Iterable[Card]) -> List[Card]:
    """Order cards highest rank first, the layout the evaluator expects."""
    return sorted(cards, reverse=True)


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    if len(label) != 2:
        raise ValueError(f"Invalid card label: {label}")
    return Card(label[0].upper(), label[1].lower())


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
