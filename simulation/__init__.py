"""Monte Carlo starting-hand experiment built on the hand evaluator."""

from .starting_hands import (
    StartingHandStats,
    classify_starting_hand,
    format_table,
    play_hand,
    simulate,
    tabulate,
)

__all__ = [
    "StartingHandStats",
    "classify_starting_hand",
    "format_table",
    "play_hand",
    "simulate",
    "tabulate",
]
