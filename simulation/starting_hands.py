from __future__ import annotations

import logging
import random
import threading
from typing import Dict, Iterable, List, Optional, Sequence

from tqdm import tqdm

from handrank.cards import Card, build_deck, deal
from handrank.models import SimulationConfig
from handrank.rules import COMMUNITY_CARDS, HOLE_CARDS, find_winners, rank_hand

LOGGER = logging.getLogger("simulation")

PROGRESS_STEP = 1_000


class StartingHandStats:
    """Dealt/won counters for one starting-hand class, shared across workers."""

    def __init__(self, hand_id: str) -> None:
        self.id = hand_id
        self._dealt = 0
        self._won = 0
        self._lock = threading.Lock()

    def increment_dealt(self) -> None:
        with self._lock:
            self._dealt += 1

    def increment_won(self) -> None:
        with self._lock:
            self._won += 1

    @property
    def dealt(self) -> int:
        with self._lock:
            return self._dealt

    @property
    def won(self) -> int:
        with self._lock:
            return self._won

    @property
    def win_rate(self) -> float:
        with self._lock:
            if self._dealt == 0:
                return 0.0
            return self._won / self._dealt

    def __repr__(self) -> str:
        return f"StartingHandStats(id={self.id!r}, dealt={self.dealt}, won={self.won})"


class StartingHandTable:
    def __init__(self) -> None:
        self._stats: Dict[str, StartingHandStats] = {}
        self._lock = threading.Lock()

    def get(self, hand_id: str) -> StartingHandStats:
        with self._lock:
            stats = self._stats.get(hand_id)
            if stats is None:
                stats = StartingHandStats(hand_id)
                self._stats[hand_id] = stats
            return stats

    def snapshot(self) -> Dict[str, StartingHandStats]:
        with self._lock:
            return dict(self._stats)


def classify_starting_hand(hole_cards: Sequence[Card]) -> str:
    """Short form such as ``AA``, ``AKs`` (suited) or ``T9o`` (offsuit)."""
    high, low = sorted(hole_cards, reverse=True)
    if high.rank == low.rank:
        return f"{high.rank}{low.rank}"
    return f"{high.rank}{low.rank}{'s' if high.suit == low.suit else 'o'}"


def play_hand(seats: int, rng: random.Random, table: StartingHandTable) -> List[str]:
    """Deal one showdown and record it. Returns the winning starting-hand ids."""
    deck = build_deck(rng=rng)
    # Dealing the board first makes no difference to the odds.
    community = deal(deck, COMMUNITY_CARDS)

    starting_hands: Dict[int, StartingHandStats] = {}
    hands = {}
    for seat in range(seats):
        hole = deal(deck, HOLE_CARDS)
        stats = table.get(classify_starting_hand(hole))
        stats.increment_dealt()
        starting_hands[seat] = stats
        hands[seat] = rank_hand(hole, community)

    winners = find_winners(hands)
    for seat in winners:
        starting_hands[seat].increment_won()
    return [starting_hands[seat].id for seat in winners]


def split_iterations(iterations: int, workers: int) -> List[int]:
    share, remainder = divmod(iterations, workers)
    return [share + (1 if idx < remainder else 0) for idx in range(workers)]


def simulate(config: SimulationConfig) -> Dict[str, StartingHandStats]:
    table = StartingHandTable()
    budgets = [budget for budget in split_iterations(config.iterations, config.workers) if budget > 0]
    progress = tqdm(total=config.iterations, desc="Simulating", unit="hand", disable=not config.show_progress)
    progress_lock = threading.Lock()
    errors: List[BaseException] = []

    def advance(count: int) -> None:
        with progress_lock:
            progress.update(count)

    def worker(budget: int, rng: random.Random) -> None:
        try:
            done = 0
            for _ in range(budget):
                play_hand(config.seats, rng, table)
                done += 1
                if done == PROGRESS_STEP:
                    advance(done)
                    done = 0
            advance(done)
        except Exception as exc:
            LOGGER.exception("Simulation worker %s failed", threading.current_thread().name)
            errors.append(exc)

    LOGGER.info(
        "Simulating %s hands for %s seats across %s workers",
        config.iterations,
        config.seats,
        len(budgets),
    )
    threads = []
    for idx, budget in enumerate(budgets):
        seed: Optional[int] = None if config.seed is None else config.seed + idx
        thread = threading.Thread(
            target=worker,
            args=(budget, random.Random(seed)),
            name=f"simulation-worker-{idx}",
        )
        threads.append(thread)
        thread.start()

    for thread in threads:
        thread.join()
    progress.close()

    if errors:
        raise RuntimeError(f"{len(errors)} simulation worker(s) failed") from errors[0]
    return table.snapshot()


def tabulate(stats: Iterable[StartingHandStats]) -> List[StartingHandStats]:
    return sorted(stats, key=lambda info: (-info.win_rate, info.id))


def format_table(stats: Iterable[StartingHandStats]) -> str:
    return "\n".join(f"{info.id}\t{info.win_rate:.4f}" for info in tabulate(stats))
