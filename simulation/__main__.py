import argparse
import logging
import os
import time

from handrank.models import SimulationConfig
from .starting_hands import format_table, simulate

LOGGER = logging.getLogger("simulation")


def main() -> None:
    parser = argparse.ArgumentParser(description="Estimate Texas Hold'em starting-hand win rates")
    parser.add_argument("iterations", type=int, help="Number of hands to deal")
    parser.add_argument("--seats", type=int, default=2, help="Players dealt in per hand")
    parser.add_argument("--workers", type=int, default=os.cpu_count() or 1, help="Worker threads")
    parser.add_argument("--seed", type=int, default=None, help="Base seed; worker N uses seed + N")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, etc.).")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    try:
        config = SimulationConfig(
            iterations=args.iterations,
            seats=args.seats,
            workers=args.workers,
            seed=args.seed,
            show_progress=not args.no_progress,
        )
    except ValueError as exc:
        parser.error(str(exc))

    start = time.perf_counter()
    stats = simulate(config)
    LOGGER.info("Completed in %.1f seconds.", time.perf_counter() - start)
    print(format_table(stats.values()))


if __name__ == "__main__":
    main()
