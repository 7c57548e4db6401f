"""
Prepare the word-list and progress stores.

Creates the daily-counter tables, seeds the demo lists into an empty
MongoDB collection and prints a summary of every stored list.

Usage:
    python -m scripts.setup_stores [--no-seed] [--reset-progress] [--yes]
"""

from __future__ import annotations

import argparse
from typing import Optional

import structlog

from app.store import RepositoryStore
from core import list_repo, progress_db
from core.logging_config import configure_logging
from core.progress import summarize_list
from core.scheduling import system_clock


logger = structlog.get_logger(__name__)


def setup_stores(seed: bool = True, reset_progress: bool = False) -> int:
    """
    Initialize both stores and print per-list counters.

    Args:
        seed: Insert the demo lists when the collection is empty
        reset_progress: Drop and recreate the daily-counter tables

    Returns:
        Number of lists stored
    """
    if reset_progress:
        progress_db.reset_db()
    else:
        progress_db.init_db()

    if seed:
        list_repo.seed_defaults()

    store = RepositoryStore()
    lists = store.all_lists()
    now = system_clock()

    print(f"{'list':<20} {'total':>6} {'new':>6} {'queued':>7} {'due':>5} {'mastered':>9}")
    for word_list in lists:
        summary = summarize_list(word_list, now)
        print(
            f"{word_list.id:<20} {summary.total:>6} {summary.new:>6} "
            f"{summary.queued:>7} {summary.due:>5} {summary.mastered:>9}"
        )

    logger.info("stores_ready", lists=len(lists), reset_progress=reset_progress)
    return len(lists)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Initialize the word-list and progress stores"
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Don't insert the demo lists into an empty collection"
    )
    parser.add_argument(
        "--reset-progress",
        action="store_true",
        help="DANGEROUS: delete all daily counters before starting"
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Skip the confirmation prompt for --reset-progress"
    )
    args = parser.parse_args(argv)

    configure_logging()

    if args.reset_progress and not args.yes:
        response = input("Delete all daily counters? (type 'yes' to confirm): ")
        if response.lower() != "yes":
            print("Cancelled. No changes made.")
            return

    setup_stores(seed=not args.no_seed, reset_progress=args.reset_progress)


if __name__ == "__main__":
    main()
